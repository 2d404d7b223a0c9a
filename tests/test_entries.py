"""Entry API tests."""

import pytest


def _create(client, headers, payload):
    response = client.post("/api/entries", headers=headers, json=payload)
    assert response.status_code == 201
    return response.json()


def test_create_entry(client, auth_headers, entry_payload):
    """Test creating an entry."""
    response = client.post("/api/entries", headers=auth_headers, json=entry_payload)
    assert response.status_code == 201
    data = response.json()
    assert data["user_id"] == auth_headers.user_id
    assert data["user_name"] == "Jane"
    assert data["work_done"] == "A"
    assert data["blockers"] == "B"
    assert data["learnings"] == "C"
    assert data["github_commit_link"] is None
    assert data["date"] is not None
    assert data["created_at"] is not None


def test_create_entry_with_commit_link(client, auth_headers, entry_payload):
    link = "https://github.com/acme/devlog/commit/3f2a9c1"
    data = _create(client, auth_headers, {**entry_payload, "github_commit_link": link})
    assert data["github_commit_link"] == link


def test_create_entry_commit_link_without_scheme(client, auth_headers, entry_payload):
    data = _create(
        client, auth_headers, {**entry_payload, "github_commit_link": "github.com/acme/devlog/pull/7"}
    )
    assert data["github_commit_link"] == "github.com/acme/devlog/pull/7"


def test_create_entry_blank_commit_link_means_none(client, auth_headers, entry_payload):
    data = _create(client, auth_headers, {**entry_payload, "github_commit_link": ""})
    assert data["github_commit_link"] is None


@pytest.mark.parametrize(
    "override, field",
    [
        ({"work_done": ""}, "work_done"),
        ({"blockers": "   "}, "blockers"),
        ({"learnings": None}, "learnings"),
        ({"github_commit_link": "not a url"}, "github_commit_link"),
    ],
)
def test_create_entry_validation(client, auth_headers, entry_payload, override, field):
    response = client.post("/api/entries", headers=auth_headers, json={**entry_payload, **override})
    assert response.status_code == 422
    fields = [error["field"] for error in response.json()["details"]["errors"]]
    assert fields == [field]


def test_create_entry_missing_fields(client, auth_headers):
    response = client.post("/api/entries", headers=auth_headers, json={"work_done": "A"})
    assert response.status_code == 422
    fields = {error["field"] for error in response.json()["details"]["errors"]}
    assert fields == {"blockers", "learnings"}


def test_create_entry_requires_auth(client, entry_payload):
    response = client.post("/api/entries", json=entry_payload)
    assert response.status_code == 401


def test_list_entries_is_team_wide(client, auth_headers, other_headers, entry_payload):
    """Every authenticated user sees every entry, annotated with its owner."""
    _create(client, auth_headers, {**entry_payload, "date": "2026-01-01T09:00:00Z"})
    _create(client, other_headers, {**entry_payload, "date": "2026-01-02T09:00:00Z"})

    response = client.get("/api/entries", headers=other_headers)
    assert response.status_code == 200
    entries = response.json()
    assert [(e["user_id"], e["user_name"]) for e in entries] == [
        (other_headers.user_id, "Bob"),
        (auth_headers.user_id, "Jane"),
    ]


def test_list_entries_newest_date_first(client, auth_headers, entry_payload):
    for work, date in [
        ("monday", "2026-03-02T09:00:00Z"),
        ("wednesday", "2026-03-04T09:00:00Z"),
        ("tuesday", "2026-03-03T09:00:00Z"),
    ]:
        _create(client, auth_headers, {**entry_payload, "work_done": work, "date": date})

    response = client.get("/api/entries", headers=auth_headers)
    assert [e["work_done"] for e in response.json()] == ["wednesday", "tuesday", "monday"]


def test_list_entries_equal_dates_keep_insertion_order(client, auth_headers, entry_payload):
    for work in ("first", "second", "third"):
        _create(
            client, auth_headers, {**entry_payload, "work_done": work, "date": "2026-03-02T09:00:00Z"}
        )

    response = client.get("/api/entries", headers=auth_headers)
    assert [e["work_done"] for e in response.json()] == ["first", "second", "third"]


def test_list_entries_is_idempotent(client, auth_headers, other_headers, entry_payload):
    _create(client, auth_headers, entry_payload)
    _create(client, other_headers, entry_payload)
    _create(client, auth_headers, {**entry_payload, "date": "2025-12-31T23:59:00Z"})

    first = client.get("/api/entries", headers=auth_headers).json()
    second = client.get("/api/entries", headers=auth_headers).json()
    assert first == second


def test_get_entry(client, auth_headers, entry_payload):
    created = _create(client, auth_headers, entry_payload)

    response = client.get(f"/api/entries/{created['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == created


def test_get_entry_readable_by_teammate(client, auth_headers, other_headers, entry_payload):
    created = _create(client, auth_headers, entry_payload)

    response = client.get(f"/api/entries/{created['id']}", headers=other_headers)
    assert response.status_code == 200
    assert response.json()["user_id"] == auth_headers.user_id


def test_get_entry_not_found(client, auth_headers):
    response = client.get("/api/entries/99999", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["code"] == "NOT_FOUND"


def test_update_entry_by_owner(client, auth_headers, entry_payload):
    created = _create(client, auth_headers, entry_payload)

    response = client.put(
        f"/api/entries/{created['id']}", headers=auth_headers, json={"work_done": "X"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["work_done"] == "X"
    # Absent fields are untouched
    assert data["blockers"] == "B"
    assert data["learnings"] == "C"
    assert data["user_id"] == auth_headers.user_id


def test_update_entry_by_other_user_forbidden(client, auth_headers, other_headers, entry_payload):
    created = _create(client, auth_headers, entry_payload)

    response = client.put(
        f"/api/entries/{created['id']}", headers=other_headers, json={"work_done": "X"}
    )
    assert response.status_code == 403
    assert response.json()["code"] == "FORBIDDEN"

    unchanged = client.get(f"/api/entries/{created['id']}", headers=auth_headers).json()
    assert unchanged["work_done"] == "A"


def test_update_entry_not_found(client, auth_headers):
    response = client.put("/api/entries/99999", headers=auth_headers, json={"work_done": "X"})
    assert response.status_code == 404


def test_update_entry_cannot_change_owner(client, auth_headers, other_headers, entry_payload):
    created = _create(client, auth_headers, entry_payload)

    response = client.put(
        f"/api/entries/{created['id']}",
        headers=auth_headers,
        json={"user_id": other_headers.user_id, "learnings": "L"},
    )
    assert response.status_code == 200
    assert response.json()["user_id"] == auth_headers.user_id
    assert response.json()["learnings"] == "L"


def test_update_entry_rejects_null_text(client, auth_headers, entry_payload):
    created = _create(client, auth_headers, entry_payload)

    response = client.put(
        f"/api/entries/{created['id']}", headers=auth_headers, json={"blockers": None}
    )
    assert response.status_code == 422


def test_update_entry_clears_commit_link(client, auth_headers, entry_payload):
    created = _create(
        client, auth_headers, {**entry_payload, "github_commit_link": "https://github.com/a/b"}
    )

    response = client.put(
        f"/api/entries/{created['id']}", headers=auth_headers, json={"github_commit_link": None}
    )
    assert response.status_code == 200
    assert response.json()["github_commit_link"] is None


def test_delete_entry_by_owner(client, auth_headers, entry_payload):
    created = _create(client, auth_headers, entry_payload)

    response = client.delete(f"/api/entries/{created['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {"message": "Entry deleted successfully"}

    response = client.get(f"/api/entries/{created['id']}", headers=auth_headers)
    assert response.status_code == 404


def test_delete_entry_by_other_user_forbidden(client, auth_headers, other_headers, entry_payload):
    created = _create(client, auth_headers, entry_payload)

    response = client.delete(f"/api/entries/{created['id']}", headers=other_headers)
    assert response.status_code == 403

    response = client.get(f"/api/entries/{created['id']}", headers=auth_headers)
    assert response.status_code == 200


def test_delete_entry_not_found(client, auth_headers):
    response = client.delete("/api/entries/99999", headers=auth_headers)
    assert response.status_code == 404


def test_entry_views_never_expose_password(client, auth_headers, entry_payload):
    _create(client, auth_headers, entry_payload)
    response = client.get("/api/entries", headers=auth_headers)
    assert "password" not in response.text
