"""Profile API tests."""


def test_get_profile(client, auth_headers):
    response = client.get("/api/profile/me", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {
        "id": auth_headers.user_id,
        "name": "Jane",
        "email": "jane@x.com",
        "team": "",
        "role": "member",
    }


def test_update_profile_partial(client, auth_headers):
    """Only fields present in the request are changed."""
    response = client.put("/api/profile", headers=auth_headers, json={"team": "Platform"})
    assert response.status_code == 200
    data = response.json()
    assert data["team"] == "Platform"
    assert data["name"] == "Jane"
    assert data["email"] == "jane@x.com"

    response = client.put("/api/profile", headers=auth_headers, json={"name": "Jane Doe"})
    assert response.json()["name"] == "Jane Doe"
    assert response.json()["team"] == "Platform"


def test_update_profile_email_normalized(client, auth_headers):
    response = client.put("/api/profile", headers=auth_headers, json={"email": "Jane.Doe@X.com"})
    assert response.status_code == 200
    assert response.json()["email"] == "jane.doe@x.com"

    # Login works with the new address
    response = client.post(
        "/api/auth/login", json={"email": "jane.doe@x.com", "password": "pass123"}
    )
    assert response.status_code == 200


def test_update_profile_email_conflict(client, auth_headers, other_headers):
    response = client.put("/api/profile", headers=auth_headers, json={"email": "bob@x.com"})
    assert response.status_code == 409

    response = client.get("/api/profile/me", headers=auth_headers)
    assert response.json()["email"] == "jane@x.com"


def test_update_profile_same_email_is_not_conflict(client, auth_headers):
    response = client.put("/api/profile", headers=auth_headers, json={"email": "jane@x.com"})
    assert response.status_code == 200


def test_update_profile_ignores_password_and_role(client, auth_headers):
    response = client.put(
        "/api/profile",
        headers=auth_headers,
        json={"role": "admin", "password": "hijacked", "team": "Core"},
    )
    assert response.status_code == 200
    assert response.json()["role"] == "member"

    response = client.post("/api/auth/login", json={"email": "jane@x.com", "password": "pass123"})
    assert response.status_code == 200


def test_update_profile_rejects_null_name(client, auth_headers):
    response = client.put("/api/profile", headers=auth_headers, json={"name": None})
    assert response.status_code == 422


def test_update_profile_rejects_blank_name(client, auth_headers):
    response = client.put("/api/profile", headers=auth_headers, json={"name": "   "})
    assert response.status_code == 422
    assert response.json()["details"]["errors"][0]["field"] == "name"

    response = client.get("/api/profile/me", headers=auth_headers)
    assert response.json()["name"] == "Jane"


def test_update_profile_trims_name(client, auth_headers):
    response = client.put("/api/profile", headers=auth_headers, json={"name": "  Jane Doe  "})
    assert response.status_code == 200
    assert response.json()["name"] == "Jane Doe"


def test_profile_never_exposes_password(client, auth_headers):
    response = client.get("/api/profile/me", headers=auth_headers)
    assert "password" not in response.text
