"""Pytest configuration and fixtures."""

import os

# Use test database - whatever DATABASE_URL points at, SQLite locally.
# Must be set before the app modules read their settings.
os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from devlog.database import Base, SessionLocal, engine, get_db  # noqa: E402
from devlog.main import app  # noqa: E402


class AuthHeaders(dict):
    """Dict subclass that also stores user_id and email."""

    def __init__(self, *args, user_id: int | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    from devlog import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = SessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(client):
    """Factory that registers a user and returns auth headers for them."""

    def register(name: str, email: str, password: str = "pass123") -> AuthHeaders:
        response = client.post(
            "/api/auth/register",
            json={"name": name, "email": email, "password": password},
        )
        assert response.status_code == 201
        data = response.json()
        return AuthHeaders(
            {"Authorization": f"Bearer {data['token']}"},
            user_id=data["user"]["id"],
            email=data["user"]["email"],
        )

    return register


@pytest.fixture
def auth_headers(make_user):
    """Create a user and return auth headers with user info."""
    return make_user("Jane", "jane@x.com")


@pytest.fixture
def other_headers(make_user):
    """A second user, for ownership checks."""
    return make_user("Bob", "bob@x.com")


@pytest.fixture
def entry_payload():
    return {"work_done": "A", "blockers": "B", "learnings": "C"}
