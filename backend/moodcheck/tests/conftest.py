"""
Shared fixtures: an in-memory SQLite database behind the API and a
memory-backed store for service-level tests.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from moodcheck.db.base import Base
from moodcheck.db.session import build_engine, get_db
from moodcheck.main import app
from moodcheck.services.auth_service import AuthStore
from moodcheck.storage.kv_store import MemoryKeyValueStore
import moodcheck.models  # noqa: F401

STRONG_PASSWORD = "Calm#Mind2024"


@pytest.fixture
def db_session():
    engine = build_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()
        engine.dispose()


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def store():
    return MemoryKeyValueStore()


@pytest.fixture
def auth(store):
    return AuthStore(store, persist_session=True)


def register(client, email, role="user", password=STRONG_PASSWORD, username=None):
    return client.post(
        "/api/auth/register",
        json={
            "username": username or email.split("@")[0],
            "email": email,
            "password": password,
            "role": role
        }
    )


def auth_headers(client, email, role="user", password=STRONG_PASSWORD):
    """Register ``email`` and return bearer headers for it."""
    register(client, email, role=role, password=password)
    response = client.post("/api/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}
