import pytest
from fastapi.testclient import TestClient

from school_api.config import Settings
from school_api.main import create_app

TEST_SECRET = "test-signing-secret"


@pytest.fixture
def app(monkeypatch):
    """A fresh app on its own in-memory SQLite database."""
    monkeypatch.setenv("JWT_SECRET", TEST_SECRET)
    monkeypatch.setenv("DATABASE_URL", "sqlite://")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    return create_app(Settings())


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def auth_headers(client):
    r = client.post('/auth/register', json={'name': 'Admin', 'email': 'admin@school.test', 'password': 'pass123'})
    assert r.status_code == 201
    login = client.post('/auth/login', json={'email': 'admin@school.test', 'password': 'pass123'})
    assert login.status_code == 200
    return {'Authorization': f"Bearer {login.json()['access_token']}"}
