import os

# Config reads the environment at import time
os.environ["TESTING"] = "true"
os.environ["STORE_BACKEND"] = "memory"
os.environ["RATELIMIT_ENABLED"] = "false"
os.environ["PASSWORD_HASH_ROUNDS"] = "1000"
os.environ["SERVICE_AUTH_SECRET"] = "test-secret"
os.environ["ADMIN_EMAIL"] = "admin@growthkit.com"

import pytest
from fastapi.testclient import TestClient
from growthkit.fastapi_app import create_fastapi_app

ADMIN_EMAIL = "admin@growthkit.com"
PASSWORD = "secret123"


def signup(client, email, password=PASSWORD):
    """Sign up and return (auth headers, user body)."""
    res = client.post("/api/auth/signup", json={"email": email, "password": password})
    assert res.status_code == 201, res.text
    body = res.json()
    return {"Authorization": f"Bearer {body['token']}"}, body["user"]


@pytest.fixture()
def app():
    """Create a new FastAPI app, with its own empty store, for each test."""
    return create_fastapi_app()


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def auth_headers(client):
    """Authentication headers for a freshly signed-up member."""
    headers, _ = signup(client, "member@example.com")
    return headers


@pytest.fixture()
def admin_headers(client):
    headers, _ = signup(client, ADMIN_EMAIL)
    return headers
