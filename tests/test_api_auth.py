from fastapi.testclient import TestClient
from growthkit.fastapi_app import create_fastapi_app
from conftest import ADMIN_EMAIL, PASSWORD, signup


class TestSignup:
    def test_signup_returns_user_and_token(self, client):
        res = client.post(
            "/api/auth/signup", json={"email": "New@Example.com", "password": PASSWORD}
        )

        assert res.status_code == 201
        body = res.json()
        assert body["token"]
        assert body["user"]["email"] == "new@example.com"
        assert body["user"]["credits"] == 5
        assert body["user"]["unlocked_tools"] == []
        assert body["user"]["is_admin"] is False
        assert "password_hash" not in body["user"]

    def test_duplicate_email(self, client):
        signup(client, "dup@example.com")
        res = client.post(
            "/api/auth/signup", json={"email": "dup@example.com", "password": PASSWORD}
        )
        assert res.status_code == 400
        assert res.json() == {"error": "A user with this email already exists."}

    def test_short_password(self, client):
        res = client.post("/api/auth/signup", json={"email": "a@b.co", "password": "123"})
        assert res.status_code == 400

    def test_admin_signup(self, client):
        _, user = signup(client, ADMIN_EMAIL)
        assert user["is_admin"] is True


class TestLogin:
    def test_login(self, client):
        signup(client, "member@example.com")
        res = client.post(
            "/api/auth/login", json={"email": "member@example.com", "password": PASSWORD}
        )
        assert res.status_code == 200
        assert res.json()["user"]["email"] == "member@example.com"

    def test_bad_password(self, client):
        signup(client, "member@example.com")
        res = client.post(
            "/api/auth/login", json={"email": "member@example.com", "password": "nope-nope"}
        )
        assert res.status_code == 401
        assert res.json() == {"error": "Invalid credentials."}


class TestMe:
    def test_me(self, client, auth_headers):
        res = client.get("/api/auth/me", headers=auth_headers)
        assert res.status_code == 200
        assert res.json()["email"] == "member@example.com"

    def test_missing_token(self, client):
        res = client.get("/api/auth/me")
        assert res.status_code == 401
        assert "error" in res.json()

    def test_garbage_token(self, client):
        res = client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
        assert res.status_code == 401

    def test_token_for_unknown_user(self, client):
        """A well-formed token whose user is not in this app's store."""
        headers, _ = signup(client, "member@example.com")

        with TestClient(create_fastapi_app()) as fresh:
            res = fresh.get("/api/auth/me", headers=headers)

        assert res.status_code == 401
        assert res.json() == {"error": "Unauthorized"}
