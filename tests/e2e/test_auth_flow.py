"""End-to-end tests for sign-up, log-in and profile routes."""

import pytest

from tests.harness import create_client_fixture

# E2E test fixture
client = create_client_fixture()


def _sign_up(client, username="alice", password="password1"):
    return client.post(
        "/auth/sign-up", json={"username": username, "password": password}
    )


def _log_in(client, username="alice", password="password1"):
    return client.post(
        "/auth/log-in", json={"username": username, "password": password}
    )


class TestSignUp:
    """Tests for POST /auth/sign-up."""

    def test_sign_up(self, client):
        response = _sign_up(client)

        assert response.status_code == 201
        assert response.json() == {"message": "successfully signed up user"}

    def test_username_taken(self, client):
        _sign_up(client)

        response = _sign_up(client, password="another-password")

        assert response.status_code == 400
        assert response.json() == {"message": "username taken"}

    def test_missing_password(self, client):
        response = client.post("/auth/sign-up", json={"username": "alice"})

        assert response.status_code == 400
        assert response.json() == {"message": "missing username or password"}

    @pytest.mark.parametrize("username", ["John Doe", "émile", "Jo"])
    def test_any_username_up_to_thirty_characters(self, client, username):
        response = _sign_up(client, username=username)

        assert response.status_code == 201
        assert _log_in(client, username=username).status_code == 200

    def test_username_too_long(self, client):
        response = _sign_up(client, username="x" * 31)

        assert response.status_code == 400
        assert response.json() == {"message": "username must be at most 30 characters"}

    def test_malformed_body(self, client):
        response = client.post(
            "/auth/sign-up",
            content="not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert "message" in response.json()


class TestLogIn:
    """Tests for POST /auth/log-in and POST /auth/refresh-token."""

    def test_log_in(self, client):
        _sign_up(client)

        response = _log_in(client)

        assert response.status_code == 200
        data = response.json()
        assert data["token"]
        assert data["refresh_token"]
        assert data["user"]["username"] == "alice"
        assert "password_hash" not in data["user"]

    def test_wrong_password(self, client):
        _sign_up(client)

        response = _log_in(client, password="wrong")

        assert response.status_code == 400
        assert response.json() == {"message": "wrong username or password"}

    def test_unknown_user_gets_same_message(self, client):
        response = _log_in(client, username="nobody")

        assert response.status_code == 400
        assert response.json() == {"message": "wrong username or password"}

    def test_refresh_token(self, client):
        _sign_up(client)
        tokens = _log_in(client).json()

        response = client.post(
            "/auth/refresh-token", json={"refreshToken": tokens["refresh_token"]}
        )

        assert response.status_code == 200
        new_token = response.json()["token"]
        me = client.get("/auth/me", headers={"Authorization": f"Bearer {new_token}"})
        assert me.json()["username"] == "alice"

    def test_access_token_rejected_for_refresh(self, client):
        _sign_up(client)
        tokens = _log_in(client).json()

        response = client.post(
            "/auth/refresh-token", json={"refreshToken": tokens["token"]}
        )

        assert response.status_code == 401
        assert response.json() == {"message": "Invalid token"}


class TestAuthenticatedRoutes:
    """Tests for GET /auth/me and PUT /auth/profile."""

    def test_no_token(self, client):
        response = client.get("/auth/me")

        assert response.status_code == 401
        assert response.json() == {"message": "No token provided"}
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_invalid_token(self, client):
        response = client.get("/auth/me", headers={"Authorization": "Bearer garbage"})

        assert response.status_code == 401
        assert response.json() == {"message": "Invalid token"}

    def test_missing_token_wins_over_malformed_body(self, client):
        response = client.put("/auth/profile", json=["not", "an", "object"])

        assert response.status_code == 401
        assert response.json() == {"message": "No token provided"}

    def test_update_profile(self, client):
        _sign_up(client)
        token = _log_in(client).json()["token"]
        headers = {"Authorization": f"Bearer {token}"}

        response = client.put(
            "/auth/profile", json={"username": "alice2", "icon": "fox"}, headers=headers
        )

        assert response.status_code == 200
        assert response.json()["username"] == "alice2"
        assert response.json()["icon"] == "fox"
        # Token stays valid: it names the user ID, not the username
        assert client.get("/auth/me", headers=headers).json()["username"] == "alice2"


class TestHealth:
    """Tests for GET /health."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
