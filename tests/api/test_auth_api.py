"""API tests for registration, login and the current-user endpoints."""

from unittest.mock import AsyncMock, patch

import pytest

from discusshub.exceptions import ConflictError, ForbiddenError
from discusshub.services import AuthService, decode_access_token

pytestmark = pytest.mark.api


class TestRegister:

    def test_registered(self, client, alice):
        with patch.object(AuthService, "register_user", new_callable=AsyncMock) as mock_register:
            mock_register.return_value = alice
            response = client.post(
                "/api/auth/register",
                json={"username": "alice", "email": "alice@example.com", "password": "s3cret!"},
            )

        assert response.status_code == 201
        data = response.json()
        assert data["id"] == str(alice.id)
        assert data["username"] == "alice"
        assert "hashedPassword" not in data

    def test_duplicate(self, client):
        with patch.object(AuthService, "register_user", new_callable=AsyncMock) as mock_register:
            mock_register.side_effect = ConflictError("Username 'alice' is already taken")
            response = client.post(
                "/api/auth/register",
                json={"username": "alice", "email": "alice@example.com", "password": "s3cret!"},
            )

        assert response.status_code == 409
        assert response.json() == {"message": "Username 'alice' is already taken"}

    def test_invalid_email(self, client):
        response = client.post(
            "/api/auth/register",
            json={"username": "alice", "email": "not-an-email", "password": "s3cret!"},
        )
        assert response.status_code == 400


class TestLogin:

    def test_returns_token_for_user_id(self, client, alice):
        with patch.object(AuthService, "login_user", new_callable=AsyncMock) as mock_login:
            mock_login.return_value = alice
            response = client.post("/api/auth/login", json={"username": "alice", "password": "s3cret!"})

        assert response.status_code == 200
        data = response.json()
        assert data["token_type"] == "bearer"
        assert decode_access_token(data["access_token"]).subject == str(alice.id)

    def test_bad_credentials(self, client):
        with patch.object(AuthService, "login_user", new_callable=AsyncMock) as mock_login:
            mock_login.return_value = None
            response = client.post("/api/auth/login", json={"username": "alice", "password": "wrong"})

        assert response.status_code == 401
        assert response.json() == {"message": "Invalid username or password"}


class TestCurrentUser:

    def test_me(self, client, login_as, alice):
        login_as(alice)
        response = client.get("/api/auth/me")

        assert response.status_code == 200
        assert response.json()["email"] == "alice@example.com"
        assert "hashedPassword" not in response.json()

    def test_change_password(self, client, login_as, alice):
        login_as(alice)
        with patch.object(AuthService, "change_password", new_callable=AsyncMock) as mock_change:
            mock_change.return_value = {"message": "Password updated successfully"}
            response = client.post(
                "/api/auth/change-password",
                json={"current_password": "old-pass", "new_password": "new-pass"},
            )

        assert response.status_code == 200
        mock_change.assert_awaited_once_with(user=alice, current_password="old-pass", new_password="new-pass")

    def test_change_password_wrong_current(self, client, login_as, alice):
        login_as(alice)
        with patch.object(AuthService, "change_password", new_callable=AsyncMock) as mock_change:
            mock_change.side_effect = ForbiddenError("Current password is incorrect")
            response = client.post(
                "/api/auth/change-password",
                json={"current_password": "nope", "new_password": "new-pass"},
            )

        assert response.status_code == 403
