from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock, patch
from uuid import uuid4

import pytest
from pydantic import SecretStr

from backend.api.deps import get_auth_service, get_folder_service, get_token_provider
from backend.boundary.db.CRUD.user_crud import user_crud
from backend.configs.auth import AuthSettings
from backend.core.exceptions import AuthenticationError, DuplicateResourceError
from backend.core.security import TokenProvider


@pytest.fixture
def token_provider() -> TokenProvider:
    return TokenProvider(AuthSettings(jwt_secret=SecretStr("k" * 64), jwt_expiration_minutes=60))


@pytest.fixture
def mock_auth_service(app):
    service = AsyncMock()
    app.dependency_overrides[get_auth_service] = lambda: service
    return service


def test_register(anonymous_client, mock_auth_service):
    mock_auth_service.register.return_value = {"id": "x", "username": "alice", "email": "a@b.co"}

    response = anonymous_client.post(
        "/api/auth/register",
        json={"username": "alice", "email": "alice@example.com", "password": "secret1"},
    )

    assert response.status_code == 201
    assert response.json() == {
        "success": True,
        "message": "User registered successfully",
        "data": None,
    }
    mock_auth_service.register.assert_awaited_once_with(
        username="alice", email="alice@example.com", password="secret1"
    )


def test_register_duplicate_username(anonymous_client, mock_auth_service):
    mock_auth_service.register.side_effect = DuplicateResourceError("Username is already taken!")

    response = anonymous_client.post(
        "/api/auth/register",
        json={"username": "alice", "email": "alice@example.com", "password": "secret1"},
    )

    assert response.status_code == 400
    assert response.json()["success"] is False
    assert response.json()["message"] == "Username is already taken!"


@pytest.mark.parametrize(
    "payload",
    [
        {"username": "al", "email": "alice@example.com", "password": "secret1"},
        {"username": "alice", "email": "not-an-email", "password": "secret1"},
        {"username": "alice", "email": "a@b.c d", "password": "secret1"},
        {"username": "alice", "email": "a@@b.com", "password": "secret1"},
        {"username": "alice", "email": "x@.com.", "password": "secret1"},
        {"username": "alice", "email": "a b@c.d", "password": "secret1"},
        {"username": "alice", "email": "alice@example.com", "password": "123"},
    ],
)
def test_register_validation(anonymous_client, mock_auth_service, payload):
    response = anonymous_client.post("/api/auth/register", json=payload)

    assert response.status_code == 422
    mock_auth_service.register.assert_not_called()


def test_login(anonymous_client, mock_auth_service):
    mock_auth_service.login.return_value = {"access_token": "jwt", "token_type": "Bearer"}

    response = anonymous_client.post(
        "/api/auth/login", json={"usernameOrEmail": "alice", "password": "secret1"}
    )

    assert response.status_code == 200
    assert response.json() == {"accessToken": "jwt", "tokenType": "Bearer"}
    mock_auth_service.login.assert_awaited_once_with("alice", "secret1")


def test_login_bad_credentials(anonymous_client, mock_auth_service):
    mock_auth_service.login.side_effect = AuthenticationError("Invalid username/email or password")

    response = anonymous_client.post(
        "/api/auth/login", json={"usernameOrEmail": "alice", "password": "wrong"}
    )

    assert response.status_code == 401
    assert response.json()["message"] == "Invalid username/email or password"


class TestBearerAuthentication:
    """Protected endpoints without a valid token."""

    def test_missing_token(self, anonymous_client):
        response = anonymous_client.get("/api/translations")

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"
        assert response.json() == {
            "success": False,
            "message": "Authentication required",
            "data": None,
        }

    def test_invalid_token(self, app, anonymous_client):
        provider = MagicMock()
        provider.get_user_id.side_effect = AuthenticationError("Invalid access token")
        app.dependency_overrides[get_token_provider] = lambda: provider

        response = anonymous_client.get(
            "/api/folders", headers={"Authorization": "Bearer garbage"}
        )

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid access token"
        provider.get_user_id.assert_called_once_with("garbage")

    def test_token_for_deleted_user(self, app, anonymous_client):
        provider = MagicMock()
        provider.get_user_id.return_value = uuid4()
        app.dependency_overrides[get_token_provider] = lambda: provider

        with patch.object(user_crud, "exists", AsyncMock(return_value=False)):
            response = anonymous_client.get(
                "/api/folders", headers={"Authorization": "Bearer valid-but-orphaned"}
            )

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"
        assert response.json()["message"] == "User not found"

    def test_expired_token(self, app, anonymous_client, token_provider):
        issued = datetime.now(timezone.utc) - timedelta(days=2)
        token = token_provider.create_access_token(uuid4(), now=issued)
        app.dependency_overrides[get_token_provider] = lambda: token_provider

        response = anonymous_client.get(
            "/api/folders", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 401
        assert response.json()["message"] == "Access token has expired"

    def test_valid_token_reaches_endpoint(self, app, anonymous_client, token_provider):
        user_id = uuid4()
        token = token_provider.create_access_token(user_id)
        folder_service = AsyncMock()
        folder_service.list_folders.return_value = []
        app.dependency_overrides[get_token_provider] = lambda: token_provider
        app.dependency_overrides[get_folder_service] = lambda: folder_service

        with patch.object(user_crud, "exists", AsyncMock(return_value=True)):
            response = anonymous_client.get(
                "/api/folders", headers={"Authorization": f"Bearer {token}"}
            )

        assert response.status_code == 200
        folder_service.list_folders.assert_awaited_once_with(user_id, None)


def test_register_trims_identity(anonymous_client, mock_auth_service):
    mock_auth_service.register.return_value = {"id": "x", "username": "alice", "email": "a@b.co"}

    response = anonymous_client.post(
        "/api/auth/register",
        json={"username": " alice ", "email": " alice@example.com ", "password": "secret1"},
    )

    assert response.status_code == 201
    mock_auth_service.register.assert_awaited_once_with(
        username="alice", email="alice@example.com", password="secret1"
    )
