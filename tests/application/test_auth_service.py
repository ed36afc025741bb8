"""
Tests for AuthService registration and login.
"""

import uuid
from unittest.mock import AsyncMock, patch

import pytest
from pydantic import SecretStr

from backend.application.services.auth_service import ACCOUNT_TAKEN, AuthService
from backend.boundary.db.CRUD.user_crud import user_crud
from backend.configs.auth import AuthSettings
from backend.core.exceptions import AuthenticationError, DuplicateResourceError
from backend.core.security import TokenProvider


@pytest.fixture
def token_provider() -> TokenProvider:
    return TokenProvider(AuthSettings(jwt_secret=SecretStr("k" * 64)))


@pytest.fixture
def auth_service(test_async_db, token_provider) -> AuthService:
    return AuthService(test_async_db, token_provider, bcrypt_rounds=4)


class TestRegister:
    """Test suite for AuthService.register()."""

    async def test_register_stores_hashed_password(self, test_async_db, auth_service) -> None:
        # Act
        result = await auth_service.register("alice", "alice@example.com", "password123")

        # Assert
        user = await user_crud.get_by_id(test_async_db, result["id"])
        assert user.username == "alice"
        assert user.password_hash != "password123"
        assert user.password_hash.startswith("$2")

    async def test_duplicate_username_rejected(self, auth_service) -> None:
        await auth_service.register("alice", "alice@example.com", "password123")

        with pytest.raises(DuplicateResourceError, match="Username"):
            await auth_service.register("alice", "other@example.com", "password123")

    async def test_duplicate_email_rejected(self, auth_service) -> None:
        await auth_service.register("alice", "alice@example.com", "password123")

        with pytest.raises(DuplicateResourceError, match="Email"):
            await auth_service.register("alice2", "alice@example.com", "password123")

    async def test_concurrent_registration_hits_unique_constraint(self, auth_service) -> None:
        await auth_service.register("alice", "alice@example.com", "password123")

        # Both pre-insert checks pass, as they would for two racing requests
        with patch.object(user_crud, "username_exists", AsyncMock(return_value=False)), \
                patch.object(user_crud, "email_exists", AsyncMock(return_value=False)):
            with pytest.raises(DuplicateResourceError) as exc_info:
                await auth_service.register("alice", "alice@example.com", "password123")

        assert exc_info.value.message == ACCOUNT_TAKEN


class TestLogin:
    """Test suite for AuthService.login()."""

    @pytest.mark.parametrize("identifier", ["alice", "alice@example.com"])
    async def test_login_issues_token_for_user(
        self, test_async_db, auth_service, token_provider, identifier
    ) -> None:
        # Arrange
        registered = await auth_service.register("alice", "alice@example.com", "password123")

        # Act
        result = await auth_service.login(identifier, "password123")

        # Assert
        assert result["token_type"] == "Bearer"
        assert token_provider.get_user_id(result["access_token"]) == registered["id"]
        user = await user_crud.get_by_id(test_async_db, registered["id"])
        assert user.last_login is not None

    async def test_wrong_password_rejected(self, auth_service) -> None:
        await auth_service.register("alice", "alice@example.com", "password123")

        with pytest.raises(AuthenticationError):
            await auth_service.login("alice", "wrong-password")

    async def test_unknown_user_rejected(self, auth_service) -> None:
        with pytest.raises(AuthenticationError):
            await auth_service.login(f"ghost-{uuid.uuid4().hex[:6]}", "password123")
