"""
Tests for UserService profile reads and updates.
"""

import uuid

import pytest

from backend.application.services.user_service import UserService
from backend.core.exceptions import ResourceNotFoundError, ValidationError


class TestUserService:
    """Test suite for UserService."""

    async def test_get_profile_shape(self, test_async_db, make_user) -> None:
        user = await make_user("alice")

        profile = await UserService(test_async_db).get_profile(user.id)

        assert profile["username"] == "alice"
        assert profile["preferences"] == {
            "preferred_source_lang": None,
            "preferred_target_lang": None,
        }
        assert profile["settings"] is None

    async def test_get_profile_missing_user(self, test_async_db) -> None:
        with pytest.raises(ResourceNotFoundError):
            await UserService(test_async_db).get_profile(uuid.uuid4())

    async def test_update_preferences_and_settings(self, test_async_db, make_user) -> None:
        # Arrange
        user = await make_user()
        service = UserService(test_async_db)

        # Act
        profile = await service.update_profile(
            user.id,
            preferences={"preferred_source_lang": "en", "preferred_target_lang": "ja"},
            settings='{"theme": "dark"}',
        )

        # Assert
        assert profile["preferences"]["preferred_target_lang"] == "ja"
        assert profile["settings"] == '{"theme": "dark"}'

    async def test_preferences_replace_both_languages(self, test_async_db, make_user) -> None:
        user = await make_user()
        service = UserService(test_async_db)
        await service.update_profile(
            user.id,
            preferences={"preferred_source_lang": "en", "preferred_target_lang": "ja"},
        )

        profile = await service.update_profile(
            user.id, preferences={"preferred_source_lang": "de"}
        )

        assert profile["preferences"] == {
            "preferred_source_lang": "de",
            "preferred_target_lang": None,
        }

    async def test_invalid_settings_json_rejected(self, test_async_db, make_user) -> None:
        user = await make_user()

        with pytest.raises(ValidationError, match="valid JSON"):
            await UserService(test_async_db).update_profile(user.id, settings="{not json")

    async def test_empty_update_returns_current_profile(self, test_async_db, make_user) -> None:
        user = await make_user("alice")

        profile = await UserService(test_async_db).update_profile(user.id)

        assert profile["username"] == "alice"
