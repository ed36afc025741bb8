"""
User profile service.

Dependencies: backend.boundary.db.CRUD
System role: Profile read and preference update use cases
"""

import json
import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.CRUD.user_crud import user_crud
from backend.boundary.db.models.user_model import UserModel
from backend.core.exceptions import ResourceNotFoundError, ValidationError

logger = logging.getLogger(__name__)


def _profile(user: UserModel) -> dict:
    return {
        "id": user.id,
        "username": user.username,
        "email": user.email,
        "created_at": user.created_at,
        "last_login": user.last_login,
        "preferences": {
            "preferred_source_lang": user.preferred_source_lang,
            "preferred_target_lang": user.preferred_target_lang,
        },
        "settings": user.settings,
    }


class UserService:
    """User profile orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_profile(self, user_id: UUID) -> dict:
        """
        Get the profile of a user.

        Raises:
            ResourceNotFoundError: If the user no longer exists
        """
        user = await user_crud.get_by_id(self.db, user_id)
        if user is None:
            raise ResourceNotFoundError("User", user_id)
        return _profile(user)

    async def update_profile(
        self,
        user_id: UUID,
        preferences: dict | None = None,
        settings: str | None = None,
    ) -> dict:
        """
        Update language preferences and/or client settings.

        Args:
            user_id: User UUID
            preferences: preferred_source_lang and preferred_target_lang; when
                given, both columns are replaced (missing keys become NULL)
            settings: JSON document string; must parse as JSON

        Returns:
            dict: Updated profile

        Raises:
            ValidationError: If settings is not valid JSON
            ResourceNotFoundError: If the user no longer exists
        """
        values: dict = {}

        if preferences is not None:
            values["preferred_source_lang"] = preferences.get("preferred_source_lang")
            values["preferred_target_lang"] = preferences.get("preferred_target_lang")

        if settings is not None:
            try:
                json.loads(settings)
            except json.JSONDecodeError as e:
                raise ValidationError(
                    "Settings must be a valid JSON string.",
                    field="settings",
                ) from e
            values["settings"] = settings

        if not values:
            return await self.get_profile(user_id)

        user = await user_crud.update_by_id(self.db, user_id, **values)
        if user is None:
            raise ResourceNotFoundError("User", user_id)

        logger.info(
            "User profile updated",
            extra={"user_id": str(user_id), "fields": sorted(values)},
        )
        return _profile(user)
