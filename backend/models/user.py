"""
User profile schemas.

Dependencies: pydantic
System role: Profile API contracts
"""

import uuid
from datetime import datetime

from pydantic import Field

from backend.models.common import CamelModel


class UserPreferences(CamelModel):
    """Preferred language pair."""

    preferred_source_lang: str | None = Field(None, max_length=16)
    preferred_target_lang: str | None = Field(None, max_length=16)


class UserProfileResponse(CamelModel):
    """Response schema for the current user's profile."""

    id: uuid.UUID
    username: str
    email: str
    created_at: datetime
    last_login: datetime | None
    preferences: UserPreferences
    settings: str | None


class UserProfileUpdateRequest(CamelModel):
    """Request schema for updating the current user's profile."""

    preferences: UserPreferences | None = None
    settings: str | None = Field(None, description="Client settings as a JSON string")
