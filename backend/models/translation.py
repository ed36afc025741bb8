"""
Translation history schemas.

Dependencies: pydantic, backend.boundary.db.models
System role: Translation persistence API contracts
"""

import uuid
from datetime import datetime

from pydantic import Field, field_validator

from backend.boundary.db.models.enums import InputType
from backend.models.common import CamelModel


class CreateTranslationRequest(CamelModel):
    """Request schema for saving a translation to history."""

    source_text: str = Field(..., min_length=1)
    target_text: str = Field(..., min_length=1)
    source_lang: str = Field(..., min_length=1, max_length=16)
    target_lang: str = Field(..., min_length=1, max_length=16)
    input_type: InputType

    @field_validator("source_text", "target_text", "source_lang", "target_lang")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class TranslationResponse(CamelModel):
    """Response schema for a stored translation."""

    id: uuid.UUID
    source_text: str
    target_text: str
    source_lang: str
    target_lang: str
    input_type: InputType
    is_favorite: bool
    is_saved: bool
    tags: str | None
    created_at: datetime
