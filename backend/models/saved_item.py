"""
Saved item schemas.

Dependencies: pydantic, backend.boundary.db.models
System role: Saved item API contracts
"""

import uuid
from datetime import datetime

from pydantic import Field

from backend.boundary.db.models.enums import SavedItemCategory
from backend.models.common import CamelModel
from backend.models.translation import TranslationResponse


class CreateSavedItemRequest(CamelModel):
    """Request schema for bookmarking a translation."""

    translation_id: uuid.UUID
    category: SavedItemCategory
    folder_id: uuid.UUID | None = None
    name: str | None = Field(None, max_length=255, description="Defaults to the source text")
    notes: str | None = None


class UpdateSavedItemRequest(CamelModel):
    """Request schema for renaming, annotating or moving a saved item."""

    name: str | None = Field(None, max_length=255)
    notes: str | None = None
    folder_id: uuid.UUID | None = None
    set_folder_id_null: bool = Field(False, description="Move the item out of its folder")


class SavedItemResponse(CamelModel):
    """Response schema for a saved item with its translation embedded."""

    id: uuid.UUID
    translation: TranslationResponse
    category: SavedItemCategory
    folder_id: uuid.UUID | None
    folder_name: str | None
    name: str | None
    notes: str | None
    created_at: datetime
