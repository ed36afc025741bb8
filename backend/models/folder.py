"""
Folder schemas.

Dependencies: pydantic
System role: Folder API contracts
"""

import uuid
from datetime import datetime

from pydantic import Field

from backend.models.common import CamelModel


class CreateFolderRequest(CamelModel):
    """Request schema for creating a folder."""

    name: str = Field(..., min_length=1, max_length=255, description="Folder name")
    parent_folder_id: uuid.UUID | None = Field(None, description="Parent folder, omit for root")


class RenameFolderRequest(CamelModel):
    """Request schema for renaming a folder."""

    name: str = Field(..., min_length=1, max_length=255, description="New folder name")


class FolderResponse(CamelModel):
    """Response schema for folder operations."""

    id: uuid.UUID
    name: str
    parent_folder_id: uuid.UUID | None
    created_at: datetime
