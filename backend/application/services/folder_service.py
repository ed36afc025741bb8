"""
Folder service orchestrator.

Maintains each user's folder tree. Sibling folders must have distinct
names, and a folder can only be deleted once it is empty.

Dependencies: backend.boundary.db.CRUD
System role: Folder use case orchestration
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from backend.application.services.common import ensure_owner
from backend.boundary.db.CRUD.folder_crud import folder_crud
from backend.boundary.db.CRUD.saved_item_crud import saved_item_crud
from backend.boundary.db.models.folder_model import FolderModel
from backend.core.exceptions import (
    DuplicateResourceError,
    FolderNotEmptyError,
    ResourceNotFoundError,
)

logger = logging.getLogger(__name__)

DUPLICATE_NAME = "A folder with this name already exists in this location."
HAS_SUBFOLDERS = "Cannot delete folder with subfolders. Delete or move subfolders first."
HAS_SAVED_ITEMS = "Cannot delete folder that contains saved items. Move or delete items first."


def folder_to_dict(folder: FolderModel) -> dict:
    return {
        "id": folder.id,
        "name": folder.name,
        "parent_folder_id": folder.parent_folder_id,
        "created_at": folder.created_at,
    }


async def get_owned_folder(
    db: AsyncSession,
    user_id: UUID,
    folder_id: UUID,
    resource: str = "Folder",
    denied: str = "User not authorized to access this folder.",
) -> FolderModel:
    """
    Load a folder and check it belongs to user_id.

    Args:
        db: Async SQLAlchemy session
        user_id: Requesting user
        folder_id: Folder UUID
        resource: Resource label for the not-found message
        denied: Message for the permission error

    Raises:
        ResourceNotFoundError: If the folder does not exist
        PermissionDeniedError: If another user owns it
    """
    folder = await folder_crud.get_by_id(db, folder_id)
    if folder is None:
        raise ResourceNotFoundError(resource, folder_id)
    ensure_owner(folder.user_id, user_id, denied)
    return folder


class FolderService:
    """Folder service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize folder service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def create_folder(
        self,
        user_id: UUID,
        name: str,
        parent_folder_id: UUID | None = None,
    ) -> dict:
        """
        Create a folder at the root or under a parent.

        Args:
            user_id: Owning user
            name: Folder name (already trimmed)
            parent_folder_id: Parent folder, None for a root folder

        Returns:
            dict: Created folder

        Raises:
            ResourceNotFoundError: If the parent does not exist
            PermissionDeniedError: If the parent belongs to another user
            DuplicateResourceError: If a sibling already has this name
        """
        if parent_folder_id is not None:
            await get_owned_folder(
                self.db,
                user_id,
                parent_folder_id,
                resource="Parent folder",
                denied="User not authorized to create subfolder in this parent folder.",
            )

        if await folder_crud.name_taken(self.db, user_id, name, parent_folder_id):
            raise DuplicateResourceError(DUPLICATE_NAME)

        folder = await folder_crud.create(
            self.db,
            user_id=user_id,
            name=name,
            parent_folder_id=parent_folder_id,
        )
        logger.info(
            "Folder created",
            extra={
                "folder_id": str(folder.id),
                "user_id": str(user_id),
                "parent_folder_id": str(parent_folder_id) if parent_folder_id else None,
            },
        )
        return folder_to_dict(folder)

    async def list_folders(self, user_id: UUID, parent_folder_id: UUID | None = None) -> list[dict]:
        """
        List root folders, or the subfolders of parent_folder_id.

        Raises:
            ResourceNotFoundError: If the parent does not exist
            PermissionDeniedError: If the parent belongs to another user
        """
        if parent_folder_id is not None:
            await get_owned_folder(self.db, user_id, parent_folder_id, resource="Parent folder")

        folders = await folder_crud.get_children(self.db, user_id, parent_folder_id)
        return [folder_to_dict(f) for f in folders]

    async def rename_folder(self, user_id: UUID, folder_id: UUID, name: str) -> dict:
        """
        Rename a folder.

        Renaming a folder to its current name is allowed.

        Raises:
            ResourceNotFoundError: If the folder does not exist
            PermissionDeniedError: If it belongs to another user
            DuplicateResourceError: If a sibling already has this name
        """
        folder = await get_owned_folder(
            self.db, user_id, folder_id, denied="User not authorized to update this folder."
        )

        if await folder_crud.name_taken(
            self.db, user_id, name, folder.parent_folder_id, exclude_id=folder.id
        ):
            raise DuplicateResourceError(DUPLICATE_NAME)

        updated = await folder_crud.update_by_id(self.db, folder.id, name=name)
        logger.info("Folder renamed", extra={"folder_id": str(folder_id)})
        return folder_to_dict(updated)

    async def delete_folder(self, user_id: UUID, folder_id: UUID) -> None:
        """
        Delete an empty folder.

        Raises:
            ResourceNotFoundError: If the folder does not exist
            PermissionDeniedError: If it belongs to another user
            FolderNotEmptyError: If it has subfolders or saved items
        """
        folder = await get_owned_folder(
            self.db, user_id, folder_id, denied="User not authorized to delete this folder."
        )

        if await folder_crud.has_subfolders(self.db, folder.id):
            raise FolderNotEmptyError(HAS_SUBFOLDERS, folder.id)
        if await saved_item_crud.count_in_folder(self.db, folder.id) > 0:
            raise FolderNotEmptyError(HAS_SAVED_ITEMS, folder.id)

        await folder_crud.delete_by_id(self.db, folder.id)
        logger.info("Folder deleted", extra={"folder_id": str(folder_id), "user_id": str(user_id)})
