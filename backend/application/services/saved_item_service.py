"""
Saved item service orchestrator.

Bookmarks translations, files them into folders and answers filtered
listings.

Dependencies: backend.boundary.db.CRUD
System role: Saved item use case orchestration
"""

import logging
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from backend.application.services.common import ensure_owner, normalize_page, page_dict
from backend.application.services.folder_service import get_owned_folder
from backend.application.services.translation_service import translation_to_dict
from backend.boundary.db.CRUD.saved_item_crud import saved_item_crud
from backend.boundary.db.CRUD.translation_crud import translation_crud
from backend.boundary.db.models.enums import SavedItemCategory
from backend.boundary.db.models.saved_item_model import SavedItemModel
from backend.core.exceptions import DuplicateResourceError, ResourceNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_NAME_MAX = 50
ALREADY_SAVED = "This translation is already saved."
NOT_FOUND = "Saved item not found."


def default_item_name(source_text: str) -> str:
    """Name a bookmark after its source text, shortened to DEFAULT_NAME_MAX chars."""
    if len(source_text) > DEFAULT_NAME_MAX:
        return source_text[: DEFAULT_NAME_MAX - 3] + "..."
    return source_text


def saved_item_to_dict(item: SavedItemModel) -> dict:
    """Serialize a saved item with its translation and folder loaded."""
    return {
        "id": item.id,
        "translation": translation_to_dict(item.translation, is_saved=True),
        "category": item.category,
        "folder_id": item.folder_id,
        "folder_name": item.folder.name if item.folder is not None else None,
        "name": item.name,
        "notes": item.notes,
        "created_at": item.created_at,
    }


class SavedItemService:
    """Saved item service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize saved item service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def _get_owned(
        self,
        user_id: UUID,
        saved_item_id: UUID,
        denied: str = "User not authorized to access this saved item.",
    ) -> SavedItemModel:
        item = await saved_item_crud.get_with_relations(self.db, saved_item_id)
        if item is None:
            raise ResourceNotFoundError("Saved item", saved_item_id, message=NOT_FOUND)
        ensure_owner(item.user_id, user_id, denied)
        return item

    async def create_saved_item(
        self,
        user_id: UUID,
        translation_id: UUID,
        category: SavedItemCategory,
        folder_id: UUID | None = None,
        name: str | None = None,
        notes: str | None = None,
    ) -> dict:
        """
        Bookmark a translation.

        A blank name defaults to the translation's source text. Saving also
        marks the translation as a favorite.

        Returns:
            dict: Created saved item with embedded translation

        Raises:
            ResourceNotFoundError: If the translation or folder does not exist
            PermissionDeniedError: If either belongs to another user
            DuplicateResourceError: If the translation is already saved
        """
        translation = await translation_crud.get_by_id(self.db, translation_id)
        if translation is None:
            raise ResourceNotFoundError("Translation", translation_id)
        ensure_owner(
            translation.user_id,
            user_id,
            "User not authorized to save this translation.",
        )

        if await saved_item_crud.is_saved(self.db, user_id, translation_id):
            raise DuplicateResourceError(ALREADY_SAVED)

        if folder_id is not None:
            await get_owned_folder(
                self.db,
                user_id,
                folder_id,
                denied="User not authorized to save item to this folder.",
            )

        if name is None or not name.strip():
            name = default_item_name(translation.source_text)

        try:
            item = await saved_item_crud.create(
                self.db,
                user_id=user_id,
                translation_id=translation_id,
                category=category,
                folder_id=folder_id,
                name=name,
                notes=notes,
            )
        except IntegrityError as e:
            raise DuplicateResourceError(ALREADY_SAVED) from e

        if not translation.is_favorite:
            await translation_crud.update_by_id(self.db, translation_id, is_favorite=True)

        logger.info(
            "Translation saved",
            extra={
                "saved_item_id": str(item.id),
                "translation_id": str(translation_id),
                "category": category.value,
            },
        )
        return saved_item_to_dict(await saved_item_crud.get_with_relations(self.db, item.id))

    async def list_saved_items(
        self,
        user_id: UUID,
        category: SavedItemCategory | None = None,
        folder_id: UUID | None = None,
        page: int = 0,
        size: int = 20,
    ) -> dict:
        """
        Get one page of the user's saved items, newest first.

        Args:
            user_id: User UUID
            category: Only items with this category
            folder_id: Only items in this folder
            page: Zero-based page index
            size: Page size (clamped to 1..100)

        Returns:
            dict: Page envelope of saved item dicts

        Raises:
            ResourceNotFoundError: If folder_id does not exist
            PermissionDeniedError: If folder_id belongs to another user
        """
        if folder_id is not None:
            await get_owned_folder(self.db, user_id, folder_id)

        page, size = normalize_page(page, size)
        items, total = await saved_item_crud.get_filtered_page(
            self.db,
            user_id,
            limit=size,
            offset=page * size,
            category=category,
            folder_id=folder_id,
        )
        return page_dict([saved_item_to_dict(i) for i in items], page, size, total)

    async def get_saved_item(self, user_id: UUID, saved_item_id: UUID) -> dict:
        """
        Get one saved item.

        Raises:
            ResourceNotFoundError: If the saved item does not exist
            PermissionDeniedError: If it belongs to another user
        """
        return saved_item_to_dict(await self._get_owned(user_id, saved_item_id))

    async def update_saved_item(
        self,
        user_id: UUID,
        saved_item_id: UUID,
        name: str | None = None,
        notes: str | None = None,
        folder_id: UUID | None = None,
        set_folder_id_null: bool = False,
    ) -> dict:
        """
        Rename, annotate or move a saved item.

        Args:
            user_id: Requesting user
            saved_item_id: Saved item UUID
            name: New name, ignored when blank
            notes: New notes, ignored when None
            folder_id: Destination folder
            set_folder_id_null: Move the item out of any folder; wins over folder_id

        Returns:
            dict: Updated saved item

        Raises:
            ResourceNotFoundError: If the item or destination folder does not exist
            PermissionDeniedError: If either belongs to another user
        """
        item = await self._get_owned(
            user_id,
            saved_item_id,
            denied="User not authorized to update this saved item.",
        )

        values: dict = {}
        if name is not None and name.strip():
            values["name"] = name
        if notes is not None:
            values["notes"] = notes

        if set_folder_id_null:
            values["folder_id"] = None
        elif folder_id is not None:
            await get_owned_folder(
                self.db,
                user_id,
                folder_id,
                denied="User not authorized to move item to this folder.",
            )
            values["folder_id"] = folder_id

        if values:
            await saved_item_crud.update_by_id(self.db, item.id, **values)
            logger.info(
                "Saved item updated",
                extra={"saved_item_id": str(item.id), "fields": sorted(values)},
            )

        return saved_item_to_dict(await saved_item_crud.get_with_relations(self.db, item.id))

    async def delete_saved_item(self, user_id: UUID, saved_item_id: UUID) -> None:
        """
        Delete a saved item. The translation and its favorite flag are kept.

        Raises:
            ResourceNotFoundError: If the saved item does not exist
            PermissionDeniedError: If it belongs to another user
        """
        item = await self._get_owned(
            user_id,
            saved_item_id,
            denied="User not authorized to delete this saved item.",
        )
        await saved_item_crud.delete_by_id(self.db, item.id)
        logger.info("Saved item deleted", extra={"saved_item_id": str(saved_item_id)})
