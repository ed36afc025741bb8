"""
Saved item CRUD operations.

Saved items are always returned with their translation and folder
eagerly loaded, since every response embeds both.

Dependencies: sqlalchemy, backend.boundary.db.models
System role: Bookmark persistence operations
"""

from typing import Iterable, Sequence
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from backend.boundary.db.models.enums import SavedItemCategory
from backend.boundary.db.models.saved_item_model import SavedItemModel
from backend.boundary.db.CRUD.base_crud import BaseCRUD

_EAGER = (
    selectinload(SavedItemModel.translation),
    selectinload(SavedItemModel.folder),
)


class SavedItemCRUD(BaseCRUD[SavedItemModel]):
    """CRUD operations for SavedItemModel."""

    def __init__(self) -> None:
        super().__init__(SavedItemModel)

    async def get_with_relations(
        self,
        session: AsyncSession,
        id: UUID,
    ) -> SavedItemModel | None:
        """
        Retrieve a saved item with translation and folder loaded.

        populate_existing refreshes an instance already held in the
        identity map, e.g. right after an UPDATE ... RETURNING.
        """
        stmt = (
            select(SavedItemModel)
            .where(SavedItemModel.id == id)
            .options(*_EAGER)
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_filtered_page(
        self,
        session: AsyncSession,
        user_id: UUID,
        limit: int,
        offset: int = 0,
        category: SavedItemCategory | None = None,
        folder_id: UUID | None = None,
    ) -> tuple[Sequence[SavedItemModel], int]:
        """
        Retrieve a user's saved items newest first, optionally filtered.

        Args:
            session: Async database session
            user_id: Owning user UUID
            limit: Page size
            offset: Number of rows to skip
            category: Only items with this category
            folder_id: Only items in this folder

        Returns:
            Tuple of (saved items on this page, total matching)
        """
        criteria = [SavedItemModel.user_id == user_id]
        if category is not None:
            criteria.append(SavedItemModel.category == category)
        if folder_id is not None:
            criteria.append(SavedItemModel.folder_id == folder_id)

        stmt = (
            select(SavedItemModel)
            .where(*criteria)
            .options(*_EAGER)
            .order_by(SavedItemModel.created_at.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await session.execute(stmt)
        items = result.scalars().all()

        total = await self.count(session, *criteria)
        return items, total

    async def is_saved(
        self,
        session: AsyncSession,
        user_id: UUID,
        translation_id: UUID,
    ) -> bool:
        return await self.exists(
            session,
            SavedItemModel.user_id == user_id,
            SavedItemModel.translation_id == translation_id,
        )

    async def get_saved_translation_ids(
        self,
        session: AsyncSession,
        user_id: UUID,
        translation_ids: Iterable[UUID],
    ) -> set[UUID]:
        """
        Return the subset of translation_ids the user has saved.

        Used to flag a whole page of translations in one query.
        """
        ids = list(translation_ids)
        if not ids:
            return set()

        stmt = select(SavedItemModel.translation_id).where(
            SavedItemModel.user_id == user_id,
            SavedItemModel.translation_id.in_(ids),
        )
        result = await session.execute(stmt)
        return set(result.scalars().all())

    async def count_in_folder(self, session: AsyncSession, folder_id: UUID) -> int:
        return await self.count(session, SavedItemModel.folder_id == folder_id)

    async def delete_by_translation(self, session: AsyncSession, translation_id: UUID) -> int:
        """
        Delete every saved item that bookmarks translation_id.

        Returns:
            Number of saved items removed
        """
        stmt = delete(SavedItemModel).where(SavedItemModel.translation_id == translation_id)
        result = await session.execute(stmt)
        return result.rowcount


saved_item_crud = SavedItemCRUD()
