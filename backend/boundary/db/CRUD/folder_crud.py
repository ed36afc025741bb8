"""
Folder CRUD operations.

Provides folder-tree queries. A NULL parent_folder_id marks a root
folder, so parent comparisons use IS NULL rather than equality.

Dependencies: sqlalchemy, backend.boundary.db.models
System role: Folder hierarchy persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import ColumnElement, select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.models.folder_model import FolderModel
from backend.boundary.db.CRUD.base_crud import BaseCRUD


def _parent_clause(parent_folder_id: UUID | None) -> ColumnElement[bool]:
    if parent_folder_id is None:
        return FolderModel.parent_folder_id.is_(None)
    return FolderModel.parent_folder_id == parent_folder_id


class FolderCRUD(BaseCRUD[FolderModel]):
    """CRUD operations for FolderModel."""

    def __init__(self) -> None:
        super().__init__(FolderModel)

    async def get_children(
        self,
        session: AsyncSession,
        user_id: UUID,
        parent_folder_id: UUID | None = None,
    ) -> Sequence[FolderModel]:
        """
        List a user's folders directly under parent_folder_id, newest first.

        Args:
            session: Async database session
            user_id: Owning user UUID
            parent_folder_id: Parent folder, None for root folders

        Returns:
            Sequence of FolderModels
        """
        stmt = (
            select(FolderModel)
            .where(
                FolderModel.user_id == user_id,
                _parent_clause(parent_folder_id),
            )
            .order_by(FolderModel.created_at.desc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def name_taken(
        self,
        session: AsyncSession,
        user_id: UUID,
        name: str,
        parent_folder_id: UUID | None = None,
        exclude_id: UUID | None = None,
    ) -> bool:
        """
        Check whether a sibling folder already uses name.

        Args:
            session: Async database session
            user_id: Owning user UUID
            name: Candidate folder name (exact match)
            parent_folder_id: Parent to look in, None for root level
            exclude_id: Folder to ignore, used when renaming

        Returns:
            True if another folder in the same location has this name
        """
        criteria = [
            FolderModel.user_id == user_id,
            FolderModel.name == name,
            _parent_clause(parent_folder_id),
        ]
        if exclude_id is not None:
            criteria.append(FolderModel.id != exclude_id)
        return await self.exists(session, *criteria)

    async def has_subfolders(self, session: AsyncSession, folder_id: UUID) -> bool:
        return await self.exists(session, FolderModel.parent_folder_id == folder_id)


folder_crud = FolderCRUD()
