"""
Translation CRUD operations.

Dependencies: sqlalchemy, backend.boundary.db.models
System role: Translation history persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.models.translation_model import TranslationModel
from backend.boundary.db.CRUD.base_crud import BaseCRUD


class TranslationCRUD(BaseCRUD[TranslationModel]):
    """CRUD operations for TranslationModel scoped to an owning user."""

    def __init__(self) -> None:
        super().__init__(TranslationModel)

    async def get_page_for_user(
        self,
        session: AsyncSession,
        user_id: UUID,
        limit: int,
        offset: int = 0,
    ) -> tuple[Sequence[TranslationModel], int]:
        """
        Retrieve a user's translations, newest first.

        Args:
            session: Async database session
            user_id: Owning user UUID
            limit: Page size
            offset: Number of rows to skip

        Returns:
            Tuple of (translations on this page, total for the user)
        """
        return await self.get_page(
            session,
            TranslationModel.user_id == user_id,
            limit=limit,
            offset=offset,
        )


translation_crud = TranslationCRUD()
