"""
User CRUD operations.

Dependencies: sqlalchemy, backend.boundary.db.models
System role: Account persistence operations
"""

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.models.user_model import UserModel
from backend.boundary.db.CRUD.base_crud import BaseCRUD


class UserCRUD(BaseCRUD[UserModel]):
    """CRUD operations for UserModel with login lookups."""

    def __init__(self) -> None:
        super().__init__(UserModel)

    async def get_by_username_or_email(
        self,
        session: AsyncSession,
        identifier: str,
    ) -> UserModel | None:
        """
        Find a user whose username or email equals identifier.

        Args:
            session: Async database session
            identifier: Username or email address as typed at login

        Returns:
            Matching UserModel, None if no account matches
        """
        stmt = select(UserModel).where(
            or_(UserModel.username == identifier, UserModel.email == identifier)
        )
        result = await session.execute(stmt)
        return result.scalars().first()

    async def username_exists(self, session: AsyncSession, username: str) -> bool:
        return await self.exists(session, UserModel.username == username)

    async def email_exists(self, session: AsyncSession, email: str) -> bool:
        return await self.exists(session, UserModel.email == email)


user_crud = UserCRUD()
