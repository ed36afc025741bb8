"""
Base CRUD operations for SQLAlchemy models.

Generic Create, Read, Update, Delete operations plus the owner-scoped
and paginated reads every user-owned table needs.

Dependencies: sqlalchemy, uuid
System role: Foundation for all database CRUD operations
"""

from typing import Any, Generic, TypeVar, Sequence
from uuid import UUID

from sqlalchemy import ColumnElement, func, select, update, delete
from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Generic base class for CRUD operations.

    Subclasses pass their model class and add table-specific queries.

    Type Parameters:
        ModelT: SQLAlchemy model class inheriting from Base

    Attributes:
        model: The SQLAlchemy model class to operate on
    """

    def __init__(self, model: type[ModelT]) -> None:
        self.model = model

    async def create(self, session: AsyncSession, **kwargs) -> ModelT:
        """
        Insert a new row and return it with generated ID and timestamps.

        Args:
            session: Async database session
            **kwargs: Model field values
        """
        instance = self.model(**kwargs)
        session.add(instance)
        await session.flush()
        await session.refresh(instance)
        return instance

    async def get_by_id(self, session: AsyncSession, id: UUID) -> ModelT | None:
        stmt = select(self.model).where(self.model.id == id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_page(
        self,
        session: AsyncSession,
        *criteria: ColumnElement[bool],
        limit: int,
        offset: int = 0,
        order_by: Any = None,
    ) -> tuple[Sequence[ModelT], int]:
        """
        Retrieve one page of rows matching criteria, with the total count.

        Args:
            session: Async database session
            *criteria: WHERE clauses combined with AND
            limit: Page size
            offset: Number of rows to skip
            order_by: ORDER BY clause (defaults to newest first)

        Returns:
            Tuple of (rows on this page, total matching rows)
        """
        if order_by is None:
            order_by = self.model.created_at.desc()

        stmt = (
            select(self.model)
            .where(*criteria)
            .order_by(order_by)
            .offset(offset)
            .limit(limit)
        )
        result = await session.execute(stmt)
        rows = result.scalars().all()

        total = await self.count(session, *criteria)
        return rows, total

    async def count(self, session: AsyncSession, *criteria: ColumnElement[bool]) -> int:
        """Count rows matching all criteria."""
        stmt = select(func.count()).select_from(self.model).where(*criteria)
        result = await session.execute(stmt)
        return result.scalar_one()

    async def update_by_id(
        self,
        session: AsyncSession,
        id: UUID,
        **kwargs,
    ) -> ModelT | None:
        """
        Update a record by primary key.

        Args:
            session: Async database session
            id: UUID primary key
            **kwargs: Fields to update with new values

        Returns:
            Updated model instance if found, None otherwise
        """
        stmt = (
            update(self.model)
            .where(self.model.id == id)
            .values(**kwargs)
            .returning(self.model)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def delete_by_id(self, session: AsyncSession, id: UUID) -> bool:
        """
        Delete a record by primary key.

        Returns:
            True if record was deleted, False if not found
        """
        stmt = delete(self.model).where(self.model.id == id)
        result = await session.execute(stmt)
        return result.rowcount > 0

    async def exists(self, session: AsyncSession, *criteria: ColumnElement[bool]) -> bool:
        """Check whether any row matches all criteria."""
        stmt = select(self.model.id).where(*criteria).limit(1)
        result = await session.execute(stmt)
        return result.scalar_one_or_none() is not None
