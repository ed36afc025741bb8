"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory async database, row factories, common IDs
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import uuid
from datetime import datetime, timedelta, timezone

import pytest


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup (lazy imported to avoid settings issues)
    """
    from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
    from sqlalchemy.pool import StaticPool
    from backend.boundary.db.base import Base
    import backend.boundary.db.models  # noqa: F401

    # Use SQLite in-memory database for tests
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # Create session factory
    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    # Create session for test
    async with async_session() as session:
        yield session
        await session.rollback()

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def make_user(test_async_db):
    """
    Factory creating persisted users.

    Returns:
        Callable: async (username) -> UserModel
    """
    from backend.boundary.db.CRUD.user_crud import user_crud

    async def _make(username: str = "alice"):
        return await user_crud.create(
            test_async_db,
            username=username,
            email=f"{username}@example.com",
            password_hash="not-a-real-hash",
        )

    return _make


@pytest.fixture
def make_translation(test_async_db):
    """
    Factory creating persisted translations.

    Returns:
        Callable: async (user_id, source_text, minutes_ago, ...) -> TranslationModel
    """
    from backend.boundary.db.CRUD.translation_crud import translation_crud
    from backend.boundary.db.models.enums import InputType

    async def _make(
        user_id: uuid.UUID,
        source_text: str = "Hello",
        minutes_ago: int = 0,
        is_favorite: bool = False,
    ):
        return await translation_crud.create(
            test_async_db,
            user_id=user_id,
            source_text=source_text,
            target_text=f"[fr] {source_text}",
            source_lang="en",
            target_lang="fr",
            input_type=InputType.TEXT,
            is_favorite=is_favorite,
            created_at=datetime.now(timezone.utc) - timedelta(minutes=minutes_ago),
        )

    return _make


@pytest.fixture
def user_id():
    """Generate a test user ID."""
    return uuid.uuid4()
