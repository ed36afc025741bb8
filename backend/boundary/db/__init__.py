"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin, CreatedAtMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Async connection management
  - UserModel, TranslationModel, FolderModel, SavedItemModel: Domain entities
  - InputType, SavedItemCategory: Enum types
  - user_crud, translation_crud, folder_crud, saved_item_crud: CRUD operation singletons

Dependencies: sqlalchemy, backend.configs
System role: Database adapter providing persistent storage for accounts,
translation history, folders and bookmarks.
"""

from backend.boundary.db.base import Base, CreatedAtMixin, TimestampMixin, UUIDMixin
from backend.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from backend.boundary.db.models import (
    FolderModel,
    InputType,
    SavedItemCategory,
    SavedItemModel,
    TranslationModel,
    UserModel,
)
from backend.boundary.db.CRUD import (
    BaseCRUD,
    FolderCRUD,
    SavedItemCRUD,
    TranslationCRUD,
    UserCRUD,
    folder_crud,
    saved_item_crud,
    translation_crud,
    user_crud,
)

__all__ = [
    # Base classes
    "Base",
    "CreatedAtMixin",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "UserModel",
    "TranslationModel",
    "FolderModel",
    "SavedItemModel",
    "InputType",
    "SavedItemCategory",
    # CRUD classes
    "BaseCRUD",
    "UserCRUD",
    "TranslationCRUD",
    "FolderCRUD",
    "SavedItemCRUD",
    # CRUD singletons
    "user_crud",
    "translation_crud",
    "folder_crud",
    "saved_item_crud",
]
