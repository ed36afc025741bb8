"""
Database models package.

Exports:
  - UserModel: Account ORM model
  - TranslationModel, InputType: Translation history ORM model and input enum
  - FolderModel: Nested folder ORM model
  - SavedItemModel, SavedItemCategory: Bookmark ORM model and category enum

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Database model definitions for domain entities
"""

from backend.boundary.db.models.enums import InputType, SavedItemCategory
from backend.boundary.db.models.user_model import UserModel
from backend.boundary.db.models.translation_model import TranslationModel
from backend.boundary.db.models.folder_model import FolderModel
from backend.boundary.db.models.saved_item_model import SavedItemModel

__all__ = [
    "InputType",
    "SavedItemCategory",
    "UserModel",
    "TranslationModel",
    "FolderModel",
    "SavedItemModel",
]
