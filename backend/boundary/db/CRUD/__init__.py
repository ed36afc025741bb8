"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from backend.boundary.db.CRUD import translation_crud, saved_item_crud

    translation = await translation_crud.get_by_id(db, translation_id)
"""

from backend.boundary.db.CRUD.base_crud import BaseCRUD
from backend.boundary.db.CRUD.user_crud import UserCRUD, user_crud
from backend.boundary.db.CRUD.translation_crud import TranslationCRUD, translation_crud
from backend.boundary.db.CRUD.folder_crud import FolderCRUD, folder_crud
from backend.boundary.db.CRUD.saved_item_crud import SavedItemCRUD, saved_item_crud

__all__ = [
    "BaseCRUD",
    "UserCRUD",
    "user_crud",
    "TranslationCRUD",
    "translation_crud",
    "FolderCRUD",
    "folder_crud",
    "SavedItemCRUD",
    "saved_item_crud",
]
