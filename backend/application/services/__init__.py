"""Service orchestrators."""

from .auth_service import AuthService
from .folder_service import FolderService
from .language_service import LanguageService
from .saved_item_service import SavedItemService
from .translation_service import TranslationService
from .user_service import UserService

__all__ = [
    "AuthService",
    "FolderService",
    "LanguageService",
    "SavedItemService",
    "TranslationService",
    "UserService",
]
