"""API routers."""

from .auth import router as auth_router
from .folders import router as folders_router  # Imports from folders/ package
from .health import router as health_router
from .language import router as language_router
from .saved_items import router as saved_items_router  # Imports from saved_items/ package
from .translations import router as translations_router
from .users import router as users_router

__all__ = [
    "auth_router",
    "folders_router",
    "health_router",
    "language_router",
    "saved_items_router",
    "translations_router",
    "users_router",
]
