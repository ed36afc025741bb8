"""
API routes module.

FastAPI routers for all HTTP endpoints, gathered under the /api prefix.
"""

from fastapi import APIRouter

from .routers import (
    auth_router,
    folders_router,
    health_router,
    language_router,
    saved_items_router,
    translations_router,
    users_router,
)

api_router = APIRouter(prefix="/api")

# Include all routers
api_router.include_router(health_router)
api_router.include_router(auth_router)
api_router.include_router(users_router)
api_router.include_router(language_router)
api_router.include_router(translations_router)
api_router.include_router(folders_router)
api_router.include_router(saved_items_router)

__all__ = ["api_router"]
