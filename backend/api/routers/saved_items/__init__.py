"""Saved item API package."""

from .saved_items_router import router

__all__ = ["router"]
