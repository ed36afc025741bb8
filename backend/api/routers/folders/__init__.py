"""Folder API package."""

from .folders_router import router

__all__ = ["router"]
