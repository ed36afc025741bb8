"""
Helpers shared by the persistence services.

Dependencies: backend.core.exceptions
System role: Ownership checks and page bookkeeping
"""

import math
from typing import Any
from uuid import UUID

from backend.core.exceptions import PermissionDeniedError

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


def normalize_page(page: int, size: int) -> tuple[int, int]:
    """Clamp a zero-based page index to >= 0 and size to 1..MAX_PAGE_SIZE."""
    return max(page, 0), min(max(size, 1), MAX_PAGE_SIZE)


def page_dict(content: list[Any], page: int, size: int, total: int) -> dict:
    """
    Build the page envelope returned by list endpoints.

    Args:
        content: Items on this page
        page: Zero-based page index
        size: Page size
        total: Total items across all pages

    Returns:
        dict: content, page, size, total_elements, total_pages, first, last
    """
    total_pages = math.ceil(total / size) if size else 0
    return {
        "content": content,
        "page": page,
        "size": size,
        "total_elements": total,
        "total_pages": total_pages,
        "first": page == 0,
        "last": page >= total_pages - 1,
    }


def ensure_owner(owner_id: UUID, user_id: UUID, message: str) -> None:
    """Raise PermissionDeniedError unless owner_id is the requesting user."""
    if owner_id != user_id:
        raise PermissionDeniedError(message, user_id=user_id)
