"""
Saved item response mapping utilities.

Converts service-layer dicts into the response schemas.

Dependencies: backend.models
System role: Saved item response shaping
"""

from backend.models.common import Page
from backend.models.saved_item import SavedItemResponse


def map_saved_item_to_response(item: dict) -> SavedItemResponse:
    return SavedItemResponse.model_validate(item)


def map_saved_item_page(result: dict) -> Page[SavedItemResponse]:
    """Map a page envelope of saved item dicts."""
    return Page[SavedItemResponse](
        content=[map_saved_item_to_response(i) for i in result["content"]],
        page=result["page"],
        size=result["size"],
        total_elements=result["total_elements"],
        total_pages=result["total_pages"],
        first=result["first"],
        last=result["last"],
    )
