"""
Saved item API endpoints.

Routes:
- POST /saved-items - Bookmark a translation
- GET /saved-items - Page through bookmarks (?category=, ?folderId=)
- GET /saved-items/{id} - Get one bookmark
- PUT /saved-items/{id} - Rename, annotate or move a bookmark
- DELETE /saved-items/{id} - Delete a bookmark

Dependencies: backend.application.services, backend.models
System role: Saved item HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from backend.api.deps.dependencies import get_current_user_id, get_saved_item_service
from backend.api.routers.router_utils import handle_service_errors
from backend.application.services.saved_item_service import SavedItemService
from backend.boundary.db.models.enums import SavedItemCategory
from backend.models.common import ApiResponse, Page
from backend.models.saved_item import (
    CreateSavedItemRequest,
    SavedItemResponse,
    UpdateSavedItemRequest,
)

from .saved_item_responses import map_saved_item_page, map_saved_item_to_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/saved-items", tags=["saved-items"])


@router.post("", response_model=SavedItemResponse, status_code=status.HTTP_201_CREATED)
@handle_service_errors
async def create_saved_item(
    request: CreateSavedItemRequest,
    user_id: UUID = Depends(get_current_user_id),
    saved_item_service: SavedItemService = Depends(get_saved_item_service),
) -> SavedItemResponse:
    """
    Bookmark a translation.

    Raises:
        HTTPException(400): Translation already saved
        HTTPException(403): Translation or folder owned by another user
        HTTPException(404): Translation or folder not found
    """
    item = await saved_item_service.create_saved_item(
        user_id=user_id,
        translation_id=request.translation_id,
        category=request.category,
        folder_id=request.folder_id,
        name=request.name,
        notes=request.notes,
    )
    return map_saved_item_to_response(item)


@router.get("", response_model=Page[SavedItemResponse])
@handle_service_errors
async def list_saved_items(
    category: SavedItemCategory | None = Query(None),
    folder_id: UUID | None = Query(None, alias="folderId"),
    page: int = Query(0, ge=0),
    size: int = Query(20),
    user_id: UUID = Depends(get_current_user_id),
    saved_item_service: SavedItemService = Depends(get_saved_item_service),
) -> Page[SavedItemResponse]:
    """
    Page through the user's bookmarks, newest first.

    Raises:
        HTTPException(403): Folder owned by another user
        HTTPException(404): Folder not found
    """
    result = await saved_item_service.list_saved_items(
        user_id,
        category=category,
        folder_id=folder_id,
        page=page,
        size=size,
    )
    return map_saved_item_page(result)


@router.get("/{saved_item_id}", response_model=SavedItemResponse)
@handle_service_errors
async def get_saved_item(
    saved_item_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    saved_item_service: SavedItemService = Depends(get_saved_item_service),
) -> SavedItemResponse:
    """
    Get one bookmark.

    Raises:
        HTTPException(403): Saved item owned by another user
        HTTPException(404): Saved item not found
    """
    item = await saved_item_service.get_saved_item(user_id, saved_item_id)
    return map_saved_item_to_response(item)


@router.put("/{saved_item_id}", response_model=SavedItemResponse)
@handle_service_errors
async def update_saved_item(
    saved_item_id: UUID,
    request: UpdateSavedItemRequest,
    user_id: UUID = Depends(get_current_user_id),
    saved_item_service: SavedItemService = Depends(get_saved_item_service),
) -> SavedItemResponse:
    """
    Rename, annotate or move a bookmark.

    Raises:
        HTTPException(403): Saved item or folder owned by another user
        HTTPException(404): Saved item or folder not found
    """
    item = await saved_item_service.update_saved_item(
        user_id,
        saved_item_id,
        name=request.name,
        notes=request.notes,
        folder_id=request.folder_id,
        set_folder_id_null=request.set_folder_id_null,
    )
    return map_saved_item_to_response(item)


@router.delete("/{saved_item_id}", response_model=ApiResponse)
@handle_service_errors
async def delete_saved_item(
    saved_item_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    saved_item_service: SavedItemService = Depends(get_saved_item_service),
) -> ApiResponse:
    """
    Delete a bookmark, keeping its translation.

    Raises:
        HTTPException(403): Saved item owned by another user
        HTTPException(404): Saved item not found
    """
    await saved_item_service.delete_saved_item(user_id, saved_item_id)
    return ApiResponse(success=True, message="Saved item deleted successfully.")
