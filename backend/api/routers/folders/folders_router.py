"""
Folder API endpoints.

Routes:
- POST /folders - Create folder (root or nested)
- GET /folders - List root folders, or subfolders with ?parentFolderId=
- PUT /folders/{id} - Rename folder
- DELETE /folders/{id} - Delete an empty folder

Dependencies: backend.application.services, backend.models
System role: Folder management HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from backend.api.deps.dependencies import get_current_user_id, get_folder_service
from backend.api.routers.router_utils import handle_service_errors
from backend.application.services.folder_service import FolderService
from backend.models.common import ApiResponse
from backend.models.folder import CreateFolderRequest, FolderResponse, RenameFolderRequest

from .folder_validators import normalize_folder_name

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/folders", tags=["folders"])


@router.post("", response_model=FolderResponse, status_code=status.HTTP_201_CREATED)
@handle_service_errors
async def create_folder(
    request: CreateFolderRequest,
    user_id: UUID = Depends(get_current_user_id),
    folder_service: FolderService = Depends(get_folder_service),
) -> FolderResponse:
    """
    Create a folder.

    Raises:
        HTTPException(400): Blank or duplicate name
        HTTPException(403): Parent folder owned by another user
        HTTPException(404): Parent folder not found
    """
    name = normalize_folder_name(request.name)
    folder = await folder_service.create_folder(user_id, name, request.parent_folder_id)
    return FolderResponse.model_validate(folder)


@router.get("", response_model=list[FolderResponse])
@handle_service_errors
async def list_folders(
    parent_folder_id: UUID | None = Query(None, alias="parentFolderId"),
    user_id: UUID = Depends(get_current_user_id),
    folder_service: FolderService = Depends(get_folder_service),
) -> list[FolderResponse]:
    """List root folders, or the subfolders of parentFolderId, newest first."""
    folders = await folder_service.list_folders(user_id, parent_folder_id)
    return [FolderResponse.model_validate(f) for f in folders]


@router.put("/{folder_id}", response_model=FolderResponse)
@handle_service_errors
async def rename_folder(
    folder_id: UUID,
    request: RenameFolderRequest,
    user_id: UUID = Depends(get_current_user_id),
    folder_service: FolderService = Depends(get_folder_service),
) -> FolderResponse:
    """
    Rename a folder.

    Raises:
        HTTPException(400): Blank or duplicate name
        HTTPException(403): Folder owned by another user
        HTTPException(404): Folder not found
    """
    name = normalize_folder_name(request.name)
    folder = await folder_service.rename_folder(user_id, folder_id, name)
    return FolderResponse.model_validate(folder)


@router.delete("/{folder_id}", response_model=ApiResponse)
@handle_service_errors
async def delete_folder(
    folder_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    folder_service: FolderService = Depends(get_folder_service),
) -> ApiResponse:
    """
    Delete an empty folder.

    Raises:
        HTTPException(400): Folder has subfolders or saved items
        HTTPException(403): Folder owned by another user
        HTTPException(404): Folder not found
    """
    await folder_service.delete_folder(user_id, folder_id)
    logger.info("Folder removed via API", extra={"folder_id": str(folder_id)})
    return ApiResponse(success=True, message="Folder deleted successfully.")
