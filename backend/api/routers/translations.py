"""
Translation history API endpoints.

Routes:
- POST /translations - Save a translation
- GET /translations - Page through history, newest first
- GET /translations/{id} - Get one translation
- DELETE /translations/{id} - Delete a translation and its saved items
- PATCH /translations/{id}/favorite - Toggle the favorite flag

Dependencies: backend.application.services, backend.models
System role: Translation history HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from backend.api.deps.dependencies import get_current_user_id, get_translation_service
from backend.api.routers.router_utils import handle_service_errors
from backend.application.services.translation_service import TranslationService
from backend.models.common import ApiResponse, Page
from backend.models.translation import CreateTranslationRequest, TranslationResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/translations", tags=["translations"])


@router.post("", response_model=TranslationResponse, status_code=status.HTTP_201_CREATED)
@handle_service_errors
async def create_translation(
    request: CreateTranslationRequest,
    user_id: UUID = Depends(get_current_user_id),
    translation_service: TranslationService = Depends(get_translation_service),
) -> TranslationResponse:
    """Save a translation to the user's history."""
    translation = await translation_service.create_translation(
        user_id=user_id,
        source_text=request.source_text,
        target_text=request.target_text,
        source_lang=request.source_lang,
        target_lang=request.target_lang,
        input_type=request.input_type,
    )
    return TranslationResponse.model_validate(translation)


@router.get("", response_model=Page[TranslationResponse])
@handle_service_errors
async def list_translations(
    page: int = Query(0, ge=0),
    size: int = Query(20),
    user_id: UUID = Depends(get_current_user_id),
    translation_service: TranslationService = Depends(get_translation_service),
) -> Page[TranslationResponse]:
    """
    Page through the user's history.

    Args:
        page: Zero-based page index
        size: Page size, clamped to 1..100
    """
    result = await translation_service.list_translations(user_id, page=page, size=size)
    return Page[TranslationResponse].model_validate(result)


@router.get("/{translation_id}", response_model=TranslationResponse)
@handle_service_errors
async def get_translation(
    translation_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    translation_service: TranslationService = Depends(get_translation_service),
) -> TranslationResponse:
    """
    Get one of the user's translations.

    Raises:
        HTTPException(404): Translation not found
        HTTPException(403): Translation owned by another user
    """
    translation = await translation_service.get_translation(user_id, translation_id)
    return TranslationResponse.model_validate(translation)


@router.delete("/{translation_id}", response_model=ApiResponse)
@handle_service_errors
async def delete_translation(
    translation_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    translation_service: TranslationService = Depends(get_translation_service),
) -> ApiResponse:
    """
    Delete a translation and every saved item referencing it.

    Raises:
        HTTPException(404): Translation not found
        HTTPException(403): Translation owned by another user
    """
    await translation_service.delete_translation(user_id, translation_id)
    return ApiResponse(success=True, message="Translation deleted successfully.")


@router.patch("/{translation_id}/favorite", response_model=TranslationResponse)
@handle_service_errors
async def toggle_favorite(
    translation_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    translation_service: TranslationService = Depends(get_translation_service),
) -> TranslationResponse:
    """
    Flip the favorite flag of a translation.

    Raises:
        HTTPException(404): Translation not found
        HTTPException(403): Translation owned by another user
    """
    translation = await translation_service.toggle_favorite(user_id, translation_id)
    return TranslationResponse.model_validate(translation)
