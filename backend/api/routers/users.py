"""
User profile API endpoints.

Routes:
- GET /user/me - Current user's profile
- PUT /user/me - Update preferences and settings

Dependencies: backend.application.services, backend.models
System role: Profile HTTP API
"""

from uuid import UUID

from fastapi import APIRouter, Depends

from backend.api.deps.dependencies import get_current_user_id, get_user_service
from backend.api.routers.router_utils import handle_service_errors
from backend.application.services.user_service import UserService
from backend.models.user import UserProfileResponse, UserProfileUpdateRequest

router = APIRouter(prefix="/user", tags=["user"])


@router.get("/me", response_model=UserProfileResponse)
@handle_service_errors
async def get_me(
    user_id: UUID = Depends(get_current_user_id),
    user_service: UserService = Depends(get_user_service),
) -> UserProfileResponse:
    """Get the authenticated user's profile."""
    profile = await user_service.get_profile(user_id)
    return UserProfileResponse.model_validate(profile)


@router.put("/me", response_model=UserProfileResponse)
@handle_service_errors
async def update_me(
    request: UserProfileUpdateRequest,
    user_id: UUID = Depends(get_current_user_id),
    user_service: UserService = Depends(get_user_service),
) -> UserProfileResponse:
    """
    Update the authenticated user's preferences and/or settings.

    Raises:
        HTTPException(400): settings is not a valid JSON string
    """
    profile = await user_service.update_profile(
        user_id,
        preferences=request.preferences.model_dump() if request.preferences else None,
        settings=request.settings,
    )
    return UserProfileResponse.model_validate(profile)
