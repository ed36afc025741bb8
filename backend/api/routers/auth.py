"""
Authentication API endpoints.

Routes:
- POST /auth/register - Create an account
- POST /auth/login - Exchange credentials for a bearer token

Dependencies: backend.application.services, backend.models
System role: Public authentication HTTP API
"""

import logging

from fastapi import APIRouter, Depends, status

from backend.api.deps.dependencies import get_auth_service
from backend.api.routers.router_utils import handle_service_errors
from backend.application.services.auth_service import AuthService
from backend.models.auth import LoginRequest, RegisterRequest, TokenResponse
from backend.models.common import ApiResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=ApiResponse, status_code=status.HTTP_201_CREATED)
@handle_service_errors
async def register(
    request: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> ApiResponse:
    """
    Register a new account.

    Raises:
        HTTPException(400): Username or email already registered
        HTTPException(422): Malformed request
    """
    await auth_service.register(
        username=request.username,
        email=request.email,
        password=request.password,
    )
    return ApiResponse(success=True, message="User registered successfully")


@router.post("/login", response_model=TokenResponse)
@handle_service_errors
async def login(
    request: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> TokenResponse:
    """
    Log in with username or email.

    Raises:
        HTTPException(401): Bad credentials
    """
    token = await auth_service.login(request.username_or_email, request.password)
    return TokenResponse(**token)
