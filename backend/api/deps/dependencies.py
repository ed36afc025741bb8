"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: backend.configs, backend.application, backend.boundary
System role: DI container for service injection
"""

import logging
from functools import lru_cache
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from backend.configs import Settings, get_settings
from backend.boundary.db import get_async_db
from backend.boundary.db.CRUD.user_crud import user_crud
from backend.boundary.db.models.user_model import UserModel
from backend.application.services import (
    AuthService,
    FolderService,
    LanguageService,
    SavedItemService,
    TranslationService,
    UserService,
)
from backend.core.exceptions import AuthenticationError
from backend.core.security import TokenProvider
from backend.models.common import ApiResponse

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self):
        self._token_provider = None
        self._language_service = None

    @property
    def token_provider(self) -> TokenProvider:
        """Get cached JWT token provider."""
        if self._token_provider is None:
            self._token_provider = TokenProvider(get_settings().auth)
        return self._token_provider

    @property
    def language_service(self) -> LanguageService:
        """Get cached language service with its AWS clients."""
        if self._language_service is None:
            from backend.boundary.aws import (
                PollyClient,
                S3StagingClient,
                TextractClient,
                TranscribeClient,
                TranslateClient,
            )

            aws = get_settings().aws
            staging = S3StagingClient(bucket=aws.transcribe_bucket, region=aws.region)
            self._language_service = LanguageService(
                translate_client=TranslateClient(region=aws.region),
                polly_client=PollyClient(
                    region=aws.region,
                    output_format=aws.polly_output_format,
                    prefer_neural=aws.polly_prefer_neural,
                ),
                textract_client=TextractClient(region=aws.region),
                transcribe_client=TranscribeClient(
                    staging=staging,
                    region=aws.region,
                    key_prefix=aws.transcribe_prefix,
                    poll_interval=aws.transcribe_poll_interval,
                    timeout=aws.transcribe_timeout,
                    default_sample_rate=aws.default_sample_rate,
                ),
            )
        return self._language_service

    def clear(self) -> None:
        """Clear all cached instances."""
        self._token_provider = None
        self._language_service = None


# Global service cache
_service_cache = ServiceCache()

def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_token_provider() -> TokenProvider:
    """Get cached token provider."""
    return get_service_cache().token_provider


def _unauthorized(message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=ApiResponse(success=False, message=message).model_dump(by_alias=True),
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    token_provider: TokenProvider = Depends(get_token_provider),
    db: AsyncSession = Depends(get_async_db),
) -> UUID:
    """
    Resolve the authenticated user from the bearer token.

    Returns:
        UUID: ID of the requesting user

    Raises:
        HTTPException(401): Missing, invalid or expired token, or deleted user
    """
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise _unauthorized("Authentication required")

    try:
        user_id = token_provider.get_user_id(credentials.credentials)
    except AuthenticationError as e:
        logger.warning("Rejected access token", extra={"error": str(e)})
        raise _unauthorized(str(e)) from e

    if not await user_crud.exists(db, UserModel.id == user_id):
        logger.warning("Token for unknown user", extra={"user_id": str(user_id)})
        raise _unauthorized("User not found")

    return user_id


def get_auth_service(
    db: AsyncSession = Depends(get_async_db),
    token_provider: TokenProvider = Depends(get_token_provider),
    settings: Settings = Depends(get_settings_dependency),
) -> AuthService:
    """
    Get auth service instance.

    Args:
        db: Async database session (injected via Depends)
        token_provider: JWT issuer (injected via Depends)
        settings: Application settings (injected via Depends)

    Returns:
        AuthService: Auth service instance
    """
    return AuthService(
        db=db,
        token_provider=token_provider,
        bcrypt_rounds=settings.auth.bcrypt_rounds,
    )


def get_user_service(db: AsyncSession = Depends(get_async_db)) -> UserService:
    """Get user profile service instance."""
    return UserService(db=db)


def get_translation_service(db: AsyncSession = Depends(get_async_db)) -> TranslationService:
    """
    Get translation history service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        TranslationService: Translation service instance
    """
    return TranslationService(db=db)


def get_folder_service(db: AsyncSession = Depends(get_async_db)) -> FolderService:
    """Get folder service instance."""
    return FolderService(db=db)


def get_saved_item_service(db: AsyncSession = Depends(get_async_db)) -> SavedItemService:
    """Get saved item service instance."""
    return SavedItemService(db=db)


def get_language_service() -> LanguageService:
    """
    Get language service instance.

    Returns:
        LanguageService: Cached service wrapping the AWS clients
    """
    return get_service_cache().language_service
