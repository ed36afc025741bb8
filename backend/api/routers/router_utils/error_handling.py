"""
Service error handling utilities.

Provides a decorator that maps domain exceptions raised by the service
layer to HTTPExceptions whose detail is an ApiResponse body.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from backend.core.exceptions import (
    AuthenticationError,
    CloudServiceError,
    DuplicateResourceError,
    FolderNotEmptyError,
    PermissionDeniedError,
    ResourceNotFoundError,
    RosettaException,
    ValidationError,
)
from backend.models.common import ApiResponse

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])

# Checked in order; first match wins
STATUS_BY_ERROR: tuple[tuple[type[RosettaException], int], ...] = (
    (ResourceNotFoundError, status.HTTP_404_NOT_FOUND),
    (PermissionDeniedError, status.HTTP_403_FORBIDDEN),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (DuplicateResourceError, status.HTTP_400_BAD_REQUEST),
    (FolderNotEmptyError, status.HTTP_400_BAD_REQUEST),
    (CloudServiceError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def api_error(status_code: int, message: str, data: Any = None) -> HTTPException:
    """Build an HTTPException carrying an ApiResponse(success=False) body."""
    body = ApiResponse(success=False, message=message, data=data)
    return HTTPException(status_code=status_code, detail=body.model_dump(by_alias=True))


def status_for(exc: RosettaException) -> int:
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def handle_service_errors(func: F) -> F:
    """
    Decorator to handle service errors and transform them into HTTPExceptions.

    This centralizes:
    - Logging of errors with their domain details
    - Mapping exception types to HTTP status codes
    - Uniform ApiResponse error bodies
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except RosettaException as e:
            status_code = status_for(e)
            if status_code >= 500:
                logger.error(
                    "Service operation failed",
                    extra={"error": str(e), "error_type": type(e).__name__, **e.details},
                )
            else:
                logger.warning(
                    "Request rejected",
                    extra={"error": str(e), "error_type": type(e).__name__, "status_code": status_code},
                )
            raise api_error(status_code, e.message) from e

        except Exception as e:
            logger.exception("Unexpected failure in service operation", extra={"error": str(e)})
            raise api_error(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "An internal error occurred.",
            ) from e

    return wrapper  # type: ignore
