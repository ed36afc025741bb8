"""
Core business logic module.

Contains the exception hierarchy and security primitives shared by the
application services and the API layer.
"""

from backend.core.exceptions import (
    AuthenticationError,
    CloudServiceError,
    DuplicateResourceError,
    FolderNotEmptyError,
    PermissionDeniedError,
    ResourceNotFoundError,
    RosettaException,
    UnsupportedVoiceError,
    ValidationError,
)

__all__ = [
    "AuthenticationError",
    "CloudServiceError",
    "DuplicateResourceError",
    "FolderNotEmptyError",
    "PermissionDeniedError",
    "ResourceNotFoundError",
    "RosettaException",
    "UnsupportedVoiceError",
    "ValidationError",
]
