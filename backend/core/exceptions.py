"""
Exception hierarchy for the Rosetta translation backend.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any
from uuid import UUID


class RosettaException(Exception):
    """Base exception for all Rosetta application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return the human-readable message (details stay in logs only)."""
        return self.message


class ValidationError(RosettaException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class ResourceNotFoundError(RosettaException):
    """Raised when a user, translation, folder or saved item does not exist."""

    def __init__(
        self,
        resource: str,
        resource_id: UUID | str | None = None,
        message: str | None = None,
    ) -> None:
        details = {"resource": resource}
        if resource_id is not None:
            details["resource_id"] = str(resource_id)
        super().__init__(message or f"{resource} not found: {resource_id}", details)


class PermissionDeniedError(RosettaException):
    """Raised when a row's owner does not match the requesting user."""

    def __init__(self, message: str, user_id: UUID | None = None) -> None:
        details = {"user_id": str(user_id)} if user_id else None
        super().__init__(message, details)


class DuplicateResourceError(RosettaException):
    """Raised when a uniqueness rule would be violated."""

    pass


class FolderNotEmptyError(RosettaException):
    """Raised when deleting a folder that still has subfolders or saved items."""

    def __init__(self, message: str, folder_id: UUID) -> None:
        super().__init__(message, {"folder_id": str(folder_id)})


class AuthenticationError(RosettaException):
    """Raised when credentials or access tokens are missing or invalid."""

    pass


class CloudServiceError(RosettaException):
    """Raised when a call to the cloud AI platform fails."""

    def __init__(
        self,
        message: str,
        service: str | None = None,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize cloud service error.

        Args:
            message: Error message
            service: AWS service name (translate, polly, textract, transcribe, s3)
            operation: Operation that failed
            details: Additional context
        """
        details = details or {}
        if service:
            details["service"] = service
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class UnsupportedVoiceError(CloudServiceError):
    """Raised when text-to-speech has no voice for the requested language."""

    def __init__(self, language_code: str, reason: str | None = None) -> None:
        message = f"Text-to-Speech is not available for the language: {language_code}."
        if reason:
            message = f"{message} Details: {reason}"
        super().__init__(
            message,
            service="polly",
            operation="synthesize_speech",
            details={"language_code": language_code},
        )
        self.language_code = language_code
