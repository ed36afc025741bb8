"""
Folder validation utilities.

Business rules for folder names not covered by the Pydantic models.

Dependencies: backend.core.exceptions
System role: Folder input normalization
"""

from backend.core.exceptions import ValidationError

MAX_FOLDER_NAME_LENGTH = 255


def normalize_folder_name(name: str) -> str:
    """
    Trim a folder name and check it is usable.

    Args:
        name: Name as sent by the client

    Returns:
        str: Trimmed name

    Raises:
        ValidationError: If the name is blank or too long
    """
    trimmed = name.strip()
    if not trimmed:
        raise ValidationError("Folder name cannot be empty.", field="name")
    if len(trimmed) > MAX_FOLDER_NAME_LENGTH:
        raise ValidationError(
            f"Folder name cannot exceed {MAX_FOLDER_NAME_LENGTH} characters.",
            field="name",
        )
    return trimmed
