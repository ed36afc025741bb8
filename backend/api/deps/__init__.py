"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_auth_service,
    get_current_user_id,
    get_folder_service,
    get_language_service,
    get_saved_item_service,
    get_settings_dependency,
    get_token_provider,
    get_translation_service,
    get_user_service,
)

__all__ = [
    "get_auth_service",
    "get_current_user_id",
    "get_folder_service",
    "get_language_service",
    "get_saved_item_service",
    "get_settings_dependency",
    "get_token_provider",
    "get_translation_service",
    "get_user_service",
]
