"""
Router utility functions.

Contains helpers shared by router endpoints to keep them clean.
"""

from backend.api.routers.router_utils.error_handling import (
    api_error,
    handle_service_errors,
)

__all__ = [
    "api_error",
    "handle_service_errors",
]
