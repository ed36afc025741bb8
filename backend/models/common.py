"""
Common response models and utilities.

Wire schemas speak camelCase JSON while Python code stays snake_case;
CamelModel bridges the two with an alias generator.

Dependencies: pydantic
System role: Common API response structures
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base schema serialized with camelCase keys, populated by either form."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ApiResponse(CamelModel):
    """Generic status envelope: a success flag, a message and optional data."""

    success: bool
    message: str
    data: Any | None = Field(default=None, description="Optional payload")


class Page(CamelModel, Generic[T]):
    """Zero-based page of results."""

    content: list[T]
    page: int
    size: int
    total_elements: int
    total_pages: int
    first: bool
    last: bool
