"""
Translation ORM model.

One row per translation a user chose to keep in their history.

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Translation history persistence
"""

from uuid import UUID

from sqlalchemy import Boolean, Enum, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from backend.boundary.db.base import Base, UUIDMixin, CreatedAtMixin
from backend.boundary.db.models.enums import InputType


class TranslationModel(Base, UUIDMixin, CreatedAtMixin):
    """
    Translation ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        user_id: Owning user (cascade delete with the user)
        source_text: Original text
        target_text: Translated text
        source_lang: Source language code
        target_lang: Target language code
        input_type: How the source text was captured
        is_favorite: Favorite flag (default False)
        tags: Optional JSON string of user tags
        created_at: Creation timestamp (UTC)
    """

    __tablename__ = "translations"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    source_text: Mapped[str] = mapped_column(Text, nullable=False)
    target_text: Mapped[str] = mapped_column(Text, nullable=False)
    source_lang: Mapped[str] = mapped_column(String(16), nullable=False)
    target_lang: Mapped[str] = mapped_column(String(16), nullable=False)

    input_type: Mapped[InputType] = mapped_column(
        Enum(InputType, native_enum=False),
        nullable=False,
    )

    is_favorite: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    tags: Mapped[str | None] = mapped_column(Text, nullable=True)
