"""
Saved item ORM model.

A bookmark on one translation, optionally filed in a folder.

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Bookmark persistence
"""

from uuid import UUID

from sqlalchemy import Enum, ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backend.boundary.db.base import Base, UUIDMixin, CreatedAtMixin
from backend.boundary.db.models.enums import SavedItemCategory


class SavedItemModel(Base, UUIDMixin, CreatedAtMixin):
    """
    Saved item ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        user_id: Owning user
        translation_id: Bookmarked translation (cascade delete with it)
        category: Category tag
        folder_id: Containing folder (NULL when unfiled)
        name: Display name
        notes: Free-form notes
        created_at: Creation timestamp (UTC)

    Relationships:
        translation: Many-to-one with TranslationModel
        folder: Many-to-one with FolderModel (nullable)

    Constraints:
        (user_id, translation_id): UNIQUE, a translation is saved once per user
    """

    __tablename__ = "saved_items"
    __table_args__ = (
        UniqueConstraint("user_id", "translation_id", name="uq_saved_items_user_translation"),
    )

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    translation_id: Mapped[UUID] = mapped_column(
        ForeignKey("translations.id", ondelete="CASCADE"),
        nullable=False,
    )

    category: Mapped[SavedItemCategory] = mapped_column(
        Enum(SavedItemCategory, native_enum=False),
        nullable=False,
    )

    folder_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("folders.id", ondelete="CASCADE"),
        nullable=True,
        default=None,
        index=True,
    )

    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Relationships (always loaded explicitly with selectinload in CRUD queries)
    translation = relationship("TranslationModel", foreign_keys=[translation_id])
    folder = relationship("FolderModel", foreign_keys=[folder_id])
