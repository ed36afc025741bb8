"""
Folder ORM model.

User-owned, optionally nested containers for saved items.

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Hierarchical filing for bookmarks
"""

from uuid import UUID

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from backend.boundary.db.base import Base, UUIDMixin, CreatedAtMixin


class FolderModel(Base, UUIDMixin, CreatedAtMixin):
    """
    Folder ORM model.

    A folder with parent_folder_id NULL is a root folder. Names are unique
    per (user, parent); the service enforces this because NULL parents do
    not collide in a SQL unique index.

    Attributes:
        id: UUID primary key (auto-generated)
        user_id: Owning user
        name: Display name
        parent_folder_id: Parent folder (NULL for root folders)
        created_at: Creation timestamp (UTC)
    """

    __tablename__ = "folders"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    # CASCADE lets a user delete sweep nested folders; the API refuses to
    # delete a folder that still has children
    parent_folder_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("folders.id", ondelete="CASCADE"),
        nullable=True,
        default=None,
        index=True,
        doc="Parent folder ID (NULL for root folders)",
    )
