"""
User ORM model.

Represents an account holder. Every other row in the schema is owned by
exactly one user.

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Identity and preference persistence
"""

from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from backend.boundary.db.base import Base, UUIDMixin, TimestampMixin


class UserModel(Base, UUIDMixin, TimestampMixin):
    """
    User ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        username: Unique login name
        email: Unique email address
        password_hash: bcrypt hash of the password
        last_login: Time of the last successful login (nullable)
        preferred_source_lang: Default source language code (nullable)
        preferred_target_lang: Default target language code (nullable)
        settings: Free-form client settings, stored as a JSON string (nullable)
        created_at: Account creation timestamp (UTC)
        updated_at: Last modification timestamp (UTC)

    Constraints:
        username, email: UNIQUE
    """

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(String(50), nullable=False, unique=True, index=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    last_login: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
    )

    preferred_source_lang: Mapped[str | None] = mapped_column(String(16), nullable=True)
    preferred_target_lang: Mapped[str | None] = mapped_column(String(16), nullable=True)

    settings: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        doc="Client settings as a JSON document string",
    )
