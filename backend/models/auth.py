"""
Authentication schemas.

Dependencies: pydantic, email-validator
System role: Register/login API contracts
"""

from pydantic import EmailStr, Field, field_validator

from backend.models.common import CamelModel

# bcrypt ignores input past 72 bytes
MAX_PASSWORD_BYTES = 72


class RegisterRequest(CamelModel):
    """Request schema for creating an account."""

    username: str = Field(..., min_length=3, max_length=50, description="Unique login name")
    email: EmailStr = Field(..., description="Unique email address")
    password: str = Field(..., min_length=6, description="Plain-text password")

    @field_validator("username", "email", mode="before")
    @classmethod
    def strip_identity(cls, value):
        if not isinstance(value, str):
            return value
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("password")
    @classmethod
    def password_length(cls, value: str) -> str:
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


class LoginRequest(CamelModel):
    """Request schema for exchanging credentials for a token."""

    username_or_email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class TokenResponse(CamelModel):
    """Bearer token issued on login."""

    access_token: str
    token_type: str = "Bearer"
