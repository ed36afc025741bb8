"""
Authentication configuration settings.

JWT signing parameters and password hashing cost.

Dependencies: pydantic, pydantic_settings
System role: Token issuance and verification configuration
"""

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class AuthSettings(BaseSettings):
    """JWT and password hashing configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="AUTH_",
        case_sensitive=False,
        extra="ignore",
    )

    jwt_secret: SecretStr = Field(
        default=SecretStr("change-me-to-a-64-byte-secret-for-hs512-signing-in-production!!"),
        description="HMAC secret used to sign access tokens",
    )
    jwt_algorithm: str = Field(default="HS512", description="JWT signing algorithm")
    jwt_expiration_minutes: int = Field(
        default=60 * 24,
        description="Access token lifetime in minutes",
    )
    bcrypt_rounds: int = Field(default=12, description="bcrypt work factor")
