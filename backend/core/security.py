"""
Password hashing and access token handling.

bcrypt for password hashes, PyJWT for signed bearer tokens whose subject is
the user's UUID.

Dependencies: bcrypt, jwt (PyJWT), backend.configs
System role: Credential verification for the auth service and API guard
"""

import logging
from datetime import datetime, timedelta, timezone
from uuid import UUID

import bcrypt
import jwt

from backend.configs.auth import AuthSettings
from backend.core.exceptions import AuthenticationError

logger = logging.getLogger(__name__)


def hash_password(password: str, rounds: int = 12) -> str:
    """
    Hash a plaintext password with a fresh bcrypt salt.

    Args:
        password: Plaintext password
        rounds: bcrypt work factor

    Returns:
        str: bcrypt hash suitable for storage
    """
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed stored hash
        return False


class TokenProvider:
    """Issues and validates HMAC-signed JWT access tokens."""

    def __init__(self, settings: AuthSettings) -> None:
        self._secret = settings.jwt_secret.get_secret_value()
        self._algorithm = settings.jwt_algorithm
        self._expiration = timedelta(minutes=settings.jwt_expiration_minutes)

    def create_access_token(self, user_id: UUID, now: datetime | None = None) -> str:
        """
        Create a signed access token for a user.

        Args:
            user_id: Subject of the token
            now: Issue time (defaults to current UTC time)

        Returns:
            str: Encoded JWT
        """
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "sub": str(user_id),
            "iat": issued_at,
            "exp": issued_at + self._expiration,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def get_user_id(self, token: str) -> UUID:
        """
        Validate a token and return the user ID it was issued for.

        Raises:
            AuthenticationError: If the token is expired, malformed or badly signed
        """
        try:
            claims = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except jwt.ExpiredSignatureError as e:
            logger.info("Rejected expired access token")
            raise AuthenticationError("Access token has expired") from e
        except jwt.InvalidTokenError as e:
            logger.warning("Rejected invalid access token", extra={"error": str(e)})
            raise AuthenticationError("Invalid access token") from e

        try:
            return UUID(claims["sub"])
        except (KeyError, ValueError, TypeError) as e:
            raise AuthenticationError("Invalid access token subject") from e
