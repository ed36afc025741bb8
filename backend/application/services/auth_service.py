"""
Authentication service.

Registers accounts and exchanges credentials for access tokens.

Dependencies: backend.boundary.db.CRUD, backend.core.security
System role: Account creation and login use cases
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.base import utcnow
from backend.boundary.db.CRUD.user_crud import user_crud
from backend.core.exceptions import AuthenticationError, DuplicateResourceError
from backend.core.security import TokenProvider, hash_password, verify_password

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid username/email or password"
ACCOUNT_TAKEN = "Username or Email Address already in use!"


class AuthService:
    """Registration and login orchestrator."""

    def __init__(
        self,
        db: AsyncSession,
        token_provider: TokenProvider,
        bcrypt_rounds: int = 12,
    ) -> None:
        """
        Initialize auth service.

        Args:
            db: Async SQLAlchemy session
            token_provider: Issues signed access tokens
            bcrypt_rounds: bcrypt cost factor for new password hashes
        """
        self.db = db
        self.token_provider = token_provider
        self.bcrypt_rounds = bcrypt_rounds

    async def register(self, username: str, email: str, password: str) -> dict:
        """
        Create a new account.

        Args:
            username: Unique login name
            email: Unique email address
            password: Plain-text password, hashed before storage

        Returns:
            dict: id, username, email of the new user

        Raises:
            DuplicateResourceError: If the username or email is already registered
        """
        if await user_crud.username_exists(self.db, username):
            raise DuplicateResourceError("Username is already taken!")
        if await user_crud.email_exists(self.db, email):
            raise DuplicateResourceError("Email Address already in use!")

        try:
            user = await user_crud.create(
                self.db,
                username=username,
                email=email,
                password_hash=hash_password(password, rounds=self.bcrypt_rounds),
            )
        except IntegrityError as e:
            # A concurrent registration won the unique constraint
            raise DuplicateResourceError(ACCOUNT_TAKEN) from e
        logger.info("User registered", extra={"user_id": str(user.id)})
        return {"id": user.id, "username": user.username, "email": user.email}

    async def login(self, username_or_email: str, password: str) -> dict:
        """
        Verify credentials and issue an access token.

        Records the login time on success.

        Returns:
            dict: access_token and token_type ("Bearer")

        Raises:
            AuthenticationError: If no account matches or the password is wrong
        """
        user = await user_crud.get_by_username_or_email(self.db, username_or_email)
        if user is None or not verify_password(password, user.password_hash):
            logger.warning("Failed login attempt")
            raise AuthenticationError(INVALID_CREDENTIALS)

        await user_crud.update_by_id(self.db, user.id, last_login=utcnow())
        token = self.token_provider.create_access_token(user.id)

        logger.info("User logged in", extra={"user_id": str(user.id)})
        return {"access_token": token, "token_type": "Bearer"}
