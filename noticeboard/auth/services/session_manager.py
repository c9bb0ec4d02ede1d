"""
Session management for user authentication.

Each user has at most one active session: the token stored on the user
document. Logging in overwrites it, logging out clears it, and a token is
only accepted while it equals the stored value. A well-signed token that
has been superseded is therefore rejected without any revocation list.
"""

import logging
import secrets
from typing import Optional

from common.auth.base import TokenCodec
from common.utils.password import PasswordHasher
from noticeboard.errors import InvalidCredentials, Unauthenticated, UserNotFound
from noticeboard.user.services.user_service import UserService

logger = logging.getLogger(__name__)


class SessionManager:
    """
    Issues, validates and revokes the single bearer token of a user.
    """

    def __init__(
        self,
        user_service: UserService,
        password_hasher: PasswordHasher,
        token_codec: TokenCodec,
    ):
        """
        Initialize SessionManager.

        Args:
            user_service: Credential store
            password_hasher: For hashing and verifying passwords
            token_codec: For signing and verifying tokens
        """
        self._user_service = user_service
        self._password_hasher = password_hasher
        self._token_codec = token_codec
        # Verified against when the email is unknown so both failures cost one bcrypt check
        self._dummy_hash = password_hasher.hash_password(secrets.token_hex(16))

    async def register(
        self,
        email: str,
        password: str,
        profile: Optional[dict] = None,
    ) -> dict:
        """
        Create a new, logged-out user.

        Input shape is validated by the request schema before this call.

        Returns:
            dict with the stored email

        Raises:
            DuplicateEmail: The email is already registered
        """
        password_hash = self._password_hasher.hash_password(password)
        user = await self._user_service.create_user(
            email=email,
            password_hash=password_hash,
            profile=profile,
        )
        return {"email": user["email"]}

    async def login(self, email: str, password: str) -> dict:
        """
        Authenticate with email and password and start a new session.

        Any previously issued token for the user stops being valid.

        Returns:
            dict with token and userId

        Raises:
            InvalidCredentials: Unknown email, wrong password, or the user
                was deleted between the lookup and the token write
        """
        user = await self._user_service.get_user_by_email(email)
        password_hash = user.get("password_hash", "") if user else self._dummy_hash
        password_ok = self._password_hasher.verify_password(password, password_hash)

        if not user or not password_ok:
            logger.info("Login rejected: invalid credentials")
            raise InvalidCredentials()

        user_id = str(user["_id"])
        token = self._token_codec.sign(user_id)

        if not await self._user_service.update_user(user_id, {"token": token}):
            raise InvalidCredentials()

        logger.info(f"Session started for user {user_id}")
        return {"token": token, "userId": user_id}

    async def refresh(self, user_id: str) -> dict:
        """
        Re-confirm that an authenticated user still exists.

        The token is not rotated.

        Raises:
            UserNotFound: The user no longer exists
        """
        user = await self._user_service.get_user_by_id(user_id)
        if not user:
            raise UserNotFound()
        return {"userId": str(user["_id"])}

    async def logout(self, user_id: str) -> None:
        """
        End the user's session by clearing the stored token.

        Raises:
            UserNotFound: The user no longer exists
        """
        if not await self._user_service.update_user(user_id, {"token": None}):
            raise UserNotFound()
        logger.info(f"Session ended for user {user_id}")

    async def validate_token(self, token: str) -> dict:
        """
        Resolve a bearer token to its user.

        The token must be correctly signed, unexpired, name an existing user
        and equal that user's stored session token.

        Returns:
            User document

        Raises:
            Unauthenticated: Any of the above checks fails
        """
        try:
            claims = self._token_codec.verify(token)
        except ValueError as e:
            logger.debug(f"Token rejected: {e}")
            raise Unauthenticated()

        user = await self._user_service.get_user_by_id(claims["sub"])

        if not user or user.get("token") != token:
            raise Unauthenticated()

        return user
