"""
Authentication gate for protected routes.

Validates the bearer token and hands the resolved identity to route
handlers as an AuthContext.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Request

from noticeboard.auth.services.session_manager import SessionManager
from noticeboard.errors import Unauthenticated

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthContext:
    """Identity of an authenticated request."""

    user_id: str
    token: str
    user: dict


class AuthMiddleware:
    """
    Resolves the Authorization header to an authenticated user.
    """

    def __init__(self, session_manager: SessionManager):
        """
        Initialize AuthMiddleware.

        Args:
            session_manager: For token validation
        """
        self._session_manager = session_manager

    async def require_auth(self, request: Request) -> AuthContext:
        """
        Validate request is authenticated.

        Args:
            request: HTTP request object

        Returns:
            AuthContext for the token's user

        Raises:
            Unauthenticated: No header, bad scheme, or invalid/superseded token
        """
        token = self._extract_token(request)

        if not token:
            raise Unauthenticated("Authentication required")

        user = await self._session_manager.validate_token(token)

        return AuthContext(user_id=str(user["_id"]), token=token, user=user)

    def _extract_token(self, request: Request) -> Optional[str]:
        """
        Extract bearer token from Authorization header.

        Expected format: "Authorization: Bearer <token>"
        """
        auth_header = request.headers.get("Authorization")

        if not auth_header:
            return None

        parts = auth_header.split()

        if len(parts) != 2:
            return None

        scheme, token = parts

        if scheme.lower() != "bearer":
            return None

        return token
