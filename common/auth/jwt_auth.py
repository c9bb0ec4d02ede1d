"""
JWT token codec.

Signs and verifies HMAC JWTs with python-jose. Every token carries a random
``jti`` so two tokens issued for the same subject within the same second are
still distinct.

Example:
    codec = JWTCodec(
        secret="your-secret-key",
        expire_minutes=60,
    )

    token = codec.sign(user_id)
    claims = codec.verify(token)
    print(claims["sub"])  # user_id
"""

import secrets
from datetime import datetime, timedelta, timezone
from typing import Dict, Any, Optional

from jose import jwt, JWTError

from common.auth.base import TokenCodec


class JWTCodec(TokenCodec):
    """
    JWT implementation of TokenCodec.

    Expiry is optional: without ``expire_minutes`` tokens stay valid until
    the stored session is replaced or cleared.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expire_minutes: Optional[int] = None,
    ):
        """
        Initialize JWT codec.

        Args:
            secret: Secret key for JWT signing (keep this secure!)
            algorithm: JWT algorithm (default: HS256)
            expire_minutes: Token lifetime, or None for no exp claim
        """
        if not secret:
            raise ValueError("JWT secret must not be empty")

        self.secret = secret
        self.algorithm = algorithm
        self.expire = timedelta(minutes=expire_minutes) if expire_minutes else None

    def sign(self, subject: str, **claims: Any) -> str:
        """Create a JWT token for the subject."""
        now = datetime.now(timezone.utc)
        payload = {
            "sub": subject,
            "iat": now,
            "jti": secrets.token_hex(16),
            **claims,
        }
        if self.expire is not None:
            payload["exp"] = now + self.expire
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> Dict[str, Any]:
        """Verify and decode a JWT token."""
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
            )
        except JWTError as e:
            raise ValueError(f"Invalid token: {e}")

        if not payload.get("sub"):
            raise ValueError("Token missing subject")

        return payload
