"""
Abstract token codec interface.

Defines the contract that all token codecs must implement. Session
management only needs to sign a set of claims and to verify a token back
into claims, so swapping JWT for another signed format does not touch
application code.

Example:
    from common.auth import TokenCodec, JWTCodec

    def get_token_codec(settings) -> TokenCodec:
        return JWTCodec(secret=settings.JWT_SECRET)
"""

from abc import ABC, abstractmethod
from typing import Dict, Any


class TokenCodec(ABC):
    """
    Abstract signed-token codec.

    Implementations must be pure: no I/O, no state shared between calls.
    """

    @abstractmethod
    def sign(self, subject: str, **claims: Any) -> str:
        """
        Create a signed token for a subject.

        Args:
            subject: Identifier the token is bound to (usually a user ID)
            **claims: Additional claims to embed

        Returns:
            Encoded token string
        """
        pass

    @abstractmethod
    def verify(self, token: str) -> Dict[str, Any]:
        """
        Verify a token and decode its claims.

        Args:
            token: The token to verify

        Returns:
            Dictionary containing decoded claims (at minimum: sub)

        Raises:
            ValueError: If the token is malformed, tampered with or expired
        """
        pass
