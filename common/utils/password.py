"""
Password hashing.

bcrypt with SHA-256 pre-hashing, so passwords longer than bcrypt's 72-byte
limit are still fully significant.

Example:
    from common.utils import PasswordHasher

    hasher = PasswordHasher()
    hashed = hasher.hash_password("pw123")
    hasher.verify_password("pw123", hashed)  # True
"""

import base64
import hashlib

import bcrypt as bcrypt_lib


class PasswordHasher:
    """One-way password hash and verify."""

    def __init__(self, rounds: int = 12):
        """
        Initialize the hasher.

        Args:
            rounds: bcrypt cost factor (log2 of the work factor)
        """
        self.rounds = rounds

    def _prehash_password(self, password: str) -> str:
        """Pre-hash password with SHA-256 before bcrypt."""
        sha256_hash = hashlib.sha256(password.encode("utf-8")).digest()
        return base64.b64encode(sha256_hash).decode("utf-8")

    def hash_password(self, password: str) -> str:
        """Hash a password using bcrypt with SHA-256 pre-hashing."""
        prehashed = self._prehash_password(password)
        salt = bcrypt_lib.gensalt(rounds=self.rounds)
        return bcrypt_lib.hashpw(prehashed.encode("utf-8"), salt).decode("utf-8")

    def verify_password(self, password: str, hashed: str) -> bool:
        """
        Verify a password against its hash.

        A malformed stored hash counts as a mismatch.
        """
        if not hashed:
            return False

        prehashed = self._prehash_password(password)
        try:
            return bcrypt_lib.checkpw(prehashed.encode("utf-8"), hashed.encode("utf-8"))
        except ValueError:
            return False
