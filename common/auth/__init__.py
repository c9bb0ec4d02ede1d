"""
Authentication module - Pluggable token codecs.
"""

from common.auth.base import TokenCodec
from common.auth.jwt_auth import JWTCodec

__all__ = ["TokenCodec", "JWTCodec"]
