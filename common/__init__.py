"""
Common library for reusable infrastructure components.

This package provides generic modules that can be used across projects:

- database: Async MongoDB connection with Beanie ODM
- auth: Token codecs (JWT)
- utils: Standard responses, exceptions, password hashing
- config: Base settings class
"""

from common.database import MongoDB, BaseDocument
from common.auth import TokenCodec, JWTCodec
from common.utils import (
    success_response,
    error_response,
    APIException,
    BadRequestException,
    UnauthorizedException,
    ConflictException,
    InternalServerException,
    PasswordHasher,
)
from common.config import BaseAppSettings

__all__ = [
    # Database
    "MongoDB",
    "BaseDocument",
    # Auth
    "TokenCodec",
    "JWTCodec",
    # Utils
    "success_response",
    "error_response",
    "APIException",
    "BadRequestException",
    "UnauthorizedException",
    "ConflictException",
    "InternalServerException",
    "PasswordHasher",
    # Config
    "BaseAppSettings",
]
