"""
Utilities module - Common helpers for API responses, exceptions, and passwords.
"""

from common.utils.responses import success_response, error_response
from common.utils.exceptions import (
    APIException,
    BadRequestException,
    UnauthorizedException,
    ConflictException,
    InternalServerException,
)
from common.utils.password import PasswordHasher

__all__ = [
    "success_response",
    "error_response",
    "APIException",
    "BadRequestException",
    "UnauthorizedException",
    "ConflictException",
    "InternalServerException",
    "PasswordHasher",
]
