"""
Error taxonomy for the notices backend.

Every client-visible failure maps to exactly one ErrorCode. The exceptions
below are the only ones services raise on purpose; anything else reaching
the API boundary is reported as INTERNAL_ERROR.
"""

from enum import Enum
from typing import Optional, Any

from common.utils.exceptions import (
    BadRequestException,
    ConflictException,
    InternalServerException,
    UnauthorizedException,
)


class ErrorCode(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    MISSING_NOTICE_ID = "MISSING_NOTICE_ID"
    DUPLICATE_EMAIL = "DUPLICATE_EMAIL"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    UNAUTHENTICATED = "UNAUTHENTICATED"
    AVATAR_ERROR = "AVATAR_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ValidationError(BadRequestException):
    """Malformed or missing input, detected before any store access."""

    def __init__(
        self,
        message: str = "Invalid request data",
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: Optional[Any] = None,
    ):
        super().__init__(message, code.value, details)


class MissingNoticeId(ValidationError):
    def __init__(self):
        super().__init__("Notice id is required", ErrorCode.MISSING_NOTICE_ID)


class DuplicateEmail(ConflictException):
    def __init__(self):
        super().__init__("Email is already in use", ErrorCode.DUPLICATE_EMAIL.value)


class InvalidCredentials(UnauthorizedException):
    """Unknown email and wrong password share this error on purpose."""

    def __init__(self):
        super().__init__("Invalid email or password", ErrorCode.INVALID_CREDENTIALS.value)


class UserNotFound(BadRequestException):
    """The authenticated user no longer exists in the store."""

    def __init__(self):
        super().__init__("User not found", ErrorCode.USER_NOT_FOUND.value)


class Unauthenticated(UnauthorizedException):
    def __init__(self, message: str = "Not authorized"):
        super().__init__(message, ErrorCode.UNAUTHENTICATED.value)


class AvatarError(InternalServerException):
    def __init__(self, message: str = "Avatar could not be processed"):
        super().__init__(message, ErrorCode.AVATAR_ERROR.value)
