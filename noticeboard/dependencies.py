"""
FastAPI dependencies for the notices application.

Provides dependency injection for all services. Services are built once by
init_all_services() at startup and never replaced while serving.
"""

import logging
from typing import Annotated, Optional

from fastapi import Depends, Request
from motor.motor_asyncio import AsyncIOMotorDatabase

from common.auth import JWTCodec
from common.utils import PasswordHasher
from noticeboard.auth.middleware import AuthContext, AuthMiddleware
from noticeboard.auth.services.session_manager import SessionManager
from noticeboard.config import Settings
from noticeboard.user.services.avatar_storage import AvatarStorage
from noticeboard.user.services.favorites_service import FavoritesService
from noticeboard.user.services.profile_service import ProfileService
from noticeboard.user.services.user_service import UserService

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────
# Global service instances
# ─────────────────────────────────────────────────────────────────

_user_service: Optional[UserService] = None
_session_manager: Optional[SessionManager] = None
_auth_middleware: Optional[AuthMiddleware] = None
_favorites_service: Optional[FavoritesService] = None
_profile_service: Optional[ProfileService] = None


def init_all_services(db: AsyncIOMotorDatabase, settings: Settings) -> None:
    """
    Initialize all services with database connection and settings.

    Called once at application startup.

    Args:
        db: MongoDB database connection
        settings: Application settings (JWT secret, avatar options, ...)

    Raises:
        ValueError: Required settings are missing
    """
    global _user_service, _session_manager, _auth_middleware
    global _favorites_service, _profile_service

    settings.validate_required()

    _user_service = UserService(db=db)

    _session_manager = SessionManager(
        user_service=_user_service,
        password_hasher=PasswordHasher(rounds=settings.BCRYPT_ROUNDS),
        token_codec=JWTCodec(
            secret=settings.JWT_SECRET,
            algorithm=settings.JWT_ALGORITHM,
            expire_minutes=settings.JWT_EXPIRE_MINUTES,
        ),
    )
    _auth_middleware = AuthMiddleware(session_manager=_session_manager)

    _favorites_service = FavoritesService(db=db)

    _profile_service = ProfileService(
        user_service=_user_service,
        avatar_storage=AvatarStorage(
            avatars_dir=settings.AVATARS_DIR,
            public_url=settings.PUBLIC_URL,
            size=settings.AVATAR_SIZE,
            quality=settings.AVATAR_QUALITY,
        ),
        upload_tmp_dir=settings.UPLOAD_TMP_DIR,
        avatar_max_bytes=settings.AVATAR_MAX_BYTES,
    )

    logger.info("Services initialized")


def get_session_manager() -> SessionManager:
    """Get session manager instance."""
    if _session_manager is None:
        raise RuntimeError("Services not initialized. Call init_all_services first.")
    return _session_manager


def get_auth_middleware() -> AuthMiddleware:
    """Get auth middleware instance."""
    if _auth_middleware is None:
        raise RuntimeError("Services not initialized. Call init_all_services first.")
    return _auth_middleware


def get_favorites_service() -> FavoritesService:
    """Get favorites service instance."""
    if _favorites_service is None:
        raise RuntimeError("Services not initialized. Call init_all_services first.")
    return _favorites_service


def get_profile_service() -> ProfileService:
    """Get profile service instance."""
    if _profile_service is None:
        raise RuntimeError("Services not initialized. Call init_all_services first.")
    return _profile_service


async def require_auth(
    request: Request,
    auth_middleware: Annotated[AuthMiddleware, Depends(get_auth_middleware)]
) -> AuthContext:
    """
    Dependency that requires authentication.

    Usage:
        @router.get("/protected")
        async def protected_route(auth: Annotated[AuthContext, Depends(require_auth)]):
            return {"user_id": auth.user_id}
    """
    return await auth_middleware.require_auth(request)
