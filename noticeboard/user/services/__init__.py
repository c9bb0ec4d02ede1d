"""
User System Services

Contains service classes for user data, favorites and avatars.
"""

from noticeboard.user.services.user_service import UserService
from noticeboard.user.services.favorites_service import FavoritesService
from noticeboard.user.services.profile_service import ProfileService
from noticeboard.user.services.avatar_storage import AvatarStorage

__all__ = [
    "UserService",
    "FavoritesService",
    "ProfileService",
    "AvatarStorage",
]
