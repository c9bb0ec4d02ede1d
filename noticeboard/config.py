"""
Notices application settings.

Extends the base settings with notices-specific configuration.
"""

from common.config import BaseAppSettings


class Settings(BaseAppSettings):
    """Notices-specific settings."""

    # ==========================================================================
    # Password Hashing
    # ==========================================================================
    BCRYPT_ROUNDS: int = 12

    # ==========================================================================
    # Avatars
    # ==========================================================================
    # Base URL avatars are served from (the app mounts AVATARS_DIR at /avatars)
    PUBLIC_URL: str = "http://localhost:8000"
    AVATARS_DIR: str = "public/avatars"
    UPLOAD_TMP_DIR: str = "tmp"
    # Shorter side of a stored avatar, in pixels
    AVATAR_SIZE: int = 500
    AVATAR_QUALITY: int = 80
    AVATAR_MAX_BYTES: int = 5 * 1024 * 1024


# Global settings instance
settings = Settings()
