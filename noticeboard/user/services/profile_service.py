"""
Profile service for user profile management.

Handles profile viewing, partial updates and the avatar lifecycle.
"""

import logging
import os
import uuid
from pathlib import Path
from typing import Any

from noticeboard.errors import AvatarError, UserNotFound, ValidationError
from noticeboard.user.services.avatar_storage import AvatarStorage, avatar_extension
from noticeboard.user.services.user_service import UserService

logger = logging.getLogger(__name__)


def profile_to_response(user: dict) -> dict:
    """Convert a user document to the public profile payload."""
    return {
        "email": user.get("email"),
        "name": user.get("name"),
        "address": user.get("address"),
        "phone": user.get("phone"),
        "birthday": user.get("birthday"),
        "avatarURL": user.get("avatar_url"),
    }


class ProfileService:
    """
    Manages user profile data and avatars.
    """

    EDITABLE_FIELDS = ("email", "name", "address", "phone", "birthday")

    ALLOWED_AVATAR_TYPES = ("image/jpeg", "image/png", "image/gif", "image/webp")

    def __init__(
        self,
        user_service: UserService,
        avatar_storage: AvatarStorage,
        upload_tmp_dir: str,
        avatar_max_bytes: int,
    ):
        """
        Initialize ProfileService.

        Args:
            user_service: Credential store
            avatar_storage: Resizes and stores avatar images
            upload_tmp_dir: Where uploads are staged before processing
            avatar_max_bytes: Largest accepted avatar upload
        """
        self._user_service = user_service
        self._avatar_storage = avatar_storage
        self._upload_tmp_dir = Path(upload_tmp_dir)
        self._avatar_max_bytes = avatar_max_bytes

    async def update_profile(self, user_id: Any, updates: dict) -> None:
        """
        Update editable profile fields (partial update).

        Raises:
            ValidationError: No editable field supplied
            DuplicateEmail: New email belongs to another user
            UserNotFound: The user no longer exists
        """
        fields = {k: v for k, v in updates.items() if k in self.EDITABLE_FIELDS}

        if not fields:
            raise ValidationError("No profile fields to update")

        if "email" in fields:
            if not fields["email"]:
                raise ValidationError("Email cannot be empty")
            fields["email"] = fields["email"].lower()

        if not await self._user_service.update_user(user_id, fields):
            raise UserNotFound()

        logger.info(f"Profile updated for user {user_id}: {sorted(fields)}")

    async def update_avatar(
        self,
        user_id: Any,
        contents: bytes,
        filename: str,
        content_type: str,
    ) -> str:
        """
        Store a new avatar and record its URL on the user.

        Returns:
            Public URL of the avatar

        Raises:
            ValidationError: Wrong file type or too large
            AvatarError: The image could not be processed
            UserNotFound: The user no longer exists
        """
        if content_type not in self.ALLOWED_AVATAR_TYPES or avatar_extension(filename) is None:
            raise ValidationError("Invalid file type. Allowed: JPEG, PNG, GIF, WebP")

        if len(contents) > self._avatar_max_bytes:
            raise ValidationError("File too large")

        temp_path = self._stage_upload(contents)
        avatar_url = await self._avatar_storage.save(temp_path, str(user_id), filename)

        if not await self._user_service.update_user(user_id, {"avatar_url": avatar_url}):
            raise UserNotFound()

        return avatar_url

    async def delete_avatar(self, user: dict) -> None:
        """
        Remove the user's avatar file and clear the stored URL.

        Raises:
            UserNotFound: The user no longer exists
        """
        user_id = str(user["_id"])
        await self._avatar_storage.delete(user_id)

        if not await self._user_service.update_user(user_id, {"avatar_url": None}):
            raise UserNotFound()

    def _stage_upload(self, contents: bytes) -> str:
        try:
            self._upload_tmp_dir.mkdir(parents=True, exist_ok=True)
            temp_path = self._upload_tmp_dir / uuid.uuid4().hex
            with open(temp_path, "wb") as f:
                f.write(contents)
        except OSError as e:
            logger.error(f"Could not stage avatar upload: {e}")
            raise AvatarError()
        return os.fspath(temp_path)
