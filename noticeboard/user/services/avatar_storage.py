"""
Avatar storage.

Turns an uploaded image into a stored avatar file and a public URL.
Images are scaled so their shorter side is ``size`` pixels and written as
``<avatars_dir>/<target_id>.<ext>``.
"""

import asyncio
import logging
import os
from pathlib import Path
from typing import Optional

from PIL import Image, UnidentifiedImageError

from noticeboard.errors import AvatarError

logger = logging.getLogger(__name__)


ALLOWED_EXTENSIONS = {"jpg", "jpeg", "png", "gif", "webp"}


def avatar_extension(original_name: Optional[str]) -> Optional[str]:
    """Lower-cased extension of an upload name, or None if not allowed."""
    if not original_name or "." not in original_name:
        return None
    extension = original_name.rsplit(".", 1)[-1].lower()
    return extension if extension in ALLOWED_EXTENSIONS else None


class AvatarStorage:
    """
    Stores avatar images on the local filesystem.
    """

    def __init__(
        self,
        avatars_dir: str,
        public_url: str,
        size: int = 500,
        quality: int = 80,
    ):
        """
        Initialize AvatarStorage.

        Args:
            avatars_dir: Directory served at /avatars
            public_url: Base URL prepended to /avatars/<name>
            size: Shorter side of the stored image, in pixels
            quality: Encoder quality for lossy formats
        """
        self._avatars_dir = Path(avatars_dir)
        self._public_url = public_url.rstrip("/")
        self._size = size
        self._quality = quality

    async def save(self, temp_path: str, target_id: str, original_name: str) -> str:
        """
        Resize and store an uploaded image, then delete the temporary file.

        Returns:
            Public URL of the stored avatar

        Raises:
            AvatarError: The file is not a readable image or cannot be written
        """
        extension = avatar_extension(original_name)
        if extension is None:
            raise AvatarError("Unsupported avatar file type")

        avatar_name = f"{target_id}.{extension}"
        result_path = self._avatars_dir / avatar_name

        try:
            await asyncio.to_thread(self._resize, temp_path, result_path)
        except (OSError, UnidentifiedImageError) as e:
            logger.error(f"Avatar processing failed for {target_id}: {e}")
            raise AvatarError()
        finally:
            if os.path.exists(temp_path):
                os.remove(temp_path)

        self._remove_variants(target_id, keep=result_path)

        logger.info(f"Avatar stored for {target_id}: {avatar_name}")
        return f"{self._public_url}/avatars/{avatar_name}"

    async def delete(self, target_id: str) -> None:
        """
        Remove every stored avatar file of a target. Missing files are not an error.

        Raises:
            AvatarError: A file exists but cannot be removed
        """
        self._remove_variants(target_id)
        logger.info(f"Avatar removed for {target_id}")

    def _remove_variants(self, target_id: str, keep: Optional[Path] = None) -> None:
        for extension in ALLOWED_EXTENSIONS:
            avatar_path = self._avatars_dir / f"{target_id}.{extension}"
            if avatar_path == keep:
                continue
            try:
                avatar_path.unlink(missing_ok=True)
            except OSError as e:
                logger.error(f"Avatar removal failed for {target_id}: {e}")
                raise AvatarError("Avatar could not be removed")

    def _resize(self, source: str, destination: Path) -> None:
        destination.parent.mkdir(parents=True, exist_ok=True)

        with Image.open(source) as image:
            width, height = image.size
            if width > height:
                new_size = (round(self._size * width / height), self._size)
            else:
                new_size = (self._size, round(self._size * height / width))

            resized = image.resize(new_size)
            if destination.suffix.lower() in (".jpg", ".jpeg") and resized.mode not in ("RGB", "L"):
                resized = resized.convert("RGB")

            resized.save(destination, quality=self._quality)
