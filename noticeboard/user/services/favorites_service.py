"""
Favorites service.

Maintains the set of notice ids a user has marked as favorite. Mutations use
MongoDB's atomic $addToSet / $pull so concurrent requests for the same user
never lose or duplicate an id. Notice existence is not checked here.
"""

import logging
from typing import Any, Optional, List

from motor.motor_asyncio import AsyncIOMotorDatabase

from common.database.base_document import utcnow
from noticeboard.errors import MissingNoticeId, UserNotFound
from noticeboard.user.services.user_service import to_object_id

logger = logging.getLogger(__name__)


def _require_notice_id(notice_id: Optional[str]) -> str:
    if notice_id is None or not str(notice_id).strip():
        raise MissingNoticeId()
    return str(notice_id).strip()


class FavoritesService:
    """
    Manages the user → notice favorite relation.
    """

    def __init__(self, db: AsyncIOMotorDatabase):
        self._users_collection = db["users"]

    async def list_favorites(self, user_id: Any) -> List[str]:
        """
        Get the user's favorite notice ids in the order they were added.

        Raises:
            UserNotFound: The user no longer exists
        """
        object_id = to_object_id(user_id)
        user = None
        if object_id is not None:
            user = await self._users_collection.find_one(
                {"_id": object_id},
                {"favorite_notices": 1}
            )

        if not user:
            raise UserNotFound()

        return list(user.get("favorite_notices", []))

    async def add_favorite(self, user_id: Any, notice_id: Optional[str]) -> None:
        """
        Add a notice to the user's favorites. Re-adding is a no-op.

        Raises:
            MissingNoticeId: notice_id is absent or blank
            UserNotFound: The user no longer exists
        """
        notice_id = _require_notice_id(notice_id)

        await self._update(
            user_id,
            {
                "$addToSet": {"favorite_notices": notice_id},
                "$set": {"updated_at": utcnow()},
            },
        )
        logger.info(f"Notice {notice_id} favorited by user {user_id}")

    async def remove_favorite(self, user_id: Any, notice_id: Optional[str]) -> None:
        """
        Remove a notice from the user's favorites. Removing an absent id
        succeeds without changes.

        Raises:
            MissingNoticeId: notice_id is absent or blank
            UserNotFound: The user no longer exists
        """
        notice_id = _require_notice_id(notice_id)

        await self._update(
            user_id,
            {
                "$pull": {"favorite_notices": notice_id},
                "$set": {"updated_at": utcnow()},
            },
        )
        logger.info(f"Notice {notice_id} unfavorited by user {user_id}")

    async def _update(self, user_id: Any, update: dict) -> None:
        object_id = to_object_id(user_id)
        if object_id is None:
            raise UserNotFound()

        result = await self._users_collection.update_one({"_id": object_id}, update)

        if result.matched_count == 0:
            raise UserNotFound()
