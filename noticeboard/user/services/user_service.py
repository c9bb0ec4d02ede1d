"""
User service - the credential store.

Persists user records in the ``users`` collection: email, password hash,
profile fields, the current session token and favorite notice references.
Email uniqueness is enforced by the collection's unique index, so a
concurrent duplicate registration surfaces as a DuplicateKeyError here.
"""

import logging
from typing import Optional, Any

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError

from common.database.base_document import utcnow
from noticeboard.errors import DuplicateEmail

logger = logging.getLogger(__name__)


def to_object_id(user_id: Any) -> Optional[ObjectId]:
    """Convert a user id to ObjectId, or None when it is not a valid id."""
    if isinstance(user_id, ObjectId):
        return user_id
    try:
        return ObjectId(str(user_id))
    except (InvalidId, TypeError):
        return None


class UserService:
    """
    Reads and writes user documents.
    """

    PROFILE_FIELDS = ("name", "address", "phone", "birthday")

    def __init__(self, db: AsyncIOMotorDatabase):
        """
        Initialize UserService.

        Args:
            db: MongoDB database connection
        """
        self._db = db
        self._users_collection = db["users"]

    async def find_one(self, query: dict) -> Optional[dict]:
        """Load the first user matching a filter."""
        return await self._users_collection.find_one(query)

    async def get_user_by_id(self, user_id: Any) -> Optional[dict]:
        """
        Load user by MongoDB ID.

        Args:
            user_id: MongoDB ObjectId or its string form

        Returns:
            User document or None if not found or the id is malformed
        """
        object_id = to_object_id(user_id)
        if object_id is None:
            return None
        return await self._users_collection.find_one({"_id": object_id})

    async def get_user_by_email(self, email: str) -> Optional[dict]:
        """Load user by (case-insensitive) email address."""
        return await self.find_one({"email": email.lower()})

    async def create_user(
        self,
        email: str,
        password_hash: str,
        profile: Optional[dict] = None,
    ) -> dict:
        """
        Insert a new, logged-out user.

        Args:
            email: User's email address
            password_hash: Already hashed password
            profile: Optional name/address/phone/birthday values

        Returns:
            Created user document

        Raises:
            DuplicateEmail: The email is already registered
        """
        profile = profile or {}
        now = utcnow()

        user_doc = {
            "email": email.lower(),
            "password_hash": password_hash,
            "token": None,
            "avatar_url": None,
            "favorite_notices": [],
            "created_at": now,
            "updated_at": now,
        }
        for field in self.PROFILE_FIELDS:
            user_doc[field] = profile.get(field)

        try:
            result = await self._users_collection.insert_one(user_doc)
        except DuplicateKeyError:
            raise DuplicateEmail()

        user_doc["_id"] = result.inserted_id
        logger.info(f"User created: {result.inserted_id}")
        return user_doc

    async def update_user(self, user_id: Any, fields: dict) -> bool:
        """
        Set fields on a user document.

        Args:
            user_id: MongoDB user ID
            fields: Field values to $set

        Returns:
            True if a user matched, False if it no longer exists

        Raises:
            DuplicateEmail: An email change collides with another user
        """
        object_id = to_object_id(user_id)
        if object_id is None:
            return False

        updates = {**fields, "updated_at": utcnow()}
        try:
            result = await self._users_collection.update_one(
                {"_id": object_id},
                {"$set": updates}
            )
        except DuplicateKeyError:
            raise DuplicateEmail()

        return result.matched_count > 0
