"""Shared test fixtures for the notices backend tests."""

import copy
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from pymongo.errors import DuplicateKeyError

from common.auth import JWTCodec
from common.utils import PasswordHasher
from noticeboard.auth.middleware import AuthMiddleware
from noticeboard.auth.services.session_manager import SessionManager
from noticeboard.user.services.favorites_service import FavoritesService
from noticeboard.user.services.user_service import UserService


TEST_SECRET = "test-secret"


class InMemoryUsersCollection:
    """
    Minimal async stand-in for the Motor ``users`` collection.

    Supports equality filters, $set / $addToSet / $pull and the unique email
    index, which is all the services use.
    """

    def __init__(self):
        self.docs = []

    def _match(self, doc, query):
        return all(doc.get(key) == value for key, value in query.items())

    def _check_unique_email(self, email, exclude_id=None):
        for doc in self.docs:
            if doc["email"] == email and doc["_id"] != exclude_id:
                raise DuplicateKeyError("E11000 duplicate key error collection: users index: email_1")

    async def find_one(self, query, projection=None):
        for doc in self.docs:
            if self._match(doc, query):
                return copy.deepcopy(doc)
        return None

    async def insert_one(self, doc):
        self._check_unique_email(doc["email"])
        stored = copy.deepcopy(doc)
        stored["_id"] = ObjectId()
        self.docs.append(stored)
        return SimpleNamespace(inserted_id=stored["_id"])

    async def update_one(self, query, update):
        for doc in self.docs:
            if not self._match(doc, query):
                continue
            if "email" in update.get("$set", {}):
                self._check_unique_email(update["$set"]["email"], exclude_id=doc["_id"])
            for key, value in update.get("$set", {}).items():
                doc[key] = value
            for key, value in update.get("$addToSet", {}).items():
                values = doc.setdefault(key, [])
                if value not in values:
                    values.append(value)
            for key, value in update.get("$pull", {}).items():
                doc[key] = [v for v in doc.get(key, []) if v != value]
            return SimpleNamespace(matched_count=1, modified_count=1)
        return SimpleNamespace(matched_count=0, modified_count=0)


# ─────────────────────────────────────────────────────────────────
# Mocked Motor collection (call-shape assertions)
# ─────────────────────────────────────────────────────────────────


@pytest.fixture
def sample_user_id():
    return str(ObjectId())


@pytest.fixture
def mock_collection():
    collection = AsyncMock()
    collection.update_one.return_value = MagicMock(matched_count=1, modified_count=1)
    return collection


@pytest.fixture
def mock_db(mock_collection):
    db = MagicMock()
    db.__getitem__ = MagicMock(return_value=mock_collection)
    return db


# ─────────────────────────────────────────────────────────────────
# In-memory store (lifecycle properties)
# ─────────────────────────────────────────────────────────────────


@pytest.fixture
def users_collection():
    return InMemoryUsersCollection()


@pytest.fixture
def fake_db(users_collection):
    db = MagicMock()
    db.__getitem__ = MagicMock(return_value=users_collection)
    return db


@pytest.fixture
def password_hasher():
    # Lowest cost bcrypt accepts, keeps the suite fast
    return PasswordHasher(rounds=4)


@pytest.fixture
def token_codec():
    return JWTCodec(secret=TEST_SECRET)


@pytest.fixture
def user_service(fake_db):
    return UserService(db=fake_db)


@pytest.fixture
def session_manager(user_service, password_hasher, token_codec):
    return SessionManager(
        user_service=user_service,
        password_hasher=password_hasher,
        token_codec=token_codec,
    )


@pytest.fixture
def auth_middleware(session_manager):
    return AuthMiddleware(session_manager=session_manager)


@pytest.fixture
def favorites_service(fake_db):
    return FavoritesService(db=fake_db)
