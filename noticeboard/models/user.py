"""
User document.

Declares the shape of the ``users`` collection and its unique email index.
Services read and write the collection through Motor directly; Beanie
builds the index when the database connects.
"""

from typing import Optional, List
from pydantic import Field, EmailStr
from beanie import Indexed

from common.database import BaseDocument


class User(BaseDocument):
    """A registered user with at most one active session token."""

    email: Indexed(EmailStr, unique=True)  # type: ignore
    password_hash: str

    # Current session token; None means logged out
    token: Optional[str] = None

    name: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    birthday: Optional[str] = None
    avatar_url: Optional[str] = None

    favorite_notices: List[str] = Field(default_factory=list)

    class Settings:
        name = "users"
