"""
Base document class with common fields for all models.

Provides created_at and updated_at timestamps. Extend this class for your
application-specific models.

Example:
    from common.database import BaseDocument

    class User(BaseDocument):
        email: str
        name: str

        class Settings:
            name = "users"  # MongoDB collection name
"""

from datetime import datetime, timezone
from beanie import Document
from pydantic import Field


def utcnow() -> datetime:
    """Get current UTC time (timezone-aware)."""
    return datetime.now(timezone.utc)


class BaseDocument(Document):
    """
    Base document with common fields.

    All documents extending this class will have:
    - created_at: Timestamp when document was created
    - updated_at: Timestamp when document was last modified
    """

    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
