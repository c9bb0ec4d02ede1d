"""
Database module - Generic async MongoDB connection using Beanie ODM.

Usage:
    from common.database import MongoDB

    db = MongoDB()
    await db.connect(uri, database_name, models)
    users = db.db["users"]
"""

from common.database.mongodb import MongoDB
from common.database.base_document import BaseDocument

__all__ = [
    "MongoDB",
    "BaseDocument",
]
