"""
Beanie document models.
"""

from noticeboard.models.user import User

__all__ = ["User"]
