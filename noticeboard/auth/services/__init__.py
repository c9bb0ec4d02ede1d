"""
Auth System Services

Contains service classes for authentication operations.
"""

from noticeboard.auth.services.session_manager import SessionManager

__all__ = ["SessionManager"]
