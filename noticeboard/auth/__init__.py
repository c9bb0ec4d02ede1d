"""
Auth System

Single-session authentication: one stored bearer token per user, checked on
every protected request.
"""

from noticeboard.auth.middleware import AuthContext, AuthMiddleware
from noticeboard.auth.services.session_manager import SessionManager

__all__ = [
    "AuthContext",
    "AuthMiddleware",
    "SessionManager",
]
