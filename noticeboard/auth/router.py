"""
FastAPI router for Auth endpoints.

Provides registration, login, session refresh and logout.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from common.utils import success_response
from noticeboard.auth.middleware import AuthContext
from noticeboard.auth.schemas import LoginRequest, RegisterRequest
from noticeboard.auth.services.session_manager import SessionManager
from noticeboard.dependencies import get_session_manager, require_auth

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["auth"])


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(
    body: RegisterRequest,
    session_manager: Annotated[SessionManager, Depends(get_session_manager)],
):
    """
    Register a new user account.

    The account starts logged out; call /login to get a token.
    """
    result = await session_manager.register(
        email=body.email,
        password=body.password,
        profile=body.model_dump(include={"name", "address", "phone", "birthday"}),
    )
    return success_response(result, message="Registration successful")


@router.post("/login")
async def login(
    body: LoginRequest,
    session_manager: Annotated[SessionManager, Depends(get_session_manager)],
):
    """
    Login with email and password.

    Returns a bearer token; any token issued earlier for the user stops working.
    """
    result = await session_manager.login(email=body.email, password=body.password)
    return success_response(result)


@router.get("/refresh")
async def refresh(
    auth: Annotated[AuthContext, Depends(require_auth)],
    session_manager: Annotated[SessionManager, Depends(get_session_manager)],
):
    """
    Confirm the current session and return the user id.
    """
    result = await session_manager.refresh(auth.user_id)
    return success_response(result)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    auth: Annotated[AuthContext, Depends(require_auth)],
    session_manager: Annotated[SessionManager, Depends(get_session_manager)],
):
    """
    Logout from the current session.
    """
    await session_manager.logout(auth.user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
