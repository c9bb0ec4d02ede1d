"""
FastAPI router for User endpoints.

Provides the current user's profile, favorites and avatar.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, File, UploadFile

from common.utils import success_response
from noticeboard.auth.middleware import AuthContext
from noticeboard.dependencies import (
    get_favorites_service,
    get_profile_service,
    require_auth,
)
from noticeboard.user.schemas import ProfileUpdateRequest
from noticeboard.user.services.favorites_service import FavoritesService
from noticeboard.user.services.profile_service import ProfileService, profile_to_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["user"])


# =============================================================================
# Profile
# =============================================================================
@router.get("/current")
async def get_current_user(
    auth: Annotated[AuthContext, Depends(require_auth)],
):
    """
    Get current user's profile.
    """
    return success_response(profile_to_response(auth.user))


@router.patch("/current")
async def update_current_user(
    body: ProfileUpdateRequest,
    auth: Annotated[AuthContext, Depends(require_auth)],
    profile_service: Annotated[ProfileService, Depends(get_profile_service)],
):
    """
    Update current user's profile.

    Only provided fields will be updated (partial update).
    """
    await profile_service.update_profile(auth.user_id, body.model_dump(exclude_unset=True))
    return success_response(message="Profile updated successfully")


# =============================================================================
# Favorites
# =============================================================================
@router.get("/favorite")
async def get_favorites(
    auth: Annotated[AuthContext, Depends(require_auth)],
    favorites_service: Annotated[FavoritesService, Depends(get_favorites_service)],
):
    """
    List the notice ids the current user has favorited.
    """
    favorites = await favorites_service.list_favorites(auth.user_id)
    return success_response(favorites)


@router.patch("/favorite/{notice_id}")
async def add_favorite(
    notice_id: str,
    auth: Annotated[AuthContext, Depends(require_auth)],
    favorites_service: Annotated[FavoritesService, Depends(get_favorites_service)],
):
    """
    Add a notice to the current user's favorites.
    """
    await favorites_service.add_favorite(auth.user_id, notice_id)
    return success_response(message="Favorite added")


@router.delete("/favorite/{notice_id}")
async def delete_favorite(
    notice_id: str,
    auth: Annotated[AuthContext, Depends(require_auth)],
    favorites_service: Annotated[FavoritesService, Depends(get_favorites_service)],
):
    """
    Remove a notice from the current user's favorites.
    """
    await favorites_service.remove_favorite(auth.user_id, notice_id)
    return success_response(message="Favorite removed")


# =============================================================================
# Avatar
# =============================================================================
@router.patch("/avatar")
async def update_avatar(
    auth: Annotated[AuthContext, Depends(require_auth)],
    profile_service: Annotated[ProfileService, Depends(get_profile_service)],
    avatar: UploadFile = File(...),
):
    """
    Upload a new profile avatar.
    """
    contents = await avatar.read()
    avatar_url = await profile_service.update_avatar(
        auth.user_id,
        contents=contents,
        filename=avatar.filename or "",
        content_type=avatar.content_type or "",
    )
    return success_response({"avatarURL": avatar_url}, message="Avatar updated successfully")


@router.delete("/avatar")
async def delete_avatar(
    auth: Annotated[AuthContext, Depends(require_auth)],
    profile_service: Annotated[ProfileService, Depends(get_profile_service)],
):
    """
    Remove the current user's avatar.
    """
    await profile_service.delete_avatar(auth.user)
    return success_response(message="Avatar removed successfully")
