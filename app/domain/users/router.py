"""User router - FastAPI endpoints for the signed-in user's account"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...auth import get_current_user
from ...database import get_db
from ...models import User
from ..auth.schemas import ProfileUpdate, UserResponse, user_response
from .schemas import (
    FavoriteCreate,
    FavoriteResponse,
    FavoriteUpdate,
    UserPreferences,
    UserStats,
    WeddingDetailsUpdate,
    favorite_response,
)
from .service import UserService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["Users"])


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    """Dependency injection for UserService"""
    return UserService(db)


# ============================================================================
# PROFILE
# ============================================================================


@router.get("/profile", response_model=UserResponse)
async def get_profile(current_user: User = Depends(get_current_user)):
    return user_response(current_user)


@router.patch("/profile", response_model=UserResponse)
async def update_profile(
    data: ProfileUpdate,
    current_user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    return user_response(service.update_profile(current_user, data))


@router.patch("/wedding-details", response_model=UserResponse)
async def update_wedding_details(
    data: WeddingDetailsUpdate,
    current_user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    return user_response(service.update_wedding_details(current_user, data))


@router.get("/stats", response_model=UserStats)
async def user_stats(
    current_user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    return service.get_stats(current_user)


@router.get("/preferences")
async def get_preferences(
    current_user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    return service.get_preferences(current_user)


@router.patch("/preferences")
async def update_preferences(
    data: UserPreferences,
    current_user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    return service.update_preferences(current_user, data)


# ============================================================================
# FAVOURITES
# ============================================================================


@router.post("/favorites", response_model=FavoriteResponse, status_code=201)
async def add_favorite(
    data: FavoriteCreate,
    current_user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    return favorite_response(service.add_favorite(current_user, data))


@router.get("/favorites", response_model=list[FavoriteResponse])
async def list_favorites(
    current_user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    return [favorite_response(f) for f in service.list_favorites(current_user)]


@router.get("/favorites/category/{category}", response_model=list[FavoriteResponse])
async def favorites_by_category(
    category: str,
    current_user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    return [favorite_response(f) for f in service.list_by_category(current_user, category)]


@router.get("/favorites/check/{vendor_id}")
async def check_favorite(
    vendor_id: int,
    current_user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    return {"isFavorited": service.is_favorited(current_user, vendor_id)}


@router.patch("/favorites/{favorite_id}", response_model=FavoriteResponse)
async def update_favorite(
    favorite_id: int,
    data: FavoriteUpdate,
    current_user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    return favorite_response(service.update_favorite(current_user, favorite_id, data))


@router.delete("/favorites/vendor/{vendor_id}")
async def remove_favorite_by_vendor(
    vendor_id: int,
    current_user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    return service.remove_favorite_by_vendor(current_user, vendor_id)


@router.delete("/favorites/{favorite_id}")
async def remove_favorite(
    favorite_id: int,
    current_user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    return service.remove_favorite(current_user, favorite_id)


__all__ = ["router"]
