"""User service - Profile, wedding details, preferences and favourites"""

import logging

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ...models import Favorite, User
from ...shared.mapping import apply_columns, to_columns
from ...shared.time import to_naive_utc
from ..auth.schemas import PROFILE_FIELD_MAP, ProfileUpdate
from ..planning.progress import completion_percentage
from .repository import UserRepository
from .schemas import (
    FAVORITE_FIELD_MAP,
    PROFILE_COMPLETION_FIELDS,
    WEDDING_FIELD_MAP,
    FavoriteCreate,
    FavoriteUpdate,
    UserPreferences,
    WeddingDetailsUpdate,
)

logger = logging.getLogger(__name__)


def profile_completion(user: User) -> int:
    """Share of the profile fields the user has filled in"""
    values = [getattr(user, field) for field in PROFILE_COMPLETION_FIELDS]
    return completion_percentage(values, bool)


class UserService:
    """Service layer for user business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = UserRepository()

    # ========================================================================
    # PROFILE
    # ========================================================================

    def update_profile(self, user: User, data: ProfileUpdate) -> User:
        apply_columns(user, to_columns(data, PROFILE_FIELD_MAP, model=User))
        return self.repo.save(self.db, user)

    def update_wedding_details(self, user: User, data: WeddingDetailsUpdate) -> User:
        columns = to_columns(data, WEDDING_FIELD_MAP, model=User)
        if "wedding_date" in columns:
            columns["wedding_date"] = to_naive_utc(columns["wedding_date"])
        apply_columns(user, columns)
        return self.repo.save(self.db, user)

    def get_stats(self, user: User) -> dict:
        return {
            "favoritesCount": self.repo.count_favorites(self.db, user.id),
            "profileCompletion": profile_completion(user),
            "memberSince": user.created_at,
            "lastLogin": user.last_login_at,
        }

    def get_preferences(self, user: User) -> dict:
        return user.preferences or {}

    def update_preferences(self, user: User, data: UserPreferences) -> dict:
        """Merge the sent preference keys into the stored ones"""
        user.preferences = {**(user.preferences or {}), **data.model_dump(exclude_unset=True)}
        user = self.repo.save(self.db, user)
        return user.preferences

    # ========================================================================
    # FAVOURITES
    # ========================================================================

    def add_favorite(self, user: User, data: FavoriteCreate) -> Favorite:
        vendor = self.repo.get_vendor(self.db, data.vendorId)
        if not vendor or not vendor.is_active:
            raise HTTPException(status_code=404, detail="Vendor not found")

        favorite = self.repo.find_favorite(self.db, user.id, vendor.id)
        if favorite and favorite.is_active:
            raise HTTPException(status_code=400, detail="Vendor already in favorites")

        if favorite:
            favorite.is_active = True
            favorite.notes = data.notes
            favorite.category = data.category
        else:
            favorite = Favorite(user_id=user.id, vendor_id=vendor.id, notes=data.notes, category=data.category)

        favorite = self.repo.save_favorite(self.db, favorite)
        logger.info(f"⭐ User {user.id} saved vendor {vendor.id} to favorites")
        return favorite

    def list_favorites(self, user: User) -> list[Favorite]:
        return self.repo.list_favorites(self.db, user.id)

    def list_by_category(self, user: User, category: str) -> list[Favorite]:
        return self.repo.list_favorites(self.db, user.id, category)

    def update_favorite(self, user: User, favorite_id: int, data: FavoriteUpdate) -> Favorite:
        favorite = self.repo.get_favorite(self.db, user.id, favorite_id)
        if not favorite:
            raise HTTPException(status_code=404, detail="Favorite not found")
        apply_columns(favorite, to_columns(data, FAVORITE_FIELD_MAP, model=Favorite))
        return self.repo.save_favorite(self.db, favorite)

    def remove_favorite(self, user: User, favorite_id: int) -> dict:
        favorite = self.repo.get_favorite(self.db, user.id, favorite_id)
        if not favorite:
            raise HTTPException(status_code=404, detail="Favorite not found")
        favorite.is_active = False
        self.repo.save_favorite(self.db, favorite)
        return {"message": "Favorite removed successfully"}

    def remove_favorite_by_vendor(self, user: User, vendor_id: int) -> dict:
        favorite = self.repo.get_favorite_by_vendor(self.db, user.id, vendor_id)
        if not favorite:
            raise HTTPException(status_code=404, detail="Favorite not found")
        favorite.is_active = False
        self.repo.save_favorite(self.db, favorite)
        return {"message": "Favorite removed successfully"}

    def is_favorited(self, user: User, vendor_id: int) -> bool:
        return self.repo.get_favorite_by_vendor(self.db, user.id, vendor_id) is not None
