"""User domain schemas - profile, preferences and favourites"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from ..vendors.schemas import VendorResponse, vendor_response

# Profile fields counted towards profile completion
PROFILE_COMPLETION_FIELDS = (
    "name",
    "phone",
    "profile_image",
    "wedding_date",
    "wedding_location",
    "guest_count",
    "budget",
    "wedding_style",
)


class WeddingDetailsUpdate(BaseModel):
    weddingDate: Optional[datetime] = None
    weddingLocation: Optional[str] = None
    guestCount: Optional[int] = Field(None, ge=0)
    budget: Optional[float] = Field(None, ge=0)
    weddingStyle: Optional[str] = None


WEDDING_FIELD_MAP = {
    "weddingDate": "wedding_date",
    "weddingLocation": "wedding_location",
    "guestCount": "guest_count",
    "budget": "budget",
    "weddingStyle": "wedding_style",
}


class BudgetRange(BaseModel):
    min: float = Field(..., ge=0)
    max: float = Field(..., ge=0)

    @model_validator(mode="after")
    def check_bounds(self):
        if self.max < self.min:
            raise ValueError("Budget range max must not be below min")
        return self


class UserPreferences(BaseModel):
    preferredCategories: Optional[list[str]] = None
    preferredDistricts: Optional[list[str]] = None
    budgetRange: Optional[BudgetRange] = None
    weddingStyle: Optional[str] = None
    interests: Optional[list[str]] = None


class UserStats(BaseModel):
    favoritesCount: int
    profileCompletion: int
    memberSince: Optional[datetime] = None
    lastLogin: Optional[datetime] = None


class FavoriteCreate(BaseModel):
    vendorId: int
    notes: Optional[str] = None
    category: Optional[str] = None


class FavoriteUpdate(BaseModel):
    notes: Optional[str] = None
    category: Optional[str] = None


FAVORITE_FIELD_MAP = {"notes": "notes", "category": "category"}


class FavoriteResponse(BaseModel):
    id: int
    vendorId: int
    notes: Optional[str] = None
    category: Optional[str] = None
    vendor: Optional[VendorResponse] = None
    createdAt: Optional[datetime] = None


def favorite_response(f) -> FavoriteResponse:
    return FavoriteResponse(
        id=f.id,
        vendorId=f.vendor_id,
        notes=f.notes,
        category=f.category,
        vendor=vendor_response(f.vendor) if f.vendor else None,
        createdAt=f.created_at,
    )
