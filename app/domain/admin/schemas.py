"""Admin domain schemas"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

from ..auth.schemas import UserResponse

Period = Literal["day", "week", "month", "year"]

ADMIN_USER_SORT_FIELDS = {
    "createdAt": "created_at",
    "name": "name",
    "email": "email",
    "lastLoginAt": "last_login_at",
}

ADMIN_VENDOR_SORT_FIELDS = {
    "createdAt": "created_at",
    "businessName": "business_name",
    "rating": "rating",
    "status": "status",
}

ADMIN_CONTENT_SORT_FIELDS = {
    "createdAt": "created_at",
    "title": "title",
    "viewCount": "view_count",
    "likeCount": "like_count",
}


class AdminStatsQuery(BaseModel):
    startDate: Optional[datetime] = None
    endDate: Optional[datetime] = None
    period: Optional[Period] = None


class AdminUserQuery(BaseModel):
    search: Optional[str] = None
    role: Optional[Literal["customer", "vendor", "admin"]] = None
    isActive: Optional[bool] = None
    sortBy: str = "createdAt"
    sortOrder: Literal["asc", "desc"] = "desc"
    page: int = Field(1, ge=1)
    limit: int = Field(10, ge=1, le=100)


class AdminVendorQuery(BaseModel):
    search: Optional[str] = None
    status: Optional[Literal["pending", "approved", "rejected", "suspended"]] = None
    isVerified: Optional[bool] = None
    isFeatured: Optional[bool] = None
    district: Optional[str] = None
    sortBy: str = "createdAt"
    sortOrder: Literal["asc", "desc"] = "desc"
    page: int = Field(1, ge=1)
    limit: int = Field(10, ge=1, le=100)


class AdminContentQuery(BaseModel):
    search: Optional[str] = None
    type: Optional[str] = None
    category: Optional[str] = None
    isPublished: Optional[bool] = None
    isFeatured: Optional[bool] = None
    sortBy: str = "createdAt"
    sortOrder: Literal["asc", "desc"] = "desc"
    page: int = Field(1, ge=1)
    limit: int = Field(10, ge=1, le=100)


class UserStatusUpdate(BaseModel):
    isActive: bool
    reason: Optional[str] = None


class VendorStatusUpdate(BaseModel):
    status: Literal["pending", "approved", "rejected", "suspended"]
    rejectionReason: Optional[str] = Field(None, max_length=1000)
    isVerified: Optional[bool] = None
    isFeatured: Optional[bool] = None


class ContentStatusUpdate(BaseModel):
    isPublished: bool
    isFeatured: Optional[bool] = None
    reason: Optional[str] = None


class FeaturedListing(BaseModel):
    itemId: int
    itemType: Literal["vendor", "idea"]
    isFeatured: bool
    reason: Optional[str] = None


class AdminUserListResponse(BaseModel):
    users: list[UserResponse]
    total: int
    page: int
    limit: int
    totalPages: int
