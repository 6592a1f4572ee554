"""Vendor domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from ...shared.validators import validate_email, validate_phone

VENDOR_CATEGORIES = (
    "photography",
    "videos",
    "catering",
    "decoration",
    "flowers",
    "cakes",
    "cards",
    "venues",
    "music",
    "transport",
    "bridal_salons",
    "groom_salons",
    "jewelry",
    "other",
)

VENDOR_SORT_FIELDS = {
    "createdAt": "created_at",
    "rating": "rating",
    "reviewCount": "review_count",
    "viewCount": "view_count",
    "businessName": "business_name",
    "priceMin": "price_min",
}


def _check_categories(values):
    if values is None:
        return values
    invalid = [v for v in values if v not in VENDOR_CATEGORIES]
    if invalid:
        raise ValueError(f"Invalid categories: {', '.join(invalid)}")
    return values


class VendorBase(BaseModel):
    businessDescription: Optional[str] = None
    district: Optional[str] = None
    city: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    whatsapp: Optional[str] = None
    socialLinks: Optional[dict] = None
    logo: Optional[str] = None
    coverImage: Optional[str] = None
    gallery: Optional[list[str]] = None
    priceMin: Optional[float] = Field(None, ge=0)
    priceMax: Optional[float] = Field(None, ge=0)
    currency: Optional[str] = None
    languages: Optional[list[str]] = None
    specializations: Optional[list[str]] = None
    awards: Optional[list[str]] = None
    experienceYears: Optional[int] = Field(None, ge=0)
    teamSize: Optional[int] = Field(None, ge=0)

    @field_validator("phone", "whatsapp")
    @classmethod
    def validate_phone_number(cls, v):
        return validate_phone(v)

    @field_validator("email")
    @classmethod
    def validate_contact_email(cls, v):
        return validate_email(v)


class VendorCreate(VendorBase):
    """Schema for creating a vendor profile"""

    businessName: str = Field(..., min_length=2, max_length=255)
    categories: list[str] = Field(..., min_length=1)

    @field_validator("categories")
    @classmethod
    def validate_categories(cls, v):
        return _check_categories(v)


class VendorUpdate(VendorBase):
    """Schema for updating a vendor profile (owner only)"""

    businessName: Optional[str] = Field(None, min_length=2, max_length=255)
    categories: Optional[list[str]] = None

    @field_validator("categories")
    @classmethod
    def validate_categories(cls, v):
        return _check_categories(v)


class VendorQuery(BaseModel):
    """Legal filters for the public vendor search"""

    search: Optional[str] = None
    categories: Optional[list[str]] = None
    district: Optional[str] = None
    city: Optional[str] = None
    minPrice: Optional[float] = None
    maxPrice: Optional[float] = None
    minRating: Optional[float] = Field(None, ge=0, le=5)
    isVerified: Optional[bool] = None
    isFeatured: Optional[bool] = None
    status: Optional[Literal["pending", "approved", "rejected", "suspended"]] = None
    sortBy: str = "createdAt"
    sortOrder: Literal["asc", "desc"] = "desc"
    page: int = Field(1, ge=1)
    limit: int = Field(10, ge=1, le=100)


class VendorApproval(BaseModel):
    status: Literal["pending", "approved", "rejected", "suspended"]
    rejectionReason: Optional[str] = Field(None, max_length=1000)


class VendorResponse(BaseModel):
    """Schema for vendor response"""

    id: int
    userId: int
    businessName: str
    businessDescription: Optional[str] = None
    categories: list[str] = []
    district: Optional[str] = None
    city: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    whatsapp: Optional[str] = None
    socialLinks: Optional[dict] = None
    logo: Optional[str] = None
    coverImage: Optional[str] = None
    gallery: list[str] = []
    status: str
    rejectionReason: Optional[str] = None
    approvedAt: Optional[datetime] = None
    isVerified: bool
    isFeatured: bool
    rating: float
    reviewCount: int
    viewCount: int
    inquiryCount: int
    bookingCount: int
    priceMin: Optional[float] = None
    priceMax: Optional[float] = None
    currency: str
    languages: list[str] = []
    specializations: list[str] = []
    awards: list[str] = []
    experienceYears: Optional[int] = None
    teamSize: Optional[int] = None
    createdAt: Optional[datetime] = None


class VendorListResponse(BaseModel):
    vendors: list[VendorResponse]
    total: int
    page: int
    limit: int
    totalPages: int


def vendor_response(v) -> VendorResponse:
    return VendorResponse(
        id=v.id,
        userId=v.user_id,
        businessName=v.business_name,
        businessDescription=v.business_description,
        categories=v.categories or [],
        district=v.district,
        city=v.city,
        address=v.address,
        phone=v.phone,
        email=v.email,
        website=v.website,
        whatsapp=v.whatsapp,
        socialLinks=v.social_links,
        logo=v.logo,
        coverImage=v.cover_image,
        gallery=v.gallery or [],
        status=v.status,
        rejectionReason=v.rejection_reason,
        approvedAt=v.approved_at,
        isVerified=v.is_verified,
        isFeatured=v.is_featured,
        rating=v.rating or 0.0,
        reviewCount=v.review_count or 0,
        viewCount=v.view_count or 0,
        inquiryCount=v.inquiry_count or 0,
        bookingCount=v.booking_count or 0,
        priceMin=v.price_min,
        priceMax=v.price_max,
        currency=v.currency,
        languages=v.languages or [],
        specializations=v.specializations or [],
        awards=v.awards or [],
        experienceYears=v.experience_years,
        teamSize=v.team_size,
        createdAt=v.created_at,
    )


# Request field -> model column for create/update payloads
VENDOR_FIELD_MAP = {
    "businessName": "business_name",
    "businessDescription": "business_description",
    "categories": "categories",
    "district": "district",
    "city": "city",
    "address": "address",
    "phone": "phone",
    "email": "email",
    "website": "website",
    "whatsapp": "whatsapp",
    "socialLinks": "social_links",
    "logo": "logo",
    "coverImage": "cover_image",
    "gallery": "gallery",
    "priceMin": "price_min",
    "priceMax": "price_max",
    "currency": "currency",
    "languages": "languages",
    "specializations": "specializations",
    "awards": "awards",
    "experienceYears": "experience_years",
    "teamSize": "team_size",
}
