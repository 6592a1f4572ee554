"""Portfolio domain schemas"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

PORTFOLIO_SORT_FIELDS = {
    "createdAt": "created_at",
    "eventDate": "event_date",
    "viewCount": "view_count",
    "likeCount": "like_count",
}


class PortfolioItem(BaseModel):
    type: Literal["image", "video"] = "image"
    url: str = Field(..., min_length=1)
    caption: Optional[str] = None
    thumbnail: Optional[str] = None
    order: Optional[int] = None
    isPrimary: bool = False


class PortfolioFields(BaseModel):
    description: Optional[str] = None
    category: Optional[str] = None
    tags: Optional[list[str]] = None
    coverImage: Optional[str] = None
    eventDate: Optional[datetime] = None
    venue: Optional[str] = None
    clientName: Optional[str] = None
    isFeatured: Optional[bool] = None


class PortfolioCreate(PortfolioFields):
    title: str = Field(..., min_length=1, max_length=255)
    items: list[PortfolioItem] = Field(..., min_length=1)


class PortfolioUpdate(PortfolioFields):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    items: Optional[list[PortfolioItem]] = None


class PortfolioQuery(BaseModel):
    search: Optional[str] = None
    category: Optional[str] = None
    tags: Optional[list[str]] = None
    isFeatured: Optional[bool] = None
    sortBy: str = "createdAt"
    sortOrder: Literal["asc", "desc"] = "desc"
    page: int = Field(1, ge=1)
    limit: int = Field(10, ge=1, le=100)


class PortfolioResponse(BaseModel):
    id: int
    vendorId: int
    vendorName: Optional[str] = None
    title: str
    description: Optional[str] = None
    category: Optional[str] = None
    tags: list[str] = []
    items: list[PortfolioItem] = []
    coverImage: Optional[str] = None
    eventDate: Optional[datetime] = None
    venue: Optional[str] = None
    clientName: Optional[str] = None
    viewCount: int
    likeCount: int
    isFeatured: bool
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None


class PortfolioListResponse(BaseModel):
    portfolios: list[PortfolioResponse]
    total: int
    page: int
    limit: int
    totalPages: int


PORTFOLIO_FIELD_MAP = {
    "title": "title",
    "description": "description",
    "category": "category",
    "tags": "tags",
    "items": "items",
    "coverImage": "cover_image",
    "eventDate": "event_date",
    "venue": "venue",
    "clientName": "client_name",
    "isFeatured": "is_featured",
}


def portfolio_response(p) -> PortfolioResponse:
    return PortfolioResponse(
        id=p.id,
        vendorId=p.vendor_id,
        vendorName=p.vendor.business_name if p.vendor else None,
        title=p.title,
        description=p.description,
        category=p.category,
        tags=p.tags or [],
        items=p.items or [],
        coverImage=p.cover_image,
        eventDate=p.event_date,
        venue=p.venue,
        clientName=p.client_name,
        viewCount=p.view_count or 0,
        likeCount=p.like_count or 0,
        isFeatured=p.is_featured,
        createdAt=p.created_at,
        updatedAt=p.updated_at,
    )
