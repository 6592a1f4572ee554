"""Review domain schemas"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from ...shared.validators import validate_rating

REVIEW_SORT_FIELDS = {
    "createdAt": "created_at",
    "rating": "rating",
    "helpfulCount": "helpful_count",
}


class ReviewFields(BaseModel):
    title: Optional[str] = Field(None, max_length=255)
    comment: Optional[str] = Field(None, max_length=5000)
    images: Optional[list[str]] = None
    serviceCategory: Optional[str] = None
    weddingDate: Optional[datetime] = None
    venue: Optional[str] = None
    pros: Optional[list[str]] = None
    cons: Optional[list[str]] = None
    wouldRecommend: Optional[bool] = None
    communicationRating: Optional[int] = None
    qualityRating: Optional[int] = None
    valueRating: Optional[int] = None
    timelinessRating: Optional[int] = None

    @field_validator("communicationRating", "qualityRating", "valueRating", "timelinessRating")
    @classmethod
    def validate_sub_rating(cls, v):
        return validate_rating(v)


class ReviewCreate(ReviewFields):
    vendorId: int
    bookingId: int
    rating: int

    @field_validator("rating")
    @classmethod
    def validate_overall_rating(cls, v):
        return validate_rating(v)


class BookingReviewCreate(ReviewFields):
    """Review submitted through a booking; vendor and booking come from the path"""

    rating: int

    @field_validator("rating")
    @classmethod
    def validate_overall_rating(cls, v):
        return validate_rating(v)


class ReviewUpdate(ReviewFields):
    rating: Optional[int] = None

    @field_validator("rating")
    @classmethod
    def validate_overall_rating(cls, v):
        return validate_rating(v)


class ReviewQuery(BaseModel):
    search: Optional[str] = None
    vendorId: Optional[int] = None
    serviceCategory: Optional[str] = None
    minRating: Optional[int] = Field(None, ge=1, le=5)
    maxRating: Optional[int] = Field(None, ge=1, le=5)
    isVerified: Optional[bool] = None
    hasImages: Optional[bool] = None
    wouldRecommend: Optional[bool] = None
    sortBy: str = "createdAt"
    sortOrder: Literal["asc", "desc"] = "desc"
    page: int = Field(1, ge=1)
    limit: int = Field(10, ge=1, le=100)


class VendorReply(BaseModel):
    response: str = Field(..., min_length=1, max_length=2000)


class HelpfulVote(BaseModel):
    isHelpful: bool


class ReviewModeration(BaseModel):
    isPublished: bool


class ReviewResponse(BaseModel):
    id: int
    customerId: int
    customerName: Optional[str] = None
    vendorId: int
    vendorName: Optional[str] = None
    bookingId: int
    rating: int
    title: Optional[str] = None
    comment: Optional[str] = None
    images: list[str] = []
    serviceCategory: Optional[str] = None
    weddingDate: Optional[datetime] = None
    venue: Optional[str] = None
    pros: list[str] = []
    cons: list[str] = []
    wouldRecommend: bool
    communicationRating: Optional[int] = None
    qualityRating: Optional[int] = None
    valueRating: Optional[int] = None
    timelinessRating: Optional[int] = None
    helpfulCount: int
    notHelpfulCount: int
    vendorResponse: Optional[str] = None
    vendorResponseDate: Optional[datetime] = None
    isVerified: bool
    isPublished: bool
    publishedAt: Optional[datetime] = None
    createdAt: Optional[datetime] = None


class ReviewListResponse(BaseModel):
    reviews: list[ReviewResponse]
    total: int
    page: int
    limit: int
    totalPages: int


class RatingStatsResponse(BaseModel):
    totalReviews: int
    averageRating: float
    ratingDistribution: dict[int, int]
    verifiedReviews: int
    reviewsWithImages: int
    wouldRecommendCount: int


REVIEW_FIELD_MAP = {
    "rating": "rating",
    "title": "title",
    "comment": "comment",
    "images": "images",
    "serviceCategory": "service_category",
    "weddingDate": "wedding_date",
    "venue": "venue",
    "pros": "pros",
    "cons": "cons",
    "wouldRecommend": "would_recommend",
    "communicationRating": "communication_rating",
    "qualityRating": "quality_rating",
    "valueRating": "value_rating",
    "timelinessRating": "timeliness_rating",
}


def review_response(r) -> ReviewResponse:
    return ReviewResponse(
        id=r.id,
        customerId=r.customer_id,
        customerName=r.customer.name if r.customer else None,
        vendorId=r.vendor_id,
        vendorName=r.vendor.business_name if r.vendor else None,
        bookingId=r.booking_id,
        rating=r.rating,
        title=r.title,
        comment=r.comment,
        images=r.images or [],
        serviceCategory=r.service_category,
        weddingDate=r.wedding_date,
        venue=r.venue,
        pros=r.pros or [],
        cons=r.cons or [],
        wouldRecommend=r.would_recommend,
        communicationRating=r.communication_rating,
        qualityRating=r.quality_rating,
        valueRating=r.value_rating,
        timelinessRating=r.timeliness_rating,
        helpfulCount=r.helpful_count or 0,
        notHelpfulCount=r.not_helpful_count or 0,
        vendorResponse=r.vendor_response,
        vendorResponseDate=r.vendor_response_date,
        isVerified=r.is_verified,
        isPublished=r.is_published,
        publishedAt=r.published_at,
        createdAt=r.created_at,
    )
