"""Review router - FastAPI endpoints for reviews"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ...auth import get_current_user, require_roles
from ...database import get_db
from ...models import User
from ...shared.pagination import page_meta
from .schemas import (
    HelpfulVote,
    RatingStatsResponse,
    ReviewCreate,
    ReviewListResponse,
    ReviewQuery,
    ReviewResponse,
    ReviewUpdate,
    VendorReply,
    review_response,
)
from .service import ReviewService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reviews", tags=["Reviews"])


def get_review_service(db: Session = Depends(get_db)) -> ReviewService:
    """Dependency injection for ReviewService"""
    return ReviewService(db)


@router.post("", response_model=ReviewResponse, status_code=201)
async def create_review(
    data: ReviewCreate,
    current_user: User = Depends(get_current_user),
    service: ReviewService = Depends(get_review_service),
):
    """Review a completed booking; updates the vendor's rating"""
    return review_response(service.create_review(data, current_user))


@router.get("", response_model=ReviewListResponse)
async def list_reviews(
    query: Annotated[ReviewQuery, Query()],
    service: ReviewService = Depends(get_review_service),
):
    reviews, total = service.list_reviews(query)
    return ReviewListResponse(
        reviews=[review_response(r) for r in reviews], **page_meta(total, query.page, query.limit)
    )


@router.get("/recent", response_model=list[ReviewResponse])
async def recent_reviews(
    limit: int = Query(10, ge=1, le=50),
    service: ReviewService = Depends(get_review_service),
):
    return [review_response(r) for r in service.get_recent(limit)]


@router.get("/top-rated", response_model=list[ReviewResponse])
async def top_rated_reviews(
    limit: int = Query(10, ge=1, le=50),
    service: ReviewService = Depends(get_review_service),
):
    return [review_response(r) for r in service.get_top_rated(limit)]


@router.get("/vendor/{vendor_id}", response_model=ReviewListResponse)
async def vendor_reviews(
    vendor_id: int,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    service: ReviewService = Depends(get_review_service),
):
    reviews, total = service.get_vendor_reviews(vendor_id, page, limit)
    return ReviewListResponse(reviews=[review_response(r) for r in reviews], **page_meta(total, page, limit))


@router.get("/vendor/{vendor_id}/stats", response_model=RatingStatsResponse)
async def vendor_rating_stats(vendor_id: int, service: ReviewService = Depends(get_review_service)):
    return service.get_vendor_stats(vendor_id)


@router.get("/{review_id}", response_model=ReviewResponse)
async def get_review(review_id: int, service: ReviewService = Depends(get_review_service)):
    return review_response(service.get_review(review_id))


@router.patch("/{review_id}", response_model=ReviewResponse)
async def update_review(
    review_id: int,
    data: ReviewUpdate,
    current_user: User = Depends(get_current_user),
    service: ReviewService = Depends(get_review_service),
):
    return review_response(service.update_review(review_id, data, current_user))


@router.delete("/{review_id}")
async def delete_review(
    review_id: int,
    current_user: User = Depends(get_current_user),
    service: ReviewService = Depends(get_review_service),
):
    return service.delete_review(review_id, current_user)


@router.patch("/{review_id}/vendor-response", response_model=ReviewResponse)
async def respond_to_review(
    review_id: int,
    data: VendorReply,
    current_user: User = Depends(require_roles("vendor")),
    service: ReviewService = Depends(get_review_service),
):
    return review_response(service.add_vendor_response(review_id, data, current_user))


@router.patch("/{review_id}/helpful")
async def mark_review_helpful(
    review_id: int,
    data: HelpfulVote,
    _: User = Depends(get_current_user),
    service: ReviewService = Depends(get_review_service),
):
    return service.mark_helpful(review_id, data)


__all__ = ["router"]
