"""Booking router - FastAPI endpoints for bookings"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ...auth import get_current_user
from ...database import get_db
from ...models import User
from ...shared.pagination import page_meta
from ..reviews.schemas import BookingReviewCreate, ReviewResponse, review_response
from .schemas import (
    BookingCreate,
    BookingListResponse,
    BookingQuery,
    BookingResponse,
    BookingStats,
    BookingUpdate,
    booking_response,
)
from .service import BookingService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/bookings", tags=["Bookings"])


def get_booking_service(db: Session = Depends(get_db)) -> BookingService:
    """Dependency injection for BookingService"""
    return BookingService(db)


@router.post("", response_model=BookingResponse, status_code=201)
async def create_booking(
    data: BookingCreate,
    current_user: User = Depends(get_current_user),
    service: BookingService = Depends(get_booking_service),
):
    return booking_response(service.create_booking(data, current_user))


@router.get("", response_model=BookingListResponse)
async def list_bookings(
    query: Annotated[BookingQuery, Query()],
    current_user: User = Depends(get_current_user),
    service: BookingService = Depends(get_booking_service),
):
    """Bookings visible to the caller's role"""
    bookings, total = service.list_bookings(query, current_user)
    return BookingListResponse(
        bookings=[booking_response(b) for b in bookings], **page_meta(total, query.page, query.limit)
    )


@router.get("/stats", response_model=BookingStats)
async def booking_stats(
    current_user: User = Depends(get_current_user),
    service: BookingService = Depends(get_booking_service),
):
    return service.get_stats(current_user)


@router.get("/upcoming", response_model=list[BookingResponse])
async def upcoming_bookings(
    limit: int = Query(5, ge=1, le=50),
    current_user: User = Depends(get_current_user),
    service: BookingService = Depends(get_booking_service),
):
    return [booking_response(b) for b in service.get_upcoming(current_user, limit)]


@router.get("/{booking_id}", response_model=BookingResponse)
async def get_booking(
    booking_id: int,
    current_user: User = Depends(get_current_user),
    service: BookingService = Depends(get_booking_service),
):
    return booking_response(service.get_booking(booking_id, current_user))


@router.patch("/{booking_id}", response_model=BookingResponse)
async def update_booking(
    booking_id: int,
    data: BookingUpdate,
    current_user: User = Depends(get_current_user),
    service: BookingService = Depends(get_booking_service),
):
    """Update status or record a payment (payment status is derived from the paid amount)"""
    return booking_response(service.update_booking(booking_id, data, current_user))


@router.delete("/{booking_id}")
async def delete_booking(
    booking_id: int,
    current_user: User = Depends(get_current_user),
    service: BookingService = Depends(get_booking_service),
):
    return service.delete_booking(booking_id, current_user)


@router.post("/{booking_id}/review", response_model=ReviewResponse, status_code=201)
async def review_booking(
    booking_id: int,
    data: BookingReviewCreate,
    current_user: User = Depends(get_current_user),
    service: BookingService = Depends(get_booking_service),
):
    return review_response(service.add_review(booking_id, data, current_user))


__all__ = ["router"]
