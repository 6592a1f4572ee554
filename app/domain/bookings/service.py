"""Booking service - Business logic for bookings"""

import logging

from fastapi import HTTPException
from sqlalchemy.orm import Query, Session

from ...models import Booking, Review, User
from ...shared.mapping import apply_columns, to_columns
from ...shared.time import to_naive_utc, utcnow
from ..reviews.schemas import BookingReviewCreate, ReviewCreate
from ..reviews.service import ReviewService
from .payments import derive_payment
from .repository import BookingRepository
from .schemas import BOOKING_CREATE_FIELDS, BOOKING_UPDATE_FIELDS, BookingCreate, BookingQuery, BookingUpdate

logger = logging.getLogger(__name__)


class BookingService:
    """Service layer for booking business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = BookingRepository()

    def create_booking(self, data: BookingCreate, user: User) -> Booking:
        logger.info(f"📥 Creating booking for vendor {data.vendorId} by user {user.id}")

        vendor = self.repo.get_vendor(self.db, data.vendorId)
        if not vendor or not vendor.is_active:
            raise HTTPException(status_code=404, detail="Vendor not found")

        columns = to_columns(data, BOOKING_CREATE_FIELDS, model=Booking)
        columns["booking_date"] = to_naive_utc(columns["booking_date"])
        columns["end_date"] = to_naive_utc(columns.get("end_date"))
        if not columns.get("currency"):
            columns.pop("currency", None)

        booking = self.repo.create(
            self.db,
            vendor,
            user.id,
            status="pending",
            payment_status="pending",
            paid_amount=0.0,
            remaining_amount=data.totalAmount,
            **columns,
        )
        logger.info(f"✅ Booking {booking.id} created")
        return booking

    def _scope(self, user: User) -> Query:
        """Customers see their own bookings, vendors their business's, admins everything"""
        if user.role == "customer":
            return self.repo.scoped(self.db, customer_id=user.id)
        if user.role == "vendor":
            vendor = self.repo.get_vendor_for_user(self.db, user.id)
            if not vendor:
                raise HTTPException(status_code=404, detail="Vendor profile not found")
            return self.repo.scoped(self.db, vendor_id=vendor.id)
        return self.repo.scoped(self.db)

    def list_bookings(self, query: BookingQuery, user: User) -> tuple[list[Booking], int]:
        return self.repo.search(self.db, self._scope(user), query)

    def _get_accessible(self, booking_id: int, user: User, action: str) -> Booking:
        booking = self.repo.get_active(self.db, booking_id)
        if not booking:
            raise HTTPException(status_code=404, detail="Booking not found")

        if user.role == "customer" and booking.customer_id != user.id:
            raise HTTPException(status_code=403, detail=f"You can only {action} your own bookings")
        if user.role == "vendor":
            vendor = self.repo.get_vendor_for_user(self.db, user.id)
            if not vendor or booking.vendor_id != vendor.id:
                raise HTTPException(status_code=403, detail=f"You can only {action} bookings for your business")
        return booking

    def get_booking(self, booking_id: int, user: User) -> Booking:
        return self._get_accessible(booking_id, user, "view")

    def update_booking(self, booking_id: int, data: BookingUpdate, user: User) -> Booking:
        booking = self._get_accessible(booking_id, user, "update")
        columns = to_columns(data, BOOKING_UPDATE_FIELDS, model=Booking)

        if data.paidAmount is not None:
            remaining, payment_status = derive_payment(booking.total_amount, data.paidAmount)
            columns["remaining_amount"] = remaining
            columns["payment_status"] = payment_status

        if data.status == "cancelled":
            booking.cancelled_at = utcnow()
            booking.cancelled_by = user.id
        elif data.status == "completed":
            booking.completed_at = utcnow()

        apply_columns(booking, columns)
        booking = self.repo.save(self.db, booking)
        logger.info(f"✅ Booking {booking_id} updated: status={booking.status}, payment={booking.payment_status}")
        return booking

    def delete_booking(self, booking_id: int, user: User) -> dict:
        booking = self._get_accessible(booking_id, user, "delete")
        booking.is_active = False
        self.repo.save(self.db, booking)
        return {"message": "Booking deleted successfully"}

    def add_review(self, booking_id: int, data: BookingReviewCreate, user: User) -> Review:
        """Review a booking; the review, vendor rating and booking snapshot commit together"""
        booking = self.repo.get_active(self.db, booking_id)
        if not booking:
            raise HTTPException(status_code=404, detail="Booking not found")

        review_data = ReviewCreate(vendorId=booking.vendor_id, bookingId=booking.id, **data.model_dump(exclude_unset=True))
        review = ReviewService(self.db).stage_review(review_data, user)

        booking.rating = data.rating
        booking.review = review.comment
        booking.review_date = utcnow()

        self.db.commit()
        self.db.refresh(review)
        return review

    def get_stats(self, user: User) -> dict:
        try:
            scope = self._scope(user)
        except HTTPException:
            return {"total": 0, "pending": 0, "confirmed": 0, "inProgress": 0, "completed": 0, "cancelled": 0}

        counts = self.repo.count_by_status(scope)
        return {
            "total": sum(counts.values()),
            "pending": counts.get("pending", 0),
            "confirmed": counts.get("confirmed", 0),
            "inProgress": counts.get("in_progress", 0),
            "completed": counts.get("completed", 0),
            "cancelled": counts.get("cancelled", 0),
        }

    def get_upcoming(self, user: User, limit: int) -> list[Booking]:
        return self.repo.upcoming(self._scope(user), utcnow(), limit)
