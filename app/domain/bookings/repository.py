"""Booking repository - Database operations for bookings"""

from datetime import datetime
from typing import Optional

from sqlalchemy import asc, func
from sqlalchemy.orm import Query, Session

from ...models import Booking, Vendor
from ...shared.filters import search_filter
from ...shared.pagination import apply_sort, paginate
from ...shared.time import to_naive_utc
from .schemas import BOOKING_SORT_FIELDS, BookingQuery


class BookingRepository:
    """Repository for booking database operations"""

    @staticmethod
    def get_active(db: Session, booking_id: int) -> Optional[Booking]:
        return db.query(Booking).filter(Booking.id == booking_id, Booking.is_active.is_(True)).first()

    @staticmethod
    def get_vendor(db: Session, vendor_id: int) -> Optional[Vendor]:
        return db.query(Vendor).filter(Vendor.id == vendor_id).first()

    @staticmethod
    def get_vendor_for_user(db: Session, user_id: int) -> Optional[Vendor]:
        return db.query(Vendor).filter(Vendor.user_id == user_id).first()

    @staticmethod
    def create(db: Session, vendor: Vendor, customer_id: int, **booking_data) -> Booking:
        """Insert the booking and bump the vendor's booking counter in one commit"""
        booking = Booking(customer_id=customer_id, vendor_id=vendor.id, **booking_data)
        db.add(booking)
        vendor.booking_count = (vendor.booking_count or 0) + 1
        db.commit()
        db.refresh(booking)
        return booking

    @staticmethod
    def save(db: Session, booking: Booking) -> Booking:
        db.commit()
        db.refresh(booking)
        return booking

    @staticmethod
    def scoped(db: Session, customer_id: Optional[int] = None, vendor_id: Optional[int] = None) -> Query:
        q = db.query(Booking).filter(Booking.is_active.is_(True))
        if customer_id is not None:
            q = q.filter(Booking.customer_id == customer_id)
        if vendor_id is not None:
            q = q.filter(Booking.vendor_id == vendor_id)
        return q

    @staticmethod
    def search(db: Session, scope: Query, query: BookingQuery) -> tuple[list[Booking], int]:
        q = scope
        if query.search:
            q = q.filter(
                search_filter(
                    query.search, Booking.service_name, Booking.venue, Booking.notes, Booking.special_requirements
                )
            )
        if query.status:
            q = q.filter(Booking.status == query.status)
        if query.paymentStatus:
            q = q.filter(Booking.payment_status == query.paymentStatus)
        if query.serviceCategory:
            q = q.filter(Booking.service_category == query.serviceCategory)
        if query.startDate:
            q = q.filter(Booking.booking_date >= to_naive_utc(query.startDate))
        if query.endDate:
            q = q.filter(Booking.booking_date <= to_naive_utc(query.endDate))

        q = apply_sort(q, Booking, query.sortBy, query.sortOrder, BOOKING_SORT_FIELDS, "bookingDate")
        return paginate(q, query.page, query.limit)

    @staticmethod
    def count_by_status(scope: Query) -> dict[str, int]:
        rows = scope.with_entities(Booking.status, func.count(Booking.id)).group_by(Booking.status).all()
        return {status: count for status, count in rows}

    @staticmethod
    def upcoming(scope: Query, now: datetime, limit: int) -> list[Booking]:
        return (
            scope.filter(
                Booking.booking_date >= now,
                Booking.status.in_(["confirmed", "in_progress"]),
            )
            .order_by(asc(Booking.booking_date), asc(Booking.id))
            .limit(limit)
            .all()
        )
