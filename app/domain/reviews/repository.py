"""Review repository - Database operations for reviews"""

from typing import Optional

from sqlalchemy import String, cast, desc, or_
from sqlalchemy.orm import Session

from ...models import Booking, Review, Vendor
from ...shared.filters import search_filter
from ...shared.pagination import apply_sort, paginate
from .schemas import REVIEW_SORT_FIELDS, ReviewQuery


def _has_no_images():
    return or_(Review.images.is_(None), cast(Review.images, String).in_(["[]", "null"]))


class ReviewRepository:
    """Repository for review database operations"""

    @staticmethod
    def _visible(db: Session):
        return db.query(Review).filter(Review.is_active.is_(True), Review.is_published.is_(True))

    @staticmethod
    def get_by_id(db: Session, review_id: int) -> Optional[Review]:
        return db.query(Review).filter(Review.id == review_id).first()

    @staticmethod
    def get_active(db: Session, review_id: int) -> Optional[Review]:
        return db.query(Review).filter(Review.id == review_id, Review.is_active.is_(True)).first()

    @staticmethod
    def find_existing(db: Session, customer_id: int, vendor_id: int, booking_id: int) -> Optional[Review]:
        return (
            db.query(Review)
            .filter(
                Review.customer_id == customer_id,
                Review.vendor_id == vendor_id,
                Review.booking_id == booking_id,
            )
            .first()
        )

    @staticmethod
    def add(db: Session, **review_data) -> Review:
        """Stage a new review in the session without committing"""
        review = Review(**review_data)
        db.add(review)
        db.flush()
        return review

    @staticmethod
    def get_booking(db: Session, booking_id: int) -> Optional[Booking]:
        return db.query(Booking).filter(Booking.id == booking_id).first()

    @staticmethod
    def get_vendor(db: Session, vendor_id: int) -> Optional[Vendor]:
        return db.query(Vendor).filter(Vendor.id == vendor_id).first()

    @staticmethod
    def get_vendor_for_user(db: Session, user_id: int) -> Optional[Vendor]:
        return db.query(Vendor).filter(Vendor.user_id == user_id).first()

    @staticmethod
    def search(db: Session, query: ReviewQuery) -> tuple[list[Review], int]:
        q = ReviewRepository._visible(db)

        if query.search:
            q = q.filter(
                search_filter(query.search, Review.title, Review.comment)
                | cast(Review.pros, String).ilike(f"%{query.search}%")
                | cast(Review.cons, String).ilike(f"%{query.search}%")
            )
        if query.vendorId is not None:
            q = q.filter(Review.vendor_id == query.vendorId)
        if query.serviceCategory:
            q = q.filter(Review.service_category == query.serviceCategory)
        if query.minRating is not None:
            q = q.filter(Review.rating >= query.minRating)
        if query.maxRating is not None:
            q = q.filter(Review.rating <= query.maxRating)
        if query.isVerified is not None:
            q = q.filter(Review.is_verified.is_(query.isVerified))
        if query.hasImages is True:
            q = q.filter(~_has_no_images())
        elif query.hasImages is False:
            q = q.filter(_has_no_images())
        if query.wouldRecommend is not None:
            q = q.filter(Review.would_recommend.is_(query.wouldRecommend))

        q = apply_sort(q, Review, query.sortBy, query.sortOrder, REVIEW_SORT_FIELDS, "createdAt")
        return paginate(q, query.page, query.limit)

    @staticmethod
    def get_for_vendor(db: Session, vendor_id: int, page: int, limit: int) -> tuple[list[Review], int]:
        q = (
            ReviewRepository._visible(db)
            .filter(Review.vendor_id == vendor_id)
            .order_by(desc(Review.created_at), desc(Review.id))
        )
        return paginate(q, page, limit)

    @staticmethod
    def get_all_for_vendor(db: Session, vendor_id: int) -> list[Review]:
        return ReviewRepository._visible(db).filter(Review.vendor_id == vendor_id).all()

    @staticmethod
    def get_recent(db: Session, limit: int) -> list[Review]:
        return (
            ReviewRepository._visible(db)
            .order_by(desc(Review.created_at), desc(Review.id))
            .limit(limit)
            .all()
        )

    @staticmethod
    def get_top_rated(db: Session, limit: int) -> list[Review]:
        return (
            ReviewRepository._visible(db)
            .filter(Review.rating == 5)
            .order_by(desc(Review.helpful_count), desc(Review.created_at), desc(Review.id))
            .limit(limit)
            .all()
        )
