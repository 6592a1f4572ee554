"""Review service - Business logic for reviews and vendor rating upkeep"""

import logging

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ...models import Review, SuperAdmin, User
from ...security_utils import strip_tags
from ...shared.mapping import apply_columns, to_columns
from ...shared.time import utcnow
from .rating import rating_stats, recompute_vendor_rating
from .repository import ReviewRepository
from .schemas import REVIEW_FIELD_MAP, HelpfulVote, ReviewCreate, ReviewQuery, ReviewUpdate, VendorReply

logger = logging.getLogger(__name__)


class ReviewService:
    """
    Service layer for reviews.

    Every mutation that can change which reviews count towards a vendor's
    rating recomputes that vendor's aggregate before the single commit.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = ReviewRepository()

    def _commit(self, review: Review) -> Review:
        self.db.commit()
        self.db.refresh(review)
        return review

    def stage_review(self, data: ReviewCreate, user: User) -> Review:
        """
        Validate and add a review plus the vendor recompute to the session.
        The caller commits.
        """
        vendor = self.repo.get_vendor(self.db, data.vendorId)
        if not vendor or not vendor.is_active:
            raise HTTPException(status_code=404, detail="Vendor not found")

        booking = self.repo.get_booking(self.db, data.bookingId)
        if not booking or not booking.is_active:
            raise HTTPException(status_code=404, detail="Booking not found")
        if booking.customer_id != user.id:
            raise HTTPException(status_code=403, detail="You can only review your own bookings")
        if booking.vendor_id != vendor.id:
            raise HTTPException(status_code=400, detail="Booking does not belong to this vendor")
        if booking.status != "completed":
            raise HTTPException(status_code=400, detail="You can only review completed bookings")

        if self.repo.find_existing(self.db, user.id, vendor.id, booking.id):
            logger.warning(f"⚠️ Duplicate review attempt by user {user.id} for booking {booking.id}")
            raise HTTPException(status_code=400, detail="Review already exists for this booking")

        columns = to_columns(data, REVIEW_FIELD_MAP, model=Review)
        if columns.get("comment"):
            columns["comment"] = strip_tags(columns["comment"])
        review = self.repo.add(
            self.db,
            customer_id=user.id,
            vendor_id=vendor.id,
            booking_id=booking.id,
            is_verified=True,
            is_published=True,
            published_at=utcnow(),
            **columns,
        )
        recompute_vendor_rating(self.db, vendor.id)
        return review

    def create_review(self, data: ReviewCreate, user: User) -> Review:
        logger.info(f"📥 Creating review for vendor {data.vendorId} by user {user.id}")
        review = self.stage_review(data, user)
        return self._commit(review)

    def list_reviews(self, query: ReviewQuery) -> tuple[list[Review], int]:
        return self.repo.search(self.db, query)

    def get_review(self, review_id: int) -> Review:
        review = self.repo.get_active(self.db, review_id)
        if not review:
            raise HTTPException(status_code=404, detail="Review not found")
        return review

    def _get_authored(self, review_id: int, user: User, action: str) -> Review:
        review = self.get_review(review_id)
        if review.customer_id != user.id:
            raise HTTPException(status_code=403, detail=f"You can only {action} your own reviews")
        return review

    def update_review(self, review_id: int, data: ReviewUpdate, user: User) -> Review:
        review = self._get_authored(review_id, user, "update")
        columns = to_columns(data, REVIEW_FIELD_MAP, model=Review)
        if columns.get("comment"):
            columns["comment"] = strip_tags(columns["comment"])
        apply_columns(review, columns)
        recompute_vendor_rating(self.db, review.vendor_id)
        return self._commit(review)

    def delete_review(self, review_id: int, user: User) -> dict:
        review = self._get_authored(review_id, user, "delete")
        review.is_active = False
        recompute_vendor_rating(self.db, review.vendor_id)
        self.db.commit()
        logger.info(f"🗑️ Review {review_id} soft deleted")
        return {"message": "Review deleted successfully"}

    def add_vendor_response(self, review_id: int, data: VendorReply, user: User) -> Review:
        review = self.get_review(review_id)
        vendor = self.repo.get_vendor_for_user(self.db, user.id)
        if not vendor or review.vendor_id != vendor.id:
            raise HTTPException(status_code=403, detail="You can only respond to reviews for your business")
        review.vendor_response = strip_tags(data.response)
        review.vendor_response_date = utcnow()
        return self._commit(review)

    def mark_helpful(self, review_id: int, data: HelpfulVote) -> dict:
        review = self.get_review(review_id)
        if data.isHelpful:
            review.helpful_count = (review.helpful_count or 0) + 1
        else:
            review.not_helpful_count = (review.not_helpful_count or 0) + 1
        self._commit(review)
        return {
            "message": "Marked as helpful" if data.isHelpful else "Marked as not helpful",
            "helpfulCount": review.helpful_count,
            "notHelpfulCount": review.not_helpful_count,
        }

    def moderate_review(self, review_id: int, is_published: bool, admin: SuperAdmin) -> Review:
        """Publish or unpublish a review; the vendor aggregate follows"""
        review = self.repo.get_active(self.db, review_id)
        if not review:
            raise HTTPException(status_code=404, detail="Review not found")
        review.is_published = is_published
        review.moderated_at = utcnow()
        review.moderated_by = admin.id
        if is_published and not review.published_at:
            review.published_at = utcnow()
        recompute_vendor_rating(self.db, review.vendor_id)
        logger.info(f"🛡️ Review {review_id} {'published' if is_published else 'unpublished'} by {admin.id}")
        return self._commit(review)

    def get_vendor_reviews(self, vendor_id: int, page: int, limit: int) -> tuple[list[Review], int]:
        return self.repo.get_for_vendor(self.db, vendor_id, page, limit)

    def get_vendor_stats(self, vendor_id: int) -> dict:
        return rating_stats(self.repo.get_all_for_vendor(self.db, vendor_id))

    def get_recent(self, limit: int) -> list[Review]:
        return self.repo.get_recent(self.db, limit)

    def get_top_rated(self, limit: int) -> list[Review]:
        return self.repo.get_top_rated(self.db, limit)
