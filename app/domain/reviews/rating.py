"""
Vendor rating aggregation.

A vendor's ``rating`` and ``review_count`` are always derived from the set of
its reviews that are both active and published. They are recomputed from
scratch (never incremented) whenever that set may have changed: review
create, update, soft delete, booking review and admin moderation.
"""

import logging
import math
from collections.abc import Iterable
from typing import Optional

from sqlalchemy.orm import Session

from ...models import Review, Vendor

logger = logging.getLogger(__name__)


def round_half_up(value: float, digits: int = 0) -> float:
    """Round like JavaScript Math.round (halves go up), not banker's rounding"""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def average_rating(ratings: Iterable[int]) -> float:
    """Mean star rating rounded to one decimal place; 0.0 when there are no ratings"""
    ratings = list(ratings)
    if not ratings:
        return 0.0
    return round_half_up(sum(ratings) / len(ratings), 1)


def recompute_vendor_rating(db: Session, vendor_id: int) -> Optional[tuple[float, int]]:
    """
    Recompute a vendor's aggregate from its counted reviews.

    Writes into the caller's session and flushes; the caller commits, so the
    review change and the aggregate land in the same transaction.
    """
    vendor = db.query(Vendor).filter(Vendor.id == vendor_id).first()
    if not vendor:
        logger.warning(f"⚠️ Rating recompute skipped, vendor {vendor_id} not found")
        return None

    db.flush()
    ratings = [
        row.rating
        for row in db.query(Review.rating).filter(
            Review.vendor_id == vendor_id,
            Review.is_active.is_(True),
            Review.is_published.is_(True),
        )
    ]

    vendor.rating = average_rating(ratings)
    vendor.review_count = len(ratings)
    db.flush()

    logger.info(f"⭐ Vendor {vendor_id} rating recomputed: {vendor.rating} from {vendor.review_count} reviews")
    return vendor.rating, vendor.review_count


def rating_stats(reviews: list[Review]) -> dict:
    """Summary used by the vendor stats endpoint"""
    distribution = {5: 0, 4: 0, 3: 0, 2: 0, 1: 0}
    for review in reviews:
        if review.rating in distribution:
            distribution[review.rating] += 1

    return {
        "totalReviews": len(reviews),
        "averageRating": average_rating(r.rating for r in reviews),
        "ratingDistribution": distribution,
        "verifiedReviews": sum(1 for r in reviews if r.is_verified),
        "reviewsWithImages": sum(1 for r in reviews if r.images),
        "wouldRecommendCount": sum(1 for r in reviews if r.would_recommend),
    }
