"""Admin service - Dashboard reporting and moderation for super admins"""

import logging
from collections import Counter
from datetime import datetime, timedelta
from typing import Optional

from fastapi import BackgroundTasks, HTTPException
from sqlalchemy.orm import Session

from ...models import Booking, Idea, Review, SuperAdmin, User, Vendor
from ...shared.time import to_naive_utc, utcnow
from ..ideas.service import set_publication
from ..reviews.service import ReviewService
from ..vendors.schemas import VendorApproval
from ..vendors.service import VendorService
from .repository import AdminRepository
from .schemas import (
    AdminContentQuery,
    AdminStatsQuery,
    AdminUserQuery,
    AdminVendorQuery,
    ContentStatusUpdate,
    FeaturedListing,
    UserStatusUpdate,
    VendorStatusUpdate,
)

logger = logging.getLogger(__name__)

ACTIVITY_PER_KIND = 5


def period_start(period: str, now: datetime) -> datetime:
    """Start of a reporting period ending now"""
    if period == "day":
        return now.replace(hour=0, minute=0, second=0, microsecond=0)
    if period == "week":
        return now - timedelta(days=7)
    if period == "month":
        return now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    if period == "year":
        return now.replace(month=1, day=1, hour=0, minute=0, second=0, microsecond=0)
    return now - timedelta(days=30)


def date_window(query: AdminStatsQuery) -> tuple[Optional[datetime], Optional[datetime]]:
    """Explicit start and end dates win over a named period"""
    if query.startDate and query.endDate:
        return to_naive_utc(query.startDate), to_naive_utc(query.endDate)
    if query.period:
        return period_start(query.period, utcnow()), None
    return None, None


def _day(value) -> str:
    # SQLite returns DATE() as text, other backends as a date
    return value if isinstance(value, str) else value.isoformat()


def _mark_featured(obj, is_featured: bool):
    obj.is_featured = is_featured
    if is_featured:
        obj.featured_at = utcnow()


class AdminService:
    """Service layer for super admin operations"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = AdminRepository()

    # ========================================================================
    # REPORTING
    # ========================================================================

    def get_dashboard(self, query: AdminStatsQuery) -> dict:
        start, end = date_window(query)
        counts = self.repo.dashboard_counts(self.db, start, end)
        return {
            "overview": {
                "totalUsers": counts["users"],
                "totalVendors": counts["vendors"],
                "totalIdeas": counts["ideas"],
                "totalBookings": counts["bookings"],
                "totalReviews": counts["reviews"],
                "totalInquiries": counts["inquiries"],
                "totalRevenue": self.repo.paid_revenue(self.db, start, end),
            },
            "pending": {
                "pendingVendors": counts["pending_vendors"],
                "unpublishedIdeas": counts["ideas"] - counts["published_ideas"],
                "pendingBookings": counts["bookings"] - counts["completed_bookings"],
                "unverifiedReviews": counts["reviews"] - counts["verified_reviews"],
            },
            "completion": {
                "publishedIdeas": counts["published_ideas"],
                "completedBookings": counts["completed_bookings"],
                "verifiedReviews": counts["verified_reviews"],
            },
        }

    def get_analytics(self, query: AdminStatsQuery) -> dict:
        start, end = date_window(query)

        categories = Counter()
        for vendor_categories in self.repo.approved_vendor_categories(self.db):
            categories.update(vendor_categories)

        return {
            "trends": {
                "users": [
                    {"date": _day(day), "count": count}
                    for day, count in self.repo.daily_counts(self.db, User, start, end)
                ],
                "vendors": [
                    {"date": _day(day), "count": count}
                    for day, count in self.repo.daily_counts(self.db, Vendor, start, end)
                ],
                "revenue": [
                    {"date": _day(day), "revenue": float(revenue or 0.0), "bookings": bookings}
                    for day, revenue, bookings in self.repo.daily_revenue(self.db, start, end)
                ],
            },
            "topVendors": [
                {
                    "id": vendor.id,
                    "businessName": vendor.business_name,
                    "rating": vendor.rating or 0.0,
                    "reviewCount": vendor.review_count or 0,
                    "totalRevenue": float(revenue or 0.0),
                    "totalBookings": bookings,
                }
                for vendor, revenue, bookings in self.repo.top_vendors(self.db)
            ],
            "categoryDistribution": [
                {"category": name, "count": count} for name, count in categories.most_common()
            ],
        }

    def get_recent_activity(self, limit: int) -> list[dict]:
        """Newest users, vendors, ideas and bookings merged into one feed"""
        entries = []
        for user in self.repo.recent(self.db, User, ACTIVITY_PER_KIND):
            entries.append(
                {
                    "type": "user",
                    "id": user.id,
                    "title": user.name,
                    "detail": user.role,
                    "createdAt": user.created_at,
                }
            )
        for vendor in self.repo.recent(self.db, Vendor, ACTIVITY_PER_KIND):
            entries.append(
                {
                    "type": "vendor",
                    "id": vendor.id,
                    "title": vendor.business_name,
                    "detail": vendor.status,
                    "createdAt": vendor.created_at,
                }
            )
        for idea in self.repo.recent(self.db, Idea, ACTIVITY_PER_KIND):
            entries.append(
                {
                    "type": "idea",
                    "id": idea.id,
                    "title": idea.title,
                    "detail": idea.category,
                    "createdAt": idea.created_at,
                }
            )
        for booking in self.repo.recent(self.db, Booking, ACTIVITY_PER_KIND):
            entries.append(
                {
                    "type": "booking",
                    "id": booking.id,
                    "title": booking.service_name,
                    "detail": booking.status,
                    "createdAt": booking.created_at,
                }
            )

        entries.sort(key=lambda e: e["createdAt"] or datetime.min, reverse=True)
        return entries[:limit]

    # ========================================================================
    # MODERATION
    # ========================================================================

    def list_users(self, query: AdminUserQuery) -> tuple[list[User], int]:
        return self.repo.search_users(self.db, query)

    def update_user_status(self, user_id: int, data: UserStatusUpdate, admin: SuperAdmin) -> User:
        user = self.repo.get_user(self.db, user_id)
        if not user:
            raise HTTPException(status_code=404, detail="User not found")
        user.is_active = data.isActive
        user = self.repo.commit(self.db, user)
        logger.info(
            f"🛡️ User {user_id} {'activated' if data.isActive else 'deactivated'} by super admin {admin.id}"
            + (f": {data.reason}" if data.reason else "")
        )
        return user

    def list_vendors(self, query: AdminVendorQuery) -> tuple[list[Vendor], int]:
        return self.repo.search_vendors(self.db, query)

    def update_vendor_status(
        self,
        vendor_id: int,
        data: VendorStatusUpdate,
        admin: SuperAdmin,
        background_tasks: Optional[BackgroundTasks] = None,
    ) -> Vendor:
        """Approval decision plus the verified and featured flags"""
        approval = VendorApproval(status=data.status, rejectionReason=data.rejectionReason)
        vendor = VendorService(self.db).approve_vendor(vendor_id, approval, admin, background_tasks)

        if data.isVerified is not None:
            vendor.is_verified = data.isVerified
        if data.isFeatured is not None:
            _mark_featured(vendor, data.isFeatured)
        return self.repo.commit(self.db, vendor)

    def list_content(self, query: AdminContentQuery) -> tuple[list[Idea], int]:
        return self.repo.search_content(self.db, query)

    def update_content_status(self, idea_id: int, data: ContentStatusUpdate, admin: SuperAdmin) -> Idea:
        idea = self.repo.get_idea(self.db, idea_id)
        if not idea:
            raise HTTPException(status_code=404, detail="Content not found")
        set_publication(idea, is_published=data.isPublished, is_featured=data.isFeatured)
        idea = self.repo.commit(self.db, idea)
        logger.info(f"🛡️ Idea {idea_id} published={idea.is_published} featured={idea.is_featured} by {admin.id}")
        return idea

    def update_review_status(self, review_id: int, is_published: bool, admin: SuperAdmin) -> Review:
        return ReviewService(self.db).moderate_review(review_id, is_published, admin)

    def update_featured(self, data: FeaturedListing, admin: SuperAdmin) -> dict:
        if data.itemType == "vendor":
            item = self.repo.get_vendor(self.db, data.itemId)
            if not item:
                raise HTTPException(status_code=404, detail="Vendor not found")
        else:
            item = self.repo.get_idea(self.db, data.itemId)
            if not item:
                raise HTTPException(status_code=404, detail="Idea not found")

        _mark_featured(item, data.isFeatured)
        self.repo.commit(self.db, item)
        logger.info(f"⭐ {data.itemType} {data.itemId} featured={data.isFeatured} by super admin {admin.id}")
        return {"message": f"Featured status updated for {data.itemType}"}
