"""Admin repository - Cross-domain reporting queries"""

from datetime import datetime
from typing import Optional

from sqlalchemy import desc, func
from sqlalchemy.orm import Query, Session

from ...models import Booking, Idea, Inquiry, Review, User, Vendor
from ...shared.filters import search_filter
from ...shared.pagination import apply_sort, paginate
from .schemas import (
    ADMIN_CONTENT_SORT_FIELDS,
    ADMIN_USER_SORT_FIELDS,
    ADMIN_VENDOR_SORT_FIELDS,
    AdminContentQuery,
    AdminUserQuery,
    AdminVendorQuery,
)


def created_between(q: Query, model, start: Optional[datetime], end: Optional[datetime]) -> Query:
    if start is not None:
        q = q.filter(model.created_at >= start)
    if end is not None:
        q = q.filter(model.created_at <= end)
    return q


class AdminRepository:
    """Repository for admin reporting and moderation queries"""

    @staticmethod
    def count_active(db: Session, model, start=None, end=None, *criteria) -> int:
        q = db.query(model).filter(model.is_active.is_(True), *criteria)
        return created_between(q, model, start, end).count()

    @staticmethod
    def dashboard_counts(db: Session, start=None, end=None) -> dict:
        count = AdminRepository.count_active
        return {
            "users": count(db, User, start, end),
            "vendors": count(db, Vendor, start, end),
            "ideas": count(db, Idea, start, end),
            "bookings": count(db, Booking, start, end),
            "reviews": count(db, Review, start, end),
            "inquiries": count(db, Inquiry, start, end),
            "pending_vendors": count(db, Vendor, start, end, Vendor.status == "pending"),
            "published_ideas": count(db, Idea, start, end, Idea.is_published.is_(True)),
            "completed_bookings": count(db, Booking, start, end, Booking.status == "completed"),
            "verified_reviews": count(db, Review, start, end, Review.is_verified.is_(True)),
        }

    @staticmethod
    def paid_revenue(db: Session, start=None, end=None) -> float:
        q = db.query(func.coalesce(func.sum(Booking.total_amount), 0.0)).filter(
            Booking.is_active.is_(True), Booking.payment_status == "paid"
        )
        return float(created_between(q, Booking, start, end).scalar() or 0.0)

    @staticmethod
    def daily_counts(db: Session, model, start=None, end=None) -> list[tuple]:
        day = func.date(model.created_at)
        q = db.query(day, func.count(model.id)).filter(model.is_active.is_(True))
        return created_between(q, model, start, end).group_by(day).order_by(day).all()

    @staticmethod
    def daily_revenue(db: Session, start=None, end=None) -> list[tuple]:
        day = func.date(Booking.created_at)
        q = db.query(day, func.sum(Booking.total_amount), func.count(Booking.id)).filter(
            Booking.is_active.is_(True), Booking.payment_status == "paid"
        )
        return created_between(q, Booking, start, end).group_by(day).order_by(day).all()

    @staticmethod
    def top_vendors(db: Session, limit: int = 10) -> list[tuple]:
        """Approved vendors ranked by the total value of their bookings"""
        revenue = func.coalesce(func.sum(Booking.total_amount), 0.0)
        return (
            db.query(Vendor, revenue.label("revenue"), func.count(Booking.id).label("bookings"))
            .outerjoin(Booking, (Booking.vendor_id == Vendor.id) & Booking.is_active.is_(True))
            .filter(Vendor.is_active.is_(True), Vendor.status == "approved")
            .group_by(Vendor.id)
            .order_by(desc(revenue), Vendor.id)
            .limit(limit)
            .all()
        )

    @staticmethod
    def approved_vendor_categories(db: Session) -> list[list[str]]:
        rows = (
            db.query(Vendor.categories)
            .filter(Vendor.is_active.is_(True), Vendor.status == "approved")
            .all()
        )
        return [categories or [] for (categories,) in rows]

    @staticmethod
    def recent(db: Session, model, limit: int) -> list:
        return (
            db.query(model)
            .filter(model.is_active.is_(True))
            .order_by(desc(model.created_at), desc(model.id))
            .limit(limit)
            .all()
        )

    @staticmethod
    def search_users(db: Session, query: AdminUserQuery) -> tuple[list[User], int]:
        q = db.query(User)
        if query.search:
            q = q.filter(search_filter(query.search, User.name, User.email))
        if query.role:
            q = q.filter(User.role == query.role)
        if query.isActive is not None:
            q = q.filter(User.is_active.is_(query.isActive))
        q = apply_sort(q, User, query.sortBy, query.sortOrder, ADMIN_USER_SORT_FIELDS, "createdAt")
        return paginate(q, query.page, query.limit)

    @staticmethod
    def search_vendors(db: Session, query: AdminVendorQuery) -> tuple[list[Vendor], int]:
        """Every vendor regardless of status, for moderation"""
        q = db.query(Vendor)
        if query.search:
            q = q.filter(search_filter(query.search, Vendor.business_name, Vendor.business_description, Vendor.email))
        if query.status:
            q = q.filter(Vendor.status == query.status)
        if query.isVerified is not None:
            q = q.filter(Vendor.is_verified.is_(query.isVerified))
        if query.isFeatured is not None:
            q = q.filter(Vendor.is_featured.is_(query.isFeatured))
        if query.district:
            q = q.filter(Vendor.district == query.district)
        q = apply_sort(q, Vendor, query.sortBy, query.sortOrder, ADMIN_VENDOR_SORT_FIELDS, "createdAt")
        return paginate(q, query.page, query.limit)

    @staticmethod
    def search_content(db: Session, query: AdminContentQuery) -> tuple[list[Idea], int]:
        """Ideas including unpublished drafts"""
        q = db.query(Idea).filter(Idea.is_active.is_(True))
        if query.search:
            q = q.filter(search_filter(query.search, Idea.title, Idea.content))
        if query.type:
            q = q.filter(Idea.type == query.type)
        if query.category:
            q = q.filter(Idea.category == query.category)
        if query.isPublished is not None:
            q = q.filter(Idea.is_published.is_(query.isPublished))
        if query.isFeatured is not None:
            q = q.filter(Idea.is_featured.is_(query.isFeatured))
        q = apply_sort(q, Idea, query.sortBy, query.sortOrder, ADMIN_CONTENT_SORT_FIELDS, "createdAt")
        return paginate(q, query.page, query.limit)

    @staticmethod
    def get_user(db: Session, user_id: int) -> Optional[User]:
        return db.query(User).filter(User.id == user_id).first()

    @staticmethod
    def get_vendor(db: Session, vendor_id: int) -> Optional[Vendor]:
        return db.query(Vendor).filter(Vendor.id == vendor_id).first()

    @staticmethod
    def get_idea(db: Session, idea_id: int) -> Optional[Idea]:
        return db.query(Idea).filter(Idea.id == idea_id).first()

    @staticmethod
    def commit(db: Session, obj):
        db.commit()
        db.refresh(obj)
        return obj
