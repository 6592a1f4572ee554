"""Vendor repository - Database operations for vendors"""

from typing import Optional

from sqlalchemy import desc
from sqlalchemy.orm import Session

from ...models import User, Vendor
from ...shared.filters import json_list_contains, json_list_contains_any, search_filter
from ...shared.pagination import apply_sort, paginate
from .schemas import VENDOR_SORT_FIELDS, VendorQuery


class VendorRepository:
    """Repository for vendor database operations"""

    @staticmethod
    def get_by_id(db: Session, vendor_id: int) -> Optional[Vendor]:
        return db.query(Vendor).filter(Vendor.id == vendor_id).first()

    @staticmethod
    def get_active(db: Session, vendor_id: int) -> Optional[Vendor]:
        return db.query(Vendor).filter(Vendor.id == vendor_id, Vendor.is_active.is_(True)).first()

    @staticmethod
    def get_by_user_id(db: Session, user_id: int) -> Optional[Vendor]:
        return db.query(Vendor).filter(Vendor.user_id == user_id).first()

    @staticmethod
    def create(db: Session, user_id: int, **vendor_data) -> Vendor:
        vendor = Vendor(user_id=user_id, status="pending", **vendor_data)
        db.add(vendor)
        db.commit()
        db.refresh(vendor)
        return vendor

    @staticmethod
    def save(db: Session, vendor: Vendor) -> Vendor:
        db.commit()
        db.refresh(vendor)
        return vendor

    @staticmethod
    def search(db: Session, query: VendorQuery) -> tuple[list[Vendor], int]:
        """Public search; approved vendors only unless a status is requested"""
        q = db.query(Vendor).filter(Vendor.is_active.is_(True))
        q = q.filter(Vendor.status == (query.status or "approved"))

        if query.search:
            q = q.filter(
                search_filter(query.search, Vendor.business_name, Vendor.business_description)
                | json_list_contains(Vendor.specializations, query.search)
            )
        if query.categories:
            q = q.filter(json_list_contains_any(Vendor.categories, query.categories))
        if query.district:
            q = q.filter(Vendor.district == query.district)
        if query.city:
            q = q.filter(Vendor.city == query.city)
        if query.minPrice is not None:
            q = q.filter(Vendor.price_min >= query.minPrice)
        if query.maxPrice is not None:
            q = q.filter(Vendor.price_max <= query.maxPrice)
        if query.minRating is not None:
            q = q.filter(Vendor.rating >= query.minRating)
        if query.isVerified is not None:
            q = q.filter(Vendor.is_verified.is_(query.isVerified))
        if query.isFeatured is not None:
            q = q.filter(Vendor.is_featured.is_(query.isFeatured))

        q = apply_sort(q, Vendor, query.sortBy, query.sortOrder, VENDOR_SORT_FIELDS, "createdAt")
        return paginate(q, query.page, query.limit)

    @staticmethod
    def _public(db: Session):
        return db.query(Vendor).filter(Vendor.is_active.is_(True), Vendor.status == "approved")

    @staticmethod
    def get_featured(db: Session, limit: int) -> list[Vendor]:
        return (
            VendorRepository._public(db)
            .filter(Vendor.is_featured.is_(True))
            .order_by(desc(Vendor.featured_at), desc(Vendor.rating))
            .limit(limit)
            .all()
        )

    @staticmethod
    def get_by_category(db: Session, category: str, limit: int) -> list[Vendor]:
        return (
            VendorRepository._public(db)
            .filter(json_list_contains(Vendor.categories, category))
            .order_by(desc(Vendor.rating), desc(Vendor.view_count))
            .limit(limit)
            .all()
        )

    @staticmethod
    def get_by_district(db: Session, district: str, limit: int) -> list[Vendor]:
        return (
            VendorRepository._public(db)
            .filter(Vendor.district == district)
            .order_by(desc(Vendor.rating), desc(Vendor.view_count))
            .limit(limit)
            .all()
        )

    @staticmethod
    def get_pending(db: Session) -> list[Vendor]:
        return (
            db.query(Vendor)
            .filter(Vendor.is_active.is_(True), Vendor.status == "pending")
            .order_by(desc(Vendor.created_at), desc(Vendor.id))
            .all()
        )

    @staticmethod
    def get_owner(db: Session, vendor: Vendor) -> Optional[User]:
        return db.query(User).filter(User.id == vendor.user_id).first()
