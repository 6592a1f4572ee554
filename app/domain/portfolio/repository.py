"""Portfolio repository - Database operations for vendor portfolios"""

from typing import Optional

from sqlalchemy import desc
from sqlalchemy.orm import Session

from ...models import Portfolio, Vendor
from ...shared.filters import json_list_contains_any, search_filter
from ...shared.pagination import apply_sort, paginate
from .schemas import PORTFOLIO_SORT_FIELDS, PortfolioQuery


class PortfolioRepository:
    """Repository for portfolio database operations"""

    @staticmethod
    def get_active(db: Session, portfolio_id: int) -> Optional[Portfolio]:
        return db.query(Portfolio).filter(Portfolio.id == portfolio_id, Portfolio.is_active.is_(True)).first()

    @staticmethod
    def get_vendor_for_user(db: Session, user_id: int) -> Optional[Vendor]:
        return db.query(Vendor).filter(Vendor.user_id == user_id).first()

    @staticmethod
    def create(db: Session, **portfolio_data) -> Portfolio:
        portfolio = Portfolio(**portfolio_data)
        db.add(portfolio)
        db.commit()
        db.refresh(portfolio)
        return portfolio

    @staticmethod
    def save(db: Session, portfolio: Portfolio) -> Portfolio:
        db.commit()
        db.refresh(portfolio)
        return portfolio

    @staticmethod
    def search_for_vendor(db: Session, vendor_id: int, query: PortfolioQuery) -> tuple[list[Portfolio], int]:
        q = db.query(Portfolio).filter(Portfolio.vendor_id == vendor_id, Portfolio.is_active.is_(True))
        if query.search:
            q = q.filter(search_filter(query.search, Portfolio.title, Portfolio.description))
        if query.category:
            q = q.filter(Portfolio.category == query.category)
        if query.tags:
            q = q.filter(json_list_contains_any(Portfolio.tags, query.tags))
        if query.isFeatured is not None:
            q = q.filter(Portfolio.is_featured.is_(query.isFeatured))

        q = apply_sort(q, Portfolio, query.sortBy, query.sortOrder, PORTFOLIO_SORT_FIELDS, "createdAt")
        return paginate(q, query.page, query.limit)

    @staticmethod
    def get_for_vendor(db: Session, vendor_id: int) -> list[Portfolio]:
        return (
            db.query(Portfolio)
            .filter(Portfolio.vendor_id == vendor_id, Portfolio.is_active.is_(True))
            .order_by(desc(Portfolio.created_at), desc(Portfolio.id))
            .all()
        )
