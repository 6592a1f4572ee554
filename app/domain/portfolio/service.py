"""Portfolio service - Business logic for vendor portfolios"""

import logging

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ...models import Portfolio, User, Vendor
from ...shared.mapping import apply_columns, to_columns
from ...shared.time import to_naive_utc
from .repository import PortfolioRepository
from .schemas import PORTFOLIO_FIELD_MAP, PortfolioCreate, PortfolioQuery, PortfolioUpdate

logger = logging.getLogger(__name__)


class PortfolioService:
    """Service layer for portfolio business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = PortfolioRepository()

    def _own_vendor(self, user: User) -> Vendor:
        vendor = self.repo.get_vendor_for_user(self.db, user.id)
        if not vendor:
            raise HTTPException(status_code=404, detail="Vendor profile not found")
        return vendor

    def _columns(self, data) -> dict:
        columns = to_columns(data, PORTFOLIO_FIELD_MAP, model=Portfolio)
        if "event_date" in columns:
            columns["event_date"] = to_naive_utc(columns["event_date"])
        return columns

    def create_portfolio(self, data: PortfolioCreate, user: User) -> Portfolio:
        vendor = self._own_vendor(user)
        portfolio = self.repo.create(self.db, vendor_id=vendor.id, **self._columns(data))
        logger.info(f"✅ Portfolio {portfolio.id} created for vendor {vendor.id}")
        return portfolio

    def list_own(self, query: PortfolioQuery, user: User) -> tuple[list[Portfolio], int]:
        vendor = self._own_vendor(user)
        return self.repo.search_for_vendor(self.db, vendor.id, query)

    def get_portfolio(self, portfolio_id: int) -> Portfolio:
        """Public portfolio view; each fetch counts as a view"""
        portfolio = self.repo.get_active(self.db, portfolio_id)
        if not portfolio:
            raise HTTPException(status_code=404, detail="Portfolio not found")
        portfolio.view_count = (portfolio.view_count or 0) + 1
        return self.repo.save(self.db, portfolio)

    def _get_owned(self, portfolio_id: int, user: User, action: str) -> Portfolio:
        portfolio = self.repo.get_active(self.db, portfolio_id)
        if not portfolio:
            raise HTTPException(status_code=404, detail="Portfolio not found")
        vendor = self._own_vendor(user)
        if portfolio.vendor_id != vendor.id:
            raise HTTPException(status_code=403, detail=f"You can only {action} your own portfolio")
        return portfolio

    def update_portfolio(self, portfolio_id: int, data: PortfolioUpdate, user: User) -> Portfolio:
        portfolio = self._get_owned(portfolio_id, user, "update")
        apply_columns(portfolio, self._columns(data))
        return self.repo.save(self.db, portfolio)

    def delete_portfolio(self, portfolio_id: int, user: User) -> dict:
        portfolio = self._get_owned(portfolio_id, user, "delete")
        portfolio.is_active = False
        self.repo.save(self.db, portfolio)
        return {"message": "Portfolio deleted successfully"}

    def like_portfolio(self, portfolio_id: int) -> Portfolio:
        portfolio = self.repo.get_active(self.db, portfolio_id)
        if not portfolio:
            raise HTTPException(status_code=404, detail="Portfolio not found")
        portfolio.like_count = (portfolio.like_count or 0) + 1
        return self.repo.save(self.db, portfolio)

    def get_vendor_portfolio(self, vendor_id: int) -> list[Portfolio]:
        return self.repo.get_for_vendor(self.db, vendor_id)
