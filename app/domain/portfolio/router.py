"""Portfolio router - FastAPI endpoints for vendor portfolios"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ...auth import get_current_user, require_roles
from ...database import get_db
from ...models import User
from ...shared.filters import split_csv
from ...shared.pagination import page_meta
from .schemas import (
    PortfolioCreate,
    PortfolioListResponse,
    PortfolioQuery,
    PortfolioResponse,
    PortfolioUpdate,
    portfolio_response,
)
from .service import PortfolioService

logger = logging.getLogger(__name__)

# Shares the /vendors prefix; must be mounted before the vendors router so
# /vendors/portfolio is not captured by /vendors/{vendor_id}
router = APIRouter(prefix="/vendors", tags=["Portfolio"])


def get_portfolio_service(db: Session = Depends(get_db)) -> PortfolioService:
    """Dependency injection for PortfolioService"""
    return PortfolioService(db)


@router.post("/portfolio", response_model=PortfolioResponse, status_code=201)
async def create_portfolio(
    data: PortfolioCreate,
    current_user: User = Depends(require_roles("vendor")),
    service: PortfolioService = Depends(get_portfolio_service),
):
    return portfolio_response(service.create_portfolio(data, current_user))


@router.get("/portfolio", response_model=PortfolioListResponse)
async def list_my_portfolio(
    query: Annotated[PortfolioQuery, Query()],
    current_user: User = Depends(require_roles("vendor")),
    service: PortfolioService = Depends(get_portfolio_service),
):
    if query.tags:
        query.tags = split_csv(query.tags)
    portfolios, total = service.list_own(query, current_user)
    return PortfolioListResponse(
        portfolios=[portfolio_response(p) for p in portfolios], **page_meta(total, query.page, query.limit)
    )


@router.get("/portfolio/{portfolio_id}", response_model=PortfolioResponse)
async def get_portfolio(portfolio_id: int, service: PortfolioService = Depends(get_portfolio_service)):
    return portfolio_response(service.get_portfolio(portfolio_id))


@router.put("/portfolio/{portfolio_id}", response_model=PortfolioResponse)
async def update_portfolio(
    portfolio_id: int,
    data: PortfolioUpdate,
    current_user: User = Depends(require_roles("vendor")),
    service: PortfolioService = Depends(get_portfolio_service),
):
    return portfolio_response(service.update_portfolio(portfolio_id, data, current_user))


@router.delete("/portfolio/{portfolio_id}")
async def delete_portfolio(
    portfolio_id: int,
    current_user: User = Depends(require_roles("vendor")),
    service: PortfolioService = Depends(get_portfolio_service),
):
    return service.delete_portfolio(portfolio_id, current_user)


@router.post("/portfolio/{portfolio_id}/like", response_model=PortfolioResponse)
async def like_portfolio(
    portfolio_id: int,
    _: User = Depends(get_current_user),
    service: PortfolioService = Depends(get_portfolio_service),
):
    return portfolio_response(service.like_portfolio(portfolio_id))


@router.get("/{vendor_id}/portfolio", response_model=list[PortfolioResponse])
async def vendor_portfolio(vendor_id: int, service: PortfolioService = Depends(get_portfolio_service)):
    return [portfolio_response(p) for p in service.get_vendor_portfolio(vendor_id)]


__all__ = ["router"]
