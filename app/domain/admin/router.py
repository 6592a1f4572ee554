"""Admin router - FastAPI endpoints for super admins"""

import logging
from typing import Annotated

from fastapi import APIRouter, BackgroundTasks, Depends, Query
from sqlalchemy.orm import Session

from ...auth import get_current_super_admin
from ...database import get_db
from ...models import SuperAdmin
from ...shared.pagination import page_meta
from ..auth.schemas import UserResponse, user_response
from ..ideas.schemas import IdeaListResponse, IdeaResponse, idea_response
from ..reviews.schemas import ReviewModeration, ReviewResponse, review_response
from ..vendors.schemas import VendorListResponse, VendorResponse, vendor_response
from .schemas import (
    AdminContentQuery,
    AdminStatsQuery,
    AdminUserListResponse,
    AdminUserQuery,
    AdminVendorQuery,
    ContentStatusUpdate,
    FeaturedListing,
    UserStatusUpdate,
    VendorStatusUpdate,
)
from .service import AdminService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["Admin"])


def get_admin_service(db: Session = Depends(get_db)) -> AdminService:
    """Dependency injection for AdminService"""
    return AdminService(db)


# ============================================================================
# REPORTING
# ============================================================================


@router.get("/dashboard")
async def dashboard(
    query: Annotated[AdminStatsQuery, Query()],
    _: SuperAdmin = Depends(get_current_super_admin),
    service: AdminService = Depends(get_admin_service),
):
    return service.get_dashboard(query)


@router.get("/analytics")
async def analytics(
    query: Annotated[AdminStatsQuery, Query()],
    _: SuperAdmin = Depends(get_current_super_admin),
    service: AdminService = Depends(get_admin_service),
):
    return service.get_analytics(query)


@router.get("/activity")
async def recent_activity(
    limit: int = Query(20, ge=1, le=100),
    _: SuperAdmin = Depends(get_current_super_admin),
    service: AdminService = Depends(get_admin_service),
):
    return service.get_recent_activity(limit)


# ============================================================================
# USERS
# ============================================================================


@router.get("/users", response_model=AdminUserListResponse)
async def list_users(
    query: Annotated[AdminUserQuery, Query()],
    _: SuperAdmin = Depends(get_current_super_admin),
    service: AdminService = Depends(get_admin_service),
):
    users, total = service.list_users(query)
    return AdminUserListResponse(users=[user_response(u) for u in users], **page_meta(total, query.page, query.limit))


@router.patch("/users/{user_id}/status", response_model=UserResponse)
async def update_user_status(
    user_id: int,
    data: UserStatusUpdate,
    admin: SuperAdmin = Depends(get_current_super_admin),
    service: AdminService = Depends(get_admin_service),
):
    return user_response(service.update_user_status(user_id, data, admin))


# ============================================================================
# VENDORS
# ============================================================================


@router.get("/vendors", response_model=VendorListResponse)
async def list_vendors(
    query: Annotated[AdminVendorQuery, Query()],
    _: SuperAdmin = Depends(get_current_super_admin),
    service: AdminService = Depends(get_admin_service),
):
    vendors, total = service.list_vendors(query)
    return VendorListResponse(
        vendors=[vendor_response(v) for v in vendors], **page_meta(total, query.page, query.limit)
    )


@router.patch("/vendors/{vendor_id}/status", response_model=VendorResponse)
async def update_vendor_status(
    vendor_id: int,
    data: VendorStatusUpdate,
    background_tasks: BackgroundTasks,
    admin: SuperAdmin = Depends(get_current_super_admin),
    service: AdminService = Depends(get_admin_service),
):
    return vendor_response(service.update_vendor_status(vendor_id, data, admin, background_tasks))


# ============================================================================
# CONTENT AND REVIEWS
# ============================================================================


@router.get("/content", response_model=IdeaListResponse)
async def list_content(
    query: Annotated[AdminContentQuery, Query()],
    _: SuperAdmin = Depends(get_current_super_admin),
    service: AdminService = Depends(get_admin_service),
):
    ideas, total = service.list_content(query)
    return IdeaListResponse(ideas=[idea_response(i) for i in ideas], **page_meta(total, query.page, query.limit))


@router.patch("/content/{content_id}/status", response_model=IdeaResponse)
async def update_content_status(
    content_id: int,
    data: ContentStatusUpdate,
    admin: SuperAdmin = Depends(get_current_super_admin),
    service: AdminService = Depends(get_admin_service),
):
    return idea_response(service.update_content_status(content_id, data, admin))


@router.patch("/reviews/{review_id}/status", response_model=ReviewResponse)
async def update_review_status(
    review_id: int,
    data: ReviewModeration,
    admin: SuperAdmin = Depends(get_current_super_admin),
    service: AdminService = Depends(get_admin_service),
):
    """Publish or hide a review; the vendor's rating is recomputed in the same commit"""
    return review_response(service.update_review_status(review_id, data.isPublished, admin))


@router.post("/featured")
async def update_featured(
    data: FeaturedListing,
    admin: SuperAdmin = Depends(get_current_super_admin),
    service: AdminService = Depends(get_admin_service),
):
    return service.update_featured(data, admin)


__all__ = ["router"]
