"""Vendor router - FastAPI endpoints for vendor profiles"""

import logging
from typing import Annotated

from fastapi import APIRouter, BackgroundTasks, Depends, Query
from sqlalchemy.orm import Session

from ...auth import get_current_super_admin, require_roles
from ...database import get_db
from ...models import SuperAdmin, User
from ...shared.pagination import page_meta
from .schemas import (
    VendorApproval,
    VendorCreate,
    VendorListResponse,
    VendorQuery,
    VendorResponse,
    VendorUpdate,
    vendor_response,
)
from .service import VendorService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/vendors", tags=["Vendors"])


def get_vendor_service(db: Session = Depends(get_db)) -> VendorService:
    """Dependency injection for VendorService"""
    return VendorService(db)


# ============================================================================
# PUBLIC BROWSING
# ============================================================================


@router.get("", response_model=VendorListResponse)
async def list_vendors(
    query: Annotated[VendorQuery, Query()],
    service: VendorService = Depends(get_vendor_service),
):
    """Search approved vendors with filters, sorting and pagination"""
    vendors, total = service.list_vendors(query)
    return VendorListResponse(
        vendors=[vendor_response(v) for v in vendors], **page_meta(total, query.page, query.limit)
    )


@router.get("/featured", response_model=list[VendorResponse])
async def featured_vendors(
    limit: int = Query(10, ge=1, le=50),
    service: VendorService = Depends(get_vendor_service),
):
    return [vendor_response(v) for v in service.get_featured(limit)]


@router.get("/category/{category}", response_model=list[VendorResponse])
async def vendors_by_category(
    category: str,
    limit: int = Query(10, ge=1, le=50),
    service: VendorService = Depends(get_vendor_service),
):
    return [vendor_response(v) for v in service.get_by_category(category, limit)]


@router.get("/district/{district}", response_model=list[VendorResponse])
async def vendors_by_district(
    district: str,
    limit: int = Query(10, ge=1, le=50),
    service: VendorService = Depends(get_vendor_service),
):
    return [vendor_response(v) for v in service.get_by_district(district, limit)]


# ============================================================================
# VENDOR SELF-SERVICE
# ============================================================================


@router.post("", response_model=VendorResponse, status_code=201)
async def create_vendor(
    data: VendorCreate,
    background_tasks: BackgroundTasks,
    current_user: User = Depends(require_roles("vendor")),
    service: VendorService = Depends(get_vendor_service),
):
    """Create the vendor profile for the current user (starts as pending)"""
    return vendor_response(service.create_vendor(data, current_user, background_tasks))


@router.get("/my-profile", response_model=VendorResponse)
async def my_vendor_profile(
    current_user: User = Depends(require_roles("vendor")),
    service: VendorService = Depends(get_vendor_service),
):
    return vendor_response(service.get_my_vendor(current_user))


# ============================================================================
# MODERATION
# ============================================================================


@router.get("/pending", response_model=list[VendorResponse])
async def pending_vendors(
    _: SuperAdmin = Depends(get_current_super_admin),
    service: VendorService = Depends(get_vendor_service),
):
    return [vendor_response(v) for v in service.get_pending()]


@router.patch("/{vendor_id}/approve", response_model=VendorResponse)
async def approve_vendor(
    vendor_id: int,
    data: VendorApproval,
    background_tasks: BackgroundTasks,
    admin: SuperAdmin = Depends(get_current_super_admin),
    service: VendorService = Depends(get_vendor_service),
):
    """Approve, reject or suspend a vendor; the vendor is notified by email"""
    return vendor_response(service.approve_vendor(vendor_id, data, admin, background_tasks))


# ============================================================================
# SINGLE VENDOR
# ============================================================================


@router.get("/{vendor_id}", response_model=VendorResponse)
async def get_vendor(vendor_id: int, service: VendorService = Depends(get_vendor_service)):
    """Public vendor profile; every fetch counts as a view"""
    return vendor_response(service.get_vendor(vendor_id, count_view=True))


@router.patch("/{vendor_id}", response_model=VendorResponse)
async def update_vendor(
    vendor_id: int,
    data: VendorUpdate,
    current_user: User = Depends(require_roles("vendor")),
    service: VendorService = Depends(get_vendor_service),
):
    return vendor_response(service.update_vendor(vendor_id, data, current_user))


@router.delete("/{vendor_id}")
async def delete_vendor(
    vendor_id: int,
    current_user: User = Depends(require_roles("vendor")),
    service: VendorService = Depends(get_vendor_service),
):
    return service.delete_vendor(vendor_id, current_user)


__all__ = ["router"]
