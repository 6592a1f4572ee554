"""Planning router - FastAPI endpoints for the wedding planning workbook"""

import logging
from typing import Literal

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ...auth import get_current_user
from ...database import get_db
from ...models import User
from .schemas import (
    BudgetItemsAdd,
    BudgetItemUpdate,
    ChecklistItemsAdd,
    ChecklistItemUpdate,
    GuestsAdd,
    GuestUpdate,
    PlannedVendor,
    PlanningCreate,
    PlanningResponse,
    PlanningUpdate,
    TimelineItemsAdd,
    TimelineItemUpdate,
    planning_response,
)
from .service import PlanningService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/planning", tags=["Planning"])


def get_planning_service(db: Session = Depends(get_db)) -> PlanningService:
    """Dependency injection for PlanningService"""
    return PlanningService(db)


# ============================================================================
# WORKBOOK
# ============================================================================


@router.post("", response_model=PlanningResponse, status_code=201)
async def create_planning(
    data: PlanningCreate,
    current_user: User = Depends(get_current_user),
    service: PlanningService = Depends(get_planning_service),
):
    return planning_response(service.create_planning(data, current_user))


@router.get("", response_model=PlanningResponse)
async def get_planning(
    current_user: User = Depends(get_current_user),
    service: PlanningService = Depends(get_planning_service),
):
    return planning_response(service.get_planning(current_user))


@router.get("/stats")
async def planning_stats(
    current_user: User = Depends(get_current_user),
    service: PlanningService = Depends(get_planning_service),
):
    return service.get_stats(current_user)


@router.get("/export")
async def export_planning(
    format: Literal["json", "csv"] = Query("json"),
    current_user: User = Depends(get_current_user),
    service: PlanningService = Depends(get_planning_service),
):
    """JSON returns the whole workbook; CSV streams the budget items"""
    if format == "csv":
        return service.export_budget_csv(current_user)
    return planning_response(service.get_planning(current_user))


@router.patch("", response_model=PlanningResponse)
async def update_planning(
    data: PlanningUpdate,
    current_user: User = Depends(get_current_user),
    service: PlanningService = Depends(get_planning_service),
):
    return planning_response(service.update_planning(data, current_user))


@router.delete("")
async def delete_planning(
    current_user: User = Depends(get_current_user),
    service: PlanningService = Depends(get_planning_service),
):
    return service.delete_planning(current_user)


# ============================================================================
# BUDGET
# ============================================================================


@router.post("/budget", response_model=PlanningResponse)
async def add_budget_items(
    data: BudgetItemsAdd,
    current_user: User = Depends(get_current_user),
    service: PlanningService = Depends(get_planning_service),
):
    return planning_response(service.add_items(current_user, "budget", data.items))


@router.patch("/budget/{item_id}", response_model=PlanningResponse)
async def update_budget_item(
    item_id: int,
    data: BudgetItemUpdate,
    current_user: User = Depends(get_current_user),
    service: PlanningService = Depends(get_planning_service),
):
    return planning_response(service.update_item(current_user, "budget", item_id, data))


@router.delete("/budget/{item_id}", response_model=PlanningResponse)
async def remove_budget_item(
    item_id: int,
    current_user: User = Depends(get_current_user),
    service: PlanningService = Depends(get_planning_service),
):
    return planning_response(service.remove_item(current_user, "budget", item_id))


# ============================================================================
# GUESTS
# ============================================================================


@router.post("/guests", response_model=PlanningResponse)
async def add_guests(
    data: GuestsAdd,
    current_user: User = Depends(get_current_user),
    service: PlanningService = Depends(get_planning_service),
):
    return planning_response(service.add_items(current_user, "guests", data.guests))


@router.patch("/guests/{guest_id}", response_model=PlanningResponse)
async def update_guest(
    guest_id: int,
    data: GuestUpdate,
    current_user: User = Depends(get_current_user),
    service: PlanningService = Depends(get_planning_service),
):
    return planning_response(service.update_item(current_user, "guests", guest_id, data))


@router.delete("/guests/{guest_id}", response_model=PlanningResponse)
async def remove_guest(
    guest_id: int,
    current_user: User = Depends(get_current_user),
    service: PlanningService = Depends(get_planning_service),
):
    return planning_response(service.remove_item(current_user, "guests", guest_id))


# ============================================================================
# TIMELINE
# ============================================================================


@router.post("/timeline", response_model=PlanningResponse)
async def add_timeline_items(
    data: TimelineItemsAdd,
    current_user: User = Depends(get_current_user),
    service: PlanningService = Depends(get_planning_service),
):
    return planning_response(service.add_items(current_user, "timeline", data.items))


@router.patch("/timeline/{item_id}", response_model=PlanningResponse)
async def update_timeline_item(
    item_id: int,
    data: TimelineItemUpdate,
    current_user: User = Depends(get_current_user),
    service: PlanningService = Depends(get_planning_service),
):
    return planning_response(service.update_item(current_user, "timeline", item_id, data))


@router.delete("/timeline/{item_id}", response_model=PlanningResponse)
async def remove_timeline_item(
    item_id: int,
    current_user: User = Depends(get_current_user),
    service: PlanningService = Depends(get_planning_service),
):
    return planning_response(service.remove_item(current_user, "timeline", item_id))


# ============================================================================
# CHECKLIST
# ============================================================================


@router.post("/checklist", response_model=PlanningResponse)
async def add_checklist_items(
    data: ChecklistItemsAdd,
    current_user: User = Depends(get_current_user),
    service: PlanningService = Depends(get_planning_service),
):
    return planning_response(service.add_items(current_user, "checklist", data.items))


@router.patch("/checklist/{item_id}", response_model=PlanningResponse)
async def update_checklist_item(
    item_id: int,
    data: ChecklistItemUpdate,
    current_user: User = Depends(get_current_user),
    service: PlanningService = Depends(get_planning_service),
):
    return planning_response(service.update_item(current_user, "checklist", item_id, data))


@router.delete("/checklist/{item_id}", response_model=PlanningResponse)
async def remove_checklist_item(
    item_id: int,
    current_user: User = Depends(get_current_user),
    service: PlanningService = Depends(get_planning_service),
):
    return planning_response(service.remove_item(current_user, "checklist", item_id))


# ============================================================================
# PLANNED VENDORS
# ============================================================================


@router.post("/vendors", response_model=PlanningResponse)
async def add_planned_vendor(
    data: PlannedVendor,
    current_user: User = Depends(get_current_user),
    service: PlanningService = Depends(get_planning_service),
):
    return planning_response(service.add_vendor(current_user, data))


@router.patch("/vendors/{vendor_index}", response_model=PlanningResponse)
async def update_planned_vendor(
    vendor_index: int,
    data: PlannedVendor,
    current_user: User = Depends(get_current_user),
    service: PlanningService = Depends(get_planning_service),
):
    return planning_response(service.update_vendor(current_user, vendor_index, data))


@router.delete("/vendors/{vendor_index}", response_model=PlanningResponse)
async def remove_planned_vendor(
    vendor_index: int,
    current_user: User = Depends(get_current_user),
    service: PlanningService = Depends(get_planning_service),
):
    return planning_response(service.remove_vendor(current_user, vendor_index))


__all__ = ["router"]
