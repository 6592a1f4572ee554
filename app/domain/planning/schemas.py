"""Planning domain schemas"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

RsvpStatus = Literal["pending", "confirmed", "declined"]
TimelineStatus = Literal["pending", "in_progress", "completed", "cancelled"]
Priority = Literal["low", "medium", "high"]


# ============================================================================
# PLANNING
# ============================================================================


class PlanningCreate(BaseModel):
    title: str = Field("My Wedding", min_length=1, max_length=255)
    weddingDate: Optional[datetime] = None
    venue: Optional[str] = None
    totalBudget: float = Field(0.0, ge=0)
    currency: Optional[str] = Field(None, min_length=3, max_length=3)
    notes: Optional[str] = None


class PlanningUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    weddingDate: Optional[datetime] = None
    venue: Optional[str] = None
    totalBudget: Optional[float] = Field(None, ge=0)
    currency: Optional[str] = Field(None, min_length=3, max_length=3)
    notes: Optional[str] = None


PLANNING_FIELD_MAP = {
    "title": "title",
    "weddingDate": "wedding_date",
    "venue": "venue",
    "totalBudget": "total_budget",
    "currency": "currency",
    "notes": "notes",
}


# ============================================================================
# SECTION ITEMS
# ============================================================================


class BudgetItemFields(BaseModel):
    actualCost: Optional[float] = Field(None, ge=0)
    isPaid: Optional[bool] = None
    vendorName: Optional[str] = None
    dueDate: Optional[datetime] = None
    notes: Optional[str] = None


class BudgetItemCreate(BudgetItemFields):
    category: str = Field(..., min_length=1, max_length=100)
    name: str = Field(..., min_length=1, max_length=255)
    estimatedCost: float = Field(0.0, ge=0)


class BudgetItemUpdate(BudgetItemFields):
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    estimatedCost: Optional[float] = Field(None, ge=0)


class BudgetItemsAdd(BaseModel):
    items: list[BudgetItemCreate] = Field(..., min_length=1)


class GuestFields(BaseModel):
    email: Optional[str] = None
    phone: Optional[str] = None
    relationship: Optional[str] = None
    side: Optional[Literal["bride", "groom", "both"]] = None
    rsvpStatus: Optional[RsvpStatus] = None
    plusOnes: Optional[int] = Field(None, ge=0)
    tableNumber: Optional[int] = Field(None, ge=0)
    dietaryRestrictions: Optional[str] = None
    notes: Optional[str] = None


class GuestCreate(GuestFields):
    name: str = Field(..., min_length=1, max_length=255)


class GuestUpdate(GuestFields):
    name: Optional[str] = Field(None, min_length=1, max_length=255)


class GuestsAdd(BaseModel):
    guests: list[GuestCreate] = Field(..., min_length=1)


class TimelineItemFields(BaseModel):
    description: Optional[str] = None
    dueDate: Optional[datetime] = None
    status: Optional[TimelineStatus] = None
    category: Optional[str] = None
    priority: Optional[Priority] = None


class TimelineItemCreate(TimelineItemFields):
    title: str = Field(..., min_length=1, max_length=255)


class TimelineItemUpdate(TimelineItemFields):
    title: Optional[str] = Field(None, min_length=1, max_length=255)


class TimelineItemsAdd(BaseModel):
    items: list[TimelineItemCreate] = Field(..., min_length=1)


class ChecklistItemFields(BaseModel):
    category: Optional[str] = None
    dueDate: Optional[datetime] = None
    isCompleted: Optional[bool] = None
    notes: Optional[str] = None


class ChecklistItemCreate(ChecklistItemFields):
    task: str = Field(..., min_length=1, max_length=500)


class ChecklistItemUpdate(ChecklistItemFields):
    task: Optional[str] = Field(None, min_length=1, max_length=500)


class ChecklistItemsAdd(BaseModel):
    items: list[ChecklistItemCreate] = Field(..., min_length=1)


class PlannedVendor(BaseModel):
    vendorId: Optional[int] = None
    name: Optional[str] = None
    category: Optional[str] = None
    contact: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    status: Optional[str] = None
    quotedPrice: Optional[float] = Field(None, ge=0)
    notes: Optional[str] = None


BUDGET_FIELD_MAP = {
    "category": "category",
    "name": "name",
    "estimatedCost": "estimated_cost",
    "actualCost": "actual_cost",
    "isPaid": "is_paid",
    "vendorName": "vendor_name",
    "dueDate": "due_date",
    "notes": "notes",
}

GUEST_FIELD_MAP = {
    "name": "name",
    "email": "email",
    "phone": "phone",
    "relationship": "relationship_to_couple",
    "side": "side",
    "rsvpStatus": "rsvp_status",
    "plusOnes": "plus_ones",
    "tableNumber": "table_number",
    "dietaryRestrictions": "dietary_restrictions",
    "notes": "notes",
}

TIMELINE_FIELD_MAP = {
    "title": "title",
    "description": "description",
    "dueDate": "due_date",
    "status": "status",
    "category": "category",
    "priority": "priority",
}

CHECKLIST_FIELD_MAP = {
    "task": "task",
    "category": "category",
    "dueDate": "due_date",
    "isCompleted": "is_completed",
    "notes": "notes",
}


# ============================================================================
# RESPONSES
# ============================================================================


class ProgressResponse(BaseModel):
    budget: int
    guests: int
    timeline: int
    checklist: int


class PlanningResponse(BaseModel):
    id: int
    userId: int
    title: str
    weddingDate: Optional[datetime] = None
    venue: Optional[str] = None
    totalBudget: float
    currency: str
    notes: Optional[str] = None
    budgetItems: list[dict] = []
    guests: list[dict] = []
    timeline: list[dict] = []
    checklist: list[dict] = []
    vendors: list[dict] = []
    progress: ProgressResponse
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None


def _item_dict(item, field_map: dict) -> dict:
    data = {"id": item.id}
    for key, column in field_map.items():
        data[key] = getattr(item, column)
    return data


def budget_item_dict(item) -> dict:
    return _item_dict(item, BUDGET_FIELD_MAP)


def guest_dict(guest) -> dict:
    return _item_dict(guest, GUEST_FIELD_MAP)


def timeline_item_dict(item) -> dict:
    return _item_dict(item, TIMELINE_FIELD_MAP)


def checklist_item_dict(item) -> dict:
    data = _item_dict(item, CHECKLIST_FIELD_MAP)
    data["completedAt"] = item.completed_at
    return data


def planning_response(p) -> PlanningResponse:
    return PlanningResponse(
        id=p.id,
        userId=p.user_id,
        title=p.title,
        weddingDate=p.wedding_date,
        venue=p.venue,
        totalBudget=p.total_budget or 0.0,
        currency=p.currency,
        notes=p.notes,
        budgetItems=[budget_item_dict(i) for i in p.budget_items],
        guests=[guest_dict(g) for g in p.guests],
        timeline=[timeline_item_dict(i) for i in p.timeline_items],
        checklist=[checklist_item_dict(i) for i in p.checklist_items],
        vendors=list(p.vendors or []),
        progress=ProgressResponse(
            budget=p.progress_budget,
            guests=p.progress_guests,
            timeline=p.progress_timeline,
            checklist=p.progress_checklist,
        ),
        createdAt=p.created_at,
        updatedAt=p.updated_at,
    )
