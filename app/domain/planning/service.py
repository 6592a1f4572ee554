"""Planning service - Business logic for the wedding planning workbook"""

import csv
import logging
from io import StringIO

from fastapi import HTTPException
from fastapi.responses import StreamingResponse
from pydantic import BaseModel
from sqlalchemy.orm import Session

from ...models import Planning, User
from ...shared.mapping import apply_columns, to_columns
from ...shared.time import to_naive_utc, utcnow
from .progress import SECTIONS, overall_progress, refresh_progress
from .repository import ITEM_MODELS, PlanningRepository
from .schemas import (
    BUDGET_FIELD_MAP,
    CHECKLIST_FIELD_MAP,
    GUEST_FIELD_MAP,
    PLANNING_FIELD_MAP,
    TIMELINE_FIELD_MAP,
    PlannedVendor,
    PlanningCreate,
    PlanningUpdate,
)

logger = logging.getLogger(__name__)

# section name -> (request field map, label used in error messages)
SECTION_FIELDS = {
    "budget": (BUDGET_FIELD_MAP, "Budget item"),
    "guests": (GUEST_FIELD_MAP, "Guest"),
    "timeline": (TIMELINE_FIELD_MAP, "Timeline item"),
    "checklist": (CHECKLIST_FIELD_MAP, "Checklist item"),
}

DATE_COLUMNS = ("due_date", "wedding_date")


def _normalize_dates(columns: dict) -> dict:
    for key in DATE_COLUMNS:
        if columns.get(key) is not None:
            columns[key] = to_naive_utc(columns[key])
    return columns


class PlanningService:
    """Service layer for planning business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = PlanningRepository()

    def _get(self, user: User) -> Planning:
        planning = self.repo.get_for_user(self.db, user.id)
        if not planning:
            raise HTTPException(status_code=404, detail="Planning document not found")
        return planning

    # ========================================================================
    # WORKBOOK
    # ========================================================================

    def create_planning(self, data: PlanningCreate, user: User) -> Planning:
        """
        One workbook per user. A previously deleted workbook is revived empty
        rather than inserting a second row for the same user.
        """
        columns = _normalize_dates(to_columns(data, PLANNING_FIELD_MAP, partial=False, model=Planning))
        if not columns.get("currency"):
            columns.pop("currency", None)

        existing = self.repo.get_any_for_user(self.db, user.id)
        if existing and existing.is_active:
            raise HTTPException(status_code=403, detail="Planning document already exists for this user")

        if existing:
            for section in SECTIONS.values():
                getattr(existing, section[0]).clear()
            existing.vendors = []
            existing.is_active = True
            apply_columns(existing, columns)
            refresh_progress(existing)
            planning = self.repo.save(self.db, existing)
        else:
            planning = self.repo.create(self.db, user_id=user.id, vendors=[], **columns)

        logger.info(f"✅ Planning {planning.id} created for user {user.id}")
        return planning

    def get_planning(self, user: User) -> Planning:
        return self._get(user)

    def update_planning(self, data: PlanningUpdate, user: User) -> Planning:
        planning = self._get(user)
        apply_columns(planning, _normalize_dates(to_columns(data, PLANNING_FIELD_MAP, model=Planning)))
        return self.repo.save(self.db, planning)

    def delete_planning(self, user: User) -> dict:
        planning = self._get(user)
        planning.is_active = False
        self.repo.save(self.db, planning)
        return {"message": "Planning document deleted successfully"}

    # ========================================================================
    # SECTION ITEMS
    # ========================================================================

    def add_items(self, user: User, section: str, items: list[BaseModel]) -> Planning:
        """Append a batch of items to a section and recompute that section's progress"""
        planning = self._get(user)
        field_map, _ = SECTION_FIELDS[section]
        collection = getattr(planning, SECTIONS[section][0])

        for item in items:
            columns = _normalize_dates(to_columns(item, field_map, model=ITEM_MODELS[section]))
            if section == "checklist" and columns.get("is_completed"):
                columns["completed_at"] = utcnow()
            collection.append(self.repo.new_item(section, **columns))

        refresh_progress(planning, section)
        planning = self.repo.save(self.db, planning)
        logger.info(f"✅ Added {len(items)} {section} item(s) to planning {planning.id}")
        return planning

    def _find_item(self, planning: Planning, section: str, item_id: int):
        _, label = SECTION_FIELDS[section]
        for item in getattr(planning, SECTIONS[section][0]):
            if item.id == item_id:
                return item
        raise HTTPException(status_code=404, detail=f"{label} not found")

    def update_item(self, user: User, section: str, item_id: int, data: BaseModel) -> Planning:
        planning = self._get(user)
        item = self._find_item(planning, section, item_id)
        field_map, _ = SECTION_FIELDS[section]
        columns = _normalize_dates(to_columns(data, field_map, model=type(item)))

        if section == "checklist" and "is_completed" in columns:
            if columns["is_completed"] and not item.is_completed:
                columns["completed_at"] = utcnow()
            elif not columns["is_completed"]:
                columns["completed_at"] = None

        apply_columns(item, columns)
        refresh_progress(planning, section)
        return self.repo.save(self.db, planning)

    def remove_item(self, user: User, section: str, item_id: int) -> Planning:
        planning = self._get(user)
        item = self._find_item(planning, section, item_id)
        getattr(planning, SECTIONS[section][0]).remove(item)
        refresh_progress(planning, section)
        return self.repo.save(self.db, planning)

    # ========================================================================
    # PLANNED VENDORS
    # ========================================================================

    def _check_vendor_index(self, planning: Planning, index: int):
        if index < 0 or index >= len(planning.vendors or []):
            raise HTTPException(status_code=404, detail="Vendor not found")

    def add_vendor(self, user: User, data: PlannedVendor) -> Planning:
        planning = self._get(user)
        # JSON columns only register changes on reassignment
        planning.vendors = [*(planning.vendors or []), data.model_dump(exclude_none=True)]
        return self.repo.save(self.db, planning)

    def update_vendor(self, user: User, index: int, data: PlannedVendor) -> Planning:
        planning = self._get(user)
        self._check_vendor_index(planning, index)
        vendors = list(planning.vendors)
        vendors[index] = {**vendors[index], **data.model_dump(exclude_unset=True)}
        planning.vendors = vendors
        return self.repo.save(self.db, planning)

    def remove_vendor(self, user: User, index: int) -> Planning:
        planning = self._get(user)
        self._check_vendor_index(planning, index)
        planning.vendors = [v for i, v in enumerate(planning.vendors) if i != index]
        return self.repo.save(self.db, planning)

    # ========================================================================
    # STATS AND EXPORT
    # ========================================================================

    def get_stats(self, user: User) -> dict:
        planning = self._get(user)
        now = utcnow()

        total_budget = sum(i.estimated_cost or 0.0 for i in planning.budget_items)
        spent_budget = sum(i.actual_cost or 0.0 for i in planning.budget_items)
        guests = planning.guests
        timeline = planning.timeline_items
        checklist = planning.checklist_items

        return {
            "budget": {
                "total": total_budget,
                "spent": spent_budget,
                "remaining": total_budget - spent_budget,
                "progress": planning.progress_budget,
            },
            "guests": {
                "total": len(guests),
                "confirmed": sum(1 for g in guests if g.rsvp_status == "confirmed"),
                "pending": sum(1 for g in guests if g.rsvp_status == "pending"),
                "declined": sum(1 for g in guests if g.rsvp_status == "declined"),
                "progress": planning.progress_guests,
            },
            "timeline": {
                "total": len(timeline),
                "completed": sum(1 for t in timeline if t.status == "completed"),
                "overdue": sum(
                    1 for t in timeline if t.status != "completed" and t.due_date is not None and t.due_date < now
                ),
                "progress": planning.progress_timeline,
            },
            "checklist": {
                "total": len(checklist),
                "completed": sum(1 for c in checklist if c.is_completed),
                "progress": planning.progress_checklist,
            },
            "overallProgress": overall_progress(planning),
        }

    def export_budget_csv(self, user: User) -> StreamingResponse:
        """Budget items of the workbook as a CSV download"""
        planning = self._get(user)

        output = StringIO()
        writer = csv.writer(output)
        writer.writerow(["Category", "Item", "Estimated Cost", "Actual Cost", "Status"])
        for item in planning.budget_items:
            writer.writerow(
                [
                    item.category,
                    item.name,
                    item.estimated_cost or 0,
                    item.actual_cost or 0,
                    "Paid" if item.is_paid else "Pending",
                ]
            )

        output.seek(0)
        filename = f"planning_export_{utcnow().strftime('%Y%m%d_%H%M%S')}.csv"
        logger.info(f"✅ Planning CSV export: {filename} ({len(planning.budget_items)} budget items)")

        return StreamingResponse(
            iter([output.getvalue()]),
            media_type="text/csv",
            headers={
                "Content-Disposition": f"attachment; filename={filename}",
                "Cache-Control": "no-cache",
            },
        )
