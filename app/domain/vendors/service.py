"""Vendor service - Business logic for vendor profiles and approval"""

import logging
from typing import Optional

from fastapi import BackgroundTasks, HTTPException
from sqlalchemy.orm import Session

from ...email_service import send_new_vendor_notification, send_safely, send_vendor_approval_email
from ...models import SuperAdmin, User, Vendor
from ...shared.mapping import apply_columns, to_columns
from ...shared.time import utcnow
from .repository import VendorRepository
from .schemas import VENDOR_FIELD_MAP, VendorApproval, VendorCreate, VendorQuery, VendorUpdate

logger = logging.getLogger(__name__)


class VendorService:
    """Service layer for vendor business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = VendorRepository()

    def create_vendor(
        self, data: VendorCreate, user: User, background_tasks: Optional[BackgroundTasks] = None
    ) -> Vendor:
        logger.info(f"📥 Creating vendor profile for user_id: {user.id}")

        if user.role != "vendor":
            raise HTTPException(status_code=403, detail="User does not have vendor role")

        if self.repo.get_by_user_id(self.db, user.id):
            raise HTTPException(status_code=400, detail="User already has a vendor profile")

        vendor = self.repo.create(self.db, user.id, **to_columns(data, VENDOR_FIELD_MAP, partial=False, model=Vendor))
        logger.info(f"✅ Vendor {vendor.id} created with status pending")

        if background_tasks is not None:
            background_tasks.add_task(
                send_safely, send_new_vendor_notification, vendor.business_name, vendor.email or user.email, vendor.id
            )
        return vendor

    def list_vendors(self, query: VendorQuery) -> tuple[list[Vendor], int]:
        return self.repo.search(self.db, query)

    def get_vendor(self, vendor_id: int, count_view: bool = False) -> Vendor:
        vendor = self.repo.get_active(self.db, vendor_id)
        if not vendor:
            raise HTTPException(status_code=404, detail="Vendor not found")
        if count_view:
            vendor.view_count = (vendor.view_count or 0) + 1
            self.repo.save(self.db, vendor)
        return vendor

    def get_my_vendor(self, user: User) -> Vendor:
        vendor = self.repo.get_by_user_id(self.db, user.id)
        if not vendor or not vendor.is_active:
            raise HTTPException(status_code=404, detail="Vendor profile not found")
        return vendor

    def _get_owned(self, vendor_id: int, user: User, action: str) -> Vendor:
        vendor = self.get_vendor(vendor_id)
        if vendor.user_id != user.id:
            logger.warning(f"⚠️ User {user.id} tried to {action} vendor {vendor_id}")
            raise HTTPException(status_code=403, detail=f"You can only {action} your own vendor profile")
        return vendor

    def update_vendor(self, vendor_id: int, data: VendorUpdate, user: User) -> Vendor:
        vendor = self._get_owned(vendor_id, user, "update")
        apply_columns(vendor, to_columns(data, VENDOR_FIELD_MAP, model=Vendor))
        return self.repo.save(self.db, vendor)

    def delete_vendor(self, vendor_id: int, user: User) -> dict:
        vendor = self._get_owned(vendor_id, user, "delete")
        vendor.is_active = False
        self.repo.save(self.db, vendor)
        logger.info(f"🗑️ Vendor {vendor_id} soft deleted")
        return {"message": "Vendor profile deleted successfully"}

    def approve_vendor(
        self,
        vendor_id: int,
        approval: VendorApproval,
        admin: SuperAdmin,
        background_tasks: Optional[BackgroundTasks] = None,
    ) -> Vendor:
        """
        Apply an approval decision. Any status may be set from any other;
        approval stamps approved_at and clears an earlier rejection reason.
        """
        vendor = self.repo.get_by_id(self.db, vendor_id)
        if not vendor:
            raise HTTPException(status_code=404, detail="Vendor not found")

        vendor.status = approval.status
        vendor.approved_by = admin.id
        if approval.status == "approved":
            vendor.approved_at = utcnow()
            vendor.rejection_reason = None
        elif approval.status == "rejected":
            vendor.rejection_reason = approval.rejectionReason

        self.repo.save(self.db, vendor)
        logger.info(f"✅ Vendor {vendor_id} set to {approval.status} by super admin {admin.id}")

        if background_tasks is not None and approval.status in ("approved", "rejected"):
            owner = self.repo.get_owner(self.db, vendor)
            recipient = owner.email if owner else vendor.email
            if recipient:
                background_tasks.add_task(
                    send_safely,
                    send_vendor_approval_email,
                    recipient,
                    vendor.business_name,
                    approval.status,
                    vendor.rejection_reason,
                )
        return vendor

    def get_featured(self, limit: int) -> list[Vendor]:
        return self.repo.get_featured(self.db, limit)

    def get_by_category(self, category: str, limit: int) -> list[Vendor]:
        return self.repo.get_by_category(self.db, category, limit)

    def get_by_district(self, district: str, limit: int) -> list[Vendor]:
        return self.repo.get_by_district(self.db, district, limit)

    def get_pending(self) -> list[Vendor]:
        return self.repo.get_pending(self.db)
