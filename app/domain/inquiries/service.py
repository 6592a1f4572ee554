"""Inquiry service - Business logic for customer to vendor conversations"""

import logging
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.orm import Query, Session

from ...models import Inquiry, InquiryMessage, User
from ...shared.mapping import to_columns
from ...shared.time import to_naive_utc, utcnow
from .repository import InquiryRepository
from .schemas import INQUIRY_CREATE_FIELDS, InquiryCreate, InquiryMessageCreate, InquiryQuery, InquiryUpdate

logger = logging.getLogger(__name__)


class InquiryService:
    """Service layer for inquiry business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = InquiryRepository()

    def create_inquiry(self, data: InquiryCreate, user: User) -> Inquiry:
        vendor = self.repo.get_vendor(self.db, data.vendorId)
        if not vendor or not vendor.is_active:
            raise HTTPException(status_code=404, detail="Vendor not found")

        now = utcnow()
        columns = to_columns(data, INQUIRY_CREATE_FIELDS, partial=False, model=Inquiry)
        columns["wedding_date"] = to_naive_utc(columns.get("wedding_date"))

        inquiry = Inquiry(
            customer_id=user.id,
            vendor_id=vendor.id,
            status="pending",
            last_message_at=now,
            **columns,
        )
        first_message = InquiryMessage(sender_id=user.id, message=data.message, attachments=data.attachments or [])
        inquiry = self.repo.create(self.db, vendor, inquiry, first_message)
        logger.info(f"✅ Inquiry {inquiry.id} opened by user {user.id} for vendor {vendor.id}")
        return inquiry

    def _vendor_id_for(self, user: User):
        vendor = self.repo.get_vendor_for_user(self.db, user.id)
        return vendor.id if vendor else None

    def _scope(self, user: User, strict: bool = True) -> Optional[Query]:
        """Customers see their own inquiries, vendors their business's, admins everything"""
        if user.role == "customer":
            return self.repo.scoped(self.db, customer_id=user.id)
        if user.role == "vendor":
            vendor_id = self._vendor_id_for(user)
            if vendor_id is None:
                if strict:
                    raise HTTPException(status_code=404, detail="Vendor profile not found")
                return None
            return self.repo.scoped(self.db, vendor_id=vendor_id)
        return self.repo.scoped(self.db)

    def _get_accessible(self, inquiry_id: int, user: User, action: str) -> Inquiry:
        inquiry = self.repo.get_active(self.db, inquiry_id)
        if not inquiry:
            raise HTTPException(status_code=404, detail="Inquiry not found")

        if user.role == "customer" and inquiry.customer_id != user.id:
            raise HTTPException(status_code=403, detail=f"You can only {action} your own inquiries")
        if user.role == "vendor" and inquiry.vendor_id != self._vendor_id_for(user):
            raise HTTPException(status_code=403, detail=f"You can only {action} inquiries for your business")
        return inquiry

    def list_inquiries(self, query: InquiryQuery, user: User) -> tuple[list[Inquiry], int]:
        return self.repo.search(self._scope(user), query)

    def get_inquiry(self, inquiry_id: int, user: User) -> Inquiry:
        return self._get_accessible(inquiry_id, user, "view")

    def add_message(self, inquiry_id: int, data: InquiryMessageCreate, user: User) -> Inquiry:
        """
        Append a message to the conversation.

        Any message on a pending inquiry marks it replied, whoever sends it.
        Other statuses are left alone.
        """
        inquiry = self._get_accessible(inquiry_id, user, "add messages to")
        inquiry.messages.append(
            InquiryMessage(sender_id=user.id, message=data.message, attachments=data.attachments or [])
        )
        inquiry.last_message_at = utcnow()

        if inquiry.status == "pending":
            inquiry.status = "replied"

        return self.repo.save(self.db, inquiry)

    def mark_as_read(self, inquiry_id: int, user: User) -> dict:
        inquiry = self._get_accessible(inquiry_id, user, "mark as read")
        now = utcnow()
        for message in inquiry.messages:
            if message.sender_id != user.id and not message.is_read:
                message.is_read = True
                message.read_at = now
        self.repo.save(self.db, inquiry)
        return {"message": "Inquiry marked as read"}

    def update_status(self, inquiry_id: int, data: InquiryUpdate, user: User) -> Inquiry:
        inquiry = self._get_accessible(inquiry_id, user, "update")
        if data.status is not None:
            inquiry.status = data.status
            if data.status == "closed":
                inquiry.closed_at = utcnow()
                inquiry.closed_by = user.id
        if data.closeReason is not None:
            inquiry.close_reason = data.closeReason
        inquiry = self.repo.save(self.db, inquiry)
        logger.info(f"✅ Inquiry {inquiry_id} status set to {inquiry.status} by user {user.id}")
        return inquiry

    def delete_inquiry(self, inquiry_id: int, user: User) -> dict:
        inquiry = self._get_accessible(inquiry_id, user, "delete")
        inquiry.is_active = False
        self.repo.save(self.db, inquiry)
        return {"message": "Inquiry deleted successfully"}

    def get_unread_count(self, user: User) -> int:
        scope = self._scope(user, strict=False)
        if scope is None:
            return 0
        return self.repo.count_unread(scope, user.id)

    def get_recent(self, user: User, limit: int) -> list[Inquiry]:
        scope = self._scope(user, strict=False)
        if scope is None:
            return []
        return self.repo.recent(scope, limit)
