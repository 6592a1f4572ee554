"""Inquiry repository - Database operations for inquiries and their messages"""

from typing import Optional

from sqlalchemy import desc
from sqlalchemy.orm import Query, Session

from ...models import Inquiry, InquiryMessage, Vendor
from ...shared.filters import search_filter
from ...shared.pagination import apply_sort, paginate
from .schemas import INQUIRY_SORT_FIELDS, InquiryQuery


class InquiryRepository:
    """Repository for inquiry database operations"""

    @staticmethod
    def get_active(db: Session, inquiry_id: int) -> Optional[Inquiry]:
        return db.query(Inquiry).filter(Inquiry.id == inquiry_id, Inquiry.is_active.is_(True)).first()

    @staticmethod
    def get_vendor(db: Session, vendor_id: int) -> Optional[Vendor]:
        return db.query(Vendor).filter(Vendor.id == vendor_id).first()

    @staticmethod
    def get_vendor_for_user(db: Session, user_id: int) -> Optional[Vendor]:
        return db.query(Vendor).filter(Vendor.user_id == user_id).first()

    @staticmethod
    def create(db: Session, vendor: Vendor, inquiry: Inquiry, first_message: InquiryMessage) -> Inquiry:
        """Insert the inquiry with its opening message and bump the vendor's inquiry counter"""
        inquiry.messages.append(first_message)
        db.add(inquiry)
        vendor.inquiry_count = (vendor.inquiry_count or 0) + 1
        db.commit()
        db.refresh(inquiry)
        return inquiry

    @staticmethod
    def save(db: Session, inquiry: Inquiry) -> Inquiry:
        db.commit()
        db.refresh(inquiry)
        return inquiry

    @staticmethod
    def scoped(db: Session, customer_id: Optional[int] = None, vendor_id: Optional[int] = None) -> Query:
        q = db.query(Inquiry).filter(Inquiry.is_active.is_(True))
        if customer_id is not None:
            q = q.filter(Inquiry.customer_id == customer_id)
        if vendor_id is not None:
            q = q.filter(Inquiry.vendor_id == vendor_id)
        return q

    @staticmethod
    def search(scope: Query, query: InquiryQuery) -> tuple[list[Inquiry], int]:
        q = scope
        if query.search:
            q = q.filter(search_filter(query.search, Inquiry.subject, Inquiry.message))
        if query.status:
            q = q.filter(Inquiry.status == query.status)
        q = apply_sort(q, Inquiry, query.sortBy, query.sortOrder, INQUIRY_SORT_FIELDS, "lastMessageAt")
        return paginate(q, query.page, query.limit)

    @staticmethod
    def count_unread(scope: Query, reader_id: int) -> int:
        """Inquiries holding at least one unread message written by someone other than the reader"""
        unread = Inquiry.messages.any((InquiryMessage.sender_id != reader_id) & InquiryMessage.is_read.is_(False))
        return scope.filter(unread).count()

    @staticmethod
    def recent(scope: Query, limit: int) -> list[Inquiry]:
        return scope.order_by(desc(Inquiry.last_message_at), desc(Inquiry.id)).limit(limit).all()
