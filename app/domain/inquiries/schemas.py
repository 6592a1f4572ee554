"""Inquiry domain schemas"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

InquiryStatus = Literal["pending", "replied", "closed"]
Urgency = Literal["low", "normal", "medium", "high"]

INQUIRY_SORT_FIELDS = {
    "lastMessageAt": "last_message_at",
    "createdAt": "created_at",
    "status": "status",
    "weddingDate": "wedding_date",
}


class InquiryCreate(BaseModel):
    vendorId: int
    subject: str = Field(..., min_length=1, max_length=255)
    message: str = Field(..., min_length=1)
    attachments: Optional[list[str]] = None
    weddingDate: Optional[datetime] = None
    guestCount: Optional[int] = Field(None, ge=0)
    budget: Optional[float] = Field(None, ge=0)
    venue: Optional[str] = None
    serviceCategory: Optional[str] = None
    urgency: Urgency = "normal"


class InquiryMessageCreate(BaseModel):
    message: str = Field(..., min_length=1)
    attachments: Optional[list[str]] = None


class InquiryUpdate(BaseModel):
    """Status assignment is not transition checked; any state may follow any other"""

    status: Optional[InquiryStatus] = None
    closeReason: Optional[str] = Field(None, max_length=500)


class InquiryQuery(BaseModel):
    search: Optional[str] = None
    status: Optional[InquiryStatus] = None
    sortBy: str = "lastMessageAt"
    sortOrder: Literal["asc", "desc"] = "desc"
    page: int = Field(1, ge=1)
    limit: int = Field(10, ge=1, le=100)


class InquiryMessageResponse(BaseModel):
    id: int
    senderId: int
    message: str
    attachments: list[str] = []
    isRead: bool
    readAt: Optional[datetime] = None
    createdAt: Optional[datetime] = None


class InquiryResponse(BaseModel):
    id: int
    customerId: int
    customerName: Optional[str] = None
    vendorId: int
    vendorName: Optional[str] = None
    subject: str
    message: str
    status: str
    weddingDate: Optional[datetime] = None
    guestCount: Optional[int] = None
    budget: Optional[float] = None
    venue: Optional[str] = None
    serviceCategory: Optional[str] = None
    urgency: str
    lastMessageAt: Optional[datetime] = None
    closedAt: Optional[datetime] = None
    closedBy: Optional[int] = None
    closeReason: Optional[str] = None
    messages: list[InquiryMessageResponse] = []
    createdAt: Optional[datetime] = None


class InquiryListResponse(BaseModel):
    inquiries: list[InquiryResponse]
    total: int
    page: int
    limit: int
    totalPages: int


INQUIRY_CREATE_FIELDS = {
    "subject": "subject",
    "message": "message",
    "weddingDate": "wedding_date",
    "guestCount": "guest_count",
    "budget": "budget",
    "venue": "venue",
    "serviceCategory": "service_category",
    "urgency": "urgency",
}


def message_response(m) -> InquiryMessageResponse:
    return InquiryMessageResponse(
        id=m.id,
        senderId=m.sender_id,
        message=m.message,
        attachments=m.attachments or [],
        isRead=m.is_read,
        readAt=m.read_at,
        createdAt=m.created_at,
    )


def inquiry_response(i) -> InquiryResponse:
    return InquiryResponse(
        id=i.id,
        customerId=i.customer_id,
        customerName=i.customer.name if i.customer else None,
        vendorId=i.vendor_id,
        vendorName=i.vendor.business_name if i.vendor else None,
        subject=i.subject,
        message=i.message,
        status=i.status,
        weddingDate=i.wedding_date,
        guestCount=i.guest_count,
        budget=i.budget,
        venue=i.venue,
        serviceCategory=i.service_category,
        urgency=i.urgency,
        lastMessageAt=i.last_message_at,
        closedAt=i.closed_at,
        closedBy=i.closed_by,
        closeReason=i.close_reason,
        messages=[message_response(m) for m in i.messages],
        createdAt=i.created_at,
    )
