"""Booking domain schemas"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

BookingStatus = Literal["pending", "confirmed", "in_progress", "completed", "cancelled"]
PaymentStatus = Literal["pending", "partial", "paid", "refunded"]

BOOKING_SORT_FIELDS = {
    "bookingDate": "booking_date",
    "createdAt": "created_at",
    "totalAmount": "total_amount",
    "status": "status",
}


class BookingPackage(BaseModel):
    name: str
    description: Optional[str] = None
    price: float = Field(..., ge=0)
    currency: Optional[str] = None
    inclusions: list[str] = []
    exclusions: list[str] = []
    duration: Optional[str] = None
    deliverables: list[str] = []


class BookingCreate(BaseModel):
    vendorId: int
    serviceName: str = Field(..., min_length=1, max_length=255)
    serviceCategory: Optional[str] = None
    bookingDate: datetime
    endDate: Optional[datetime] = None
    startTime: Optional[str] = None
    endTime: Optional[str] = None
    venue: Optional[str] = None
    venueAddress: Optional[str] = None
    guestCount: Optional[int] = Field(None, ge=0)
    totalAmount: float = Field(..., ge=0)
    currency: Optional[str] = None
    packages: Optional[list[BookingPackage]] = None
    specialRequirements: Optional[str] = None
    notes: Optional[str] = None


class BookingUpdate(BaseModel):
    """Status and payment updates. Status is assigned as given, without transition checks."""

    status: Optional[BookingStatus] = None
    paymentStatus: Optional[PaymentStatus] = None
    paidAmount: Optional[float] = Field(None, ge=0)
    notes: Optional[str] = None
    vendorNotes: Optional[str] = None
    cancellationReason: Optional[str] = None
    refundAmount: Optional[float] = Field(None, ge=0)
    refundReason: Optional[str] = None
    contractUrl: Optional[str] = None
    invoiceUrl: Optional[str] = None
    receiptUrl: Optional[str] = None


class BookingQuery(BaseModel):
    search: Optional[str] = None
    status: Optional[BookingStatus] = None
    paymentStatus: Optional[PaymentStatus] = None
    serviceCategory: Optional[str] = None
    startDate: Optional[datetime] = None
    endDate: Optional[datetime] = None
    sortBy: str = "bookingDate"
    sortOrder: Literal["asc", "desc"] = "desc"
    page: int = Field(1, ge=1)
    limit: int = Field(10, ge=1, le=100)


class BookingResponse(BaseModel):
    id: int
    customerId: int
    customerName: Optional[str] = None
    vendorId: int
    vendorName: Optional[str] = None
    serviceName: str
    serviceCategory: Optional[str] = None
    bookingDate: datetime
    endDate: Optional[datetime] = None
    startTime: Optional[str] = None
    endTime: Optional[str] = None
    venue: Optional[str] = None
    venueAddress: Optional[str] = None
    guestCount: Optional[int] = None
    totalAmount: float
    currency: str
    status: str
    paymentStatus: str
    paidAmount: float
    remainingAmount: float
    packages: list[dict] = []
    specialRequirements: Optional[str] = None
    notes: Optional[str] = None
    vendorNotes: Optional[str] = None
    cancellationReason: Optional[str] = None
    cancelledAt: Optional[datetime] = None
    completedAt: Optional[datetime] = None
    refundAmount: Optional[float] = None
    rating: Optional[int] = None
    review: Optional[str] = None
    reviewDate: Optional[datetime] = None
    createdAt: Optional[datetime] = None


class BookingListResponse(BaseModel):
    bookings: list[BookingResponse]
    total: int
    page: int
    limit: int
    totalPages: int


class BookingStats(BaseModel):
    total: int
    pending: int
    confirmed: int
    inProgress: int
    completed: int
    cancelled: int


BOOKING_CREATE_FIELDS = {
    "serviceName": "service_name",
    "serviceCategory": "service_category",
    "bookingDate": "booking_date",
    "endDate": "end_date",
    "startTime": "start_time",
    "endTime": "end_time",
    "venue": "venue",
    "venueAddress": "venue_address",
    "guestCount": "guest_count",
    "totalAmount": "total_amount",
    "currency": "currency",
    "packages": "packages",
    "specialRequirements": "special_requirements",
    "notes": "notes",
}

BOOKING_UPDATE_FIELDS = {
    "status": "status",
    "paymentStatus": "payment_status",
    "paidAmount": "paid_amount",
    "notes": "notes",
    "vendorNotes": "vendor_notes",
    "cancellationReason": "cancellation_reason",
    "refundAmount": "refund_amount",
    "refundReason": "refund_reason",
    "contractUrl": "contract_url",
    "invoiceUrl": "invoice_url",
    "receiptUrl": "receipt_url",
}


def booking_response(b) -> BookingResponse:
    return BookingResponse(
        id=b.id,
        customerId=b.customer_id,
        customerName=b.customer.name if b.customer else None,
        vendorId=b.vendor_id,
        vendorName=b.vendor.business_name if b.vendor else None,
        serviceName=b.service_name,
        serviceCategory=b.service_category,
        bookingDate=b.booking_date,
        endDate=b.end_date,
        startTime=b.start_time,
        endTime=b.end_time,
        venue=b.venue,
        venueAddress=b.venue_address,
        guestCount=b.guest_count,
        totalAmount=b.total_amount,
        currency=b.currency,
        status=b.status,
        paymentStatus=b.payment_status,
        paidAmount=b.paid_amount or 0.0,
        remainingAmount=b.remaining_amount or 0.0,
        packages=b.packages or [],
        specialRequirements=b.special_requirements,
        notes=b.notes,
        vendorNotes=b.vendor_notes,
        cancellationReason=b.cancellation_reason,
        cancelledAt=b.cancelled_at,
        completedAt=b.completed_at,
        refundAmount=b.refund_amount,
        rating=b.rating,
        review=b.review,
        reviewDate=b.review_date,
        createdAt=b.created_at,
    )
