"""Inquiry router - FastAPI endpoints for inquiries"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ...auth import get_current_user
from ...database import get_db
from ...models import User
from ...shared.pagination import page_meta
from .schemas import (
    InquiryCreate,
    InquiryListResponse,
    InquiryMessageCreate,
    InquiryQuery,
    InquiryResponse,
    InquiryUpdate,
    inquiry_response,
)
from .service import InquiryService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/inquiries", tags=["Inquiries"])


def get_inquiry_service(db: Session = Depends(get_db)) -> InquiryService:
    """Dependency injection for InquiryService"""
    return InquiryService(db)


@router.post("", response_model=InquiryResponse, status_code=201)
async def create_inquiry(
    data: InquiryCreate,
    current_user: User = Depends(get_current_user),
    service: InquiryService = Depends(get_inquiry_service),
):
    return inquiry_response(service.create_inquiry(data, current_user))


@router.get("", response_model=InquiryListResponse)
async def list_inquiries(
    query: Annotated[InquiryQuery, Query()],
    current_user: User = Depends(get_current_user),
    service: InquiryService = Depends(get_inquiry_service),
):
    inquiries, total = service.list_inquiries(query, current_user)
    return InquiryListResponse(
        inquiries=[inquiry_response(i) for i in inquiries], **page_meta(total, query.page, query.limit)
    )


@router.get("/unread-count")
async def unread_count(
    current_user: User = Depends(get_current_user),
    service: InquiryService = Depends(get_inquiry_service),
):
    return {"count": service.get_unread_count(current_user)}


@router.get("/recent", response_model=list[InquiryResponse])
async def recent_inquiries(
    limit: int = Query(5, ge=1, le=50),
    current_user: User = Depends(get_current_user),
    service: InquiryService = Depends(get_inquiry_service),
):
    return [inquiry_response(i) for i in service.get_recent(current_user, limit)]


@router.get("/{inquiry_id}", response_model=InquiryResponse)
async def get_inquiry(
    inquiry_id: int,
    current_user: User = Depends(get_current_user),
    service: InquiryService = Depends(get_inquiry_service),
):
    return inquiry_response(service.get_inquiry(inquiry_id, current_user))


@router.post("/{inquiry_id}/messages", response_model=InquiryResponse, status_code=201)
async def add_message(
    inquiry_id: int,
    data: InquiryMessageCreate,
    current_user: User = Depends(get_current_user),
    service: InquiryService = Depends(get_inquiry_service),
):
    return inquiry_response(service.add_message(inquiry_id, data, current_user))


@router.patch("/{inquiry_id}/read")
async def mark_inquiry_read(
    inquiry_id: int,
    current_user: User = Depends(get_current_user),
    service: InquiryService = Depends(get_inquiry_service),
):
    return service.mark_as_read(inquiry_id, current_user)


@router.patch("/{inquiry_id}", response_model=InquiryResponse)
async def update_inquiry(
    inquiry_id: int,
    data: InquiryUpdate,
    current_user: User = Depends(get_current_user),
    service: InquiryService = Depends(get_inquiry_service),
):
    return inquiry_response(service.update_status(inquiry_id, data, current_user))


@router.delete("/{inquiry_id}")
async def delete_inquiry(
    inquiry_id: int,
    current_user: User = Depends(get_current_user),
    service: InquiryService = Depends(get_inquiry_service),
):
    return service.delete_inquiry(inquiry_id, current_user)


__all__ = ["router"]
