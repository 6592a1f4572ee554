"""Idea router - FastAPI endpoints for ideas"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ...auth import get_current_user, require_roles
from ...database import get_db
from ...models import User
from ...shared.filters import split_csv
from ...shared.pagination import page_meta
from .schemas import IdeaCreate, IdeaLike, IdeaListResponse, IdeaQuery, IdeaResponse, IdeaUpdate, idea_response
from .service import IdeaService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ideas", tags=["Ideas"])


def get_idea_service(db: Session = Depends(get_db)) -> IdeaService:
    """Dependency injection for IdeaService"""
    return IdeaService(db)


# ============================================================================
# FEEDS
# ============================================================================


@router.get("", response_model=IdeaListResponse)
async def list_ideas(
    query: Annotated[IdeaQuery, Query()],
    service: IdeaService = Depends(get_idea_service),
):
    """Published ideas; defaults to the trending order"""
    if query.tags:
        query.tags = split_csv(query.tags)
    ranked, total = service.list_ideas(query)
    return IdeaListResponse(
        ideas=[idea_response(idea, score) for idea, score in ranked], **page_meta(total, query.page, query.limit)
    )


@router.get("/featured", response_model=list[IdeaResponse])
async def featured_ideas(
    limit: int = Query(10, ge=1, le=50),
    service: IdeaService = Depends(get_idea_service),
):
    return [idea_response(i) for i in service.get_featured(limit)]


@router.get("/trending", response_model=list[IdeaResponse])
async def trending_ideas(
    limit: int = Query(10, ge=1, le=50),
    service: IdeaService = Depends(get_idea_service),
):
    return [idea_response(idea, score) for idea, score in service.get_trending(limit)]


@router.get("/tags", response_model=list[IdeaResponse])
async def ideas_by_tags(
    tags: str = Query(..., description="Comma separated tags"),
    limit: int = Query(10, ge=1, le=50),
    service: IdeaService = Depends(get_idea_service),
):
    return [idea_response(i) for i in service.get_by_tags(split_csv(tags), limit)]


@router.get("/category/{category}", response_model=list[IdeaResponse])
async def ideas_by_category(
    category: str,
    limit: int = Query(10, ge=1, le=50),
    service: IdeaService = Depends(get_idea_service),
):
    return [idea_response(i) for i in service.get_by_category(category, limit)]


@router.get("/author/{author_id}", response_model=list[IdeaResponse])
async def ideas_by_author(
    author_id: int,
    limit: int = Query(10, ge=1, le=50),
    service: IdeaService = Depends(get_idea_service),
):
    return [idea_response(i) for i in service.get_by_author(author_id, limit)]


@router.get("/my-ideas", response_model=list[IdeaResponse])
async def my_ideas(
    current_user: User = Depends(require_roles("vendor")),
    service: IdeaService = Depends(get_idea_service),
):
    """The vendor's own ideas including unpublished drafts"""
    return [idea_response(i) for i in service.get_my_ideas(current_user)]


# ============================================================================
# AUTHORING
# ============================================================================


@router.post("", response_model=IdeaResponse, status_code=201)
async def create_idea(
    data: IdeaCreate,
    current_user: User = Depends(get_current_user),
    service: IdeaService = Depends(get_idea_service),
):
    return idea_response(service.create_idea(data, current_user))


@router.get("/{idea_id}", response_model=IdeaResponse)
async def get_idea(idea_id: int, service: IdeaService = Depends(get_idea_service)):
    return idea_response(service.get_idea(idea_id))


@router.get("/{idea_id}/related", response_model=list[IdeaResponse])
async def related_ideas(
    idea_id: int,
    limit: int = Query(5, ge=1, le=20),
    service: IdeaService = Depends(get_idea_service),
):
    return [idea_response(i) for i in service.get_related(idea_id, limit)]


@router.patch("/{idea_id}", response_model=IdeaResponse)
async def update_idea(
    idea_id: int,
    data: IdeaUpdate,
    current_user: User = Depends(require_roles("vendor")),
    service: IdeaService = Depends(get_idea_service),
):
    return idea_response(service.update_idea(idea_id, data, current_user))


@router.delete("/{idea_id}")
async def delete_idea(
    idea_id: int,
    current_user: User = Depends(require_roles("vendor")),
    service: IdeaService = Depends(get_idea_service),
):
    return service.delete_idea(idea_id, current_user)


# ============================================================================
# ENGAGEMENT
# ============================================================================


@router.patch("/{idea_id}/like")
async def like_idea(
    idea_id: int,
    data: IdeaLike,
    _: User = Depends(get_current_user),
    service: IdeaService = Depends(get_idea_service),
):
    return service.like_idea(idea_id, data)


@router.post("/{idea_id}/share")
async def share_idea(idea_id: int, service: IdeaService = Depends(get_idea_service)):
    return service.share_idea(idea_id)


__all__ = ["router"]
