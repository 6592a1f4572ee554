"""Idea service - Business logic for ideas and inspiration content"""

import logging
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ...models import Idea, User
from ...security_utils import sanitize_html
from ...shared.mapping import apply_columns, to_columns
from ...shared.time import utcnow
from .repository import IdeaRepository
from .schemas import IDEA_FIELD_MAP, IdeaCreate, IdeaLike, IdeaQuery, IdeaUpdate
from .trending import rank_by_trending

logger = logging.getLogger(__name__)

TRENDING_WINDOW_FACTOR = 2


def set_publication(idea: Idea, is_published: Optional[bool] = None, is_featured: Optional[bool] = None):
    """Publish/feature flags with their first-time timestamps"""
    if is_published is not None:
        idea.is_published = is_published
        if is_published and not idea.published_at:
            idea.published_at = utcnow()
    if is_featured is not None:
        idea.is_featured = is_featured
        if is_featured:
            idea.featured_at = utcnow()


class IdeaService:
    """Service layer for idea business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = IdeaRepository()

    def create_idea(self, data: IdeaCreate, user: User) -> Idea:
        if user.role != "vendor":
            raise HTTPException(status_code=403, detail="Only vendors can create ideas")

        columns = to_columns(data, IDEA_FIELD_MAP, model=Idea)
        columns["content"] = sanitize_html(columns["content"])
        columns["author_name"] = columns.get("author_name") or user.name

        idea = self.repo.create(
            self.db,
            author_id=user.id,
            author_role=user.role,
            is_published=False,
            published_at=None,
            **columns,
        )
        logger.info(f"✅ Idea {idea.id} created by vendor user {user.id} (awaiting publication)")
        return idea

    def list_ideas(self, query: IdeaQuery) -> tuple[list[tuple[Idea, Optional[float]]], int]:
        """
        Filtered, sorted, paginated ideas. The trending sort scores every
        matching idea in memory and paginates the ranked list, hottest first
        regardless of ``sortOrder``. The other sorts are pushed down to the
        database.
        """
        q = self.repo.filtered(self.db, query)
        offset = (query.page - 1) * query.limit

        if query.sortBy == "trending":
            candidates = self.repo.newest_first(q).all()
            ranked = rank_by_trending(candidates)
            return ranked[offset : offset + query.limit], len(ranked)

        total = q.order_by(None).count()
        ideas = self.repo.sorted_by(q, query.sortBy, query.sortOrder).offset(offset).limit(query.limit).all()
        return [(idea, None) for idea in ideas], total

    def get_idea(self, idea_id: int) -> Idea:
        """Published idea; each fetch counts as a view"""
        idea = self.repo.get_published(self.db, idea_id)
        if not idea:
            raise HTTPException(status_code=404, detail="Idea not found")
        idea.view_count = (idea.view_count or 0) + 1
        return self.repo.save(self.db, idea)

    def _get_authored(self, idea_id: int, user: User, action: str) -> Idea:
        idea = self.repo.get_active(self.db, idea_id)
        if not idea:
            raise HTTPException(status_code=404, detail="Idea not found")
        if idea.author_id != user.id:
            raise HTTPException(status_code=403, detail=f"You can only {action} your own ideas")
        return idea

    def update_idea(self, idea_id: int, data: IdeaUpdate, user: User) -> Idea:
        idea = self._get_authored(idea_id, user, "update")
        columns = to_columns(data, IDEA_FIELD_MAP, model=Idea)
        is_published = columns.pop("is_published", None)
        if columns.get("content") is not None:
            columns["content"] = sanitize_html(columns["content"])
        apply_columns(idea, columns)
        set_publication(idea, is_published=is_published)
        return self.repo.save(self.db, idea)

    def delete_idea(self, idea_id: int, user: User) -> dict:
        idea = self._get_authored(idea_id, user, "delete")
        idea.is_active = False
        self.repo.save(self.db, idea)
        return {"message": "Idea deleted successfully"}

    def like_idea(self, idea_id: int, data: IdeaLike) -> dict:
        idea = self.repo.get_active(self.db, idea_id)
        if not idea:
            raise HTTPException(status_code=404, detail="Idea not found")
        if data.isLiked:
            idea.like_count = (idea.like_count or 0) + 1
        else:
            idea.like_count = max(0, (idea.like_count or 0) - 1)
        self.repo.save(self.db, idea)
        return {"message": "Idea liked" if data.isLiked else "Idea unliked", "likeCount": idea.like_count}

    def share_idea(self, idea_id: int) -> dict:
        idea = self.repo.get_active(self.db, idea_id)
        if not idea:
            raise HTTPException(status_code=404, detail="Idea not found")
        idea.share_count = (idea.share_count or 0) + 1
        self.repo.save(self.db, idea)
        return {"message": "Share recorded", "shareCount": idea.share_count}

    def get_trending(self, limit: int) -> list[tuple[Idea, float]]:
        """Rank a window of the newest published ideas and keep the top ``limit``"""
        window = self.repo.get_recent_window(self.db, limit * TRENDING_WINDOW_FACTOR)
        return rank_by_trending(window)[:limit]

    def get_featured(self, limit: int) -> list[Idea]:
        return self.repo.get_featured(self.db, limit)

    def get_by_category(self, category: str, limit: int) -> list[Idea]:
        return self.repo.get_by_category(self.db, category, limit)

    def get_by_author(self, author_id: int, limit: int) -> list[Idea]:
        return self.repo.get_by_author(self.db, author_id, limit)

    def get_by_tags(self, tags: list[str], limit: int) -> list[Idea]:
        if not tags:
            raise HTTPException(status_code=400, detail="At least one tag is required")
        return self.repo.get_by_tags(self.db, tags, limit)

    def get_related(self, idea_id: int, limit: int) -> list[Idea]:
        idea = self.repo.get_active(self.db, idea_id)
        if not idea:
            raise HTTPException(status_code=404, detail="Idea not found")
        return self.repo.get_related(self.db, idea, limit)

    def get_my_ideas(self, user: User) -> list[Idea]:
        return self.repo.get_for_author(self.db, user.id)
