"""Idea repository - Database operations for ideas"""

from typing import Optional

from sqlalchemy import String, asc, cast, desc, or_
from sqlalchemy.orm import Query, Session

from ...models import Idea
from ...shared.filters import json_list_contains_any, search_filter
from .schemas import IdeaQuery

# Column orderings for the stored-field sorts, written for descending order
SORT_COLUMNS = {
    "latest": ("created_at",),
    "popular": ("view_count", "like_count"),
    "viewCount": ("view_count",),
    "likeCount": ("like_count",),
}


class IdeaRepository:
    """Repository for idea database operations"""

    @staticmethod
    def published(db: Session) -> Query:
        return db.query(Idea).filter(Idea.is_active.is_(True), Idea.is_published.is_(True))

    @staticmethod
    def get_active(db: Session, idea_id: int) -> Optional[Idea]:
        return db.query(Idea).filter(Idea.id == idea_id, Idea.is_active.is_(True)).first()

    @staticmethod
    def get_published(db: Session, idea_id: int) -> Optional[Idea]:
        return IdeaRepository.published(db).filter(Idea.id == idea_id).first()

    @staticmethod
    def create(db: Session, **idea_data) -> Idea:
        idea = Idea(**idea_data)
        db.add(idea)
        db.commit()
        db.refresh(idea)
        return idea

    @staticmethod
    def save(db: Session, idea: Idea) -> Idea:
        db.commit()
        db.refresh(idea)
        return idea

    @staticmethod
    def filtered(db: Session, query: IdeaQuery) -> Query:
        q = IdeaRepository.published(db)
        if query.search:
            q = q.filter(
                or_(
                    search_filter(query.search, Idea.title, Idea.content, Idea.excerpt),
                    cast(Idea.tags, String).ilike(f"%{query.search}%"),
                )
            )
        if query.type:
            q = q.filter(Idea.type == query.type)
        if query.category:
            q = q.filter(Idea.category == query.category)
        if query.tags:
            q = q.filter(json_list_contains_any(Idea.tags, query.tags))
        if query.isFeatured is not None:
            q = q.filter(Idea.is_featured.is_(query.isFeatured))
        return q

    @staticmethod
    def newest_first(q: Query) -> Query:
        return q.order_by(desc(Idea.created_at), desc(Idea.id))

    @staticmethod
    def sorted_by(q: Query, sort_by: str, sort_order: str) -> Query:
        direction = asc if sort_order == "asc" else desc
        columns = SORT_COLUMNS.get(sort_by, SORT_COLUMNS["latest"])
        return q.order_by(*[direction(getattr(Idea, c)) for c in columns], direction(Idea.id))

    @staticmethod
    def get_featured(db: Session, limit: int) -> list[Idea]:
        return (
            IdeaRepository.published(db)
            .filter(Idea.is_featured.is_(True))
            .order_by(desc(Idea.featured_at), desc(Idea.view_count))
            .limit(limit)
            .all()
        )

    @staticmethod
    def get_by_category(db: Session, category: str, limit: int) -> list[Idea]:
        return (
            IdeaRepository.published(db)
            .filter(Idea.category == category)
            .order_by(desc(Idea.view_count), desc(Idea.like_count))
            .limit(limit)
            .all()
        )

    @staticmethod
    def get_by_author(db: Session, author_id: int, limit: int) -> list[Idea]:
        return (
            IdeaRepository.newest_first(IdeaRepository.published(db).filter(Idea.author_id == author_id))
            .limit(limit)
            .all()
        )

    @staticmethod
    def get_by_tags(db: Session, tags: list[str], limit: int) -> list[Idea]:
        return (
            IdeaRepository.published(db)
            .filter(json_list_contains_any(Idea.tags, tags))
            .order_by(desc(Idea.view_count), desc(Idea.like_count))
            .limit(limit)
            .all()
        )

    @staticmethod
    def get_related(db: Session, idea: Idea, limit: int) -> list[Idea]:
        similar = [Idea.category == idea.category, Idea.type == idea.type]
        if idea.tags:
            similar.append(json_list_contains_any(Idea.tags, idea.tags))
        return (
            IdeaRepository.published(db)
            .filter(Idea.id != idea.id, or_(*similar))
            .order_by(desc(Idea.view_count), desc(Idea.like_count))
            .limit(limit)
            .all()
        )

    @staticmethod
    def get_recent_window(db: Session, size: int) -> list[Idea]:
        return IdeaRepository.newest_first(IdeaRepository.published(db)).limit(size).all()

    @staticmethod
    def get_for_author(db: Session, author_id: int) -> list[Idea]:
        """All of an author's live ideas, drafts included"""
        return (
            IdeaRepository.newest_first(
                db.query(Idea).filter(Idea.author_id == author_id, Idea.is_active.is_(True))
            ).all()
        )
