"""Trending score for ideas, computed at read time and never stored"""

from datetime import datetime
from typing import Optional

from ...shared.time import to_naive_utc, utcnow

VIEW_WEIGHT = 0.3
LIKE_WEIGHT = 0.5
SHARE_WEIGHT = 0.2
AGE_PENALTY_PER_DAY = 0.1

SECONDS_PER_DAY = 86400


def days_since(created_at: Optional[datetime], now: Optional[datetime] = None) -> float:
    """Fractional days elapsed since creation (0 when the timestamp is unknown)"""
    if created_at is None:
        return 0.0
    now = to_naive_utc(now) if now else utcnow()
    return (now - to_naive_utc(created_at)).total_seconds() / SECONDS_PER_DAY


def trending_score(
    view_count: int,
    like_count: int,
    share_count: int,
    created_at: Optional[datetime],
    now: Optional[datetime] = None,
) -> float:
    """0.3*views + 0.5*likes + 0.2*shares - 0.1*days_since_creation"""
    return (
        VIEW_WEIGHT * (view_count or 0)
        + LIKE_WEIGHT * (like_count or 0)
        + SHARE_WEIGHT * (share_count or 0)
        - AGE_PENALTY_PER_DAY * days_since(created_at, now)
    )


def rank_by_trending(ideas: list, now: Optional[datetime] = None) -> list[tuple]:
    """
    Pair each idea with its score, highest score first.

    The sort is stable, so ideas with equal scores keep the order they were
    fetched in.
    """
    now = now or utcnow()
    scored = [
        (idea, trending_score(idea.view_count, idea.like_count, idea.share_count, idea.created_at, now))
        for idea in ideas
    ]
    return sorted(scored, key=lambda pair: pair[1], reverse=True)
