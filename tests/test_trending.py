"""
Tests for the idea trending score.
"""
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest

from app.domain.ideas.trending import days_since, rank_by_trending, trending_score

NOW = datetime(2026, 6, 1, 12, 0, 0)


def _idea(name, views=0, likes=0, shares=0, age_days=0.0):
    return SimpleNamespace(
        name=name,
        view_count=views,
        like_count=likes,
        share_count=shares,
        created_at=NOW - timedelta(days=age_days),
    )


class TestTrendingScore:

    def test_weights(self):
        assert trending_score(100, 10, 5, NOW, NOW) == pytest.approx(30 + 5 + 1)

    def test_age_penalty_per_day(self):
        created = NOW - timedelta(days=10)
        assert trending_score(0, 0, 0, created, NOW) == pytest.approx(-1.0)

    def test_ten_day_old_idea(self):
        created = NOW - timedelta(days=10)
        assert trending_score(100, 20, 5, created, NOW) == pytest.approx(40.0)

    def test_fractional_days(self):
        created = NOW - timedelta(hours=12)
        assert trending_score(0, 0, 0, created, NOW) == pytest.approx(-0.05)

    def test_missing_counters_count_as_zero(self):
        assert trending_score(None, None, None, NOW, NOW) == 0

    def test_aware_timestamps_are_normalized(self):
        aware_now = NOW.replace(tzinfo=timezone.utc)
        assert days_since(NOW - timedelta(days=2), aware_now) == pytest.approx(2.0)

    def test_unknown_creation_time_has_no_penalty(self):
        assert days_since(None, NOW) == 0.0


class TestRankByTrending:

    def test_highest_score_first(self):
        ideas = [_idea("old", views=100, age_days=300), _idea("fresh", views=20), _idea("liked", likes=50)]
        ranked = rank_by_trending(ideas, now=NOW)
        assert [idea.name for idea, _ in ranked] == ["liked", "fresh", "old"]

    def test_ties_keep_fetch_order(self):
        ideas = [_idea("first", likes=2), _idea("second", likes=2), _idea("third", likes=2)]
        ranked = rank_by_trending(ideas, now=NOW)
        assert [idea.name for idea, _ in ranked] == ["first", "second", "third"]

    def test_scores_are_returned(self):
        ranked = rank_by_trending([_idea("only", views=10)], now=NOW)
        assert ranked[0][1] == pytest.approx(3.0)
