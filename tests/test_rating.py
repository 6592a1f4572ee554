"""
Tests for vendor rating aggregation.
"""
from types import SimpleNamespace

from app.domain.reviews.rating import average_rating, rating_stats, round_half_up


class TestRoundHalfUp:
    """Halves round away from zero for positive values, unlike round()."""

    def test_half_rounds_up(self):
        assert round_half_up(2.25, 1) == 2.3
        assert round_half_up(0.5) == 1.0
        assert round_half_up(2.5) == 3.0

    def test_below_half_rounds_down(self):
        assert round_half_up(4.24, 1) == 4.2

    def test_whole_number_unchanged(self):
        assert round_half_up(4.0, 1) == 4.0


class TestAverageRating:

    def test_no_ratings_is_zero(self):
        assert average_rating([]) == 0.0

    def test_single_rating(self):
        assert average_rating([4]) == 4.0

    def test_rounded_to_one_decimal(self):
        # 14 / 3 = 4.666...
        assert average_rating([5, 5, 4]) == 4.7

    def test_three_reviews(self):
        assert average_rating([5, 4, 3]) == 4.0

    def test_accepts_generators(self):
        assert average_rating(r for r in [1, 2]) == 1.5


class TestRatingStats:

    def _review(self, rating, verified=False, images=None, recommend=None):
        return SimpleNamespace(rating=rating, is_verified=verified, images=images, would_recommend=recommend)

    def test_distribution_and_counts(self):
        reviews = [
            self._review(5, verified=True, images=["a.jpg"], recommend=True),
            self._review(5, verified=True),
            self._review(3, recommend=True),
            self._review(1),
        ]
        stats = rating_stats(reviews)

        assert stats["totalReviews"] == 4
        assert stats["averageRating"] == 3.5
        assert stats["ratingDistribution"] == {5: 2, 4: 0, 3: 1, 2: 0, 1: 1}
        assert stats["verifiedReviews"] == 2
        assert stats["reviewsWithImages"] == 1
        assert stats["wouldRecommendCount"] == 2

    def test_three_reviews_average_four(self):
        stats = rating_stats([self._review(5), self._review(4), self._review(3)])
        assert stats["totalReviews"] == 3
        assert stats["averageRating"] == 4.0

    def test_empty(self):
        stats = rating_stats([])
        assert stats["totalReviews"] == 0
        assert stats["averageRating"] == 0.0
        assert sum(stats["ratingDistribution"].values()) == 0
