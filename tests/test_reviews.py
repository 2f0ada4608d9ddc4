"""Tests for services.reviews."""

import math
from decimal import Decimal
from fractions import Fraction
from types import MappingProxyType

import pytest

from storefront.models.models import Review
from storefront.services.reviews import average_rating, rating_value, valid_ratings


def make_review(rating, review_id=1):
    return Review(id=review_id, product_id=1, user_id=7, user_name="ann", message="ok", rating=rating)


class TestAverageRating:
    def test_empty_list_is_zero(self):
        assert average_rating([]) == 0.0

    def test_no_numeric_ratings_is_zero(self):
        reviews = [make_review(None), make_review("bad"), make_review(True)]
        assert average_rating(reviews) == 0.0

    def test_mean_of_numeric_ratings(self):
        reviews = [make_review(5), make_review(4), make_review(3), make_review(1)]
        assert average_rating(reviews) == pytest.approx(13 / 4)

    def test_malformed_ratings_are_skipped(self):
        reviews = [{"rating": 4}, {"rating": "bad"}, {"rating": 2}]
        assert average_rating(reviews) == 3.0

    def test_non_finite_ratings_are_skipped(self):
        reviews = [make_review(math.nan), make_review(math.inf), make_review(2)]
        assert average_rating(reviews) == 2.0

    def test_result_is_float(self):
        result = average_rating([make_review(4)])
        assert isinstance(result, float)
        assert result == 4.0

    def test_accepts_generator(self):
        assert average_rating(make_review(r) for r in (1, 2, 3)) == 2.0


class TestValidRatings:
    def test_keeps_order(self):
        reviews = [make_review(3), make_review(None), make_review(1.5)]
        assert valid_ratings(reviews) == [3.0, 1.5]

    def test_missing_rating_key(self):
        assert valid_ratings([{}, {"message": "hi"}]) == []

    def test_decimal_ratings_count(self):
        reviews = [{"rating": Decimal("4")}, {"rating": Decimal("2")}]
        assert average_rating(reviews) == 3.0

    def test_read_only_mappings(self):
        reviews = [MappingProxyType({"rating": 5}), MappingProxyType({"rating": 1})]
        assert average_rating(reviews) == 3.0


class TestRatingValue:
    @pytest.mark.parametrize("rating,expected", [
        (4, 4.0),
        (2.5, 2.5),
        (Decimal("3.5"), 3.5),
        (Fraction(9, 2), 4.5),
    ])
    def test_numbers(self, rating, expected):
        assert rating_value(rating) == expected

    @pytest.mark.parametrize("rating", [
        None, "4", True, False, math.nan, -math.inf, Decimal("NaN"), Decimal("sNaN"), Decimal("Infinity"),
    ])
    def test_rejected(self, rating):
        assert rating_value(rating) is None
