"""Tests for Review aggregate invariants and shared field rules."""

import pytest
from ledger.review.review import (
    MAX_TEXT_LENGTH,
    Review,
    is_valid_location_id,
    is_valid_rating,
    is_valid_text,
)
from protean.exceptions import ValidationError


def _make_review(**overrides):
    defaults = {
        "review_id": 0,
        "author": "ST1TEST",
        "location_id": 1,
        "text": "Great place!",
        "rating": 4,
        "timestamp": 0,
    }
    defaults.update(overrides)
    return Review.submit(**defaults)


class TestTextBounds:
    def test_single_character_accepted(self):
        assert _make_review(text="x").text == "x"

    def test_500_characters_accepted(self):
        assert len(_make_review(text="a" * MAX_TEXT_LENGTH).text) == MAX_TEXT_LENGTH

    def test_501_characters_rejected(self):
        with pytest.raises(ValidationError):
            _make_review(text="a" * (MAX_TEXT_LENGTH + 1))

    def test_empty_text_rejected(self):
        with pytest.raises(ValidationError):
            _make_review(text="")


class TestRatingBounds:
    @pytest.mark.parametrize("rating", [1, 3, 5])
    def test_in_range_accepted(self, rating):
        assert _make_review(rating=rating).rating == rating

    @pytest.mark.parametrize("rating", [0, 6, -1])
    def test_out_of_range_rejected(self, rating):
        with pytest.raises(ValidationError) as exc:
            _make_review(rating=rating)
        assert "Rating must be between 1 and 5" in str(exc.value)


class TestLocation:
    def test_zero_location_rejected(self):
        with pytest.raises(ValidationError) as exc:
            _make_review(location_id=0)
        assert "positive integer" in str(exc.value)


class TestFieldRules:
    def test_location_rule(self):
        assert is_valid_location_id(1) is True
        assert is_valid_location_id(0) is False
        assert is_valid_location_id(None) is False

    def test_text_rule(self):
        assert is_valid_text("ok") is True
        assert is_valid_text("") is False
        assert is_valid_text(None) is False
        assert is_valid_text("a" * 501) is False

    def test_rating_rule(self):
        assert is_valid_rating(1) is True
        assert is_valid_rating(5) is True
        assert is_valid_rating(0) is False
        assert is_valid_rating(None) is False
