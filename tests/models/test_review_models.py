"""Tests for review models"""
import pytest
from pydantic import ValidationError

from review_service.models.review import Reply, Review


class TestReviewModel:
    """Test Review model"""

    def test_serializes_with_camel_case_keys(self):
        review = Review(
            id="abc", source="tmdb", external_id="603", text="t", name="n", email="a@b.co", rating=5
        )
        data = review.model_dump(by_alias=True)

        assert data["externalId"] == "603"
        assert "createdAt" in data
        assert data["replies"] == []

    def test_accepts_either_spelling(self):
        review = Review(
            id="abc", source="tmdb", externalId="603", text="t", name="n", email="a@b.co", rating=5
        )
        assert review.external_id == "603"

    @pytest.mark.parametrize("rating", [0, 11])
    def test_rating_bounds(self, rating):
        with pytest.raises(ValidationError):
            Review(id="abc", source="tmdb", external_id="603", text="t", name="n", email="a@b.co", rating=rating)

    def test_reply_has_no_rating(self):
        reply = Reply(id="r1", text="t", name="n", email="a@b.co")
        assert "rating" not in reply.model_dump()
        assert reply.created_at is not None
