"""Tests for reaction counters"""
import asyncio

import pytest

from review_service.core.errors import ValidationError
from review_service.schemas.reaction import ReactionSubmission


class TestReactionService:
    """Test add_reaction and get_reactions"""

    @pytest.mark.asyncio
    async def test_counts_start_at_zero(self, reaction_service):
        result = await reaction_service.get_reactions("tmdb", "603")
        assert result.counts == {"excellent": 0, "good": 0, "average": 0, "sad": 0, "horror": 0}

    @pytest.mark.asyncio
    async def test_add_reaction(self, reaction_service):
        await reaction_service.add_reaction("tmdb", "603", ReactionSubmission(reaction="good"))
        result = await reaction_service.add_reaction("tmdb", "603", ReactionSubmission(reaction=" GOOD "))

        assert result.counts["good"] == 2
        assert result.counts["sad"] == 0
        assert (await reaction_service.get_reactions("tmdb", "604")).counts["good"] == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("reaction", [None, "", "meh"])
    async def test_unknown_reaction_rejected(self, reaction_service, reaction_collection, reaction):
        with pytest.raises(ValidationError) as exc_info:
            await reaction_service.add_reaction("tmdb", "603", ReactionSubmission(reaction=reaction))
        assert exc_info.value.message.startswith("Reaction must be one of")
        assert reaction_collection.docs == []

    @pytest.mark.asyncio
    async def test_concurrent_increments(self, reaction_service):
        await asyncio.gather(*[
            reaction_service.add_reaction("tmdb", "603", ReactionSubmission(reaction="horror"))
            for _ in range(4)
        ])
        result = await reaction_service.get_reactions("tmdb", "603")
        assert result.counts["horror"] == 4
