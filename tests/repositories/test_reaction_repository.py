"""Tests for the reaction repository against a mocked Motor collection"""
from unittest.mock import AsyncMock, patch

import pytest
from pymongo.errors import PyMongoError

from review_service.core.errors import StoreError
from review_service.models.reaction import ReactionKind
from review_service.repositories.reaction import ReactionRepository


@pytest.fixture
def mock_collection():
    return AsyncMock()


class TestReactionRepository:

    @pytest.mark.asyncio
    async def test_increment_uses_atomic_inc_with_upsert(self, mock_collection):
        mock_collection.find_one_and_update.return_value = {"counts": {"sad": 3}}

        counts = await ReactionRepository(mock_collection).increment("tmdb", "603", ReactionKind.SAD)

        query, update = mock_collection.find_one_and_update.call_args.args
        assert query == {"source": "tmdb", "external_id": "603"}
        assert update == {"$inc": {"counts.sad": 1}}
        assert mock_collection.find_one_and_update.call_args.kwargs["upsert"] is True
        assert counts["sad"] == 3
        assert counts["excellent"] == 0

    @pytest.mark.asyncio
    async def test_get_counts_without_document(self, mock_collection):
        mock_collection.find_one.return_value = None

        counts = await ReactionRepository(mock_collection).get_counts("tmdb", "603")

        assert set(counts) == {kind.value for kind in ReactionKind}
        assert sum(counts.values()) == 0

    @pytest.mark.asyncio
    async def test_store_failure(self, mock_collection):
        mock_collection.find_one.side_effect = PyMongoError("down")

        with patch('review_service.repositories.reaction.logger'):
            with pytest.raises(StoreError):
                await ReactionRepository(mock_collection).get_counts("tmdb", "603")
