"""
Reaction counter repository

One document per media item holds a ``counts`` map that only changes through
an atomic ``$inc``.
"""

from typing import Dict

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from review_service.core.errors import StoreError
from review_service.core.logger import logger
from review_service.models.reaction import ReactionKind


def _complete_counts(stored: Dict[str, int]) -> Dict[str, int]:
    return {kind.value: int(stored.get(kind.value, 0)) for kind in ReactionKind}


class ReactionRepository:
    """Repository for per-media reaction counters"""

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def increment(self, source: str, external_id: str, kind: ReactionKind) -> Dict[str, int]:
        """Add one to a reaction counter, creating the counter document if needed"""
        try:
            doc = await self.collection.find_one_and_update(
                {"source": source, "external_id": external_id},
                {"$inc": {f"counts.{kind.value}": 1}},
                upsert=True,
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            logger.error("MongoDB error recording reaction", error=e)
            raise StoreError("Server error while submitting reaction")

        return _complete_counts(doc.get("counts", {}))

    async def get_counts(self, source: str, external_id: str) -> Dict[str, int]:
        try:
            doc = await self.collection.find_one({"source": source, "external_id": external_id})
        except PyMongoError as e:
            logger.error("MongoDB error fetching reactions", error=e)
            raise StoreError("Server error while fetching reactions")

        return _complete_counts(doc.get("counts", {}) if doc else {})
