"""
Review repository for data access layer following Repository pattern

Replies are embedded in their parent review document and only ever appended
with an atomic ``$push``.
"""

from datetime import datetime, UTC
from typing import List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import PyMongoError

from review_service.core.errors import StoreError
from review_service.core.logger import logger
from review_service.models.review import Reply, ReplyDraft, Review, ReviewDraft

THREAD_ORDER = [("created_at", ASCENDING), ("_id", ASCENDING)]


class ReviewRepository:
    """Repository for review data access operations"""

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    @staticmethod
    def _doc_to_reply(doc: dict) -> Reply:
        return Reply(
            id=str(doc["_id"]),
            text=doc["text"],
            name=doc["name"],
            email=doc["email"],
            created_at=doc["created_at"],
        )

    def _doc_to_review(self, doc: dict) -> Review:
        """Convert MongoDB document to Review model"""
        return Review(
            id=str(doc["_id"]),
            source=doc["source"],
            external_id=doc["external_id"],
            text=doc["text"],
            name=doc["name"],
            email=doc["email"],
            rating=doc["rating"],
            created_at=doc["created_at"],
            replies=[self._doc_to_reply(reply) for reply in doc.get("replies", [])],
        )

    async def create(self, source: str, external_id: str, draft: ReviewDraft) -> str:
        """Insert a new review with no replies and return its id"""
        doc = draft.model_dump()
        doc.update({
            "source": source,
            "external_id": external_id,
            "created_at": datetime.now(UTC),
            "replies": [],
        })

        try:
            result = await self.collection.insert_one(doc)
        except PyMongoError as e:
            logger.error("MongoDB error creating review", error=e)
            raise StoreError("Server error while submitting review")

        return str(result.inserted_id)

    async def find_thread(self, source: str, external_id: str) -> List[Review]:
        """All reviews for a media item, oldest first"""
        try:
            cursor = self.collection.find(
                {"source": source, "external_id": external_id}
            ).sort(THREAD_ORDER)
            docs = await cursor.to_list(length=None)
        except PyMongoError as e:
            logger.error("MongoDB error fetching reviews", error=e)
            raise StoreError("Server error while fetching reviews")

        return [self._doc_to_review(doc) for doc in docs]

    async def push_reply(
        self, source: str, external_id: str, review_id: str, draft: ReplyDraft
    ) -> Optional[Review]:
        """
        Append a reply to the review identified by review_id within the
        (source, external_id) scope.

        Returns the updated review, or None when no such review exists.
        """
        if not ObjectId.is_valid(review_id):
            return None

        reply_doc = draft.model_dump()
        reply_doc.update({
            "_id": ObjectId(),
            "created_at": datetime.now(UTC),
        })

        try:
            doc = await self.collection.find_one_and_update(
                {"_id": ObjectId(review_id), "source": source, "external_id": external_id},
                {"$push": {"replies": reply_doc}},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            logger.error("MongoDB error submitting reply", error=e)
            raise StoreError("Server error while submitting reply")

        return self._doc_to_review(doc) if doc else None
