"""
Review service containing business logic layer
"""

from typing import List

from review_service.core.errors import NotFoundError
from review_service.core.logger import logger
from review_service.models.review import Review, ReviewSummary
from review_service.repositories.review import ReviewRepository
from review_service.schemas.review import ReplySubmission, ReviewSubmission
from review_service.services.aggregation import summarize
from review_service.validators.review import (
    validate_media_key,
    validate_reply_submission,
    validate_review_submission,
)


class ReviewService:
    """Service layer for review and reply business logic"""

    def __init__(self, repository: ReviewRepository):
        self.repository = repository

    async def get_reviews(self, source: str, external_id: str) -> List[Review]:
        """Thread collection for a media item; empty when nobody has reviewed it"""
        source, external_id = validate_media_key(source, external_id)
        return await self.repository.find_thread(source, external_id)

    async def submit_review(
        self, source: str, external_id: str, submission: ReviewSubmission
    ) -> List[Review]:
        """
        Validate and store a review, then return the complete thread
        collection for the media item.
        """
        source, external_id = validate_media_key(source, external_id)
        draft = validate_review_submission(submission)
        review_id = await self.repository.create(source, external_id, draft)

        logger.info(
            f"Created review {review_id}",
            metadata={
                "event": "submit_review",
                "review_id": review_id,
                "source": source,
                "external_id": external_id,
                "rating": draft.rating,
            }
        )

        return await self.repository.find_thread(source, external_id)

    async def submit_reply(
        self, source: str, external_id: str, review_id: str, submission: ReplySubmission
    ) -> List[Review]:
        """
        Validate a reply and append it to an existing review, then return the
        complete thread collection for the media item.

        Raises NotFoundError when the review does not exist within the
        (source, external_id) scope; nothing is written in that case.
        """
        source, external_id = validate_media_key(source, external_id)
        draft = validate_reply_submission(submission)
        parent = await self.repository.push_reply(source, external_id, review_id, draft)
        if parent is None:
            raise NotFoundError("Review not found", details={"review_id": review_id})

        logger.info(
            f"Added reply to review {review_id}",
            metadata={
                "event": "submit_reply",
                "review_id": review_id,
                "reply_id": parent.replies[-1].id,
                "source": source,
                "external_id": external_id,
            }
        )

        return await self.repository.find_thread(source, external_id)

    async def get_summary(self, source: str, external_id: str) -> ReviewSummary:
        source, external_id = validate_media_key(source, external_id)
        reviews = await self.repository.find_thread(source, external_id)
        return summarize(source, external_id, reviews)
