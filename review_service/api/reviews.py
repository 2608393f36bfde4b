"""
Review API endpoints

Write endpoints answer with the complete, freshly read thread collection for
the media item so clients always render the current state.
"""

from typing import List

from fastapi import APIRouter, Depends, Request, status

from review_service.core.config import config
from review_service.core.errors import ErrorResponseModel
from review_service.core.rate_limit import limiter
from review_service.dependencies.review import get_review_service
from review_service.models.review import Review, ReviewSummary
from review_service.schemas.review import ReplySubmission, ReviewSubmission
from review_service.services.review import ReviewService

router = APIRouter()


@router.get(
    "/{source}/{external_id}",
    response_model=List[Review],
    responses={500: {"model": ErrorResponseModel}},
)
async def get_reviews(
    source: str,
    external_id: str,
    service: ReviewService = Depends(get_review_service),
):
    """
    List all reviews for a media item, each with its replies inline, oldest first.
    """
    return await service.get_reviews(source, external_id)


@router.get(
    "/{source}/{external_id}/summary",
    response_model=ReviewSummary,
    responses={500: {"model": ErrorResponseModel}},
)
async def get_review_summary(
    source: str,
    external_id: str,
    service: ReviewService = Depends(get_review_service),
):
    """
    Review count, reply count, average rating and rating distribution for a media item.
    """
    return await service.get_summary(source, external_id)


@router.post(
    "/{source}/{external_id}",
    response_model=List[Review],
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponseModel},
        429: {"description": "Rate limit exceeded"},
        500: {"model": ErrorResponseModel},
    },
)
@limiter.limit(config.review_rate_limit)
async def submit_review(
    request: Request,
    source: str,
    external_id: str,
    submission: ReviewSubmission,
    service: ReviewService = Depends(get_review_service),
):
    """
    Post a review. Returns the updated thread collection. Rate limited.
    """
    return await service.submit_review(source, external_id, submission)


@router.post(
    "/{source}/{external_id}/reply/{review_id}",
    response_model=List[Review],
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponseModel},
        404: {"model": ErrorResponseModel},
        429: {"description": "Rate limit exceeded"},
        500: {"model": ErrorResponseModel},
    },
)
@limiter.limit(config.reply_rate_limit)
async def submit_reply(
    request: Request,
    source: str,
    external_id: str,
    review_id: str,
    submission: ReplySubmission,
    service: ReviewService = Depends(get_review_service),
):
    """
    Reply to an existing review. Returns the updated thread collection. Rate limited.
    """
    return await service.submit_reply(source, external_id, review_id, submission)
