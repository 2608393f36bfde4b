"""
Reaction API endpoints
"""

from fastapi import APIRouter, Depends, Request, status

from review_service.core.config import config
from review_service.core.errors import ErrorResponseModel
from review_service.core.rate_limit import limiter
from review_service.dependencies.reaction import get_reaction_service
from review_service.models.reaction import ReactionCounts
from review_service.schemas.reaction import ReactionSubmission
from review_service.services.reaction import ReactionService

router = APIRouter()


@router.get("/{source}/{external_id}", response_model=ReactionCounts)
async def get_reactions(
    source: str,
    external_id: str,
    service: ReactionService = Depends(get_reaction_service),
):
    """
    Reaction tallies for a media item; every kind is present.
    """
    return await service.get_reactions(source, external_id)


@router.post(
    "/{source}/{external_id}",
    response_model=ReactionCounts,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponseModel},
        429: {"description": "Rate limit exceeded"},
    },
)
@limiter.limit(config.reaction_rate_limit)
async def add_reaction(
    request: Request,
    source: str,
    external_id: str,
    submission: ReactionSubmission,
    service: ReactionService = Depends(get_reaction_service),
):
    """
    Count one reaction for a media item. Rate limited.
    """
    return await service.add_reaction(source, external_id, submission)
