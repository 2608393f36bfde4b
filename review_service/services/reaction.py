"""
Reaction service: validates reaction kinds and drives the counters
"""

from review_service.core.errors import ValidationError
from review_service.core.logger import logger
from review_service.models.reaction import ReactionCounts, ReactionKind
from review_service.repositories.reaction import ReactionRepository
from review_service.schemas.reaction import ReactionSubmission
from review_service.validators.review import validate_media_key

INVALID_REACTION = "Reaction must be one of: " + ", ".join(kind.value for kind in ReactionKind)


def parse_reaction(value) -> ReactionKind:
    if isinstance(value, str):
        try:
            return ReactionKind(value.strip().lower())
        except ValueError:
            pass
    raise ValidationError(INVALID_REACTION, details={"rule": "reaction_kind", "field": "reaction"})


class ReactionService:
    """Service layer for reaction counters"""

    def __init__(self, repository: ReactionRepository):
        self.repository = repository

    async def add_reaction(
        self, source: str, external_id: str, submission: ReactionSubmission
    ) -> ReactionCounts:
        source, external_id = validate_media_key(source, external_id)
        kind = parse_reaction(submission.reaction)
        counts = await self.repository.increment(source, external_id, kind)

        logger.info(
            f"Recorded '{kind.value}' reaction",
            metadata={
                "event": "add_reaction",
                "source": source,
                "external_id": external_id,
                "reaction": kind.value,
            }
        )

        return ReactionCounts(source=source, external_id=external_id, counts=counts)

    async def get_reactions(self, source: str, external_id: str) -> ReactionCounts:
        source, external_id = validate_media_key(source, external_id)
        counts = await self.repository.get_counts(source, external_id)
        return ReactionCounts(source=source, external_id=external_id, counts=counts)
