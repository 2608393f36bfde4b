"""
Dependency injection for Reaction service and repository
"""

from fastapi import Depends

from review_service.db.mongodb import get_reaction_collection
from review_service.repositories.reaction import ReactionRepository
from review_service.services.reaction import ReactionService


async def get_reaction_repository(collection=Depends(get_reaction_collection)) -> ReactionRepository:
    """Get reaction repository instance"""
    return ReactionRepository(collection)


async def get_reaction_service(
    repository: ReactionRepository = Depends(get_reaction_repository)
) -> ReactionService:
    """Get reaction service instance"""
    return ReactionService(repository)
