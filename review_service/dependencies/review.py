"""
Dependency injection for Review service and repository
"""

from fastapi import Depends

from review_service.db.mongodb import get_review_collection
from review_service.repositories.review import ReviewRepository
from review_service.services.review import ReviewService


async def get_review_repository(collection=Depends(get_review_collection)) -> ReviewRepository:
    """Get review repository instance"""
    return ReviewRepository(collection)


async def get_review_service(
    repository: ReviewRepository = Depends(get_review_repository)
) -> ReviewService:
    """Get review service instance"""
    return ReviewService(repository)
