"""
Dependencies module initialization
"""

from .review import get_review_repository, get_review_service
from .reaction import get_reaction_repository, get_reaction_service

__all__ = [
    "get_review_repository",
    "get_review_service",
    "get_reaction_repository",
    "get_reaction_service",
]
