"""
Services module initialization
"""

from .review import ReviewService
from .reaction import ReactionService
from .aggregation import average_rating

__all__ = ["ReviewService", "ReactionService", "average_rating"]
