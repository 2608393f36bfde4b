"""
Repositories module initialization
"""

from .review import ReviewRepository
from .reaction import ReactionRepository

__all__ = [
    "ReviewRepository",
    "ReactionRepository",
]
