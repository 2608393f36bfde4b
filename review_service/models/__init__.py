"""
Models module initialization
"""

from .review import Review, Reply, ReviewDraft, ReplyDraft, ReviewSummary
from .reaction import ReactionKind, ReactionCounts

__all__ = [
    "Review",
    "Reply",
    "ReviewDraft",
    "ReplyDraft",
    "ReviewSummary",
    "ReactionKind",
    "ReactionCounts",
]
