"""
Request body schemas
"""

from .review import ReviewSubmission, ReplySubmission
from .reaction import ReactionSubmission

__all__ = ["ReviewSubmission", "ReplySubmission", "ReactionSubmission"]
