"""
API schemas for review and reply submissions

Every field is optional here so that presence is judged by the validation
pipeline and reported with its own messages.
"""

from typing import Any, Optional
from pydantic import BaseModel


class ReplySubmission(BaseModel):
    """Raw body of a reply submit request"""
    text: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None


class ReviewSubmission(ReplySubmission):
    """Raw body of a review submit request; rating may arrive as a number or a string"""
    rating: Optional[Any] = None
