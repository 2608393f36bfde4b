from typing import Optional
from pydantic import BaseModel


class ReactionSubmission(BaseModel):
    """Raw body of a reaction request"""
    reaction: Optional[str] = None
