from datetime import datetime, UTC
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

RATING_MIN = 1
RATING_MAX = 10


def utc_now():
    """Helper function for Pydantic default_factory to get current UTC time"""
    return datetime.now(UTC)


class CamelModel(BaseModel):
    """Serializes with camelCase keys, accepts either spelling on input"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ReplyDraft(BaseModel):
    """Reply fields that passed validation, trimmed"""
    text: str
    name: str
    email: str


class ReviewDraft(ReplyDraft):
    """Review fields that passed validation, with the parsed rating"""
    rating: int


class Reply(CamelModel):
    id: str
    text: str
    name: str
    email: str
    created_at: datetime = Field(default_factory=utc_now)


class Review(CamelModel):
    id: str
    source: str
    external_id: str
    text: str
    name: str
    email: str
    rating: int = Field(..., ge=RATING_MIN, le=RATING_MAX)
    created_at: datetime = Field(default_factory=utc_now)
    replies: List[Reply] = []


class ReviewSummary(CamelModel):
    """Derived aggregates for one thread collection"""
    source: str
    external_id: str
    total_reviews: int
    total_replies: int
    average_rating: Optional[float] = None
    rating_distribution: Dict[str, int]
