from enum import Enum
from typing import Dict

from review_service.models.review import CamelModel


class ReactionKind(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    AVERAGE = "average"
    SAD = "sad"
    HORROR = "horror"


class ReactionCounts(CamelModel):
    source: str
    external_id: str
    counts: Dict[str, int]
