"""
Rating aggregation over a thread collection.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, Optional

from review_service.models.review import RATING_MAX, RATING_MIN, Review, ReviewSummary

_ONE_DECIMAL = Decimal("0.1")


def average_rating(reviews: Iterable[Review]) -> Optional[float]:
    """
    Mean rating rounded half-up to one decimal place.

    Returns None for an empty collection; 0 is never reported as an average.
    """
    ratings = [review.rating for review in reviews]
    if not ratings:
        return None

    mean = Decimal(sum(ratings)) / Decimal(len(ratings))
    return float(mean.quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))


def rating_distribution(reviews: Iterable[Review]) -> Dict[str, int]:
    """Count of reviews per rating value, every value present"""
    distribution = {str(value): 0 for value in range(RATING_MIN, RATING_MAX + 1)}
    for review in reviews:
        distribution[str(review.rating)] += 1
    return distribution


def summarize(source: str, external_id: str, reviews: list) -> ReviewSummary:
    return ReviewSummary(
        source=source,
        external_id=external_id,
        total_reviews=len(reviews),
        total_replies=sum(len(review.replies) for review in reviews),
        average_rating=average_rating(reviews),
        rating_distribution=rating_distribution(reviews),
    )
