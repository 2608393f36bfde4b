"""
Validators module initialization
"""

from .review import (
    EMAIL_PATTERN,
    parse_rating,
    validate_email,
    validate_media_key,
    validate_reply_submission,
    validate_review_submission,
)

__all__ = [
    "EMAIL_PATTERN",
    "parse_rating",
    "validate_email",
    "validate_media_key",
    "validate_reply_submission",
    "validate_review_submission",
]
