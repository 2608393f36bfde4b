"""
Validation pipeline for review and reply submissions.

Rules run in a fixed order and the first failure wins:
1. presence of text, name, email (and rating for reviews)
2. email shape
3. rating range (reviews only)

The functions are pure: they either return a trimmed draft or raise
ValidationError.
"""

import math
import re
from typing import Any, List, Optional, Tuple

from review_service.core.errors import ValidationError
from review_service.models.review import RATING_MAX, RATING_MIN, ReplyDraft, ReviewDraft
from review_service.schemas.review import ReplySubmission, ReviewSubmission

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

# Leading integer of a string, the remainder is ignored ("7.5" -> 7).
# ASCII digits only; at most three significant digits are read, which is
# enough to place any longer number out of range.
_LEADING_INT = re.compile(r"^\s*([+-]?)0*(\d{1,3})", re.ASCII)

REVIEW_FIELDS_REQUIRED = "All fields (text, name, email, rating) are required"
REPLY_FIELDS_REQUIRED = "All fields (text, name, email) are required"
INVALID_EMAIL = "Invalid email format"
INVALID_RATING = f"Rating must be a number between {RATING_MIN} and {RATING_MAX}"
MEDIA_KEY_REQUIRED = "Source and externalId are required"


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def _missing_fields(submission: ReplySubmission, fields: List[str]) -> List[str]:
    return [field for field in fields if _is_blank(getattr(submission, field))]


def parse_rating(value: Any) -> Optional[int]:
    """
    Parse a submitted rating into an integer.

    Integers are returned as-is, finite floats are truncated toward zero and
    strings contribute their leading signed ASCII digits, truncated to
    three significant digits. Returns None when the value is not a number
    at all.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        return int(match.group(1) + match.group(2)) if match else None
    return None


def validate_email(email: str) -> None:
    if not EMAIL_PATTERN.match(email):
        raise ValidationError(INVALID_EMAIL, details={"rule": "email_format", "field": "email"})


def validate_reply_submission(submission: ReplySubmission) -> ReplyDraft:
    """Validate a reply submission and return its trimmed fields"""
    missing = _missing_fields(submission, ["text", "name", "email"])
    if missing:
        raise ValidationError(REPLY_FIELDS_REQUIRED, details={"rule": "required", "missing": missing})

    email = submission.email.strip()
    validate_email(email)

    return ReplyDraft(text=submission.text.strip(), name=submission.name.strip(), email=email)


def validate_review_submission(submission: ReviewSubmission) -> ReviewDraft:
    """Validate a review submission and return its trimmed fields with the parsed rating"""
    missing = _missing_fields(submission, ["text", "name", "email", "rating"])
    if missing:
        raise ValidationError(REVIEW_FIELDS_REQUIRED, details={"rule": "required", "missing": missing})

    email = submission.email.strip()
    validate_email(email)

    rating = parse_rating(submission.rating)
    if rating is None or rating < RATING_MIN or rating > RATING_MAX:
        raise ValidationError(INVALID_RATING, details={"rule": "rating_range", "field": "rating"})

    return ReviewDraft(
        text=submission.text.strip(),
        name=submission.name.strip(),
        email=email,
        rating=rating,
    )


def validate_media_key(source: str, external_id: str) -> Tuple[str, str]:
    """Trim the (source, external_id) pair that scopes a thread; both must be non-blank"""
    source = (source or "").strip()
    external_id = (external_id or "").strip()
    missing = [name for name, value in (("source", source), ("externalId", external_id)) if not value]
    if missing:
        raise ValidationError(MEDIA_KEY_REQUIRED, details={"rule": "required", "missing": missing})
    return source, external_id
