"""SRS helpers (SM-2 scheduling, grading and review selection)."""

from .errors import InvalidArgumentError, RetrievalFailedError
from .grading import score_to_grade
from .sm2 import (
    DEFAULT_EASE_FACTOR,
    MIN_EASE_FACTOR,
    REVIEW_STATUSES,
    ReviewStatus,
    SRSResult,
    calculate_srs,
)
from .time import (
    MS_PER_DAY,
    utc_now,
    utc_now_ms,
    datetime_to_ms,
    ms_to_datetime,
    add_days_ms,
    days_between,
    is_review_due,
)

__all__ = [
    "InvalidArgumentError",
    "RetrievalFailedError",
    "score_to_grade",
    "DEFAULT_EASE_FACTOR",
    "MIN_EASE_FACTOR",
    "REVIEW_STATUSES",
    "ReviewStatus",
    "SRSResult",
    "calculate_srs",
    "MS_PER_DAY",
    "utc_now",
    "utc_now_ms",
    "datetime_to_ms",
    "ms_to_datetime",
    "add_days_ms",
    "days_between",
    "is_review_due",
]
