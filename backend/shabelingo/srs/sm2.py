"""SM-2 scheduling for memo reviews.

The calculator is pure: the attempt time is passed in (or read once from the
wall clock when omitted) and nothing else outside the arguments is consulted.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal

from .errors import InvalidArgumentError
from .time import add_days_ms, utc_now_ms

ReviewStatus = Literal["new", "learning", "review", "remembered"]

# Only "new" and "review" are produced today; "learning" and "remembered" are
# reserved values the client already knows how to display.
REVIEW_STATUSES: tuple[ReviewStatus, ...] = ("new", "learning", "review", "remembered")

MIN_EASE_FACTOR = 1.3
DEFAULT_EASE_FACTOR = 2.5
PASSING_GRADE = 3
MIN_GRADE = 0
MAX_GRADE = 5


@dataclass(frozen=True)
class SRSResult:
    interval: int
    ease_factor: float
    review_count: int
    next_review_date: int


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _clamp_ease_factor(ef: float) -> float:
    return max(MIN_EASE_FACTOR, ef)


def _validate(grade, interval, ease_factor, review_count) -> None:
    if not _is_int(grade) or not MIN_GRADE <= grade <= MAX_GRADE:
        raise InvalidArgumentError(f"grade must be an integer between 0 and 5, got {grade!r}")
    if not _is_int(interval) or interval < 0:
        raise InvalidArgumentError(f"interval must be an integer >= 0, got {interval!r}")
    if (
        isinstance(ease_factor, bool)
        or not isinstance(ease_factor, (int, float))
        or not math.isfinite(ease_factor)
        or ease_factor < MIN_EASE_FACTOR
    ):
        raise InvalidArgumentError(f"ease factor must be a number >= 1.3, got {ease_factor!r}")
    if not _is_int(review_count) or review_count < 0:
        raise InvalidArgumentError(f"review count must be an integer >= 0, got {review_count!r}")


def next_ease_factor(ease_factor: float, grade: int) -> float:
    """EF' = EF + (0.1 - (5-q)*(0.08 + (5-q)*0.02)), floored at 1.3, 2 decimals."""
    penalty = 5 - grade
    ef_prime = ease_factor + (0.1 - penalty * (0.08 + penalty * 0.02))
    return round(_clamp_ease_factor(ef_prime), 2)


def calculate_srs(
    grade: int,
    current_interval: int = 0,
    current_ease_factor: float = DEFAULT_EASE_FACTOR,
    current_review_count: int = 0,
    now_ms: int | None = None,
) -> SRSResult:
    """Compute the next scheduling state after one graded attempt.

    grade: 0-5, where 3 and above counts as a successful recall.

    Rules:
    - success: the 1st and 2nd consecutive successes get 1 and 6 days, later
      ones get round(previous interval * previous EF); review count + 1
    - failure: interval 1 day, review count back to 0
    - EF is updated from the grade on both branches
    - next review date = now + interval days

    Raises:
        InvalidArgumentError: If any input is outside its documented range.
    """
    _validate(grade, current_interval, current_ease_factor, current_review_count)
    if now_ms is None:
        now_ms = utc_now_ms()

    if grade >= PASSING_GRADE:
        if current_review_count == 0:
            interval = 1
        elif current_review_count == 1:
            interval = 6
        else:
            interval = max(1, _round_half_up(current_interval * current_ease_factor))
        review_count = current_review_count + 1
    else:
        interval = 1
        review_count = 0

    return SRSResult(
        interval=interval,
        ease_factor=next_ease_factor(current_ease_factor, grade),
        review_count=review_count,
        next_review_date=add_days_ms(now_ms, interval),
    )
