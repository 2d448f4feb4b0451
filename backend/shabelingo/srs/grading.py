"""Pronunciation score to SRS grade mapping.

The speech-assessment service returns a 0-100 pronunciation score for an
attempt. The practice session turns it into an SM-2 grade with fixed buckets.
"""

from __future__ import annotations

from .errors import InvalidArgumentError

# (minimum score, grade), highest bucket first
SCORE_BUCKETS: tuple[tuple[int, int], ...] = (
    (90, 5),
    (80, 4),
    (70, 3),
    (60, 2),
)
FLOOR_GRADE = 1


def score_to_grade(score: float) -> int:
    """Map a pronunciation score to an SRS grade.

    Rules:
    - score >= 90 → 5
    - score >= 80 → 4
    - score >= 70 → 3
    - score >= 60 → 2
    - otherwise → 1

    Raises:
        InvalidArgumentError: If score is not within 0-100
    """
    if isinstance(score, bool) or not isinstance(score, (int, float)) or not 0 <= score <= 100:
        raise InvalidArgumentError(f"score must be between 0 and 100, got {score!r}")

    for threshold, grade in SCORE_BUCKETS:
        if score >= threshold:
            return grade
    return FLOOR_GRADE
