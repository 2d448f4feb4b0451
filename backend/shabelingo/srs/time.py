"""UTC time helpers for SRS scheduling.

Review timestamps are stored as epoch milliseconds (UTC), matching what the
mobile client writes to the memo documents.
"""

from __future__ import annotations

from datetime import datetime, timezone

MS_PER_DAY = 24 * 60 * 60 * 1000


def utc_now() -> datetime:
    """Return timezone-aware UTC 'now'."""
    return datetime.now(timezone.utc)


def utc_now_ms() -> int:
    """Return current time as epoch milliseconds."""
    return datetime_to_ms(utc_now())


def datetime_to_ms(dt: datetime) -> int:
    """Convert a datetime to epoch milliseconds. Naive datetimes are taken as UTC."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return int(dt.timestamp() * 1000)


def ms_to_datetime(ms: int) -> datetime:
    """Convert epoch milliseconds to a UTC datetime."""
    return datetime.fromtimestamp(ms / 1000, tz=timezone.utc)


def add_days_ms(now_ms: int, days: int) -> int:
    return now_ms + days * MS_PER_DAY


def days_between(first_ms: int, second_ms: int) -> int:
    """Whole days between two timestamps, rounded, regardless of order."""
    return round(abs(first_ms - second_ms) / MS_PER_DAY)


def is_review_due(next_review_date: int, now_ms: int | None = None) -> bool:
    if now_ms is None:
        now_ms = utc_now_ms()
    return now_ms >= next_review_date
