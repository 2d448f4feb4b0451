"""Selection of memos for a review session.

These helpers work on snapshots already in memory (no DB calls). The
repository applies the same predicates server-side; the queue re-applies them
so a store returning extra rows cannot leak ineligible memos into a session.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Iterable

from .time import utc_now_ms

if TYPE_CHECKING:
    from shabelingo.models import Memo


def is_due(memo: Memo, now_ms: int) -> bool:
    """A memo is due once it has been studied and its review date has passed."""
    return memo.status != "new" and memo.nextReviewDate <= now_ms


def is_evaluable(memo: Memo) -> bool:
    """True if the memo has a reference text to score pronunciation against."""
    return bool(memo.evaluationText and memo.evaluationText.strip())


def select_due(memos: Iterable[Memo], limit: int, now_ms: int | None = None) -> list[Memo]:
    """Due memos, most overdue first. Ties keep their input order."""
    if now_ms is None:
        now_ms = utc_now_ms()
    if limit <= 0:
        return []
    due = [m for m in memos if is_due(m, now_ms)]
    due.sort(key=lambda m: m.nextReviewDate)
    return due[:limit]


def select_new(memos: Iterable[Memo], limit: int) -> list[Memo]:
    """Never-studied memos, oldest first."""
    if limit <= 0:
        return []
    new = [m for m in memos if m.status == "new"]
    new.sort(key=lambda m: m.createdAt)
    return new[:limit]


def sample_review_pool(
    candidates: Iterable[Memo],
    limit: int,
    rng: random.Random | None = None,
) -> list[Memo]:
    """Shuffle studied memos from a candidate window and keep `limit` of them.

    The window is whatever the store returned, so the pool is only as random
    as the store's default ordering.
    """
    if limit <= 0:
        return []
    pool = dedupe_by_id(m for m in candidates if m.status != "new")
    if not pool:
        return []
    rng = rng or random.Random()
    return rng.sample(pool, min(limit, len(pool)))


def dedupe_by_id(memos: Iterable[Memo]) -> list[Memo]:
    """Drop repeated memo ids, keeping the first occurrence."""
    seen: set[str] = set()
    unique: list[Memo] = []
    for memo in memos:
        if memo.id in seen:
            continue
        seen.add(memo.id)
        unique.append(memo)
    return unique


def combine_daily(due: Iterable[Memo], new: Iterable[Memo]) -> list[Memo]:
    """Daily session order: due memos first, then new ones, each memo once."""
    return dedupe_by_id([*due, *new])


def filter_evaluable(memos: Iterable[Memo]) -> list[Memo]:
    return [m for m in memos if is_evaluable(m)]
