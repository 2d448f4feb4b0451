"""Review (SRS) API router."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Header, HTTPException, Query, status

from shabelingo.models import (
    Memo,
    MemoResponse,
    ReviewRequest,
    ReviewResponse,
    ReviewSessionResponse,
    SessionMode,
)
from shabelingo.repositories import (
    MemoNotFoundError,
    ReviewConflictError,
    get_memo_repository,
)
from shabelingo.srs.errors import InvalidArgumentError, RetrievalFailedError
from shabelingo.srs.grading import score_to_grade
from shabelingo.srs.queue import ReviewQueue
from shabelingo.srs.selection import filter_evaluable
from shabelingo.srs.sm2 import calculate_srs
from shabelingo.srs.time import utc_now_ms

logger = logging.getLogger(__name__)


router = APIRouter(prefix="/review", tags=["review"])


def get_review_queue() -> ReviewQueue:
    return ReviewQueue(get_memo_repository())


def apply_review(memo: Memo, grade: int, now_ms: int | None = None) -> Memo:
    """Apply a graded attempt to a memo's review state.

    Updates interval, easeFactor, reviewCount and nextReviewDate from the
    SM-2 calculator, moves the memo to "review" and stamps lastReviewDate.

    Args:
        memo: The Memo model to update (mutated in place)
        grade: Attempt grade, 0-5
        now_ms: Attempt time in epoch ms (defaults to now)

    Returns:
        The updated memo (same reference)

    Raises:
        InvalidArgumentError: If the grade or the stored review state is out of range
    """
    if now_ms is None:
        now_ms = utc_now_ms()

    result = calculate_srs(
        grade,
        memo.interval,
        memo.easeFactor,
        memo.reviewCount,
        now_ms=now_ms,
    )

    memo.interval = result.interval
    memo.easeFactor = result.ease_factor
    memo.reviewCount = result.review_count
    memo.nextReviewDate = result.next_review_date
    memo.status = "review"
    memo.lastReviewDate = now_ms
    memo.updatedAt = now_ms
    return memo


@router.get("/session", response_model=ReviewSessionResponse)
async def get_review_session(
    x_user_id: str = Header(...),
    mode: SessionMode = Query("daily", description="daily: due + new memos; random: practice pool"),
    evaluableOnly: bool = Query(False, description="Only memos with a pronunciation reference text"),
) -> ReviewSessionResponse:
    """Return the memos for a review session.

    Answers 503 when the memo store cannot be read in time; no partial
    session is ever returned.
    """
    queue = get_review_queue()
    try:
        if mode == "random":
            memos = await queue.random_session(x_user_id)
        else:
            memos = await queue.daily_session(x_user_id)
    except RetrievalFailedError as e:
        logger.warning("Review session unavailable: user=%s, mode=%s: %s", x_user_id, mode, e)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Review items could not be loaded. Please try again.",
        )

    if evaluableOnly:
        memos = filter_evaluable(memos)

    return ReviewSessionResponse(
        mode=mode,
        memos=[MemoResponse(**memo.model_dump()) for memo in memos],
        count=len(memos),
    )


@router.post("/{memo_id}", response_model=ReviewResponse)
async def submit_review(
    memo_id: str, req: ReviewRequest, x_user_id: str = Header(...)
) -> ReviewResponse:
    """Grade one attempt on a memo and persist its next review state."""
    repo = get_memo_repository()
    try:
        memo = repo.get_by_id(memo_id, x_user_id)
    except MemoNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Memo with ID {memo_id} not found",
        )

    try:
        grade = req.grade if req.grade is not None else score_to_grade(req.score)
    except InvalidArgumentError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        )

    # Request is valid here; errors come from the stored review state.
    try:
        apply_review(memo, grade)
    except InvalidArgumentError as e:
        logger.error("Stored review state rejected: user=%s, memo=%s: %s", x_user_id, memo_id, e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Stored review state for memo {memo_id} is invalid",
        )

    try:
        updated = repo.save_review_state(memo)
    except ReviewConflictError:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Memo with ID {memo_id} was reviewed elsewhere. Reload and try again.",
        )
    except MemoNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Memo with ID {memo_id} not found",
        )

    logger.info(
        "Review applied: user=%s, memo=%s, grade=%d, interval=%d, easeFactor=%s, "
        "reviewCount=%d, nextReviewDate=%d",
        x_user_id,
        memo_id,
        grade,
        updated.interval,
        updated.easeFactor,
        updated.reviewCount,
        updated.nextReviewDate,
    )

    return ReviewResponse(memo=MemoResponse(**updated.model_dump()), grade=grade)
