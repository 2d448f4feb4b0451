"""Review queue: fetches due, new and random memos for a review session."""

from __future__ import annotations

import asyncio
import logging
import random
from typing import TYPE_CHECKING, Callable, TypeVar

from azure.core.exceptions import AzureError
from pydantic import ValidationError

from .config import ReviewSettings, get_review_settings
from .errors import RetrievalFailedError
from .selection import combine_daily, sample_review_pool, select_due, select_new
from .time import utc_now_ms

if TYPE_CHECKING:
    from shabelingo.models import Memo
    from shabelingo.repositories import MemoRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ReviewQueue:
    """Selects memos for review sessions on top of the memo repository.

    Repository calls use the blocking Cosmos SDK, so each one runs in a worker
    thread and is bounded by the configured query timeout.
    """

    def __init__(
        self,
        repository: MemoRepository,
        settings: ReviewSettings | None = None,
        rng: random.Random | None = None,
    ):
        self._repository = repository
        self._settings = settings or get_review_settings()
        self._rng = rng

    async def _fetch(self, query: Callable[..., T], *args, timeout: float | None = None) -> T:
        if timeout is None:
            timeout = self._settings.query_timeout_seconds
        try:
            return await asyncio.wait_for(asyncio.to_thread(query, *args), timeout=timeout)
        except asyncio.TimeoutError:
            logger.warning("Review query %s timed out after %.1fs", query.__name__, timeout)
            raise RetrievalFailedError("Timed out while loading review items")
        except (AzureError, RuntimeError) as e:
            logger.error("Review query %s failed: %s", query.__name__, e)
            raise RetrievalFailedError("Failed to load review items") from e
        except ValidationError as e:
            logger.error(
                "Review query %s returned %d malformed memo document(s)",
                query.__name__,
                e.error_count(),
            )
            raise RetrievalFailedError("Stored review items are malformed") from e

    async def due_items(
        self,
        user_id: str,
        limit: int | None = None,
        now_ms: int | None = None,
        timeout: float | None = None,
    ) -> list[Memo]:
        """Memos whose review date has passed, most overdue first."""
        if limit is None:
            limit = self._settings.due_limit
        if now_ms is None:
            now_ms = utc_now_ms()
        memos = await self._fetch(self._repository.list_due, user_id, now_ms, limit, timeout=timeout)
        return select_due(memos, limit, now_ms)

    async def new_items(self, user_id: str, limit: int | None = None, timeout: float | None = None) -> list[Memo]:
        """Never-studied memos, in the order they were captured."""
        if limit is None:
            limit = self._settings.new_limit
        memos = await self._fetch(self._repository.list_new, user_id, limit, timeout=timeout)
        return select_new(memos, limit)

    async def random_pool(self, user_id: str, limit: int | None = None, timeout: float | None = None) -> list[Memo]:
        """Studied memos sampled from a fixed candidate window, for practice ahead of schedule."""
        if limit is None:
            limit = self._settings.random_limit
        window = max(self._settings.random_window, limit)
        candidates = await self._fetch(self._repository.list_review_window, user_id, window, timeout=timeout)
        return sample_review_pool(candidates, limit, self._rng)

    async def daily_session(
        self,
        user_id: str,
        due_limit: int | None = None,
        new_limit: int | None = None,
        now_ms: int | None = None,
        timeout: float | None = None,
    ) -> list[Memo]:
        """Due memos followed by new ones. Both queries finish before merging.

        If either query fails, or the caller is cancelled, the other query is
        cancelled too and the error propagates; no partial session is built.
        """
        due_task = asyncio.ensure_future(self.due_items(user_id, due_limit, now_ms, timeout))
        new_task = asyncio.ensure_future(self.new_items(user_id, new_limit, timeout))
        try:
            due, new = await asyncio.gather(due_task, new_task)
        except BaseException:
            due_task.cancel()
            new_task.cancel()
            # Collect both outcomes so no task is left running or unretrieved.
            await asyncio.gather(due_task, new_task, return_exceptions=True)
            raise

        session = combine_daily(due, new)
        logger.info(
            "Daily session built: user=%s, due=%d, new=%d, total=%d",
            user_id,
            len(due),
            len(new),
            len(session),
        )
        return session

    async def random_session(
        self, user_id: str, limit: int | None = None, timeout: float | None = None
    ) -> list[Memo]:
        session = await self.random_pool(user_id, limit, timeout)
        logger.info("Random session built: user=%s, total=%d", user_id, len(session))
        return session
