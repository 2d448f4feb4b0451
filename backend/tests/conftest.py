"""Pytest configuration and fixtures."""

import pytest

from shabelingo.models import Memo
from shabelingo.srs.config import get_review_settings
from shabelingo.srs.time import MS_PER_DAY

# 2025-12-13T00:00:00Z
FIXED_NOW_MS = 1765584000000


@pytest.fixture
def now_ms():
    return FIXED_NOW_MS


@pytest.fixture
def make_memo():
    """Factory for memos with sensible defaults; keyword arguments override fields."""

    def _make(memo_id: str, **overrides) -> Memo:
        data = {
            "id": memo_id,
            "userId": "user-1",
            "originalText": f"word-{memo_id}",
            "createdAt": FIXED_NOW_MS - 30 * MS_PER_DAY,
            "updatedAt": FIXED_NOW_MS - 30 * MS_PER_DAY,
            "nextReviewDate": FIXED_NOW_MS - 30 * MS_PER_DAY,
        }
        data.update(overrides)
        return Memo(**data)

    return _make


@pytest.fixture(autouse=True)
def clear_review_settings_cache():
    """Review settings are cached per process; tests change them via env."""
    get_review_settings.cache_clear()
    yield
    get_review_settings.cache_clear()
