"""Review session configuration."""

import os
from functools import lru_cache
from pydantic import BaseModel, Field


class ReviewSettings(BaseModel):
    """Review session limits loaded from environment variables."""

    due_limit: int = Field(20, ge=0)  # Max due memos in a daily session
    new_limit: int = Field(10, ge=0)  # Max new memos in a daily session
    random_limit: int = Field(20, ge=0)  # Max memos in a random session
    random_window: int = Field(50, ge=1)  # Candidates fetched before shuffling
    query_timeout_seconds: float = Field(10.0, gt=0)


@lru_cache()
def get_review_settings() -> ReviewSettings:
    """Get cached review settings from environment variables."""
    return ReviewSettings(
        due_limit=int(os.getenv("REVIEW_DUE_LIMIT", "20")),
        new_limit=int(os.getenv("REVIEW_NEW_LIMIT", "10")),
        random_limit=int(os.getenv("REVIEW_RANDOM_LIMIT", "20")),
        random_window=int(os.getenv("REVIEW_RANDOM_WINDOW", "50")),
        query_timeout_seconds=float(os.getenv("REVIEW_QUERY_TIMEOUT_SECONDS", "10")),
    )
