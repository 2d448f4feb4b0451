"""Models for review session endpoints."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, model_validator

from shabelingo.models.memo import MemoResponse


SessionMode = Literal["daily", "random"]


class ReviewSessionResponse(BaseModel):
    """Response for GET /review/session."""

    mode: SessionMode
    memos: list[MemoResponse]
    count: int


class ReviewRequest(BaseModel):
    """A graded attempt: either an explicit self-rating or a pronunciation score."""

    grade: int | None = Field(None, ge=0, le=5, description="Self-rated recall quality (0-5)")
    score: float | None = Field(None, ge=0, le=100, description="Pronunciation score (0-100)")

    @model_validator(mode="after")
    def _exactly_one_source(self) -> "ReviewRequest":
        if (self.grade is None) == (self.score is None):
            raise ValueError("Provide exactly one of 'grade' or 'score'")
        return self


class ReviewResponse(BaseModel):
    """Response for POST /review/{memo_id}."""

    memo: MemoResponse
    grade: int = Field(..., description="Grade applied to the memo")
