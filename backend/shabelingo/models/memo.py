"""Memo models for API requests and responses."""

from pydantic import BaseModel, ConfigDict, Field
from uuid import uuid4

from shabelingo.srs.sm2 import DEFAULT_EASE_FACTOR, ReviewStatus
from shabelingo.srs.time import utc_now_ms


def generate_uuid() -> str:
    """Generate a new UUID string."""
    return str(uuid4())


class MemoBase(BaseModel):
    """Base memo model with common fields."""

    originalText: str = Field(..., min_length=1, max_length=2000, description="Word or phrase being learned")
    translatedText: str | None = Field(None, max_length=2000, description="Translation or meaning")
    note: str | None = Field(None, max_length=5000, description="Free-form note")
    language: str | None = Field(None, max_length=16, description="Language code of originalText")
    evaluationText: str | None = Field(
        None,
        max_length=2000,
        description="Reference text pronunciation attempts are scored against",
    )
    categoryIds: list[str] = Field(default_factory=list, description="Categories the memo belongs to")
    tags: list[str] = Field(default_factory=list)


class MemoCreate(MemoBase):
    """Model for creating a new memo."""

    pass


class MemoUpdate(BaseModel):
    """Model for updating an existing memo. Review state is not editable here."""

    originalText: str | None = Field(None, min_length=1, max_length=2000)
    translatedText: str | None = Field(None, max_length=2000)
    note: str | None = Field(None, max_length=5000)
    language: str | None = Field(None, max_length=16)
    evaluationText: str | None = Field(None, max_length=2000)
    categoryIds: list[str] | None = None
    tags: list[str] | None = None


class Memo(MemoBase):
    """Full memo model as stored in the database."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(default_factory=generate_uuid, description="Unique identifier")
    userId: str = Field(..., description="Owner user ID (partition key)")
    createdAt: int = Field(default_factory=utc_now_ms, description="Creation timestamp (epoch ms)")
    updatedAt: int = Field(default_factory=utc_now_ms, description="Last update timestamp (epoch ms)")

    # SRS fields (persisted)
    status: ReviewStatus = Field("new", description="Lifecycle stage")
    interval: int = Field(0, ge=0, description="Days until the next review")
    easeFactor: float = Field(DEFAULT_EASE_FACTOR, description="SM-2 ease factor (min 1.3)")
    reviewCount: int = Field(0, ge=0, description="Consecutive successful reviews")
    nextReviewDate: int = Field(default_factory=utc_now_ms, description="Next review timestamp (epoch ms)")
    lastReviewDate: int | None = Field(None, description="Last graded attempt (epoch ms)")

    # Cosmos document version, used for conditional writes
    etag: str | None = Field(None, alias="_etag", exclude=True)


class MemoResponse(MemoBase):
    """Memo response model returned by API."""

    id: str
    userId: str
    createdAt: int
    updatedAt: int

    status: ReviewStatus
    interval: int
    easeFactor: float
    reviewCount: int
    nextReviewDate: int
    lastReviewDate: int | None


class MemoListResponse(BaseModel):
    """Response containing a list of memos."""

    memos: list[MemoResponse]
    count: int
