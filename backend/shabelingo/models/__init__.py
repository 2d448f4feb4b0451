"""Models module for Pydantic schemas."""

from .category import (
    Category,
    CategoryBase,
    CategoryCreate,
    CategoryResponse,
    CategoryListResponse,
)
from .memo import (
    Memo,
    MemoBase,
    MemoCreate,
    MemoUpdate,
    MemoResponse,
    MemoListResponse,
)
from .review import (
    ReviewRequest,
    ReviewResponse,
    ReviewSessionResponse,
    SessionMode,
)

__all__ = [
    "Category",
    "CategoryBase",
    "CategoryCreate",
    "CategoryResponse",
    "CategoryListResponse",
    "Memo",
    "MemoBase",
    "MemoCreate",
    "MemoUpdate",
    "MemoResponse",
    "MemoListResponse",
    "ReviewRequest",
    "ReviewResponse",
    "ReviewSessionResponse",
    "SessionMode",
]
