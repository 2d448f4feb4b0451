"""Repositories module for data access layer."""

from .memo_repository import (
    MemoRepository,
    MemoNotFoundError,
    ReviewConflictError,
    get_memo_repository,
)
from .category_repository import (
    CategoryRepository,
    CategoryNotFoundError,
    get_category_repository,
)

__all__ = [
    "CategoryRepository",
    "CategoryNotFoundError",
    "get_category_repository",
    "MemoRepository",
    "MemoNotFoundError",
    "ReviewConflictError",
    "get_memo_repository",
]
