"""API routers module."""

from .categories import router as categories_router
from .memos import router as memos_router
from .review import router as review_router

__all__ = [
    "categories_router",
    "memos_router",
    "review_router",
]
