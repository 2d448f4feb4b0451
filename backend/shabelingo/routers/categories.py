"""Categories API router."""

import logging

from fastapi import APIRouter, HTTPException, Header, status
from shabelingo.models import CategoryCreate, CategoryResponse, CategoryListResponse
from shabelingo.repositories import get_category_repository, CategoryNotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=CategoryListResponse)
async def list_categories(x_user_id: str = Header(...)) -> CategoryListResponse:
    """List the current user's categories, oldest first."""
    repo = get_category_repository()
    categories = repo.list_by_user(x_user_id)
    return CategoryListResponse(
        categories=[CategoryResponse(**category.model_dump()) for category in categories],
        count=len(categories),
    )


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    category_create: CategoryCreate, x_user_id: str = Header(...)
) -> CategoryResponse:
    """Create a category. Color defaults to purple when omitted."""
    repo = get_category_repository()
    category = repo.create(x_user_id, category_create)
    logger.info("Category created: user=%s, category=%s", x_user_id, category.id)
    return CategoryResponse(**category.model_dump())


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(category_id: str, x_user_id: str = Header(...)) -> None:
    """Delete a category."""
    repo = get_category_repository()
    try:
        repo.delete(category_id, x_user_id)
    except CategoryNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Category with ID {category_id} not found",
        )
