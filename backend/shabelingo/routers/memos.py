"""Memos API router."""

from fastapi import APIRouter, HTTPException, Header, status
from shabelingo.models import MemoCreate, MemoUpdate, MemoResponse, MemoListResponse
from shabelingo.repositories import get_memo_repository, MemoNotFoundError

router = APIRouter(prefix="/memos", tags=["memos"])


def get_user_id(x_user_id: str = Header(..., description="User ID header")) -> str:
    """Extract user ID from header."""
    return x_user_id


@router.get("", response_model=MemoListResponse)
async def list_memos(x_user_id: str = Header(...)) -> MemoListResponse:
    """List all memos for the current user."""
    user_id = get_user_id(x_user_id)
    repo = get_memo_repository()
    memos = repo.list_by_user(user_id)
    return MemoListResponse(
        memos=[MemoResponse(**memo.model_dump()) for memo in memos],
        count=len(memos),
    )


@router.get("/{memo_id}", response_model=MemoResponse)
async def get_memo(memo_id: str, x_user_id: str = Header(...)) -> MemoResponse:
    """Get a specific memo by ID."""
    user_id = get_user_id(x_user_id)
    repo = get_memo_repository()
    try:
        memo = repo.get_by_id(memo_id, user_id)
    except MemoNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Memo with ID {memo_id} not found",
        )
    return MemoResponse(**memo.model_dump())


@router.post("", response_model=MemoResponse, status_code=status.HTTP_201_CREATED)
async def create_memo(memo_create: MemoCreate, x_user_id: str = Header(...)) -> MemoResponse:
    """Create a new memo. It starts as a new item, due immediately."""
    user_id = get_user_id(x_user_id)
    repo = get_memo_repository()
    memo = repo.create(user_id, memo_create)
    return MemoResponse(**memo.model_dump())


@router.put("/{memo_id}", response_model=MemoResponse)
async def update_memo(memo_id: str, memo_update: MemoUpdate, x_user_id: str = Header(...)) -> MemoResponse:
    """Update a memo's content. Review state is only changed by reviews."""
    user_id = get_user_id(x_user_id)
    repo = get_memo_repository()
    try:
        memo = repo.update(memo_id, user_id, memo_update)
    except MemoNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Memo with ID {memo_id} not found",
        )
    return MemoResponse(**memo.model_dump())


@router.delete("/{memo_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_memo(memo_id: str, x_user_id: str = Header(...)) -> None:
    """Delete a memo."""
    user_id = get_user_id(x_user_id)
    repo = get_memo_repository()
    try:
        repo.delete(memo_id, user_id)
    except MemoNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Memo with ID {memo_id} not found",
        )
