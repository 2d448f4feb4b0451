"""Repository for Memo CRUD and review-selection queries."""

from azure.core import MatchConditions
from azure.cosmos import ContainerProxy
from azure.cosmos.exceptions import CosmosAccessConditionFailedError, CosmosResourceNotFoundError

from shabelingo.db import get_memos_container
from shabelingo.models import Memo, MemoCreate, MemoUpdate
from shabelingo.srs.time import utc_now_ms


class MemoNotFoundError(Exception):
    """Raised when a memo is not found."""

    pass


class ReviewConflictError(Exception):
    """Raised when a memo changed since it was read (another session reviewed it)."""

    pass


# Memos written before review fields existed have no status and count as new.
_NEW_PREDICATE = "(NOT IS_DEFINED(c.status) OR c.status = 'new')"
_STUDIED_PREDICATE = "(IS_STRING(c.status) AND c.status != 'new')"


class MemoRepository:
    """Repository for Memo database operations."""

    def __init__(self, container: ContainerProxy | None = None):
        """Initialize the repository with an optional container."""
        self._container = container

    @property
    def container(self) -> ContainerProxy:
        """Get the container, lazily initializing if needed."""
        if self._container is None:
            self._container = get_memos_container()
        return self._container

    def _query(self, query: str, parameters: list[dict], user_id: str) -> list[Memo]:
        items = self.container.query_items(
            query=query,
            parameters=parameters,
            partition_key=user_id,
        )
        return [Memo(**item) for item in items]

    def list_by_user(self, user_id: str) -> list[Memo]:
        """List all memos for a user, newest first."""
        query = "SELECT * FROM c WHERE c.userId = @userId ORDER BY c.createdAt DESC"
        return self._query(query, [{"name": "@userId", "value": user_id}], user_id)

    def get_by_id(self, memo_id: str, user_id: str) -> Memo:
        """Get a memo by ID and user ID."""
        try:
            item = self.container.read_item(item=memo_id, partition_key=user_id)
        except CosmosResourceNotFoundError:
            raise MemoNotFoundError(f"Memo with ID {memo_id} not found")
        return Memo(**item)

    def create(self, user_id: str, memo_create: MemoCreate) -> Memo:
        """Create a new memo with fresh review state (due now, status new)."""
        memo = Memo(userId=user_id, **memo_create.model_dump())
        created_item = self.container.create_item(body=memo.model_dump())
        return Memo(**created_item)

    def update(self, memo_id: str, user_id: str, memo_update: MemoUpdate) -> Memo:
        """Update a memo's content fields."""
        existing = self.get_by_id(memo_id, user_id)

        update_data = memo_update.model_dump(exclude_unset=True)
        if update_data:
            for key, value in update_data.items():
                setattr(existing, key, value)
            existing.updatedAt = utc_now_ms()

        updated_item = self.container.replace_item(
            item=memo_id,
            body=existing.model_dump(),
        )
        return Memo(**updated_item)

    def save_review_state(self, memo: Memo) -> Memo:
        """Persist a reviewed memo.

        When the memo carries the etag it was read with, the write only
        succeeds if nobody else changed the document in between.

        Raises:
            MemoNotFoundError: If the memo was deleted.
            ReviewConflictError: If the stored memo changed since it was read.
        """
        kwargs = {}
        if memo.etag:
            kwargs = {"etag": memo.etag, "match_condition": MatchConditions.IfNotModified}
        try:
            updated_item = self.container.replace_item(
                item=memo.id,
                body=memo.model_dump(),
                **kwargs,
            )
        except CosmosAccessConditionFailedError:
            raise ReviewConflictError(f"Memo with ID {memo.id} was modified by another session")
        except CosmosResourceNotFoundError:
            raise MemoNotFoundError(f"Memo with ID {memo.id} not found")
        return Memo(**updated_item)

    def list_due(self, user_id: str, now_ms: int, limit: int) -> list[Memo]:
        """Studied memos whose nextReviewDate has passed, most overdue first."""
        query = (
            "SELECT TOP @limit * FROM c "
            f"WHERE c.userId = @userId AND {_STUDIED_PREDICATE} AND c.nextReviewDate <= @now "
            "ORDER BY c.nextReviewDate ASC"
        )
        parameters = [
            {"name": "@limit", "value": limit},
            {"name": "@userId", "value": user_id},
            {"name": "@now", "value": now_ms},
        ]
        return self._query(query, parameters, user_id)

    def list_new(self, user_id: str, limit: int) -> list[Memo]:
        """Memos never reviewed, oldest first."""
        query = (
            "SELECT TOP @limit * FROM c "
            f"WHERE c.userId = @userId AND {_NEW_PREDICATE} "
            "ORDER BY c.createdAt ASC"
        )
        parameters = [
            {"name": "@limit", "value": limit},
            {"name": "@userId", "value": user_id},
        ]
        return self._query(query, parameters, user_id)

    def list_review_window(self, user_id: str, window: int) -> list[Memo]:
        """Up to `window` studied memos in the store's default order."""
        query = f"SELECT TOP @limit * FROM c WHERE c.userId = @userId AND {_STUDIED_PREDICATE}"
        parameters = [
            {"name": "@limit", "value": window},
            {"name": "@userId", "value": user_id},
        ]
        return self._query(query, parameters, user_id)

    def delete(self, memo_id: str, user_id: str) -> None:
        """Delete a memo by ID."""
        try:
            self.container.delete_item(item=memo_id, partition_key=user_id)
        except CosmosResourceNotFoundError:
            raise MemoNotFoundError(f"Memo with ID {memo_id} not found")


# Singleton instance
_memo_repository: MemoRepository | None = None


def get_memo_repository() -> MemoRepository:
    """Get the memo repository singleton."""
    global _memo_repository
    if _memo_repository is None:
        _memo_repository = MemoRepository()
    return _memo_repository
