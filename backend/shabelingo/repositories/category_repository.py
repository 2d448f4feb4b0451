"""Repository for Category CRUD operations."""

from azure.cosmos import ContainerProxy
from azure.cosmos.exceptions import CosmosResourceNotFoundError

from shabelingo.db import get_categories_container
from shabelingo.models import Category, CategoryCreate


class CategoryNotFoundError(Exception):
    """Raised when a category is not found."""

    pass


class CategoryRepository:
    """Repository for Category database operations."""

    def __init__(self, container: ContainerProxy | None = None):
        self._container = container

    @property
    def container(self) -> ContainerProxy:
        """Get the container, lazily initializing if needed."""
        if self._container is None:
            self._container = get_categories_container()
        return self._container

    def list_by_user(self, user_id: str) -> list[Category]:
        """List a user's categories in the order they were created."""
        query = "SELECT * FROM c WHERE c.userId = @userId ORDER BY c.createdAt ASC"
        items = self.container.query_items(
            query=query,
            parameters=[{"name": "@userId", "value": user_id}],
            partition_key=user_id,
        )
        return [Category(**item) for item in items]

    def get_by_id(self, category_id: str, user_id: str) -> Category:
        try:
            item = self.container.read_item(item=category_id, partition_key=user_id)
        except CosmosResourceNotFoundError:
            raise CategoryNotFoundError(f"Category with ID {category_id} not found")
        return Category(**item)

    def create(self, user_id: str, category_create: CategoryCreate) -> Category:
        category = Category(userId=user_id, **category_create.model_dump())
        created_item = self.container.create_item(body=category.model_dump())
        return Category(**created_item)

    def delete(self, category_id: str, user_id: str) -> None:
        """Delete a category. Memos keep the stale id in categoryIds."""
        try:
            self.container.delete_item(item=category_id, partition_key=user_id)
        except CosmosResourceNotFoundError:
            raise CategoryNotFoundError(f"Category with ID {category_id} not found")


# Singleton instance
_category_repository: CategoryRepository | None = None


def get_category_repository() -> CategoryRepository:
    """Get the category repository singleton."""
    global _category_repository
    if _category_repository is None:
        _category_repository = CategoryRepository()
    return _category_repository
