"""Category models for API requests and responses."""

from pydantic import BaseModel, ConfigDict, Field

from shabelingo.models.memo import generate_uuid
from shabelingo.srs.time import utc_now_ms

DEFAULT_CATEGORY_COLOR = "#9d4edd"


class CategoryBase(BaseModel):
    """Base category model with common fields."""

    name: str = Field(..., min_length=1, max_length=100, description="Category name")
    color: str = Field(
        DEFAULT_CATEGORY_COLOR,
        pattern=r"^#[0-9a-fA-F]{6}$",
        description="Display color as #rrggbb",
    )


class CategoryCreate(CategoryBase):
    """Model for creating a new category."""

    pass


class Category(CategoryBase):
    """Full category model as stored in the database."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(default_factory=generate_uuid, description="Unique identifier")
    userId: str = Field(..., description="Owner user ID (partition key)")
    createdAt: int = Field(default_factory=utc_now_ms, description="Creation timestamp (epoch ms)")
    updatedAt: int = Field(default_factory=utc_now_ms, description="Last update timestamp (epoch ms)")


class CategoryResponse(CategoryBase):
    """Category response model returned by API."""

    id: str
    userId: str
    createdAt: int
    updatedAt: int


class CategoryListResponse(BaseModel):
    """Response containing a list of categories."""

    categories: list[CategoryResponse]
    count: int
