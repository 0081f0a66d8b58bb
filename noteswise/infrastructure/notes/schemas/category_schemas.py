"""Pydantic schemas for Category API request/response validation."""

from datetime import datetime

from pydantic import Field

from noteswise.domain.notes.entities.category import Category as CategoryEntity
from noteswise.infrastructure.common.schemas.base import CamelModel


class CategoryCreateRequest(CamelModel):
    """Schema for creating a category."""

    name: str = Field(..., min_length=1, max_length=100, description="Category name")
    color: str | None = Field(None, max_length=32, description="Display color, e.g. #3B82F6")


class CategoryUpdateRequest(CamelModel):
    """Schema for updating a category. Sending color as null clears it."""

    name: str | None = Field(None, min_length=1, max_length=100, description="New name")
    color: str | None = Field(None, max_length=32, description="New display color")


class Category(CamelModel):
    """Schema for Category response."""

    id: int
    name: str
    color: str | None
    owner_id: str
    created_at: datetime | None
    updated_at: datetime | None

    @classmethod
    def from_entity(cls, category: CategoryEntity) -> "Category":
        return cls(
            id=category.id.value,
            name=category.name,
            color=category.color,
            owner_id=category.owner_id.value,
            created_at=category.created_at,
            updated_at=category.updated_at,
        )
