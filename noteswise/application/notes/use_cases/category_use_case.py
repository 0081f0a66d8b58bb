"""Use case for category operations."""

import structlog

from noteswise.application.notes.protocols.category_repository import (
    CategoryRepositoryProtocol,
)
from noteswise.domain.common.value_objects import CategoryId, OwnerId
from noteswise.domain.notes.entities.category import Category
from noteswise.exceptions import CategoryNotFoundError, ValidationError

logger = structlog.get_logger(__name__)


class CategoryUseCase:
    """Use case for category CRUD operations."""

    def __init__(self, category_repository: CategoryRepositoryProtocol) -> None:
        """Initialize use case with repository protocols."""
        self.category_repository = category_repository

    def list_categories(self, owner_id: str) -> list[Category]:
        return self.category_repository.find_all(OwnerId(owner_id))

    def get_category(self, category_id: int, owner_id: str) -> Category:
        """
        Get one category of the owner.

        Raises:
            CategoryNotFoundError: If the category does not exist for the owner
        """
        category = self.category_repository.find_by_id(CategoryId(category_id), OwnerId(owner_id))
        if not category:
            raise CategoryNotFoundError(category_id)
        return category

    def create_category(self, owner_id: str, name: str, color: str | None = None) -> Category:
        """
        Create a new category for the owner.

        Args:
            owner_id: ID of the authenticated owner
            name: Category name
            color: Optional display color

        Returns:
            Created category domain entity
        """
        category = Category.create(owner_id=OwnerId(owner_id), name=name, color=color)
        category = self.category_repository.create(category)

        logger.info("created_category", category_id=category.id.value, owner_id=owner_id)
        return category

    def update_category(
        self,
        category_id: int,
        owner_id: str,
        name: str | None = None,
        color: str | None = None,
        clear_color: bool = False,
    ) -> Category:
        """
        Update a category's name and/or color.

        Fields left as None keep their stored value. clear_color removes the color.

        Raises:
            CategoryNotFoundError: If the category does not exist for the owner
            ValidationError: If nothing would change
        """
        if name is None and color is None and not clear_color:
            raise ValidationError("At least one of name or color must be provided")

        category = self.get_category(category_id, owner_id)

        if name is not None:
            category.rename(name)
        if clear_color:
            category.change_color(None)
        elif color is not None:
            category.change_color(color)

        updated = self.category_repository.update(category)
        if not updated:
            raise CategoryNotFoundError(category_id)

        logger.info("updated_category", category_id=category_id, owner_id=owner_id)
        return updated

    def delete_category(self, category_id: int, owner_id: str, delete_notes: bool = False) -> None:
        """
        Delete a category.

        Args:
            category_id: ID of the category to delete
            owner_id: ID of the authenticated owner
            delete_notes: Also delete the notes filed under the category.
                By default they are kept and only lose their category.

        Raises:
            CategoryNotFoundError: If the category does not exist for the owner
        """
        deleted = self.category_repository.delete(
            CategoryId(category_id), OwnerId(owner_id), delete_notes=delete_notes
        )
        if not deleted:
            raise CategoryNotFoundError(category_id)

        logger.info(
            "deleted_category",
            category_id=category_id,
            owner_id=owner_id,
            deleted_notes=delete_notes,
        )
