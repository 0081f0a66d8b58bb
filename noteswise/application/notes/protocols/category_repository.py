"""Protocol for Category repository in notes context."""

from typing import Protocol

from noteswise.domain.common.value_objects import CategoryId, OwnerId
from noteswise.domain.notes.entities.category import Category


class CategoryRepositoryProtocol(Protocol):
    """
    Owner-scoped category storage.

    Every lookup, update and delete filters on (id, owner) in a single
    statement; a category of another owner is indistinguishable from a
    missing one.
    """

    def find_all(self, owner_id: OwnerId) -> list[Category]:
        """
        Get all categories of an owner.

        Returns:
            List of category entities ordered by name
        """
        ...

    def find_by_id(self, category_id: CategoryId, owner_id: OwnerId) -> Category | None:
        """
        Find a category by ID with owner check.

        Returns:
            Category entity if found and owned by owner, None otherwise
        """
        ...

    def create(self, category: Category) -> Category:
        """
        Insert a new category.

        Returns:
            Saved category entity with database-generated id and timestamps
        """
        ...

    def update(self, category: Category) -> Category | None:
        """
        Write name and color of an existing category.

        Returns:
            Updated entity, or None if no category with that id exists for category.owner_id
        """
        ...

    def delete(
        self, category_id: CategoryId, owner_id: OwnerId, delete_notes: bool = False
    ) -> bool:
        """
        Delete a category.

        Notes filed under the category are detached (category cleared) unless
        delete_notes is True, in which case they are deleted with their flashcards.

        Returns:
            True if deleted, False if not found
        """
        ...
