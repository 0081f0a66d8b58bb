"""Repository for Category domain entities."""

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from noteswise.domain.common.value_objects import CategoryId, OwnerId
from noteswise.domain.notes.entities.category import Category
from noteswise.infrastructure.notes.mappers.category_mapper import CategoryMapper
from noteswise.models import Category as CategoryORM
from noteswise.models import Flashcard as FlashcardORM
from noteswise.models import Note as NoteORM


class CategoryRepository:
    """Owner-scoped repository for Category domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = CategoryMapper()

    def find_all(self, owner_id: OwnerId) -> list[Category]:
        """
        Get all categories of an owner.

        Args:
            owner_id: The owner whose categories are listed

        Returns:
            List of category entities ordered by name
        """
        stmt = (
            select(CategoryORM)
            .where(CategoryORM.owner_id == owner_id.value)
            .order_by(CategoryORM.name, CategoryORM.id)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_by_id(self, category_id: CategoryId, owner_id: OwnerId) -> Category | None:
        """
        Find a category by ID with owner check.

        Args:
            category_id: The category ID
            owner_id: The owner ID for ownership verification

        Returns:
            Category entity if found and owned by owner, None otherwise
        """
        stmt = (
            select(CategoryORM)
            .where(
                CategoryORM.id == category_id.value,
                CategoryORM.owner_id == owner_id.value,
            )
            .execution_options(populate_existing=True)
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def create(self, category: Category) -> Category:
        orm_model = self.mapper.to_orm(category)
        self.db.add(orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def update(self, category: Category) -> Category | None:
        """
        Write name and color of an existing category.

        The row is matched on id and owner in the UPDATE itself.

        Returns:
            Updated category entity, or None if not found for the owner
        """
        stmt = (
            update(CategoryORM)
            .where(
                CategoryORM.id == category.id.value,
                CategoryORM.owner_id == category.owner_id.value,
            )
            .values(**self.mapper.to_update_values(category))
            .execution_options(synchronize_session=False)
        )
        if self.db.execute(stmt).rowcount == 0:  # type: ignore[attr-defined]
            self.db.rollback()
            return None

        self.db.commit()
        return self.find_by_id(category.id, category.owner_id)

    def delete(
        self, category_id: CategoryId, owner_id: OwnerId, delete_notes: bool = False
    ) -> bool:
        """
        Delete a category in one transaction.

        Args:
            category_id: The category ID
            owner_id: The owner ID for ownership verification
            delete_notes: Delete the owner's notes in this category (and their
                flashcards) instead of detaching them

        Returns:
            True if deleted, False if not found
        """
        in_category = (NoteORM.category_id == category_id.value, NoteORM.owner_id == owner_id.value)

        if delete_notes:
            self.db.execute(
                delete(FlashcardORM)
                .where(FlashcardORM.note_id.in_(select(NoteORM.id).where(*in_category)))
                .execution_options(synchronize_session=False)
            )
            self.db.execute(
                delete(NoteORM).where(*in_category).execution_options(synchronize_session=False)
            )
        else:
            self.db.execute(
                update(NoteORM)
                .where(*in_category)
                .values(category_id=None)
                .execution_options(synchronize_session=False)
            )

        result = self.db.execute(
            delete(CategoryORM)
            .where(
                CategoryORM.id == category_id.value,
                CategoryORM.owner_id == owner_id.value,
            )
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:  # type: ignore[attr-defined]
            self.db.rollback()
            return False

        self.db.commit()
        return True
