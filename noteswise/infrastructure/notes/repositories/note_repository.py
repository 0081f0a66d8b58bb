"""Repository for Note domain entities."""

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from noteswise.domain.common.value_objects import CategoryId, NoteId, OwnerId
from noteswise.domain.notes.entities.note import Note
from noteswise.infrastructure.notes.mappers.note_mapper import NoteMapper
from noteswise.models import Flashcard as FlashcardORM
from noteswise.models import Note as NoteORM


class NoteRepository:
    """Owner-scoped repository for Note domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = NoteMapper()

    def find_all(self, owner_id: OwnerId, category_id: CategoryId | None = None) -> list[Note]:
        """
        Get an owner's notes.

        Args:
            owner_id: The owner whose notes are listed
            category_id: Only return notes filed under this category

        Returns:
            List of note entities ordered by updated_at DESC
        """
        stmt = select(NoteORM).where(NoteORM.owner_id == owner_id.value)
        if category_id is not None:
            stmt = stmt.where(NoteORM.category_id == category_id.value)
        stmt = stmt.order_by(NoteORM.updated_at.desc(), NoteORM.id.desc())

        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_by_id(self, note_id: NoteId, owner_id: OwnerId) -> Note | None:
        """
        Find a note by ID with owner check.

        Args:
            note_id: The note ID
            owner_id: The owner ID for ownership verification

        Returns:
            Note entity if found and owned by owner, None otherwise
        """
        stmt = (
            select(NoteORM)
            .where(
                NoteORM.id == note_id.value,
                NoteORM.owner_id == owner_id.value,
            )
            .execution_options(populate_existing=True)
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def create(self, note: Note) -> Note:
        orm_model = self.mapper.to_orm(note)
        self.db.add(orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def update(self, note: Note) -> Note | None:
        """
        Write the mutable fields of an existing note.

        Returns:
            Updated note entity, or None if not found for the owner
        """
        stmt = (
            update(NoteORM)
            .where(
                NoteORM.id == note.id.value,
                NoteORM.owner_id == note.owner_id.value,
            )
            .values(**self.mapper.to_update_values(note))
            .execution_options(synchronize_session=False)
        )
        if self.db.execute(stmt).rowcount == 0:  # type: ignore[attr-defined]
            self.db.rollback()
            return None

        self.db.commit()
        return self.find_by_id(note.id, note.owner_id)

    def delete(self, note_id: NoteId, owner_id: OwnerId) -> bool:
        """
        Delete a note and its flashcards in one transaction.

        Returns:
            True if deleted, False if not found
        """
        owned_note = (NoteORM.id == note_id.value, NoteORM.owner_id == owner_id.value)

        self.db.execute(
            delete(FlashcardORM)
            .where(FlashcardORM.note_id.in_(select(NoteORM.id).where(*owned_note)))
            .execution_options(synchronize_session=False)
        )
        result = self.db.execute(
            delete(NoteORM).where(*owned_note).execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:  # type: ignore[attr-defined]
            self.db.rollback()
            return False

        self.db.commit()
        return True
