"""Repository for Flashcard domain entities."""

from sqlalchemy import Select, delete, select, update
from sqlalchemy.orm import Session

from noteswise.domain.common.value_objects import FlashcardId, NoteId, OwnerId
from noteswise.domain.learning.entities.flashcard import Flashcard
from noteswise.infrastructure.learning.mappers.flashcard_mapper import FlashcardMapper
from noteswise.models import Flashcard as FlashcardORM
from noteswise.models import Note as NoteORM


def _owned_note_ids(owner_id: OwnerId) -> Select[tuple[int]]:
    return select(NoteORM.id).where(NoteORM.owner_id == owner_id.value)


class FlashcardRepository:
    """Repository for Flashcard domain entities, scoped by the owner of the parent note."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = FlashcardMapper()

    def _select_owned(self, owner_id: OwnerId) -> Select[tuple[FlashcardORM]]:
        return (
            select(FlashcardORM)
            .join(NoteORM, FlashcardORM.note_id == NoteORM.id)
            .where(NoteORM.owner_id == owner_id.value)
        )

    def find_all(self, owner_id: OwnerId) -> list[Flashcard]:
        """
        Get all flashcards of an owner.

        Returns:
            List of flashcard entities ordered by created_at DESC
        """
        stmt = self._select_owned(owner_id).order_by(
            FlashcardORM.created_at.desc(), FlashcardORM.id.desc()
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_by_note(self, note_id: NoteId, owner_id: OwnerId) -> list[Flashcard]:
        """
        Get all flashcards for a note.

        Args:
            note_id: The note ID
            owner_id: The owner ID for ownership verification

        Returns:
            List of flashcard entities ordered by created_at DESC
        """
        stmt = (
            self._select_owned(owner_id)
            .where(FlashcardORM.note_id == note_id.value)
            .order_by(FlashcardORM.created_at.desc(), FlashcardORM.id.desc())
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_by_id(self, flashcard_id: FlashcardId, owner_id: OwnerId) -> Flashcard | None:
        """
        Find a flashcard by ID with ownership check through its note.

        Returns:
            Flashcard entity if found and owned by owner, None otherwise
        """
        stmt = (
            self._select_owned(owner_id)
            .where(FlashcardORM.id == flashcard_id.value)
            .execution_options(populate_existing=True)
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def create_many(
        self, flashcards: list[Flashcard], note_id: NoteId, owner_id: OwnerId
    ) -> list[Flashcard] | None:
        """
        Insert flashcards for a note owned by owner_id.

        The note row is locked (FOR UPDATE where supported) so it cannot be
        deleted between the ownership check and the insert.

        Returns:
            Saved flashcard entities in input order, or None if the note does
            not exist for the owner
        """
        note_stmt = (
            select(NoteORM.id)
            .where(NoteORM.id == note_id.value, NoteORM.owner_id == owner_id.value)
            .with_for_update()
        )
        if self.db.execute(note_stmt).scalar_one_or_none() is None:
            self.db.rollback()
            return None

        orm_models = [self.mapper.to_orm(flashcard) for flashcard in flashcards]
        for orm_model in orm_models:
            orm_model.note_id = note_id.value
        self.db.add_all(orm_models)
        self.db.commit()

        for orm_model in orm_models:
            self.db.refresh(orm_model)
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def update(self, flashcard: Flashcard, owner_id: OwnerId) -> Flashcard | None:
        """
        Write question and answer of an existing flashcard.

        Returns:
            Updated flashcard entity, or None if not found for the owner
        """
        stmt = (
            update(FlashcardORM)
            .where(
                FlashcardORM.id == flashcard.id.value,
                FlashcardORM.note_id.in_(_owned_note_ids(owner_id)),
            )
            .values(question=flashcard.question, answer=flashcard.answer)
            .execution_options(synchronize_session=False)
        )
        if self.db.execute(stmt).rowcount == 0:  # type: ignore[attr-defined]
            self.db.rollback()
            return None

        self.db.commit()
        return self.find_by_id(flashcard.id, owner_id)

    def delete(self, flashcard_id: FlashcardId, owner_id: OwnerId) -> bool:
        """
        Delete a flashcard.

        Args:
            flashcard_id: The flashcard ID
            owner_id: The owner ID for ownership verification

        Returns:
            True if deleted, False if not found
        """
        stmt = (
            delete(FlashcardORM)
            .where(
                FlashcardORM.id == flashcard_id.value,
                FlashcardORM.note_id.in_(_owned_note_ids(owner_id)),
            )
            .execution_options(synchronize_session=False)
        )
        if self.db.execute(stmt).rowcount == 0:  # type: ignore[attr-defined]
            self.db.rollback()
            return False

        self.db.commit()
        return True
