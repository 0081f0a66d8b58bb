"""Mapper for Flashcard ORM ↔ Domain conversion."""

from noteswise.domain.common.value_objects import FlashcardId, NoteId
from noteswise.domain.learning.entities.flashcard import Flashcard
from noteswise.models import Flashcard as FlashcardORM


class FlashcardMapper:
    """Mapper for Flashcard ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: FlashcardORM) -> Flashcard:
        """Convert ORM model to domain entity."""
        return Flashcard.create_with_id(
            id=FlashcardId(orm_model.id),
            note_id=NoteId(orm_model.note_id),
            question=orm_model.question,
            answer=orm_model.answer,
            created_at=orm_model.created_at,
        )

    def to_orm(self, domain_entity: Flashcard) -> FlashcardORM:
        """Convert a new domain entity to an ORM model for insertion."""
        return FlashcardORM(
            note_id=domain_entity.note_id.value,
            question=domain_entity.question,
            answer=domain_entity.answer,
        )
