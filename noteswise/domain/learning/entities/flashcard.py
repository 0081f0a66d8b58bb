"""
Flashcard entity for spaced repetition learning.
"""

from dataclasses import dataclass
from datetime import datetime

from noteswise.domain.common.entity import Entity
from noteswise.domain.common.exceptions import DomainError
from noteswise.domain.common.value_objects import FlashcardId, NoteId


@dataclass(eq=False)
class Flashcard(Entity[FlashcardId]):
    """
    Flashcard created from a note.

    Business Rules:
    - Question and answer cannot be empty
    - Flashcard must be attached to a note; ownership follows the note
    """

    id: FlashcardId
    note_id: NoteId
    question: str
    answer: str
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.question or not self.question.strip():
            raise DomainError("Question cannot be empty")
        if not self.answer or not self.answer.strip():
            raise DomainError("Answer cannot be empty")

    def update_question(self, question: str) -> None:
        """
        Update the question.

        Raises:
            DomainError: If question is empty
        """
        if not question or not question.strip():
            raise DomainError("Question cannot be empty")
        self.question = question.strip()

    def update_answer(self, answer: str) -> None:
        """
        Update the answer.

        Raises:
            DomainError: If answer is empty
        """
        if not answer or not answer.strip():
            raise DomainError("Answer cannot be empty")
        self.answer = answer.strip()

    @classmethod
    def create(cls, note_id: NoteId, question: str, answer: str) -> "Flashcard":
        """Create a new flashcard (ID will be 0 until persisted)."""
        return cls(
            id=FlashcardId.generate(),
            note_id=note_id,
            question=question.strip(),
            answer=answer.strip(),
        )

    @classmethod
    def create_with_id(
        cls,
        id: FlashcardId,
        note_id: NoteId,
        question: str,
        answer: str,
        created_at: datetime,
    ) -> "Flashcard":
        """Reconstitute a flashcard from persistence."""
        return cls(
            id=id,
            note_id=note_id,
            question=question,
            answer=answer,
            created_at=created_at,
        )
