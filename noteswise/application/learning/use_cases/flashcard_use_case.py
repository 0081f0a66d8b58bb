"""Use case for flashcard operations."""

from dataclasses import dataclass

import structlog

from noteswise.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from noteswise.application.notes.protocols.note_repository import NoteRepositoryProtocol
from noteswise.domain.common.value_objects import FlashcardId, NoteId, OwnerId
from noteswise.domain.learning.entities.flashcard import Flashcard
from noteswise.exceptions import FlashcardNotFoundError, NoteNotFoundError, ValidationError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class FlashcardDraft:
    """Question/answer pair to be stored as a flashcard."""

    question: str
    answer: str


class FlashcardUseCase:
    """Use case for flashcard CRUD operations."""

    def __init__(
        self,
        flashcard_repository: FlashcardRepositoryProtocol,
        note_repository: NoteRepositoryProtocol,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.flashcard_repository = flashcard_repository
        self.note_repository = note_repository

    def list_flashcards(self, owner_id: str) -> list[Flashcard]:
        return self.flashcard_repository.find_all(OwnerId(owner_id))

    def list_flashcards_for_note(self, note_id: int, owner_id: str) -> list[Flashcard]:
        """
        Get the flashcards of one note.

        Raises:
            NoteNotFoundError: If the note does not exist for the owner
        """
        note_id_vo = NoteId(note_id)
        owner_id_vo = OwnerId(owner_id)

        if not self.note_repository.find_by_id(note_id_vo, owner_id_vo):
            raise NoteNotFoundError(note_id)

        return self.flashcard_repository.find_by_note(note_id_vo, owner_id_vo)

    def get_flashcard(self, flashcard_id: int, owner_id: str) -> Flashcard:
        """
        Get one flashcard.

        Raises:
            FlashcardNotFoundError: If the flashcard's note is not owned by the owner
        """
        flashcard = self.flashcard_repository.find_by_id(
            FlashcardId(flashcard_id), OwnerId(owner_id)
        )
        if not flashcard:
            raise FlashcardNotFoundError(flashcard_id)
        return flashcard

    def create_flashcard(
        self, note_id: int, owner_id: str, question: str, answer: str
    ) -> Flashcard:
        """
        Create a flashcard on a note.

        Raises:
            NoteNotFoundError: If the note does not exist for the owner
        """
        return self.create_flashcards(note_id, owner_id, [FlashcardDraft(question, answer)])[0]

    def create_flashcards(
        self, note_id: int, owner_id: str, drafts: list[FlashcardDraft]
    ) -> list[Flashcard]:
        """
        Create several flashcards on a note in one transaction.

        Args:
            note_id: ID of the note
            owner_id: ID of the authenticated owner
            drafts: Question/answer pairs

        Returns:
            Created flashcard domain entities, in input order

        Raises:
            NoteNotFoundError: If the note does not exist for the owner
            ValidationError: If drafts is empty
        """
        if not drafts:
            raise ValidationError("At least one flashcard must be provided")

        note_id_vo = NoteId(note_id)
        flashcards = [
            Flashcard.create(note_id=note_id_vo, question=d.question, answer=d.answer)
            for d in drafts
        ]

        created = self.flashcard_repository.create_many(flashcards, note_id_vo, OwnerId(owner_id))
        if created is None:
            raise NoteNotFoundError(note_id)

        logger.info(
            "created_flashcards",
            note_id=note_id,
            owner_id=owner_id,
            flashcard_count=len(created),
        )
        return created

    def update_flashcard(
        self,
        flashcard_id: int,
        owner_id: str,
        question: str | None = None,
        answer: str | None = None,
    ) -> Flashcard:
        """
        Update a flashcard's question and/or answer.

        Raises:
            FlashcardNotFoundError: If flashcard is not found
            ValidationError: If neither question nor answer is provided
        """
        if question is None and answer is None:
            raise ValidationError("At least one of question or answer must be provided")

        flashcard = self.get_flashcard(flashcard_id, owner_id)

        if question is not None:
            flashcard.update_question(question)
        if answer is not None:
            flashcard.update_answer(answer)

        updated = self.flashcard_repository.update(flashcard, OwnerId(owner_id))
        if not updated:
            raise FlashcardNotFoundError(flashcard_id)

        logger.info("updated_flashcard", flashcard_id=flashcard_id)
        return updated

    def delete_flashcard(self, flashcard_id: int, owner_id: str) -> None:
        """
        Delete a flashcard.

        Raises:
            FlashcardNotFoundError: If flashcard is not found
        """
        deleted = self.flashcard_repository.delete(FlashcardId(flashcard_id), OwnerId(owner_id))
        if not deleted:
            raise FlashcardNotFoundError(flashcard_id)

        logger.info("deleted_flashcard", flashcard_id=flashcard_id)
