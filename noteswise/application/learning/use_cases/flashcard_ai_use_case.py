"""Use case for flashcard AI operations."""

from dataclasses import dataclass
from typing import Literal

import structlog

from noteswise.application.learning.protocols.ai_flashcard_service import (
    AIFlashcardServiceProtocol,
)
from noteswise.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from noteswise.application.notes.protocols.note_repository import NoteRepositoryProtocol
from noteswise.application.ports.speech_service import SpeechServiceProtocol
from noteswise.domain.common.value_objects import FlashcardId, NoteId, OwnerId
from noteswise.domain.learning.entities.flashcard import Flashcard
from noteswise.exceptions import FlashcardNotFoundError, NoteNotFoundError

logger = structlog.get_logger(__name__)

AudioPart = Literal["question", "answer", "both"]


@dataclass
class FlashcardAudio:
    """Narration of a flashcard; parts that were not requested are None."""

    question_audio: str | None = None
    answer_audio: str | None = None


class FlashcardAIUseCase:
    """Use case for flashcard AI operations."""

    def __init__(
        self,
        note_repository: NoteRepositoryProtocol,
        flashcard_repository: FlashcardRepositoryProtocol,
        flashcard_service: AIFlashcardServiceProtocol,
        speech_service: SpeechServiceProtocol,
    ) -> None:
        """Initialize use case with repository and service protocols."""
        self.note_repository = note_repository
        self.flashcard_repository = flashcard_repository
        self.flashcard_service = flashcard_service
        self.speech_service = speech_service

    async def generate_flashcards(self, note_id: int, owner_id: str) -> list[Flashcard]:
        """
        Generate flashcards from a note's content and store them on the note.

        Args:
            note_id: ID of the note
            owner_id: ID of the user (for ownership verification)

        Returns:
            Stored flashcards

        Raises:
            NoteNotFoundError: If note not found or user doesn't own it
        """
        note_id_vo = NoteId(note_id)
        owner_id_vo = OwnerId(owner_id)

        note = self.note_repository.find_by_id(note_id_vo, owner_id_vo)
        if not note:
            raise NoteNotFoundError(note_id)

        suggestions = await self.flashcard_service.generate_flashcard_suggestions(note.content)

        flashcards = [
            Flashcard.create(note_id=note_id_vo, question=s.question, answer=s.answer)
            for s in suggestions
            if s.question.strip() and s.answer.strip()
        ]
        if not flashcards:
            logger.info("generated_no_flashcards", note_id=note_id)
            return []

        created = self.flashcard_repository.create_many(flashcards, note_id_vo, owner_id_vo)
        if created is None:
            raise NoteNotFoundError(note_id)

        logger.info(
            "flashcards_generated",
            note_id=note_id,
            suggestion_count=len(suggestions),
            flashcard_count=len(created),
        )
        return created

    async def generate_flashcard_audio(
        self,
        flashcard_id: int,
        owner_id: str,
        voice: str | None = None,
        part: AudioPart = "both",
    ) -> FlashcardAudio:
        """
        Narrate the question, the answer, or both sides of a flashcard.

        Raises:
            FlashcardNotFoundError: If the flashcard's note is not owned by the owner
        """
        flashcard = self.flashcard_repository.find_by_id(
            FlashcardId(flashcard_id), OwnerId(owner_id)
        )
        if not flashcard:
            raise FlashcardNotFoundError(flashcard_id)

        audio = FlashcardAudio()
        if part in ("question", "both"):
            audio.question_audio = await self.speech_service.generate_audio(
                flashcard.question, voice
            )
        if part in ("answer", "both"):
            audio.answer_audio = await self.speech_service.generate_audio(flashcard.answer, voice)

        logger.info("generated_flashcard_audio", flashcard_id=flashcard_id, part=part)
        return audio
