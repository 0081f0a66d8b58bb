"""Use case for AI operations on a single note."""

import structlog

from noteswise.application.notes.protocols.ai_summary_service import AISummaryServiceProtocol
from noteswise.application.notes.protocols.note_repository import NoteRepositoryProtocol
from noteswise.application.ports.speech_service import SpeechServiceProtocol
from noteswise.domain.common.value_objects import NoteId, OwnerId
from noteswise.exceptions import NoteNotFoundError

logger = structlog.get_logger(__name__)


class NoteAIUseCase:
    """Summaries and narration for notes. Ownership is checked before any AI call."""

    def __init__(
        self,
        note_repository: NoteRepositoryProtocol,
        summary_service: AISummaryServiceProtocol,
        speech_service: SpeechServiceProtocol,
    ) -> None:
        self.note_repository = note_repository
        self.summary_service = summary_service
        self.speech_service = speech_service

    async def generate_summary(self, note_id: int, owner_id: str) -> str:
        """
        Summarize a note and store the summary on it.

        Raises:
            NoteNotFoundError: If the note does not exist for the owner
        """
        note = self.note_repository.find_by_id(NoteId(note_id), OwnerId(owner_id))
        if not note:
            raise NoteNotFoundError(note_id)

        summary = await self.summary_service.generate_summary(note.content)
        note.set_summary(summary)

        # The note may have been deleted while the provider was working
        if not self.note_repository.update(note):
            raise NoteNotFoundError(note_id)

        logger.info("generated_note_summary", note_id=note_id, summary_length=len(summary))
        return summary

    async def generate_audio(self, note_id: int, owner_id: str, voice: str | None = None) -> str:
        """
        Narrate a note (its summary if present, otherwise its content).

        Returns:
            Base64 encoded audio

        Raises:
            NoteNotFoundError: If the note does not exist for the owner
        """
        note = self.note_repository.find_by_id(NoteId(note_id), OwnerId(owner_id))
        if not note:
            raise NoteNotFoundError(note_id)

        audio = await self.speech_service.generate_audio(note.narration_text(), voice)

        logger.info("generated_note_audio", note_id=note_id, voice=voice)
        return audio
