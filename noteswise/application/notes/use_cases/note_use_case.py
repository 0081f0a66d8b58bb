"""Use case for note operations."""

import structlog

from noteswise.application.notes.protocols.ai_summary_service import AISummaryServiceProtocol
from noteswise.application.notes.protocols.category_repository import (
    CategoryRepositoryProtocol,
)
from noteswise.application.notes.protocols.note_repository import NoteRepositoryProtocol
from noteswise.domain.common.value_objects import CategoryId, NoteId, OwnerId
from noteswise.domain.notes.entities.note import Note
from noteswise.exceptions import InvalidReferenceError, NoteNotFoundError

logger = structlog.get_logger(__name__)


class NoteUseCase:
    """Use case for note CRUD operations."""

    def __init__(
        self,
        note_repository: NoteRepositoryProtocol,
        category_repository: CategoryRepositoryProtocol,
        summary_service: AISummaryServiceProtocol | None = None,
    ) -> None:
        """
        Initialize use case with repository protocols.

        summary_service is None when AI features are disabled; notes are then
        stored with whatever summary the client sent.
        """
        self.note_repository = note_repository
        self.category_repository = category_repository
        self.summary_service = summary_service

    def list_notes(self, owner_id: str, category_id: int | None = None) -> list[Note]:
        return self.note_repository.find_all(
            OwnerId(owner_id), CategoryId(category_id) if category_id is not None else None
        )

    def get_note(self, note_id: int, owner_id: str) -> Note:
        """
        Get one note of the owner.

        Raises:
            NoteNotFoundError: If the note does not exist for the owner
        """
        note = self.note_repository.find_by_id(NoteId(note_id), OwnerId(owner_id))
        if not note:
            raise NoteNotFoundError(note_id)
        return note

    async def create_note(
        self,
        owner_id: str,
        title: str,
        content: str,
        summary: str | None = None,
        audio_url: str | None = None,
        category_id: int | None = None,
    ) -> Note:
        """
        Create a new note, summarizing its content when AI is enabled.

        The category reference is validated before the summary is generated,
        and nothing is stored if either step fails.

        Raises:
            InvalidReferenceError: If category_id is not a category of the owner
            Exception: Whatever the AI provider raised while summarizing
        """
        owner_id_vo = OwnerId(owner_id)
        category_id_vo = self._resolve_category(category_id, owner_id_vo)

        note = Note.create(
            owner_id=owner_id_vo,
            title=title,
            content=content,
            summary=summary,
            audio_url=audio_url,
            category_id=category_id_vo,
        )

        if self.summary_service is not None and content.strip():
            note.set_summary(await self.summary_service.generate_summary(content))

        note = self.note_repository.create(note)

        logger.info("created_note", note_id=note.id.value, owner_id=owner_id)
        return note

    def update_note(
        self,
        note_id: int,
        owner_id: str,
        title: str | None = None,
        content: str | None = None,
        summary: str | None = None,
        audio_url: str | None = None,
        category_id: int | None = None,
        remove_category: bool = False,
    ) -> Note:
        """
        Update a note.

        Fields left as None keep their stored value; remove_category takes the
        note out of its category. Blank title or content are ignored.

        Raises:
            NoteNotFoundError: If the note does not exist for the owner
            InvalidReferenceError: If category_id is not a category of the owner
        """
        owner_id_vo = OwnerId(owner_id)
        note = self.get_note(note_id, owner_id)

        if category_id is not None:
            note.move_to_category(self._resolve_category(category_id, owner_id_vo))
        elif remove_category:
            note.move_to_category(None)

        if title is not None and title.strip():
            note.update_title(title)
        if content is not None and content.strip():
            note.update_content(content)
        if summary is not None:
            note.set_summary(summary)
        if audio_url is not None:
            note.set_audio_url(audio_url)

        updated = self.note_repository.update(note)
        if not updated:
            raise NoteNotFoundError(note_id)

        logger.info("updated_note", note_id=note_id, owner_id=owner_id)
        return updated

    def delete_note(self, note_id: int, owner_id: str) -> None:
        """
        Delete a note together with its flashcards.

        Raises:
            NoteNotFoundError: If the note does not exist for the owner
        """
        deleted = self.note_repository.delete(NoteId(note_id), OwnerId(owner_id))
        if not deleted:
            raise NoteNotFoundError(note_id)

        logger.info("deleted_note", note_id=note_id, owner_id=owner_id)

    def _resolve_category(self, category_id: int | None, owner_id: OwnerId) -> CategoryId | None:
        if category_id is None:
            return None
        category = self.category_repository.find_by_id(CategoryId(category_id), owner_id)
        if not category:
            logger.warning(
                "rejected_category_reference", category_id=category_id, owner_id=owner_id.value
            )
            raise InvalidReferenceError("Category", category_id)
        return category.id
