"""API routes for note management."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from noteswise.application.notes.use_cases.note_use_case import NoteUseCase
from noteswise.core import container
from noteswise.domain.common.exceptions import DomainError
from noteswise.exceptions import NotesWiseError
from noteswise.infrastructure.common.di import inject_use_case
from noteswise.infrastructure.identity.dependencies import CurrentOwner
from noteswise.infrastructure.notes.schemas import Note, NoteCreateRequest, NoteUpdateRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notes", tags=["notes"])


@router.get("", response_model=list[Note], status_code=status.HTTP_200_OK)
def list_notes(
    owner_id: CurrentOwner,
    category_id: int | None = Query(None, alias="categoryId"),
    use_case: NoteUseCase = Depends(inject_use_case(container.note_use_case)),
) -> list[Note]:
    """List the caller's notes, most recently updated first."""
    try:
        notes = use_case.list_notes(owner_id.value, category_id)
        return [Note.from_entity(note) for note in notes]
    except (NotesWiseError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to list notes: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/{note_id}", response_model=Note, status_code=status.HTTP_200_OK)
def get_note(
    note_id: int,
    owner_id: CurrentOwner,
    use_case: NoteUseCase = Depends(inject_use_case(container.note_use_case)),
) -> Note:
    try:
        return Note.from_entity(use_case.get_note(note_id, owner_id.value))
    except (NotesWiseError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to get note {note_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post("", response_model=Note, status_code=status.HTTP_201_CREATED)
async def create_note(
    request: NoteCreateRequest,
    owner_id: CurrentOwner,
    use_case: NoteUseCase = Depends(inject_use_case(container.note_use_case)),
) -> Note:
    """
    Create a note owned by the caller.

    When AI is enabled the note content is summarized before the note is
    stored; if summarization fails nothing is stored.

    Raises:
        HTTPException 400: If categoryId is not a category of the caller
        HTTPException 500: If summarization fails
    """
    try:
        note = await use_case.create_note(
            owner_id=owner_id.value,
            title=request.title,
            content=request.content,
            summary=request.summary,
            audio_url=request.audio_url,
            category_id=request.category_id,
        )
        return Note.from_entity(note)
    except (NotesWiseError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to create note: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to create note: {e!s}",
        ) from e


@router.put("/{note_id}", response_model=Note, status_code=status.HTTP_200_OK)
def update_note(
    note_id: int,
    request: NoteUpdateRequest,
    owner_id: CurrentOwner,
    use_case: NoteUseCase = Depends(inject_use_case(container.note_use_case)),
) -> Note:
    """
    Update a note. Omitted fields keep their value; ``categoryId: null`` removes the category.

    Raises:
        HTTPException 404: If the note does not exist for the caller
        HTTPException 400: If categoryId is not a category of the caller
    """
    try:
        note = use_case.update_note(
            note_id=note_id,
            owner_id=owner_id.value,
            title=request.title,
            content=request.content,
            summary=request.summary,
            audio_url=request.audio_url,
            category_id=request.category_id,
            remove_category="category_id" in request.model_fields_set
            and request.category_id is None,
        )
        return Note.from_entity(note)
    except (NotesWiseError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to update note {note_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_note(
    note_id: int,
    owner_id: CurrentOwner,
    use_case: NoteUseCase = Depends(inject_use_case(container.note_use_case)),
) -> None:
    """Delete a note together with its flashcards."""
    try:
        use_case.delete_note(note_id, owner_id.value)
    except (NotesWiseError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to delete note {note_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
