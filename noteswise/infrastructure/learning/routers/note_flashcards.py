"""API routes for the flashcards of one note."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status

from noteswise.application.learning.use_cases.flashcard_ai_use_case import FlashcardAIUseCase
from noteswise.application.learning.use_cases.flashcard_use_case import (
    FlashcardDraft,
    FlashcardUseCase,
)
from noteswise.config import get_settings
from noteswise.core import container
from noteswise.domain.common.exceptions import DomainError
from noteswise.exceptions import NotesWiseError
from noteswise.infrastructure.common.dependencies import limiter, require_ai_enabled
from noteswise.infrastructure.common.di import inject_use_case
from noteswise.infrastructure.identity.dependencies import CurrentOwner
from noteswise.infrastructure.learning.schemas import Flashcard, FlashcardsCreateRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notes", tags=["flashcards"])


@router.get(
    "/{note_id}/flashcards",
    response_model=list[Flashcard],
    status_code=status.HTTP_200_OK,
)
def list_note_flashcards(
    note_id: int,
    owner_id: CurrentOwner,
    use_case: FlashcardUseCase = Depends(inject_use_case(container.flashcard_use_case)),
) -> list[Flashcard]:
    """
    List the flashcards of a note.

    Raises:
        HTTPException 404: If the note does not exist for the caller
    """
    try:
        flashcards = use_case.list_flashcards_for_note(note_id, owner_id.value)
        return [Flashcard.from_entity(flashcard) for flashcard in flashcards]
    except (NotesWiseError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to list flashcards for note {note_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post(
    "/{note_id}/flashcards",
    response_model=list[Flashcard],
    status_code=status.HTTP_201_CREATED,
)
def create_note_flashcards(
    note_id: int,
    request: FlashcardsCreateRequest,
    owner_id: CurrentOwner,
    use_case: FlashcardUseCase = Depends(inject_use_case(container.flashcard_use_case)),
) -> list[Flashcard]:
    """
    Attach several flashcards to a note in one request.

    Raises:
        HTTPException 404: If the note does not exist for the caller
    """
    try:
        flashcards = use_case.create_flashcards(
            note_id,
            owner_id.value,
            [FlashcardDraft(question=f.question, answer=f.answer) for f in request.flashcards],
        )
        return [Flashcard.from_entity(flashcard) for flashcard in flashcards]
    except (NotesWiseError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to create flashcards for note {note_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post(
    "/{note_id}/flashcards/generate",
    response_model=list[Flashcard],
    status_code=status.HTTP_200_OK,
)
@limiter.limit(get_settings().AI_RATE_LIMIT)  # type: ignore[misc]
@require_ai_enabled
async def generate_note_flashcards(
    request: Request,
    note_id: int,
    owner_id: CurrentOwner,
    use_case: FlashcardAIUseCase = Depends(inject_use_case(container.flashcard_ai_use_case)),
) -> list[Flashcard]:
    """
    Generate flashcards from a note's content and store them on the note.

    Raises:
        HTTPException 404: If the note does not exist for the caller
        HTTPException 410: If AI features are disabled
        HTTPException 500: If the AI provider fails
    """
    try:
        flashcards = await use_case.generate_flashcards(note_id, owner_id.value)
        return [Flashcard.from_entity(flashcard) for flashcard in flashcards]
    except (NotesWiseError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to generate flashcards for note {note_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to generate flashcards: {e!s}",
        ) from e
