"""API routes for flashcard management."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status

from noteswise.application.learning.use_cases.flashcard_ai_use_case import FlashcardAIUseCase
from noteswise.application.learning.use_cases.flashcard_use_case import FlashcardUseCase
from noteswise.config import get_settings
from noteswise.core import container
from noteswise.domain.common.exceptions import DomainError
from noteswise.exceptions import NotesWiseError
from noteswise.infrastructure.common.dependencies import limiter, require_audio_enabled
from noteswise.infrastructure.common.di import inject_use_case
from noteswise.infrastructure.identity.dependencies import CurrentOwner
from noteswise.infrastructure.learning.schemas import (
    Flashcard,
    FlashcardAudioRequest,
    FlashcardAudioResponse,
    FlashcardCreateRequest,
    FlashcardUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/flashcards", tags=["flashcards"])

UNEXPECTED_ERROR = "An unexpected error occurred. Please try again later."


@router.get("", response_model=list[Flashcard], status_code=status.HTTP_200_OK)
def list_flashcards(
    owner_id: CurrentOwner,
    use_case: FlashcardUseCase = Depends(inject_use_case(container.flashcard_use_case)),
) -> list[Flashcard]:
    """List flashcards across all of the caller's notes, newest first."""
    try:
        return [Flashcard.from_entity(f) for f in use_case.list_flashcards(owner_id.value)]
    except (NotesWiseError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to list flashcards: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.get("/{flashcard_id}", response_model=Flashcard, status_code=status.HTTP_200_OK)
def get_flashcard(
    flashcard_id: int,
    owner_id: CurrentOwner,
    use_case: FlashcardUseCase = Depends(inject_use_case(container.flashcard_use_case)),
) -> Flashcard:
    try:
        return Flashcard.from_entity(use_case.get_flashcard(flashcard_id, owner_id.value))
    except (NotesWiseError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to get flashcard {flashcard_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.post("", response_model=Flashcard, status_code=status.HTTP_201_CREATED)
def create_flashcard(
    request: FlashcardCreateRequest,
    owner_id: CurrentOwner,
    use_case: FlashcardUseCase = Depends(inject_use_case(container.flashcard_use_case)),
) -> Flashcard:
    """
    Create a flashcard on one of the caller's notes.

    Args:
        request: Note ID, question and answer
        owner_id: Authenticated owner
        use_case: FlashcardUseCase injected via dependency container

    Raises:
        HTTPException 404: If the note does not exist for the caller
    """
    try:
        flashcard = use_case.create_flashcard(
            note_id=request.note_id,
            owner_id=owner_id.value,
            question=request.question,
            answer=request.answer,
        )
        return Flashcard.from_entity(flashcard)
    except (NotesWiseError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to create flashcard: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.put("/{flashcard_id}", response_model=Flashcard, status_code=status.HTTP_200_OK)
def update_flashcard(
    flashcard_id: int,
    request: FlashcardUpdateRequest,
    owner_id: CurrentOwner,
    use_case: FlashcardUseCase = Depends(inject_use_case(container.flashcard_use_case)),
) -> Flashcard:
    """
    Update a flashcard's question and/or answer.

    Raises:
        HTTPException 404: If the flashcard does not exist for the caller
        HTTPException 400: If neither question nor answer is provided
    """
    try:
        flashcard = use_case.update_flashcard(
            flashcard_id=flashcard_id,
            owner_id=owner_id.value,
            question=request.question,
            answer=request.answer,
        )
        return Flashcard.from_entity(flashcard)
    except (NotesWiseError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to update flashcard {flashcard_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.delete("/{flashcard_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_flashcard(
    flashcard_id: int,
    owner_id: CurrentOwner,
    use_case: FlashcardUseCase = Depends(inject_use_case(container.flashcard_use_case)),
) -> None:
    try:
        use_case.delete_flashcard(flashcard_id, owner_id.value)
    except (NotesWiseError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to delete flashcard {flashcard_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.post(
    "/{flashcard_id}/generate-audio",
    response_model=FlashcardAudioResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
)
@limiter.limit(get_settings().AI_RATE_LIMIT)  # type: ignore[misc]
@require_audio_enabled
async def generate_flashcard_audio(
    request: Request,
    flashcard_id: int,
    owner_id: CurrentOwner,
    body: FlashcardAudioRequest | None = None,
    use_case: FlashcardAIUseCase = Depends(inject_use_case(container.flashcard_ai_use_case)),
) -> FlashcardAudioResponse:
    """
    Narrate the question, the answer or both sides of a flashcard.

    Raises:
        HTTPException 404: If the flashcard does not exist for the caller
        HTTPException 410: If speech synthesis is disabled
        HTTPException 500: If speech synthesis fails
    """
    try:
        body = body or FlashcardAudioRequest()
        audio = await use_case.generate_flashcard_audio(
            flashcard_id, owner_id.value, voice=body.voice, part=body.type
        )
        return FlashcardAudioResponse(
            question_audio=audio.question_audio, answer_audio=audio.answer_audio
        )
    except (NotesWiseError, DomainError):
        raise
    except Exception as e:
        logger.error(
            f"Failed to generate audio for flashcard {flashcard_id}: {e!s}", exc_info=True
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to generate audio: {e!s}",
        ) from e
