"""AI-powered features for notes."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status

from noteswise.application.notes.use_cases.note_ai_use_case import NoteAIUseCase
from noteswise.config import get_settings
from noteswise.core import container
from noteswise.domain.common.exceptions import DomainError
from noteswise.exceptions import NotesWiseError
from noteswise.infrastructure.common.dependencies import (
    limiter,
    require_ai_enabled,
    require_audio_enabled,
)
from noteswise.infrastructure.common.di import inject_use_case
from noteswise.infrastructure.identity.dependencies import CurrentOwner
from noteswise.infrastructure.notes.schemas import (
    GenerateAudioRequest,
    GenerateAudioResponse,
    GenerateSummaryResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notes", tags=["notes", "ai"])

AI_RATE_LIMIT = get_settings().AI_RATE_LIMIT


@router.post(
    "/{note_id}/generate-summary",
    response_model=GenerateSummaryResponse,
    status_code=status.HTTP_200_OK,
)
@limiter.limit(AI_RATE_LIMIT)  # type: ignore[misc]
@require_ai_enabled
async def generate_note_summary(
    request: Request,
    note_id: int,
    owner_id: CurrentOwner,
    use_case: NoteAIUseCase = Depends(inject_use_case(container.note_ai_use_case)),
) -> GenerateSummaryResponse:
    """
    Summarize a note and store the summary on it.

    Args:
        request: Incoming request (used for rate limiting)
        note_id: ID of the note
        owner_id: Authenticated owner
        use_case: NoteAIUseCase injected via dependency container

    Returns:
        The generated summary

    Raises:
        HTTPException 404: If the note does not exist for the caller
        HTTPException 410: If AI features are disabled
        HTTPException 500: If the AI provider fails
    """
    try:
        summary = await use_case.generate_summary(note_id, owner_id.value)
        return GenerateSummaryResponse(summary=summary)
    except (NotesWiseError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to generate summary for note {note_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to generate summary: {e!s}",
        ) from e


@router.post(
    "/{note_id}/generate-audio",
    response_model=GenerateAudioResponse,
    status_code=status.HTTP_200_OK,
)
@limiter.limit(AI_RATE_LIMIT)  # type: ignore[misc]
@require_audio_enabled
async def generate_note_audio(
    request: Request,
    note_id: int,
    owner_id: CurrentOwner,
    body: GenerateAudioRequest | None = None,
    use_case: NoteAIUseCase = Depends(inject_use_case(container.note_ai_use_case)),
) -> GenerateAudioResponse:
    """
    Narrate a note: its summary when present, otherwise its content.

    Raises:
        HTTPException 404: If the note does not exist for the caller
        HTTPException 410: If speech synthesis is disabled
        HTTPException 500: If speech synthesis fails
    """
    try:
        voice = body.voice if body else None
        audio = await use_case.generate_audio(note_id, owner_id.value, voice=voice)
        return GenerateAudioResponse(audio_content=audio)
    except (NotesWiseError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to generate audio for note {note_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to generate audio: {e!s}",
        ) from e
