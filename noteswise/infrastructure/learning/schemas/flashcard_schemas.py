"""Pydantic schemas for Flashcard API request/response validation."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from noteswise.domain.learning.entities.flashcard import Flashcard as FlashcardEntity
from noteswise.infrastructure.common.schemas.base import CamelModel


class FlashcardDraftItem(CamelModel):
    """A question/answer pair to attach to a note."""

    question: str = Field(..., min_length=1, description="Question text for the flashcard")
    answer: str = Field(..., min_length=1, description="Answer text for the flashcard")


class FlashcardCreateRequest(FlashcardDraftItem):
    """Schema for creating a single flashcard."""

    note_id: int = Field(..., description="Note the flashcard belongs to")


class FlashcardsCreateRequest(CamelModel):
    """Schema for creating several flashcards on one note."""

    flashcards: list[FlashcardDraftItem] = Field(..., min_length=1)


class FlashcardUpdateRequest(CamelModel):
    """Schema for updating a flashcard."""

    question: str | None = Field(None, min_length=1, description="New question text")
    answer: str | None = Field(None, min_length=1, description="New answer text")


class Flashcard(CamelModel):
    """Schema for Flashcard response."""

    id: int
    note_id: int
    question: str
    answer: str
    created_at: datetime | None

    @classmethod
    def from_entity(cls, flashcard: FlashcardEntity) -> "Flashcard":
        return cls(
            id=flashcard.id.value,
            note_id=flashcard.note_id.value,
            question=flashcard.question,
            answer=flashcard.answer,
            created_at=flashcard.created_at,
        )


class FlashcardAudioRequest(CamelModel):
    """Schema for requesting flashcard narration."""

    voice: str | None = Field(None, min_length=1, description="Voice name of the speech model")
    type: Literal["question", "answer", "both"] = Field(
        "both", description="Which side of the card to narrate"
    )


class FlashcardAudioResponse(CamelModel):
    """Schema for flashcard narration; only the requested sides are present."""

    question_audio: str | None = Field(None, description="Base64-encoded MP3 of the question")
    answer_audio: str | None = Field(None, description="Base64-encoded MP3 of the answer")
