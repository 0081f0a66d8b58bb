from .flashcard_schemas import (
    Flashcard,
    FlashcardAudioRequest,
    FlashcardAudioResponse,
    FlashcardCreateRequest,
    FlashcardDraftItem,
    FlashcardsCreateRequest,
    FlashcardUpdateRequest,
)

__all__ = [
    "Flashcard",
    "FlashcardAudioRequest",
    "FlashcardAudioResponse",
    "FlashcardCreateRequest",
    "FlashcardDraftItem",
    "FlashcardUpdateRequest",
    "FlashcardsCreateRequest",
]
