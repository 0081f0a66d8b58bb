"""Common value objects shared across all domain modules."""

from .ids import CategoryId, FlashcardId, NoteId, OwnerId

__all__ = [
    "CategoryId",
    "FlashcardId",
    "NoteId",
    "OwnerId",
]
