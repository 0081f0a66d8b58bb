from .flashcard_mapper import FlashcardMapper

__all__ = ["FlashcardMapper"]
