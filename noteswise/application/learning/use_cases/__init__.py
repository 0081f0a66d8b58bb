from .flashcard_ai_use_case import FlashcardAIUseCase, FlashcardAudio
from .flashcard_use_case import FlashcardDraft, FlashcardUseCase

__all__ = ["FlashcardAIUseCase", "FlashcardAudio", "FlashcardDraft", "FlashcardUseCase"]
