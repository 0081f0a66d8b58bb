from .category_use_case import CategoryUseCase
from .note_ai_use_case import NoteAIUseCase
from .note_use_case import NoteUseCase

__all__ = ["CategoryUseCase", "NoteAIUseCase", "NoteUseCase"]
