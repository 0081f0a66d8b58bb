from .category_repository import CategoryRepository
from .note_repository import NoteRepository

__all__ = ["CategoryRepository", "NoteRepository"]
