from .ai_summary_service import AISummaryServiceProtocol
from .category_repository import CategoryRepositoryProtocol
from .note_repository import NoteRepositoryProtocol

__all__ = [
    "AISummaryServiceProtocol",
    "CategoryRepositoryProtocol",
    "NoteRepositoryProtocol",
]
