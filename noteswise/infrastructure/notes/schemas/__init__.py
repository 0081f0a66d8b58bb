from .category_schemas import Category, CategoryCreateRequest, CategoryUpdateRequest
from .note_schemas import (
    GenerateAudioRequest,
    GenerateAudioResponse,
    GenerateSummaryResponse,
    Note,
    NoteCreateRequest,
    NoteUpdateRequest,
)

__all__ = [
    "Category",
    "CategoryCreateRequest",
    "CategoryUpdateRequest",
    "GenerateAudioRequest",
    "GenerateAudioResponse",
    "GenerateSummaryResponse",
    "Note",
    "NoteCreateRequest",
    "NoteUpdateRequest",
]
