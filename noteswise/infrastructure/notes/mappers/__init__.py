from .category_mapper import CategoryMapper
from .note_mapper import NoteMapper

__all__ = ["CategoryMapper", "NoteMapper"]
