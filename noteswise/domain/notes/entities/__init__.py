from .category import Category
from .note import Note

__all__ = ["Category", "Note"]
