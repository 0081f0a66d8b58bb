"""Application exception hierarchy, translated to HTTP responses in main.py."""

from fastapi import HTTPException
from starlette import status


class NotesWiseError(Exception):
    """Base exception for all NotesWise errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(NotesWiseError):
    """Resource not found for the requesting owner."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=404)


class CategoryNotFoundError(NotFoundError):
    """Category not found error."""

    def __init__(self, category_id: int) -> None:
        self.category_id = category_id
        super().__init__(f"Category with id {category_id} not found")


class NoteNotFoundError(NotFoundError):
    """Note not found error."""

    def __init__(self, note_id: int) -> None:
        self.note_id = note_id
        super().__init__(f"Note with id {note_id} not found")


class FlashcardNotFoundError(NotFoundError):
    """Flashcard not found error."""

    def __init__(self, flashcard_id: int) -> None:
        self.flashcard_id = flashcard_id
        super().__init__(f"Flashcard with id {flashcard_id} not found")


class ValidationError(NotesWiseError):
    """Request is well-formed but cannot be applied."""

    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code=status_code)


class InvalidReferenceError(ValidationError):
    """A referenced entity does not exist for the requesting owner."""

    def __init__(self, entity_type: str, entity_id: int) -> None:
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} not found")


class ServiceError(NotesWiseError):
    """Upstream collaborator failed or is misconfigured."""


CredentialsException = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Could not validate credentials",
    headers={"WWW-Authenticate": "Bearer"},
)
