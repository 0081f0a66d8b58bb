"""Protocol for Note repository in notes context."""

from typing import Protocol

from noteswise.domain.common.value_objects import CategoryId, NoteId, OwnerId
from noteswise.domain.notes.entities.note import Note


class NoteRepositoryProtocol(Protocol):
    """Owner-scoped note storage."""

    def find_all(self, owner_id: OwnerId, category_id: CategoryId | None = None) -> list[Note]:
        """
        Get an owner's notes, optionally only those in one category.

        Returns:
            List of note entities ordered by updated_at DESC
        """
        ...

    def find_by_id(self, note_id: NoteId, owner_id: OwnerId) -> Note | None:
        """
        Find a note by ID with owner check.

        Returns:
            Note entity if found and owned by owner, None otherwise
        """
        ...

    def create(self, note: Note) -> Note:
        """Insert a new note and return it with database-generated values."""
        ...

    def update(self, note: Note) -> Note | None:
        """
        Write the mutable fields of an existing note.

        Returns:
            Updated entity, or None if no note with that id exists for note.owner_id
        """
        ...

    def delete(self, note_id: NoteId, owner_id: OwnerId) -> bool:
        """
        Delete a note and its flashcards.

        Returns:
            True if deleted, False if not found
        """
        ...
