"""Protocol for Flashcard repository in learning context."""

from typing import Protocol

from noteswise.domain.common.value_objects import FlashcardId, NoteId, OwnerId
from noteswise.domain.learning.entities.flashcard import Flashcard


class FlashcardRepositoryProtocol(Protocol):
    """
    Flashcard storage scoped by the owner of the parent note.

    Flashcards have no owner column; every operation takes the owner
    explicitly and filters through the note in the same statement.
    """

    def find_all(self, owner_id: OwnerId) -> list[Flashcard]:
        """
        Get all flashcards on notes of an owner.

        Returns:
            List of flashcard entities ordered by created_at DESC
        """
        ...

    def find_by_note(self, note_id: NoteId, owner_id: OwnerId) -> list[Flashcard]:
        """
        Get the flashcards of one note.

        Returns:
            List of flashcard entities ordered by created_at DESC; empty when
            the note does not exist for the owner
        """
        ...

    def find_by_id(self, flashcard_id: FlashcardId, owner_id: OwnerId) -> Flashcard | None:
        """
        Find a flashcard by ID with ownership check through its note.

        Returns:
            Flashcard entity if found and its note is owned by owner, None otherwise
        """
        ...

    def create_many(
        self, flashcards: list[Flashcard], note_id: NoteId, owner_id: OwnerId
    ) -> list[Flashcard] | None:
        """
        Insert flashcards for one note.

        The parent note is locked by (note_id, owner_id) for the duration of
        the insert.

        Returns:
            Saved flashcards, or None if the note does not exist for the owner
        """
        ...

    def update(self, flashcard: Flashcard, owner_id: OwnerId) -> Flashcard | None:
        """
        Write question and answer of an existing flashcard.

        Returns:
            Updated entity, or None if not found for the owner
        """
        ...

    def delete(self, flashcard_id: FlashcardId, owner_id: OwnerId) -> bool:
        """
        Delete a flashcard.

        Returns:
            True if deleted, False if not found
        """
        ...
