"""Note entity."""

from dataclasses import dataclass
from datetime import datetime

from noteswise.domain.common.entity import Entity
from noteswise.domain.common.exceptions import ValidationError
from noteswise.domain.common.value_objects import CategoryId, NoteId, OwnerId

MAX_TITLE_LENGTH = 255


@dataclass(eq=False)
class Note(Entity[NoteId]):
    """
    Note owned by a single user.

    Business Rules:
    - Title cannot be empty
    - Owner never changes after creation
    - A category reference must point at a category of the same owner
      (checked by the application layer, which can see categories)
    """

    id: NoteId
    owner_id: OwnerId
    title: str
    content: str
    summary: str | None = None
    audio_url: str | None = None
    category_id: CategoryId | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        _validate_title(self.title)

    def update_title(self, title: str) -> None:
        """
        Update the title.

        Raises:
            ValidationError: If title is empty
        """
        _validate_title(title)
        self.title = title.strip()

    def update_content(self, content: str) -> None:
        """Replace the note body."""
        self.content = content

    def set_summary(self, summary: str | None) -> None:
        self.summary = summary

    def set_audio_url(self, audio_url: str | None) -> None:
        self.audio_url = audio_url

    def move_to_category(self, category_id: CategoryId | None) -> None:
        """File the note under a category, or remove it from its category with None."""
        self.category_id = category_id

    def narration_text(self) -> str:
        """Text read aloud for this note: the summary when there is one, else the content."""
        if self.summary and self.summary.strip():
            return self.summary
        return self.content

    @classmethod
    def create(
        cls,
        owner_id: OwnerId,
        title: str,
        content: str,
        summary: str | None = None,
        audio_url: str | None = None,
        category_id: CategoryId | None = None,
    ) -> "Note":
        """Create a new note (ID will be 0 until persisted)."""
        _validate_title(title)
        return cls(
            id=NoteId.generate(),
            owner_id=owner_id,
            title=title.strip(),
            content=content,
            summary=summary,
            audio_url=audio_url,
            category_id=category_id,
        )

    @classmethod
    def create_with_id(
        cls,
        id: NoteId,
        owner_id: OwnerId,
        title: str,
        content: str,
        summary: str | None,
        audio_url: str | None,
        category_id: CategoryId | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Note":
        """Reconstitute a note from persistence."""
        return cls(
            id=id,
            owner_id=owner_id,
            title=title,
            content=content,
            summary=summary,
            audio_url=audio_url,
            category_id=category_id,
            created_at=created_at,
            updated_at=updated_at,
        )


def _validate_title(title: str) -> None:
    if not title or not title.strip():
        raise ValidationError("Title cannot be empty", field="title")
    if len(title.strip()) > MAX_TITLE_LENGTH:
        raise ValidationError(f"Title cannot exceed {MAX_TITLE_LENGTH} characters", field="title")
