"""Pydantic schemas for Note API request/response validation."""

from datetime import datetime

from pydantic import Field

from noteswise.domain.notes.entities.note import Note as NoteEntity
from noteswise.infrastructure.common.schemas.base import CamelModel


class NoteCreateRequest(CamelModel):
    """Schema for creating a note."""

    title: str = Field(..., min_length=1, max_length=255, description="Note title")
    content: str = Field("", description="Note body")
    summary: str | None = Field(None, description="Summary; generated when AI is enabled")
    audio_url: str | None = Field(None, max_length=1024, description="Narration URL")
    category_id: int | None = Field(None, description="Category to file the note under")


class NoteUpdateRequest(CamelModel):
    """
    Schema for updating a note.

    Omitted fields are left unchanged. Sending categoryId as null removes the
    note from its category.
    """

    title: str | None = Field(None, max_length=255, description="New title")
    content: str | None = Field(None, description="New body")
    summary: str | None = Field(None, description="New summary")
    audio_url: str | None = Field(None, max_length=1024, description="New narration URL")
    category_id: int | None = Field(None, description="New category")


class Note(CamelModel):
    """Schema for Note response."""

    id: int
    title: str
    content: str
    summary: str | None
    audio_url: str | None
    category_id: int | None
    owner_id: str
    created_at: datetime | None
    updated_at: datetime | None

    @classmethod
    def from_entity(cls, note: NoteEntity) -> "Note":
        return cls(
            id=note.id.value,
            title=note.title,
            content=note.content,
            summary=note.summary,
            audio_url=note.audio_url,
            category_id=note.category_id.value if note.category_id else None,
            owner_id=note.owner_id.value,
            created_at=note.created_at,
            updated_at=note.updated_at,
        )


class GenerateSummaryResponse(CamelModel):
    """Schema for a generated note summary."""

    summary: str = Field(..., description="AI-generated summary of the note")


class GenerateAudioRequest(CamelModel):
    """Schema for requesting narration audio."""

    voice: str | None = Field(None, min_length=1, description="Voice name of the speech model")


class GenerateAudioResponse(CamelModel):
    """Schema for generated narration audio."""

    audio_content: str = Field(..., description="Base64-encoded MP3 audio")
