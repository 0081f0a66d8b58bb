"""Tests for FlashcardUseCase and FlashcardAIUseCase against in-memory repositories."""

import pytest

from noteswise.application.learning.protocols.ai_flashcard_service import AIFlashcardSuggestion
from noteswise.application.learning.use_cases.flashcard_ai_use_case import FlashcardAIUseCase
from noteswise.application.learning.use_cases.flashcard_use_case import (
    FlashcardDraft,
    FlashcardUseCase,
)
from noteswise.application.notes.use_cases.note_ai_use_case import NoteAIUseCase
from noteswise.domain.common.value_objects import OwnerId
from noteswise.domain.notes.entities.note import Note
from noteswise.exceptions import (
    FlashcardNotFoundError,
    NoteNotFoundError,
    ValidationError,
)
from tests.fakes import (
    FakeAIService,
    FakeSpeechService,
    InMemoryFlashcardRepository,
    InMemoryNoteRepository,
    InMemoryStore,
)


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def note_id(store: InMemoryStore) -> int:
    note = InMemoryNoteRepository(store).create(
        Note.create(owner_id=OwnerId("alice"), title="Cells", content="Cells divide.")
    )
    return note.id.value


@pytest.fixture
def use_case(store: InMemoryStore) -> FlashcardUseCase:
    return FlashcardUseCase(
        flashcard_repository=InMemoryFlashcardRepository(store),
        note_repository=InMemoryNoteRepository(store),
    )


@pytest.fixture
def ai_service() -> FakeAIService:
    return FakeAIService()


@pytest.fixture
def speech_service() -> FakeSpeechService:
    return FakeSpeechService()


@pytest.fixture
def ai_use_case(
    store: InMemoryStore, ai_service: FakeAIService, speech_service: FakeSpeechService
) -> FlashcardAIUseCase:
    return FlashcardAIUseCase(
        note_repository=InMemoryNoteRepository(store),
        flashcard_repository=InMemoryFlashcardRepository(store),
        flashcard_service=ai_service,
        speech_service=speech_service,
    )


class TestFlashcardUseCase:
    def test_create_and_list_for_note(self, use_case: FlashcardUseCase, note_id: int) -> None:
        created = use_case.create_flashcards(
            note_id, "alice", [FlashcardDraft("Q1", "A1"), FlashcardDraft("Q2", "A2")]
        )

        assert [f.question for f in created] == ["Q1", "Q2"]
        assert len(use_case.list_flashcards_for_note(note_id, "alice")) == 2

    def test_create_requires_drafts(self, use_case: FlashcardUseCase, note_id: int) -> None:
        with pytest.raises(ValidationError):
            use_case.create_flashcards(note_id, "alice", [])

    def test_create_on_foreign_note(self, use_case: FlashcardUseCase, note_id: int) -> None:
        with pytest.raises(NoteNotFoundError):
            use_case.create_flashcard(note_id, "bob", "Q", "A")

    def test_list_for_foreign_note(self, use_case: FlashcardUseCase, note_id: int) -> None:
        with pytest.raises(NoteNotFoundError):
            use_case.list_flashcards_for_note(note_id, "bob")

    def test_ownership_follows_note(self, use_case: FlashcardUseCase, note_id: int) -> None:
        flashcard = use_case.create_flashcard(note_id, "alice", "Q", "A")

        assert use_case.list_flashcards("bob") == []
        with pytest.raises(FlashcardNotFoundError):
            use_case.get_flashcard(flashcard.id.value, "bob")
        with pytest.raises(FlashcardNotFoundError):
            use_case.update_flashcard(flashcard.id.value, "bob", answer="X")
        with pytest.raises(FlashcardNotFoundError):
            use_case.delete_flashcard(flashcard.id.value, "bob")

        assert use_case.get_flashcard(flashcard.id.value, "alice").answer == "A"

    def test_update_requires_a_field(self, use_case: FlashcardUseCase, note_id: int) -> None:
        flashcard = use_case.create_flashcard(note_id, "alice", "Q", "A")

        with pytest.raises(ValidationError):
            use_case.update_flashcard(flashcard.id.value, "alice")


class TestFlashcardAIUseCase:
    async def test_generate_flashcards(
        self, ai_use_case: FlashcardAIUseCase, ai_service: FakeAIService, note_id: int
    ) -> None:
        created = await ai_use_case.generate_flashcards(note_id, "alice")

        assert len(created) == 2
        assert ai_service.flashcard_calls == ["Cells divide."]

    async def test_generate_flashcards_with_only_blank_suggestions(
        self, ai_use_case: FlashcardAIUseCase, ai_service: FakeAIService, note_id: int
    ) -> None:
        ai_service.suggestions = [AIFlashcardSuggestion(question="", answer="")]

        assert await ai_use_case.generate_flashcards(note_id, "alice") == []

    async def test_generate_flashcards_for_foreign_note(
        self, ai_use_case: FlashcardAIUseCase, ai_service: FakeAIService, note_id: int
    ) -> None:
        with pytest.raises(NoteNotFoundError):
            await ai_use_case.generate_flashcards(note_id, "bob")

        assert ai_service.flashcard_calls == []

    async def test_generate_answer_audio_only(
        self,
        ai_use_case: FlashcardAIUseCase,
        use_case: FlashcardUseCase,
        speech_service: FakeSpeechService,
        note_id: int,
    ) -> None:
        flashcard = use_case.create_flashcard(note_id, "alice", "Q", "A")

        audio = await ai_use_case.generate_flashcard_audio(
            flashcard.id.value, "alice", voice="onyx", part="answer"
        )

        assert audio.question_audio is None
        assert audio.answer_audio is not None
        assert speech_service.calls == [("A", "onyx")]


class TestNoteAIUseCase:
    async def test_generate_summary_for_foreign_note(
        self, store: InMemoryStore, ai_service: FakeAIService, note_id: int
    ) -> None:
        use_case = NoteAIUseCase(
            note_repository=InMemoryNoteRepository(store),
            summary_service=ai_service,
            speech_service=FakeSpeechService(),
        )

        with pytest.raises(NoteNotFoundError):
            await use_case.generate_summary(note_id, "bob")

        assert ai_service.summary_calls == []
        assert await use_case.generate_summary(note_id, "alice") == "Summary of: Cells divide."
        assert store.notes[note_id].summary == "Summary of: Cells divide."
