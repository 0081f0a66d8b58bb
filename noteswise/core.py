from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from noteswise.application.learning.use_cases.flashcard_ai_use_case import FlashcardAIUseCase
from noteswise.application.learning.use_cases.flashcard_use_case import FlashcardUseCase
from noteswise.application.notes.protocols.ai_summary_service import AISummaryServiceProtocol
from noteswise.application.notes.use_cases.category_use_case import CategoryUseCase
from noteswise.application.notes.use_cases.note_ai_use_case import NoteAIUseCase
from noteswise.application.notes.use_cases.note_use_case import NoteUseCase
from noteswise.config import get_settings
from noteswise.feature_flags import is_ai_enabled
from noteswise.infrastructure.ai.ai_service import AIService
from noteswise.infrastructure.ai.speech_service import OpenAISpeechService
from noteswise.infrastructure.identity.auth.supabase_token_verifier import SupabaseTokenVerifier
from noteswise.infrastructure.learning.repositories.flashcard_repository import (
    FlashcardRepository,
)
from noteswise.infrastructure.notes.repositories import CategoryRepository, NoteRepository


def summary_service_when_enabled(
    ai_service: AISummaryServiceProtocol,
) -> AISummaryServiceProtocol | None:
    """Notes are summarized on creation only when an AI provider is configured."""
    return ai_service if is_ai_enabled() else None


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Request-scoped session, provided at runtime by inject_use_case
    db = providers.Dependency(instance_of=Session)

    settings = providers.Callable(get_settings)

    # Repositories
    category_repository = providers.Factory(CategoryRepository, db=db)
    note_repository = providers.Factory(NoteRepository, db=db)
    flashcard_repository = providers.Factory(FlashcardRepository, db=db)

    # External services
    identity_verifier = providers.Singleton(SupabaseTokenVerifier, settings=settings)
    ai_service = providers.Singleton(AIService)
    speech_service = providers.Singleton(OpenAISpeechService, settings=settings)

    # Notes module
    category_use_case = providers.Factory(
        CategoryUseCase,
        category_repository=category_repository,
    )
    note_use_case = providers.Factory(
        NoteUseCase,
        note_repository=note_repository,
        category_repository=category_repository,
        summary_service=providers.Callable(summary_service_when_enabled, ai_service=ai_service),
    )
    note_ai_use_case = providers.Factory(
        NoteAIUseCase,
        note_repository=note_repository,
        summary_service=ai_service,
        speech_service=speech_service,
    )

    # Learning module
    flashcard_use_case = providers.Factory(
        FlashcardUseCase,
        flashcard_repository=flashcard_repository,
        note_repository=note_repository,
    )
    flashcard_ai_use_case = providers.Factory(
        FlashcardAIUseCase,
        note_repository=note_repository,
        flashcard_repository=flashcard_repository,
        flashcard_service=ai_service,
        speech_service=speech_service,
    )


container = Container()
