"""Pytest configuration and fixtures."""

import os
from collections.abc import Generator, Iterator
from datetime import UTC, datetime, timedelta
from typing import Any
from unittest.mock import patch

# Settings are read at import time; configure them before importing the app.
os.environ.update(
    {
        "ENVIRONMENT": "test",
        "DATABASE_URL": "sqlite://",
        "SUPABASE_JWT_SECRET": "test-supabase-jwt-secret-0123456789abcdef",
        "SUPABASE_JWT_AUDIENCE": "authenticated",
        "AI_PROVIDER": "openai",
        "AI_MODEL_NAME": "gpt-4o-mini",
        "OPENAI_API_KEY": "sk-test",
        "RATE_LIMIT_ENABLED": "false",
    }
)
os.environ.pop("SUPABASE_URL", None)

import jwt  # noqa: E402
import pytest  # noqa: E402
from dependency_injector import providers  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402

from noteswise.config import get_settings  # noqa: E402
from noteswise.core import container  # noqa: E402
from noteswise.database import Base, create_db_engine, get_db  # noqa: E402
from noteswise.main import app  # noqa: E402
from tests.fakes import FakeAIService, FakeSpeechService  # noqa: E402

TEST_JWT_SECRET = os.environ["SUPABASE_JWT_SECRET"]
OWNER_A = "0b5e4a4e-5f6c-4b8e-9f0a-aaaaaaaaaaaa"
OWNER_B = "7d2c9f10-3e4b-4a5c-8d6e-bbbbbbbbbbbb"


def make_token(
    sub: str | None,
    *,
    secret: str = TEST_JWT_SECRET,
    audience: str = "authenticated",
    expires_in: timedelta = timedelta(hours=1),
) -> str:
    """Mint an access token shaped like the ones Supabase Auth issues."""
    payload: dict[str, Any] = {
        "aud": audience,
        "exp": datetime.now(UTC) + expires_in,
        "role": "authenticated",
    }
    if sub is not None:
        payload["sub"] = sub
    return jwt.encode(payload, secret, algorithm="HS256")


def auth_headers(owner_id: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token(owner_id)}"}


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh in-memory database for each test."""
    engine = create_db_engine("sqlite://")
    Base.metadata.create_all(bind=engine)

    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def fake_ai() -> FakeAIService:
    return FakeAIService()


@pytest.fixture
def fake_speech() -> FakeSpeechService:
    return FakeSpeechService()


@pytest.fixture
def client(
    db_session: Session, fake_ai: FakeAIService, fake_speech: FakeSpeechService
) -> Generator[TestClient, Any, None]:
    """Create a test client bound to the test database and the fake AI services."""

    def override_get_db() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    container.ai_service.override(providers.Object(fake_ai))
    container.speech_service.override(providers.Object(fake_speech))

    with TestClient(app) as test_client:
        yield test_client

    container.ai_service.reset_override()
    container.speech_service.reset_override()
    app.dependency_overrides.clear()


@pytest.fixture
def owner_a_headers() -> dict[str, str]:
    return auth_headers(OWNER_A)


@pytest.fixture
def owner_b_headers() -> dict[str, str]:
    return auth_headers(OWNER_B)


@pytest.fixture
def ai_disabled() -> Iterator[None]:
    """Run the test as if no AI provider were configured."""
    settings = get_settings().model_copy(update={"AI_PROVIDER": None, "AI_MODEL_NAME": None})
    with patch("noteswise.feature_flags.get_settings", return_value=settings):
        yield


@pytest.fixture
def audio_disabled() -> Iterator[None]:
    """Run the test with an AI provider but no speech synthesis credentials."""
    settings = get_settings().model_copy(
        update={
            "AI_PROVIDER": "anthropic",
            "ANTHROPIC_API_KEY": "sk-ant-test",
            "OPENAI_API_KEY": None,
        }
    )
    with patch("noteswise.feature_flags.get_settings", return_value=settings):
        yield


def create_test_category(
    client: TestClient, headers: dict[str, str], name: str = "Biology", **fields: Any
) -> dict[str, Any]:
    response = client.post("/api/categories", json={"name": name, **fields}, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def create_test_note(
    client: TestClient,
    headers: dict[str, str],
    title: str = "Photosynthesis",
    content: str = "Plants turn light into chemical energy.",
    **fields: Any,
) -> dict[str, Any]:
    response = client.post(
        "/api/notes", json={"title": title, "content": content, **fields}, headers=headers
    )
    assert response.status_code == 201, response.text
    return response.json()


def create_test_flashcard(
    client: TestClient,
    headers: dict[str, str],
    note_id: int,
    question: str = "What do plants need?",
    answer: str = "Light",
) -> dict[str, Any]:
    response = client.post(
        "/api/flashcards",
        json={"noteId": note_id, "question": question, "answer": answer},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()
