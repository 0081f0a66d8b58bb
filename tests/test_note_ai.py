"""Tests for note AI API endpoints."""

import pytest
from fastapi import status
from fastapi.testclient import TestClient

from tests.conftest import create_test_note
from tests.fakes import FakeAIService, FakeSpeechService, encode_audio


class TestGenerateSummary:
    def test_generate_summary_stores_summary(
        self, client: TestClient, owner_a_headers: dict[str, str], fake_ai: FakeAIService
    ) -> None:
        note = create_test_note(client, owner_a_headers, content="Cells divide by mitosis.")
        client.put(
            f"/api/notes/{note['id']}", json={"content": "Cells divide."}, headers=owner_a_headers
        )

        response = client.post(
            f"/api/notes/{note['id']}/generate-summary", headers=owner_a_headers
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"summary": "Summary of: Cells divide."}
        reread = client.get(f"/api/notes/{note['id']}", headers=owner_a_headers).json()
        assert reread["summary"] == "Summary of: Cells divide."

    def test_generate_summary_for_other_owners_note_returns_404(
        self,
        client: TestClient,
        owner_a_headers: dict[str, str],
        owner_b_headers: dict[str, str],
        fake_ai: FakeAIService,
    ) -> None:
        """Test the provider is never called for a note the caller does not own."""
        note = create_test_note(client, owner_a_headers)
        fake_ai.summary_calls.clear()

        response = client.post(
            f"/api/notes/{note['id']}/generate-summary", headers=owner_b_headers
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert fake_ai.summary_calls == []

    def test_generate_summary_provider_failure_returns_500(
        self, client: TestClient, owner_a_headers: dict[str, str], fake_ai: FakeAIService
    ) -> None:
        note = create_test_note(client, owner_a_headers)
        fake_ai.fail_with = RuntimeError("upstream timeout")

        response = client.post(
            f"/api/notes/{note['id']}/generate-summary", headers=owner_a_headers
        )

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        # Known leak: the provider message is passed through to the client
        assert response.json() == {"detail": "Failed to generate summary: upstream timeout"}

    @pytest.mark.usefixtures("ai_disabled")
    def test_generate_summary_when_ai_disabled_returns_410(
        self, client: TestClient, owner_a_headers: dict[str, str], fake_ai: FakeAIService
    ) -> None:
        note = create_test_note(client, owner_a_headers)

        response = client.post(
            f"/api/notes/{note['id']}/generate-summary", headers=owner_a_headers
        )

        assert response.status_code == status.HTTP_410_GONE
        assert fake_ai.summary_calls == []


class TestGenerateAudio:
    def test_generate_audio_narrates_summary(
        self,
        client: TestClient,
        owner_a_headers: dict[str, str],
        fake_speech: FakeSpeechService,
    ) -> None:
        note = create_test_note(client, owner_a_headers)

        response = client.post(
            f"/api/notes/{note['id']}/generate-audio",
            json={"voice": "nova"},
            headers=owner_a_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"audioContent": encode_audio(note["summary"], "nova")}
        assert fake_speech.calls == [(note["summary"], "nova")]

    def test_generate_audio_narrates_content_without_summary(
        self, client: TestClient, owner_a_headers: dict[str, str]
    ) -> None:
        note = create_test_note(client, owner_a_headers, content="Read me aloud")
        client.put(f"/api/notes/{note['id']}", json={"summary": ""}, headers=owner_a_headers)

        response = client.post(f"/api/notes/{note['id']}/generate-audio", headers=owner_a_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"audioContent": encode_audio("Read me aloud")}

    def test_generate_audio_for_other_owners_note_returns_404(
        self,
        client: TestClient,
        owner_a_headers: dict[str, str],
        owner_b_headers: dict[str, str],
        fake_speech: FakeSpeechService,
    ) -> None:
        note = create_test_note(client, owner_a_headers)

        response = client.post(
            f"/api/notes/{note['id']}/generate-audio", json={}, headers=owner_b_headers
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert fake_speech.calls == []

    def test_generate_audio_failure_returns_500(
        self,
        client: TestClient,
        owner_a_headers: dict[str, str],
        fake_speech: FakeSpeechService,
    ) -> None:
        note = create_test_note(client, owner_a_headers)
        fake_speech.fail_with = RuntimeError("voice not found")

        response = client.post(
            f"/api/notes/{note['id']}/generate-audio", json={}, headers=owner_a_headers
        )

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert "voice not found" in response.json()["detail"]

    @pytest.mark.usefixtures("ai_disabled")
    def test_generate_audio_when_ai_disabled_returns_410(
        self, client: TestClient, owner_a_headers: dict[str, str]
    ) -> None:
        note = create_test_note(client, owner_a_headers)

        response = client.post(
            f"/api/notes/{note['id']}/generate-audio", json={}, headers=owner_a_headers
        )

        assert response.status_code == status.HTTP_410_GONE

    @pytest.mark.usefixtures("audio_disabled")
    def test_generate_audio_without_speech_credentials_returns_410(
        self,
        client: TestClient,
        owner_a_headers: dict[str, str],
        fake_speech: FakeSpeechService,
    ) -> None:
        """Test AI on but speech synthesis off answers 410, like the settings flags say."""
        note = create_test_note(client, owner_a_headers)

        response = client.post(
            f"/api/notes/{note['id']}/generate-audio", json={}, headers=owner_a_headers
        )

        assert response.status_code == status.HTTP_410_GONE
        assert response.json() == {"detail": "Audio features are not enabled on this server"}
        assert fake_speech.calls == []

    @pytest.mark.usefixtures("audio_disabled")
    def test_generate_summary_still_available_without_speech_credentials(
        self,
        client: TestClient,
        owner_a_headers: dict[str, str],
    ) -> None:
        note = create_test_note(client, owner_a_headers)

        response = client.post(
            f"/api/notes/{note['id']}/generate-summary", headers=owner_a_headers
        )

        assert response.status_code == status.HTTP_200_OK
