"""Tests for main API endpoints."""

import pytest
from fastapi.testclient import TestClient


def test_health_endpoint(client: TestClient) -> None:
    """Test health check endpoint is public."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_settings_endpoint_is_public(client: TestClient) -> None:
    """Test feature flags are readable without a token."""
    response = client.get("/api/settings")
    assert response.status_code == 200
    assert response.json() == {"featureFlags": {"ai": True, "audio": True}}


@pytest.mark.usefixtures("ai_disabled")
def test_settings_endpoint_when_ai_disabled(client: TestClient) -> None:
    response = client.get("/api/settings")
    assert response.status_code == 200
    assert response.json() == {"featureFlags": {"ai": False, "audio": False}}


def test_unknown_route_outside_api_is_not_found(client: TestClient) -> None:
    response = client.get("/nowhere")
    assert response.status_code == 404


def test_cors_preflight_allows_configured_origin(client: TestClient) -> None:
    response = client.options(
        "/api/notes",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Authorization",
        },
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:5173"


@pytest.mark.usefixtures("audio_disabled")
def test_settings_endpoint_when_audio_disabled(client: TestClient) -> None:
    response = client.get("/api/settings")
    assert response.json() == {"featureFlags": {"ai": True, "audio": False}}


def test_openapi_schema_builds(client: TestClient) -> None:
    response = client.get("/openapi.json")
    assert response.status_code == 200
    assert "/api/notes/{note_id}" in response.json()["paths"]
    assert "/api/{path}" not in response.json()["paths"]
