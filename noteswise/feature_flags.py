"""Feature flags derived from configuration."""

from pydantic import BaseModel, Field

from noteswise.config import get_settings


class FeatureFlags(BaseModel):
    """Public feature toggles of this server."""

    ai: bool = Field(..., description="Whether summary and flashcard generation is available")
    audio: bool = Field(..., description="Whether speech synthesis is available")


def get_feature_flags() -> FeatureFlags:
    settings = get_settings()
    return FeatureFlags(ai=settings.ai_enabled, audio=settings.audio_enabled)


def is_ai_enabled() -> bool:
    """Check if AI features are enabled."""
    return get_feature_flags().ai


def is_audio_enabled() -> bool:
    """Check if speech synthesis is enabled."""
    return get_feature_flags().audio
