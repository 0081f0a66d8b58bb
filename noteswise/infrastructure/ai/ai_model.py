from functools import lru_cache

from pydantic_ai.models import Model
from pydantic_ai.models.anthropic import AnthropicModel
from pydantic_ai.models.google import GoogleModel
from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers.anthropic import AnthropicProvider
from pydantic_ai.providers.google import GoogleProvider
from pydantic_ai.providers.ollama import OllamaProvider
from pydantic_ai.providers.openai import OpenAIProvider

from noteswise.config import Settings, get_settings
from noteswise.exceptions import ServiceError


def build_model(settings: Settings) -> Model:
    """Build the chat model of the configured AI provider."""
    model_name = settings.AI_MODEL_NAME
    if model_name is None:
        raise ServiceError("AI_MODEL_NAME is not configured")

    # Provider credentials are guaranteed by the settings validator
    match settings.AI_PROVIDER:
        case "ollama":
            assert settings.OPENAI_BASE_URL is not None
            return OpenAIChatModel(
                model_name=model_name,
                provider=OllamaProvider(base_url=settings.OPENAI_BASE_URL),
            )
        case "openai":
            assert settings.OPENAI_API_KEY is not None
            return OpenAIChatModel(
                model_name=model_name,
                provider=OpenAIProvider(api_key=settings.OPENAI_API_KEY),
            )
        case "anthropic":
            assert settings.ANTHROPIC_API_KEY is not None
            return AnthropicModel(
                model_name=model_name,
                provider=AnthropicProvider(api_key=settings.ANTHROPIC_API_KEY),
            )
        case "google":
            assert settings.GEMINI_API_KEY is not None
            return GoogleModel(
                model_name=model_name,
                provider=GoogleProvider(api_key=settings.GEMINI_API_KEY),
            )
    raise ServiceError("AI features are not enabled on this server")


@lru_cache
def get_ai_model() -> Model:
    """
    Get the cached AI model.

    Built on first use so that a server without an AI provider never imports
    provider SDK state or fails at startup.
    """
    return build_model(get_settings())
