"""FastAPI dependencies shared by routers."""

from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar

from fastapi import HTTPException, status
from slowapi import Limiter
from slowapi.util import get_remote_address

from noteswise.config import get_settings
from noteswise.feature_flags import is_ai_enabled, is_audio_enabled

F = TypeVar("F", bound=Callable[..., Any])

limiter = Limiter(
    key_func=get_remote_address,
    enabled=get_settings().RATE_LIMIT_ENABLED,
)


def _require_feature(enabled: Callable[[], bool], detail: str) -> Callable[[F], F]:
    def decorator(func: F) -> F:
        @wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:  # noqa: ANN401
            if not enabled():
                raise HTTPException(status_code=status.HTTP_410_GONE, detail=detail)
            return await func(*args, **kwargs)

        return wrapper  # type: ignore[return-value]

    return decorator


def require_ai_enabled(func: F) -> F:
    """
    Decorator that requires an AI provider for the endpoint.

    Returns HTTP 410 Gone when AI features are disabled. Dependencies such as
    the authorization gate have already run when the check happens.
    """
    return _require_feature(is_ai_enabled, "AI features are not enabled on this server")(func)


def require_audio_enabled(func: F) -> F:
    """Decorator that requires speech synthesis for the endpoint (410 Gone otherwise)."""
    return _require_feature(is_audio_enabled, "Audio features are not enabled on this server")(
        func
    )
