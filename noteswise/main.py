"""NotesWise API application."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI, Request, status
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from noteswise.config import configure_logging, get_settings
from noteswise.database import dispose_engine, initialize_database
from noteswise.domain.common.exceptions import DomainError
from noteswise.exceptions import CredentialsException, NotesWiseError
from noteswise.infrastructure.common.dependencies import limiter
from noteswise.infrastructure.common.routers import fallback, health
from noteswise.infrastructure.common.routers import settings as settings_router
from noteswise.infrastructure.identity.dependencies import authenticate_request
from noteswise.infrastructure.learning.routers import flashcards, note_flashcards
from noteswise.infrastructure.notes.routers import categories, note_ai, notes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    settings = get_settings()
    configure_logging(settings.ENVIRONMENT)
    initialize_database(settings)
    logger.info(
        f"Starting {settings.PROJECT_NAME} {settings.VERSION} "
        f"(environment={settings.ENVIRONMENT}, ai_enabled={settings.ai_enabled})"
    )
    yield
    dispose_engine()


async def notes_wise_error_handler(request: Request, exc: NotesWiseError) -> JSONResponse:
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"detail": exc.message}
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Protected API routes answer 401 before reporting a malformed request."""
    prefix = get_settings().API_PREFIX
    path = request.url.path
    is_protected = path.startswith(prefix + "/") and path != f"{prefix}/settings"
    if is_protected and await authenticate_request(request) is None:
        return JSONResponse(
            status_code=CredentialsException.status_code,
            content={"detail": CredentialsException.detail},
            headers=CredentialsException.headers,
        )
    return await request_validation_exception_handler(request, exc)


def create_app() -> FastAPI:
    """Build the application with all routers, middleware and exception handlers."""
    settings = get_settings()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.limiter = limiter
    app.add_exception_handler(
        RateLimitExceeded,
        _rate_limit_exceeded_handler,  # type: ignore[arg-type]
    )
    app.add_exception_handler(NotesWiseError, notes_wise_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(DomainError, domain_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(
        RequestValidationError,
        validation_error_handler,  # type: ignore[arg-type]
    )

    api_router = APIRouter(prefix=settings.API_PREFIX)
    api_router.include_router(settings_router.router)
    api_router.include_router(categories.router)
    api_router.include_router(notes.router)
    api_router.include_router(note_ai.router)
    api_router.include_router(note_flashcards.router)
    api_router.include_router(flashcards.router)
    # Must stay last: catches every other path under the prefix
    api_router.include_router(fallback.router)

    app.include_router(health.router)
    app.include_router(api_router)
    return app


app = create_app()
