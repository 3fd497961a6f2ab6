"""FastAPI application entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import UTC, datetime

import structlog
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse

from flashcard_api.config import configure_logging, get_settings
from flashcard_api.core import container
from flashcard_api.database import dispose_engine, initialize_database, open_session
from flashcard_api.domain.common.exceptions import DomainError
from flashcard_api.exceptions import FlashcardApiError
from flashcard_api.infrastructure.learning.routers import flashcards
from flashcard_api.infrastructure.learning.sample_flashcards import seed_sample_flashcards

settings = get_settings()
configure_logging(settings)
logger = structlog.get_logger(__name__)


def _seed_store() -> None:
    if settings.persistence_backend == "memory":
        seed_sample_flashcards(container.flashcard_repository(), container.unit_of_work())
        return

    db = open_session()
    try:
        with container.db.override(db):
            seed_sample_flashcards(container.flashcard_repository(), container.unit_of_work())
    finally:
        db.close()


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Select the flashcard store at startup and release it at shutdown."""
    container.config.persistence_backend.from_value(settings.persistence_backend)
    if settings.persistence_backend == "database":
        initialize_database(settings)
    logger.info(
        "starting_application",
        environment=settings.ENVIRONMENT,
        persistence_backend=settings.persistence_backend,
    )

    if settings.SEED_SAMPLE_FLASHCARDS:
        _seed_store()

    yield

    dispose_engine()
    logger.info("stopped_application")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Japanese vocabulary flashcards: CRUD, review, practice, import and export",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(FlashcardApiError)
async def flashcard_api_error_handler(_request: Request, exc: FlashcardApiError) -> JSONResponse:
    """Render application errors with their status code."""
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(DomainError)
async def domain_error_handler(_request: Request, exc: DomainError) -> JSONResponse:
    """Render broken domain rules as bad requests."""
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": exc.message})


app.include_router(flashcards.router, prefix=settings.API_PREFIX)


@app.get("/", include_in_schema=False)
def root() -> RedirectResponse:
    """Redirect to the interactive API docs."""
    return RedirectResponse(url="/docs")


@app.get("/health")
def health() -> dict[str, str]:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": datetime.now(UTC).isoformat(),
        "environment": settings.ENVIRONMENT,
    }
