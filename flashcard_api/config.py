"""Settings and logging setup."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Literal

import structlog
from pydantic import computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class Settings(BaseSettings):
    """Read from the environment, then from `.env`."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Unset or blank: flashcards live in memory and are lost on restart
    DATABASE_URL: str | None = None

    HOST: str = "0.0.0.0"  # noqa: S104
    PORT: int = 5000

    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "Japanese Flashcard API"
    VERSION: str = "0.1.0"

    ENVIRONMENT: Literal["development", "production", "test"] = "development"
    # Defaults to DEBUG in development and INFO elsewhere
    LOG_LEVEL: LogLevel | None = None

    CORS_ORIGINS: list[str] = ["*"]

    SEED_SAMPLE_FLASHCARDS: bool = True

    @field_validator("DATABASE_URL", mode="after")
    @classmethod
    def blank_database_url_to_none(cls, value: str | None) -> str | None:
        return value if value and value.strip() else None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def persistence_backend(self) -> Literal["database", "memory"]:
        """Flashcard store selected by DATABASE_URL."""
        return "database" if self.DATABASE_URL else "memory"

    @property
    def log_level(self) -> int:
        if self.LOG_LEVEL is not None:
            return logging.getLevelNamesMapping()[self.LOG_LEVEL]
        return logging.DEBUG if self.ENVIRONMENT == "development" else logging.INFO


def configure_logging(settings: Settings) -> None:
    """
    Route structlog through stdlib logging.

    Production renders one JSON object per line; other environments use
    the console renderer.
    """
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=settings.log_level)

    renderer: Callable[..., Any] = (
        structlog.processors.JSONRenderer()
        if settings.ENVIRONMENT == "production"
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
