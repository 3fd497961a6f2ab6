"""
SQLAlchemy engine and per-request sessions.

The engine exists only when DATABASE_URL is set. In memory mode `get_db`
yields None and nothing here is touched.
"""

from collections.abc import Generator
from typing import Annotated, Any

from fastapi import Depends
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from flashcard_api.config import Settings, get_settings


class Base(DeclarativeBase):
    """Declarative base of the ORM models."""


_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def _engine_options(url: str) -> dict[str, Any]:
    if url.startswith("sqlite"):
        # One shared connection so in-memory SQLite survives across threads
        return {"connect_args": {"check_same_thread": False}, "poolclass": StaticPool}
    return {"pool_size": 5, "max_overflow": 10, "pool_pre_ping": True, "pool_recycle": 1800}


def initialize_database(settings: Settings) -> None:
    """Create the engine, the session factory and any missing tables."""
    global _engine, _session_factory  # noqa: PLW0603

    if settings.DATABASE_URL is None:
        raise RuntimeError("DATABASE_URL is not set; flashcards are kept in memory.")

    _engine = create_engine(settings.DATABASE_URL, **_engine_options(settings.DATABASE_URL))
    _session_factory = sessionmaker(bind=_engine, autoflush=False, expire_on_commit=False)

    # Registers the tables on Base.metadata
    from flashcard_api import models  # noqa: F401, PLC0415

    Base.metadata.create_all(bind=_engine)


def open_session() -> Session:
    """New session from the application's session factory."""
    if _session_factory is None:
        raise RuntimeError("Database is not initialized.")
    return _session_factory()


def dispose_engine() -> None:
    """Close pooled connections at shutdown."""
    global _engine, _session_factory  # noqa: PLW0603
    if _engine is None:
        return
    _engine.dispose()
    _engine = None
    _session_factory = None


def get_db(
    settings: Annotated[Settings, Depends(get_settings)],
) -> Generator[Session | None, None, None]:
    """Request-scoped session, or None when no database is configured."""
    if settings.persistence_backend == "memory":
        yield None
        return

    db = open_session()
    try:
        yield db
    finally:
        db.close()


DatabaseSession = Annotated[Session | None, Depends(get_db)]
