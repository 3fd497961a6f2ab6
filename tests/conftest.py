"""Pytest configuration and fixtures."""

import os

os.environ["SEED_SAMPLE_FLASHCARDS"] = "false"
os.environ["ENVIRONMENT"] = "test"
os.environ.pop("DATABASE_URL", None)

from collections.abc import Callable, Generator  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from flashcard_api import models  # noqa: E402, F401
from flashcard_api.core import container  # noqa: E402
from flashcard_api.database import Base, get_db  # noqa: E402
from flashcard_api.main import app  # noqa: E402

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# Create test engine
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def memory_client() -> Generator[TestClient, Any, None]:
    """Test client running on a fresh in-memory store."""
    container.in_memory_flashcard_repository.reset()

    with TestClient(app) as test_client:
        yield test_client

    container.in_memory_flashcard_repository.reset()


@pytest.fixture
def database_client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Test client running on the SQLite test database."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        container.config.persistence_backend.from_value("database")
        yield test_client

    container.config.persistence_backend.from_value("memory")
    app.dependency_overrides.clear()


@pytest.fixture(params=["memory", "database"])
def client(request: pytest.FixtureRequest) -> TestClient:
    """Test client for each flashcard store."""
    return request.getfixturevalue(f"{request.param}_client")


@pytest.fixture
def create_flashcard(client: TestClient) -> Callable[..., dict[str, Any]]:
    """Create a flashcard through the API and return its JSON."""

    def _create(**overrides: Any) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "kanji": "",
            "hiragana": "",
            "katakana": "",
            "meaning": "Meaning",
            "word_type": 0,
            "difficulty": 1,
            "category": 0,
        }
        payload.update(overrides)
        response = client.post("/api/flashcards", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def sample_flashcards(create_flashcard: Callable[..., dict[str, Any]]) -> list[dict[str, Any]]:
    """Four flashcards with ids 1..4."""
    return [
        create_flashcard(
            kanji="犬",
            hiragana="いぬ",
            meaning="Dog",
            example="私の犬はとても可愛いです。",
            word_type=1,
            difficulty=1,
            category=1,
        ),
        create_flashcard(
            katakana="コーヒー",
            meaning="Coffee",
            example="朝のコーヒーは美味しいです。",
            word_type=2,
            difficulty=1,
            category=3,
        ),
        create_flashcard(
            hiragana="おはよう",
            meaning="Good morning",
            word_type=0,
            difficulty=1,
            category=0,
        ),
        create_flashcard(
            katakana="コンピューター",
            meaning="Computer",
            word_type=2,
            difficulty=2,
            category=0,
        ),
    ]
