"""Protocol for Flashcard repository in learning context."""

from typing import Protocol

from flashcard_api.application.common.pagination import Pagination
from flashcard_api.application.learning.use_cases.dtos.flashcard_dtos import FlashcardFilter
from flashcard_api.domain.common.value_objects import FlashcardId
from flashcard_api.domain.learning.entities.flashcard import Flashcard
from flashcard_api.domain.learning.value_objects import Category, DifficultyLevel


class FlashcardRepositoryProtocol(Protocol):
    """Protocol for Flashcard repository operations in learning context."""

    def find_all(self, filters: FlashcardFilter, pagination: Pagination) -> list[Flashcard]:
        """
        Get flashcards matching the filters.

        Args:
            filters: Equality filters and optional search term
            pagination: Page to return

        Returns:
            List of flashcard entities ordered by id ASC
        """
        ...

    def count(self, filters: FlashcardFilter) -> int:
        """Count flashcards matching the filters."""
        ...

    def find_by_id(self, flashcard_id: FlashcardId) -> Flashcard | None:
        """
        Find a flashcard by ID.

        Args:
            flashcard_id: The flashcard ID

        Returns:
            Flashcard entity if found, None otherwise
        """
        ...

    def add(self, flashcard: Flashcard) -> Flashcard:
        """
        Store a new flashcard.

        Args:
            flashcard: Flashcard entity with a placeholder id

        Returns:
            Stored flashcard entity with its assigned id
        """
        ...

    def save(self, flashcard: Flashcard) -> Flashcard:
        """
        Write the state of an existing flashcard.

        Raises:
            ValueError: If the flashcard is not stored
        """
        ...

    def delete(self, flashcard_id: FlashcardId) -> bool:
        """
        Delete a flashcard.

        Returns:
            True if deleted, False if not found
        """
        ...

    def find_random(
        self,
        count: int,
        category: Category | None = None,
        difficulty: DifficultyLevel | None = None,
    ) -> list[Flashcard]:
        """
        Pick up to `count` distinct flashcards uniformly at random.

        Returns fewer than `count` when the filtered pool is smaller.
        """
        ...

    def exists_with_forms(self, kanji: str, hiragana: str, katakana: str) -> bool:
        """Check whether a flashcard with exactly these three written forms exists."""
        ...
