"""Use case for picking practice flashcards at random."""

from flashcard_api.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashcard_api.domain.learning.entities.flashcard import Flashcard
from flashcard_api.domain.learning.value_objects import Category, DifficultyLevel

MIN_RANDOM_COUNT = 1
MAX_RANDOM_COUNT = 50


class GetRandomFlashcardsUseCase:
    """Use case for random practice selection."""

    def __init__(self, flashcard_repository: FlashcardRepositoryProtocol) -> None:
        self.flashcard_repository = flashcard_repository

    def get_random_flashcards(
        self,
        count: int,
        category: Category | None = None,
        difficulty: DifficultyLevel | None = None,
    ) -> list[Flashcard]:
        """
        Pick distinct flashcards at random from the filtered pool.

        Callers keep `count` within MIN_RANDOM_COUNT..MAX_RANDOM_COUNT. A pool
        smaller than `count` is returned whole, in random order.
        """
        return self.flashcard_repository.find_random(count, category, difficulty)
