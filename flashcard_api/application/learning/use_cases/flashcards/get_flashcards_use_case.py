"""Use case for reading flashcards."""

from flashcard_api.application.common.pagination import Pagination
from flashcard_api.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashcard_api.application.learning.use_cases.dtos import FlashcardFilter
from flashcard_api.application.learning.use_cases.exceptions import FlashcardNotFoundError
from flashcard_api.domain.common.value_objects import FlashcardId
from flashcard_api.domain.learning.entities.flashcard import Flashcard


class GetFlashcardsUseCase:
    """Use case for listing flashcards and fetching one by id."""

    def __init__(self, flashcard_repository: FlashcardRepositoryProtocol) -> None:
        """Initialize use case with repository protocols."""
        self.flashcard_repository = flashcard_repository

    def list_flashcards(self, filters: FlashcardFilter, pagination: Pagination) -> list[Flashcard]:
        """
        Get one page of flashcards matching the filters.

        Args:
            filters: Category, difficulty, word type, favorite and search criteria
            pagination: Page number and size

        Returns:
            Flashcards ordered by id, empty when the page is past the end
        """
        return self.flashcard_repository.find_all(filters, pagination)

    def get_flashcard(self, flashcard_id: int) -> Flashcard:
        """
        Get a single flashcard.

        Raises:
            FlashcardNotFoundError: If flashcard is not found
        """
        flashcard = self.flashcard_repository.find_by_id(FlashcardId(flashcard_id))
        if not flashcard:
            raise FlashcardNotFoundError(flashcard_id)
        return flashcard
