"""Use case for creating flashcards."""

import structlog

from flashcard_api.application.common.unit_of_work import UnitOfWork
from flashcard_api.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashcard_api.application.learning.use_cases.dtos import FlashcardCreateData
from flashcard_api.domain.learning.entities.flashcard import Flashcard

logger = structlog.get_logger(__name__)


class CreateFlashcardUseCase:
    """Use case for creating a single flashcard."""

    def __init__(
        self,
        flashcard_repository: FlashcardRepositoryProtocol,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.flashcard_repository = flashcard_repository
        self.unit_of_work = unit_of_work

    def create_flashcard(self, data: FlashcardCreateData) -> Flashcard:
        """
        Create a new flashcard.

        The card starts unreviewed, not favorite, with a review count of zero.

        Args:
            data: Written forms, meaning, example and classification

        Returns:
            Created flashcard domain entity with its assigned id
        """
        with self.unit_of_work:
            flashcard = self.flashcard_repository.add(data.to_entity())
            self.unit_of_work.commit()

        logger.info("created_flashcard", flashcard_id=flashcard.id.value)
        return flashcard
