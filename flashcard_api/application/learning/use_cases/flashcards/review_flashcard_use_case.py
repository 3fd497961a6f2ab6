"""Use case for recording flashcard reviews."""

import structlog

from flashcard_api.application.common.unit_of_work import UnitOfWork
from flashcard_api.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashcard_api.application.learning.use_cases.exceptions import FlashcardNotFoundError
from flashcard_api.domain.common.value_objects import FlashcardId
from flashcard_api.domain.learning.entities.flashcard import Flashcard

logger = structlog.get_logger(__name__)


class ReviewFlashcardUseCase:
    """Use case for marking a flashcard as reviewed."""

    def __init__(
        self,
        flashcard_repository: FlashcardRepositoryProtocol,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.flashcard_repository = flashcard_repository
        self.unit_of_work = unit_of_work

    def mark_reviewed(self, flashcard_id: int) -> Flashcard:
        """
        Stamp the review date and bump the review count by one.

        Raises:
            FlashcardNotFoundError: If flashcard is not found
        """
        with self.unit_of_work:
            flashcard = self.flashcard_repository.find_by_id(FlashcardId(flashcard_id))
            if not flashcard:
                raise FlashcardNotFoundError(flashcard_id)

            flashcard.mark_reviewed()
            flashcard = self.flashcard_repository.save(flashcard)
            self.unit_of_work.commit()

        logger.info(
            "reviewed_flashcard",
            flashcard_id=flashcard_id,
            review_count=flashcard.review_count,
        )
        return flashcard
