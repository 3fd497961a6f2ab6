"""Use case for deleting flashcards."""

import structlog

from flashcard_api.application.common.unit_of_work import UnitOfWork
from flashcard_api.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashcard_api.application.learning.use_cases.exceptions import FlashcardNotFoundError
from flashcard_api.domain.common.value_objects import FlashcardId

logger = structlog.get_logger(__name__)


class DeleteFlashcardUseCase:
    def __init__(
        self,
        flashcard_repository: FlashcardRepositoryProtocol,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.flashcard_repository = flashcard_repository
        self.unit_of_work = unit_of_work

    def delete_flashcard(self, flashcard_id: int) -> None:
        """
        Remove a flashcard for good. Its id is not handed out again.

        Raises:
            FlashcardNotFoundError: If no flashcard has this id
        """
        with self.unit_of_work:
            if not self.flashcard_repository.delete(FlashcardId(flashcard_id)):
                raise FlashcardNotFoundError(flashcard_id)
            self.unit_of_work.commit()

        logger.info("deleted_flashcard", flashcard_id=flashcard_id)
