"""Use case for creating many flashcards in one call."""

from collections.abc import Sequence

import structlog

from flashcard_api.application.common.unit_of_work import UnitOfWork
from flashcard_api.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashcard_api.application.learning.use_cases.dtos import (
    BatchOperationResult,
    FlashcardCreateData,
)
from flashcard_api.domain.common.exceptions import DomainError

logger = structlog.get_logger(__name__)


class CreateFlashcardsBatchUseCase:
    """
    Best-effort batch creation.

    Each item is validated and checked on its own; a bad item is recorded in
    the result and the loop moves on. The whole batch shares one unit of
    work, so an unexpected failure discards every write of the batch.
    """

    def __init__(
        self,
        flashcard_repository: FlashcardRepositoryProtocol,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.flashcard_repository = flashcard_repository
        self.unit_of_work = unit_of_work

    def create_batch(
        self,
        items: Sequence[FlashcardCreateData],
        skip_duplicates: bool = True,
        validate_only: bool = False,
    ) -> BatchOperationResult:
        """
        Create flashcards from a list of requests.

        Args:
            items: Flashcards to create, in order
            skip_duplicates: Skip items whose kanji, hiragana and katakana all
                match a stored flashcard
            validate_only: Run every check without storing anything

        Returns:
            Counts, ordered error messages and the flashcards actually created
        """
        result = BatchOperationResult(total_processed=len(items))

        try:
            with self.unit_of_work:
                for index, item in enumerate(items, start=1):
                    try:
                        flashcard = item.to_entity()
                    except DomainError as e:
                        result.record_error(f"Item {index}: {e.message}")
                        continue

                    if skip_duplicates and self.flashcard_repository.exists_with_forms(
                        *flashcard.forms_key
                    ):
                        result.record_error(
                            f"Duplicate flashcard: {item.kanji}{item.hiragana}{item.katakana}"
                        )
                        continue

                    if not validate_only:
                        result.created_flashcards.append(self.flashcard_repository.add(flashcard))
                    result.success_count += 1

                self.unit_of_work.commit()
        except Exception as e:
            logger.error("batch_create_failed", total=len(items), error=str(e), exc_info=True)
            return BatchOperationResult.failed(len(items), f"Batch operation failed: {e}")

        logger.info(
            "created_flashcards_batch",
            total=result.total_processed,
            success=result.success_count,
            errors=result.error_count,
            validate_only=validate_only,
        )
        return result
