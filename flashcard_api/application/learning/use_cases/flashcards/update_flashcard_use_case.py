"""Use case for updating flashcards."""

import structlog

from flashcard_api.application.common.unit_of_work import UnitOfWork
from flashcard_api.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashcard_api.application.learning.use_cases.dtos import FlashcardPatch
from flashcard_api.application.learning.use_cases.exceptions import FlashcardNotFoundError
from flashcard_api.domain.common.value_objects import FlashcardId
from flashcard_api.domain.learning.entities.flashcard import Flashcard

logger = structlog.get_logger(__name__)


class UpdateFlashcardUseCase:
    """Use case for partial flashcard updates."""

    def __init__(
        self,
        flashcard_repository: FlashcardRepositoryProtocol,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.flashcard_repository = flashcard_repository
        self.unit_of_work = unit_of_work

    def update_flashcard(self, flashcard_id: int, patch: FlashcardPatch) -> Flashcard:
        """
        Apply the supplied fields of a patch to a flashcard.

        Written forms and meaning are only replaced by non-empty strings, so an
        empty string leaves them unchanged. The example is replaced whenever it
        is given, which lets callers clear it with an empty string.

        Args:
            flashcard_id: ID of the flashcard to update
            patch: Fields to change; None leaves a field untouched

        Returns:
            Updated flashcard domain entity

        Raises:
            FlashcardNotFoundError: If flashcard is not found
        """
        with self.unit_of_work:
            flashcard = self.flashcard_repository.find_by_id(FlashcardId(flashcard_id))
            if not flashcard:
                raise FlashcardNotFoundError(flashcard_id)

            if patch.kanji:
                flashcard.kanji = patch.kanji
            if patch.hiragana:
                flashcard.hiragana = patch.hiragana
            if patch.katakana:
                flashcard.katakana = patch.katakana
            if patch.meaning:
                flashcard.update_meaning(patch.meaning)
            if patch.example is not None:
                flashcard.example = patch.example
            if patch.word_type is not None:
                flashcard.word_type = patch.word_type
            if patch.difficulty is not None:
                flashcard.difficulty = patch.difficulty
            if patch.category is not None:
                flashcard.category = patch.category
            if patch.is_favorite is not None:
                flashcard.is_favorite = patch.is_favorite

            flashcard = self.flashcard_repository.save(flashcard)
            self.unit_of_work.commit()

        logger.info("updated_flashcard", flashcard_id=flashcard_id)
        return flashcard
