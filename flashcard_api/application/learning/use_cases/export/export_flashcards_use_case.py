"""Use case for exporting flashcards."""

from flashcard_api.application.common.pagination import Pagination
from flashcard_api.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashcard_api.application.learning.services.flashcard_csv_service import (
    FlashcardCsvService,
)
from flashcard_api.application.learning.use_cases.dtos import FlashcardFilter
from flashcard_api.domain.learning.entities.flashcard import Flashcard


class ExportFlashcardsUseCase:
    """Use case for CSV and JSON exports of every matching flashcard."""

    def __init__(
        self,
        flashcard_repository: FlashcardRepositoryProtocol,
        csv_service: FlashcardCsvService,
    ) -> None:
        self.flashcard_repository = flashcard_repository
        self.csv_service = csv_service

    def export_csv(self, filters: FlashcardFilter) -> bytes:
        """Export matching flashcards as CSV bytes."""
        return self.csv_service.write_flashcards(self._fetch_all(filters))

    def export_flashcards(self, filters: FlashcardFilter) -> list[Flashcard]:
        """Every matching flashcard in id order, for the JSON export."""
        return self._fetch_all(filters)

    def csv_template(self) -> bytes:
        """CSV import template."""
        return self.csv_service.template()

    def _fetch_all(self, filters: FlashcardFilter) -> list[Flashcard]:
        return self.flashcard_repository.find_all(filters, Pagination.unbounded())
