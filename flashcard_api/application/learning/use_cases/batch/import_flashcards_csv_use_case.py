"""Use case for importing flashcards from a CSV file."""

from enum import IntEnum
from typing import TypeVar

import structlog

from flashcard_api.application.learning.services.flashcard_csv_service import (
    FlashcardCsvRecord,
    FlashcardCsvService,
)
from flashcard_api.application.learning.use_cases.batch.create_flashcards_batch_use_case import (
    CreateFlashcardsBatchUseCase,
)
from flashcard_api.application.learning.use_cases.dtos import (
    BatchOperationResult,
    FlashcardCreateData,
)
from flashcard_api.domain.learning.value_objects import Category, DifficultyLevel, WordType

logger = structlog.get_logger(__name__)


class InvalidRecordError(ValueError):
    """A CSV row that cannot become a flashcard."""


E = TypeVar("E", bound=IntEnum)


def _parse_code(enum_type: type[E], raw: str, field_name: str) -> E:
    try:
        return enum_type(int(raw))
    except ValueError as e:
        raise InvalidRecordError(f"Invalid {field_name} {raw!r}") from e


class ImportFlashcardsCsvUseCase:
    """Use case for CSV import on top of batch creation."""

    def __init__(
        self,
        batch_use_case: CreateFlashcardsBatchUseCase,
        csv_service: FlashcardCsvService,
    ) -> None:
        self.batch_use_case = batch_use_case
        self.csv_service = csv_service

    def import_csv(self, content: bytes) -> BatchOperationResult:
        """
        Import flashcards from CSV file contents.

        Rows with a blank meaning or an undefined enumeration code are rejected
        with their line number. The remaining rows are created as a batch that
        skips duplicates.

        Args:
            content: Raw bytes of the uploaded file

        Returns:
            Combined result of row validation and batch creation

        Raises:
            CsvFormatError: If the file cannot be read as a flashcard CSV
        """
        records = self.csv_service.read_records(content)
        result = BatchOperationResult(total_processed=len(records))

        valid: list[FlashcardCreateData] = []
        for record in records:
            try:
                valid.append(self._to_create_data(record))
            except InvalidRecordError as e:
                result.record_error(f"Line {record.line_number}: {e}")

        if valid:
            batch_result = self.batch_use_case.create_batch(valid, skip_duplicates=True)
            result.success_count = batch_result.success_count
            result.error_count += batch_result.error_count
            result.error_messages.extend(batch_result.error_messages)
            result.created_flashcards = batch_result.created_flashcards

        logger.info(
            "imported_flashcards_csv",
            total=result.total_processed,
            success=result.success_count,
            errors=result.error_count,
        )
        return result

    @staticmethod
    def _to_create_data(record: FlashcardCsvRecord) -> FlashcardCreateData:
        if not record.meaning.strip():
            raise InvalidRecordError("Meaning is required")

        return FlashcardCreateData(
            kanji=record.kanji,
            hiragana=record.hiragana,
            katakana=record.katakana,
            meaning=record.meaning,
            example=record.example or None,
            word_type=_parse_code(WordType, record.word_type, "word type"),
            difficulty=_parse_code(DifficultyLevel, record.difficulty, "difficulty"),
            category=_parse_code(Category, record.category, "category"),
        )
