"""API routes for flashcard management."""

import logging
from datetime import datetime
from enum import IntEnum
from typing import Annotated, TypeVar

from fastapi import APIRouter, Depends, File, Path, Query, Response, UploadFile, status
from fastapi.responses import StreamingResponse
from pydantic import TypeAdapter

from flashcard_api.application.common.pagination import Pagination
from flashcard_api.application.learning.services.flashcard_csv_service import CsvFormatError
from flashcard_api.application.learning.use_cases.batch.create_flashcards_batch_use_case import (
    CreateFlashcardsBatchUseCase,
)
from flashcard_api.application.learning.use_cases.batch.import_flashcards_csv_use_case import (
    ImportFlashcardsCsvUseCase,
)
from flashcard_api.application.learning.use_cases.dtos import (
    BatchOperationResult,
    FlashcardCreateData,
    FlashcardFilter,
    FlashcardPatch,
)
from flashcard_api.application.learning.use_cases.export.export_flashcards_use_case import (
    ExportFlashcardsUseCase,
)
from flashcard_api.application.learning.use_cases.flashcards.create_flashcard_use_case import (
    CreateFlashcardUseCase,
)
from flashcard_api.application.learning.use_cases.flashcards.delete_flashcard_use_case import (
    DeleteFlashcardUseCase,
)
from flashcard_api.application.learning.use_cases.flashcards.get_flashcards_use_case import (
    GetFlashcardsUseCase,
)
from flashcard_api.application.learning.use_cases.flashcards.get_random_flashcards_use_case import (
    MAX_RANDOM_COUNT,
    MIN_RANDOM_COUNT,
    GetRandomFlashcardsUseCase,
)
from flashcard_api.application.learning.use_cases.flashcards.review_flashcard_use_case import (
    ReviewFlashcardUseCase,
)
from flashcard_api.application.learning.use_cases.flashcards.update_flashcard_use_case import (
    UpdateFlashcardUseCase,
)
from flashcard_api.core import container
from flashcard_api.domain.learning.entities.flashcard import Flashcard as FlashcardEntity
from flashcard_api.domain.learning.value_objects import Category, DifficultyLevel, WordType
from flashcard_api.exceptions import FlashcardApiError, ServiceError, ValidationError
from flashcard_api.infrastructure.common.di import inject_use_case
from flashcard_api.infrastructure.learning.schemas import (
    BatchCreateFlashcardsRequest,
    BatchOperationResultResponse,
    EnumOption,
    Flashcard,
    FlashcardCreateRequest,
    FlashcardUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/flashcards", tags=["flashcards"])

# JSON export is rendered with the response model of the list endpoint
_flashcard_list_adapter = TypeAdapter(list[Flashcard])

E = TypeVar("E", bound=IntEnum)


def _parse_code(enum_type: type[E], value: int | None, field_name: str) -> E | None:
    if value is None:
        return None
    try:
        return enum_type(value)
    except ValueError as e:
        raise ValidationError(f"Invalid {field_name} {value}") from e


def _to_schema(entity: FlashcardEntity) -> Flashcard:
    return Flashcard(
        id=entity.id.value,
        kanji=entity.kanji,
        hiragana=entity.hiragana,
        katakana=entity.katakana,
        meaning=entity.meaning,
        example=entity.example,
        word_type=entity.word_type,
        difficulty=entity.difficulty,
        category=entity.category,
        created_date=entity.created_date,
        last_reviewed_date=entity.last_reviewed_date,
        review_count=entity.review_count,
        is_favorite=entity.is_favorite,
    )


def _to_result_schema(result: BatchOperationResult) -> BatchOperationResultResponse:
    return BatchOperationResultResponse(
        total_processed=result.total_processed,
        success_count=result.success_count,
        error_count=result.error_count,
        error_messages=result.error_messages,
        created_flashcards=[_to_schema(f) for f in result.created_flashcards],
    )


def _enum_options(enum_type: type[IntEnum]) -> list[EnumOption]:
    return [
        EnumOption(
            value=int(member),
            name=member.label,  # type: ignore[attr-defined]
            description=member.description or None,  # type: ignore[attr-defined]
        )
        for member in enum_type
    ]


def _download_name(extension: str) -> str:
    return f"flashcards_{datetime.now().strftime('%Y%m%d_%H%M%S')}.{extension}"


def get_flashcard_filter(
    category: Annotated[int | None, Query(description="Category code")] = None,
    difficulty: Annotated[int | None, Query(description="Difficulty code")] = None,
    word_type: Annotated[int | None, Query(description="Word type code")] = None,
    is_favorite: Annotated[bool | None, Query(description="Favorite flag")] = None,
    search_term: Annotated[
        str | None, Query(description="Searched in kanji, hiragana, katakana and meaning")
    ] = None,
) -> FlashcardFilter:
    """Build the shared list/export filter from query parameters."""
    return FlashcardFilter(
        category=_parse_code(Category, category, "category"),
        difficulty=_parse_code(DifficultyLevel, difficulty, "difficulty"),
        word_type=_parse_code(WordType, word_type, "word type"),
        is_favorite=is_favorite,
        search_term=search_term,
    )


@router.get("", response_model=list[Flashcard], status_code=status.HTTP_200_OK)
def list_flashcards(
    filters: Annotated[FlashcardFilter, Depends(get_flashcard_filter)],
    page_number: Annotated[int, Query(ge=1, description="1-based page number")] = 1,
    page_size: Annotated[int, Query(ge=1, description="Flashcards per page")] = 10,
    use_case: GetFlashcardsUseCase = Depends(inject_use_case(container.get_flashcards_use_case)),
) -> list[Flashcard]:
    """
    List flashcards with optional filters, search and pagination.

    Results are ordered by id.
    """
    pagination = Pagination(page=page_number, page_size=page_size)
    flashcards = use_case.list_flashcards(filters, pagination)
    return [_to_schema(f) for f in flashcards]


@router.get("/random", response_model=list[Flashcard], status_code=status.HTTP_200_OK)
def get_random_flashcards(
    count: int = 5,
    category: int | None = None,
    difficulty: int | None = None,
    use_case: GetRandomFlashcardsUseCase = Depends(
        inject_use_case(container.get_random_flashcards_use_case)
    ),
) -> list[Flashcard]:
    """
    Pick random flashcards for practice.

    Raises:
        ValidationError: If count is outside 1..50 or a code is undefined
    """
    if count < MIN_RANDOM_COUNT or count > MAX_RANDOM_COUNT:
        raise ValidationError(
            f"Count must be between {MIN_RANDOM_COUNT} and {MAX_RANDOM_COUNT}"
        )

    flashcards = use_case.get_random_flashcards(
        count,
        category=_parse_code(Category, category, "category"),
        difficulty=_parse_code(DifficultyLevel, difficulty, "difficulty"),
    )
    return [_to_schema(f) for f in flashcards]


@router.get("/categories", response_model=list[EnumOption])
def get_categories() -> list[EnumOption]:
    """List the topic categories."""
    return _enum_options(Category)


@router.get("/difficulties", response_model=list[EnumOption])
def get_difficulties() -> list[EnumOption]:
    """List the difficulty levels."""
    return _enum_options(DifficultyLevel)


@router.get("/wordtypes", response_model=list[EnumOption])
def get_word_types() -> list[EnumOption]:
    """List the word types."""
    return _enum_options(WordType)


@router.post("/batch", response_model=BatchOperationResultResponse, status_code=status.HTTP_200_OK)
def create_flashcards_batch(
    request: BatchCreateFlashcardsRequest,
    use_case: CreateFlashcardsBatchUseCase = Depends(
        inject_use_case(container.create_flashcards_batch_use_case)
    ),
) -> BatchOperationResultResponse:
    """
    Create many flashcards at once.

    Items fail independently; the response lists every rejected item.
    """
    items = [FlashcardCreateData(**item.model_dump()) for item in request.flashcards]
    result = use_case.create_batch(
        items,
        skip_duplicates=request.skip_duplicates,
        validate_only=request.validate_only,
    )
    return _to_result_schema(result)


@router.post(
    "/import/csv", response_model=BatchOperationResultResponse, status_code=status.HTTP_200_OK
)
def import_flashcards_csv(
    file: Annotated[UploadFile | None, File(description="CSV file")] = None,
    use_case: ImportFlashcardsCsvUseCase = Depends(
        inject_use_case(container.import_flashcards_csv_use_case)
    ),
) -> BatchOperationResultResponse:
    """
    Import flashcards from a CSV file.

    Columns: Kanji,Hiragana,Katakana,Meaning,Example,WordType,Difficulty,Category

    Raises:
        ValidationError: If no file, an empty file or a non-CSV file is sent
    """
    if file is None or not file.filename:
        raise ValidationError("Please select a CSV file")
    if not file.filename.lower().endswith(".csv"):
        raise ValidationError("File must be in CSV format")

    content = file.file.read()
    if not content:
        raise ValidationError("Please select a CSV file")

    try:
        result = use_case.import_csv(content)
    except CsvFormatError as e:
        raise ValidationError(f"Import failed: {e.message}") from e
    except FlashcardApiError:
        raise
    except Exception as e:
        logger.error(f"Failed to import flashcards from {file.filename}: {e!s}", exc_info=True)
        raise ServiceError("Import failed. Please check the file and try again.") from e
    return _to_result_schema(result)


@router.get("/export/csv", response_class=StreamingResponse)
def export_flashcards_csv(
    filters: Annotated[FlashcardFilter, Depends(get_flashcard_filter)],
    use_case: ExportFlashcardsUseCase = Depends(
        inject_use_case(container.export_flashcards_use_case)
    ),
) -> StreamingResponse:
    """Download the matching flashcards as CSV."""
    try:
        data = use_case.export_csv(filters)
    except Exception as e:
        logger.error(f"Failed to export flashcards as CSV: {e!s}", exc_info=True)
        raise ServiceError("Export failed. Please try again later.") from e
    return StreamingResponse(
        iter([data]),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f"attachment; filename={_download_name('csv')}"},
    )


@router.get("/export/json", response_class=StreamingResponse)
def export_flashcards_json(
    filters: Annotated[FlashcardFilter, Depends(get_flashcard_filter)],
    use_case: ExportFlashcardsUseCase = Depends(
        inject_use_case(container.export_flashcards_use_case)
    ),
) -> StreamingResponse:
    """Download the matching flashcards as JSON."""
    try:
        flashcards = [_to_schema(f) for f in use_case.export_flashcards(filters)]
        data = _flashcard_list_adapter.dump_json(flashcards, indent=2)
    except Exception as e:
        logger.error(f"Failed to export flashcards as JSON: {e!s}", exc_info=True)
        raise ServiceError("Export failed. Please try again later.") from e
    return StreamingResponse(
        iter([data]),
        media_type="application/json",
        headers={"Content-Disposition": f"attachment; filename={_download_name('json')}"},
    )


@router.get("/template/csv", response_class=Response)
def get_csv_template(
    use_case: ExportFlashcardsUseCase = Depends(
        inject_use_case(container.export_flashcards_use_case)
    ),
) -> Response:
    """Download a CSV import template with sample rows."""
    return Response(
        content=use_case.csv_template(),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": "attachment; filename=flashcards_template.csv"},
    )


@router.get("/{flashcard_id}", response_model=Flashcard, status_code=status.HTTP_200_OK)
def get_flashcard(
    flashcard_id: Annotated[int, Path(ge=1, description="Flashcard id")],
    use_case: GetFlashcardsUseCase = Depends(inject_use_case(container.get_flashcards_use_case)),
) -> Flashcard:
    """
    Get a flashcard by id.

    Raises:
        FlashcardNotFoundError: If flashcard is not found
    """
    return _to_schema(use_case.get_flashcard(flashcard_id))


@router.post("", response_model=Flashcard, status_code=status.HTTP_201_CREATED)
def create_flashcard(
    request: FlashcardCreateRequest,
    use_case: CreateFlashcardUseCase = Depends(
        inject_use_case(container.create_flashcard_use_case)
    ),
) -> Flashcard:
    """Create a new flashcard."""
    flashcard = use_case.create_flashcard(FlashcardCreateData(**request.model_dump()))
    return _to_schema(flashcard)


@router.put("/{flashcard_id}", response_model=Flashcard, status_code=status.HTTP_200_OK)
def update_flashcard(
    flashcard_id: Annotated[int, Path(ge=1, description="Flashcard id")],
    request: FlashcardUpdateRequest,
    use_case: UpdateFlashcardUseCase = Depends(
        inject_use_case(container.update_flashcard_use_case)
    ),
) -> Flashcard:
    """
    Update a flashcard. Only the supplied fields change.

    Raises:
        FlashcardNotFoundError: If flashcard is not found
    """
    patch = FlashcardPatch(**request.model_dump())
    return _to_schema(use_case.update_flashcard(flashcard_id, patch))


@router.delete("/{flashcard_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_flashcard(
    flashcard_id: Annotated[int, Path(ge=1, description="Flashcard id")],
    use_case: DeleteFlashcardUseCase = Depends(
        inject_use_case(container.delete_flashcard_use_case)
    ),
) -> Response:
    """
    Delete a flashcard.

    Raises:
        FlashcardNotFoundError: If flashcard is not found
    """
    use_case.delete_flashcard(flashcard_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{flashcard_id}/review", response_model=Flashcard, status_code=status.HTTP_200_OK)
def mark_flashcard_reviewed(
    flashcard_id: Annotated[int, Path(ge=1, description="Flashcard id")],
    use_case: ReviewFlashcardUseCase = Depends(
        inject_use_case(container.review_flashcard_use_case)
    ),
) -> Flashcard:
    """
    Mark a flashcard as reviewed.

    Raises:
        FlashcardNotFoundError: If flashcard is not found
    """
    return _to_schema(use_case.mark_reviewed(flashcard_id))
