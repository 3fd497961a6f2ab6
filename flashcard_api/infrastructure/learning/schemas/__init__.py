from .flashcard_schemas import (
    BatchCreateFlashcardsRequest,
    BatchFlashcardItem,
    BatchOperationResultResponse,
    EnumOption,
    Flashcard,
    FlashcardCreateRequest,
    FlashcardUpdateRequest,
)

__all__ = [
    "BatchCreateFlashcardsRequest",
    "BatchFlashcardItem",
    "BatchOperationResultResponse",
    "EnumOption",
    "Flashcard",
    "FlashcardCreateRequest",
    "FlashcardUpdateRequest",
]
