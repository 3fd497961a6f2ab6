from .flashcard_dtos import (
    BatchOperationResult,
    FlashcardCreateData,
    FlashcardFilter,
    FlashcardPatch,
)

__all__ = [
    "BatchOperationResult",
    "FlashcardCreateData",
    "FlashcardFilter",
    "FlashcardPatch",
]
