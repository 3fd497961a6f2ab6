"""Common value objects shared across all domain modules."""

from .ids import FlashcardId

__all__ = [
    "FlashcardId",
]
