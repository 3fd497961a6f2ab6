from .flashcard_repository import FlashcardRepository
from .in_memory_flashcard_repository import InMemoryFlashcardRepository

__all__ = [
    "FlashcardRepository",
    "InMemoryFlashcardRepository",
]
