"""Value objects for the learning context."""

from .word_classification import Category, DifficultyLevel, WordType

__all__ = [
    "Category",
    "DifficultyLevel",
    "WordType",
]
