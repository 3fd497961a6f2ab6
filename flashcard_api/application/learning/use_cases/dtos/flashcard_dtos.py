"""DTOs for flashcard use cases."""

from dataclasses import dataclass, field

from flashcard_api.domain.learning.entities.flashcard import Flashcard
from flashcard_api.domain.learning.value_objects import Category, DifficultyLevel, WordType


@dataclass(frozen=True)
class FlashcardFilter:
    """
    Optional criteria for selecting flashcards.

    Every criterion that is set must hold (AND). The search term matches
    kanji, hiragana, katakana or meaning (OR) as a case-insensitive substring.
    """

    category: Category | None = None
    difficulty: DifficultyLevel | None = None
    word_type: WordType | None = None
    is_favorite: bool | None = None
    search_term: str | None = None

    def matches(self, flashcard: Flashcard) -> bool:
        """Evaluate the filter against one flashcard."""
        if self.category is not None and flashcard.category != self.category:
            return False
        if self.difficulty is not None and flashcard.difficulty != self.difficulty:
            return False
        if self.word_type is not None and flashcard.word_type != self.word_type:
            return False
        if self.is_favorite is not None and flashcard.is_favorite != self.is_favorite:
            return False
        if self.search_term:
            term = self.search_term.lower()
            fields = (flashcard.kanji, flashcard.hiragana, flashcard.katakana, flashcard.meaning)
            return any(term in (value or "").lower() for value in fields)
        return True


@dataclass(frozen=True)
class FlashcardCreateData:
    """Fields supplied when creating a flashcard."""

    meaning: str
    kanji: str = ""
    hiragana: str = ""
    katakana: str = ""
    example: str | None = None
    word_type: WordType = WordType.NATIVE
    difficulty: DifficultyLevel = DifficultyLevel.BEGINNER
    category: Category = Category.GENERAL

    def to_entity(self) -> Flashcard:
        """Build an unsaved flashcard from this data."""
        return Flashcard.create(
            meaning=self.meaning,
            kanji=self.kanji,
            hiragana=self.hiragana,
            katakana=self.katakana,
            example=self.example,
            word_type=self.word_type,
            difficulty=self.difficulty,
            category=self.category,
        )


@dataclass(frozen=True)
class FlashcardPatch:
    """Partial update. None means "leave unchanged"."""

    kanji: str | None = None
    hiragana: str | None = None
    katakana: str | None = None
    meaning: str | None = None
    example: str | None = None
    word_type: WordType | None = None
    difficulty: DifficultyLevel | None = None
    category: Category | None = None
    is_favorite: bool | None = None


@dataclass
class BatchOperationResult:
    """Aggregate outcome of a batch create or import."""

    total_processed: int = 0
    success_count: int = 0
    error_count: int = 0
    error_messages: list[str] = field(default_factory=list)
    created_flashcards: list[Flashcard] = field(default_factory=list)

    def record_error(self, message: str) -> None:
        self.error_count += 1
        self.error_messages.append(message)

    @classmethod
    def failed(cls, total_processed: int, message: str) -> "BatchOperationResult":
        """Result for a batch that was discarded as a whole."""
        return cls(
            total_processed=total_processed,
            success_count=0,
            error_count=total_processed,
            error_messages=[message],
            created_flashcards=[],
        )
