"""
Flashcard entity for Japanese vocabulary learning.
"""

from dataclasses import dataclass
from datetime import UTC, datetime

from flashcard_api.domain.common.entity import Entity
from flashcard_api.domain.common.exceptions import InvariantViolationError
from flashcard_api.domain.common.value_objects import FlashcardId
from flashcard_api.domain.learning.value_objects import Category, DifficultyLevel, WordType


@dataclass
class Flashcard(Entity[FlashcardId]):
    """
    Vocabulary card with its written forms and classification.

    Business Rules:
    - Meaning cannot be empty
    - Kanji, hiragana and katakana are alternative spellings; any may be empty
    - Review count only grows, by one per review, and each review stamps
      the last reviewed date
    """

    id: FlashcardId
    meaning: str
    kanji: str = ""
    hiragana: str = ""
    katakana: str = ""
    example: str | None = None
    word_type: WordType = WordType.NATIVE
    difficulty: DifficultyLevel = DifficultyLevel.BEGINNER
    category: Category = Category.GENERAL
    created_date: datetime | None = None
    last_reviewed_date: datetime | None = None
    review_count: int = 0
    is_favorite: bool = False

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.meaning or not self.meaning.strip():
            raise InvariantViolationError("Flashcard", "Meaning cannot be empty")
        if self.review_count < 0:
            raise InvariantViolationError("Flashcard", "Review count cannot be negative")

    @property
    def forms_key(self) -> tuple[str, str, str]:
        """Identity used to detect duplicate cards on import."""
        return (self.kanji, self.hiragana, self.katakana)

    def update_meaning(self, meaning: str) -> None:
        """
        Update the meaning.

        Args:
            meaning: New meaning text

        Raises:
            InvariantViolationError: If meaning is empty
        """
        if not meaning or not meaning.strip():
            raise InvariantViolationError("Flashcard", "Meaning cannot be empty")
        self.meaning = meaning

    def mark_reviewed(self, reviewed_at: datetime | None = None) -> None:
        """Record one review."""
        self.last_reviewed_date = reviewed_at or datetime.now(UTC)
        self.review_count += 1

    @classmethod
    def create(
        cls,
        meaning: str,
        kanji: str = "",
        hiragana: str = "",
        katakana: str = "",
        example: str | None = None,
        word_type: WordType = WordType.NATIVE,
        difficulty: DifficultyLevel = DifficultyLevel.BEGINNER,
        category: Category = Category.GENERAL,
    ) -> "Flashcard":
        """Create a new flashcard (ID will be 0 until persisted)."""
        return cls(
            id=FlashcardId.generate(),
            meaning=meaning,
            kanji=kanji or "",
            hiragana=hiragana or "",
            katakana=katakana or "",
            example=example,
            word_type=word_type,
            difficulty=difficulty,
            category=category,
            created_date=datetime.now(UTC),
            last_reviewed_date=None,
            review_count=0,
            is_favorite=False,
        )

    @classmethod
    def create_with_id(
        cls,
        id: FlashcardId,
        meaning: str,
        kanji: str,
        hiragana: str,
        katakana: str,
        example: str | None,
        word_type: WordType,
        difficulty: DifficultyLevel,
        category: Category,
        created_date: datetime,
        last_reviewed_date: datetime | None,
        review_count: int,
        is_favorite: bool,
    ) -> "Flashcard":
        """Reconstitute a flashcard from persistence."""
        return cls(
            id=id,
            meaning=meaning,
            kanji=kanji,
            hiragana=hiragana,
            katakana=katakana,
            example=example,
            word_type=word_type,
            difficulty=difficulty,
            category=category,
            created_date=created_date,
            last_reviewed_date=last_reviewed_date,
            review_count=review_count,
            is_favorite=is_favorite,
        )
