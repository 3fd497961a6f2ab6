"""Pydantic schemas for Flashcard API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field

from flashcard_api.domain.learning.value_objects import Category, DifficultyLevel, WordType


class FlashcardBase(BaseModel):
    """Written forms and classification shared by create payloads."""

    kanji: str = Field("", max_length=100, description="Kanji spelling, e.g. 桜")
    hiragana: str = Field("", max_length=100, description="Hiragana reading, e.g. さくら")
    katakana: str = Field("", max_length=100, description="Katakana spelling, e.g. サクラ")
    example: str | None = Field(None, max_length=1000, description="Example sentence")
    word_type: WordType = Field(WordType.NATIVE, description="Word origin code")
    difficulty: DifficultyLevel = Field(DifficultyLevel.BEGINNER, description="Difficulty code")
    category: Category = Field(Category.GENERAL, description="Topic category code")


class FlashcardCreateRequest(FlashcardBase):
    """Schema for creating a new flashcard."""

    meaning: str = Field(..., min_length=1, max_length=500, description="Meaning, e.g. 櫻花")


class FlashcardUpdateRequest(BaseModel):
    """
    Schema for updating a flashcard.

    Every field is optional. Empty kanji, hiragana, katakana or meaning
    leave the stored value unchanged.
    """

    kanji: str | None = Field(None, max_length=100, description="New kanji spelling")
    hiragana: str | None = Field(None, max_length=100, description="New hiragana reading")
    katakana: str | None = Field(None, max_length=100, description="New katakana spelling")
    meaning: str | None = Field(None, max_length=500, description="New meaning")
    example: str | None = Field(None, max_length=1000, description="New example sentence")
    word_type: WordType | None = Field(None, description="New word origin code")
    difficulty: DifficultyLevel | None = Field(None, description="New difficulty code")
    category: Category | None = Field(None, description="New topic category code")
    is_favorite: bool | None = Field(None, description="Favorite flag")


class Flashcard(BaseModel):
    """Schema for Flashcard response."""

    id: int
    kanji: str
    hiragana: str
    katakana: str
    meaning: str
    example: str | None
    word_type: WordType
    difficulty: DifficultyLevel
    category: Category
    created_date: datetime | None
    last_reviewed_date: datetime | None
    review_count: int
    is_favorite: bool


class BatchFlashcardItem(FlashcardBase):
    """One item of a batch create; meaning is checked per item, not per request."""

    meaning: str = Field("", max_length=500, description="Meaning")


class BatchCreateFlashcardsRequest(BaseModel):
    """Schema for creating many flashcards at once."""

    flashcards: list[BatchFlashcardItem] = Field(
        ..., min_length=1, description="Flashcards to create"
    )
    skip_duplicates: bool = Field(
        True, description="Skip items whose kanji, hiragana and katakana already exist"
    )
    validate_only: bool = Field(False, description="Run the checks without storing anything")


class BatchOperationResultResponse(BaseModel):
    """Schema for batch create and CSV import results."""

    total_processed: int = Field(..., description="Number of items received")
    success_count: int = Field(..., description="Items that passed (and were created)")
    error_count: int = Field(..., description="Items rejected or skipped")
    error_messages: list[str] = Field(..., description="One message per rejected item")
    created_flashcards: list[Flashcard] = Field(..., description="Flashcards created")


class EnumOption(BaseModel):
    """Schema for one value of a classification enumeration."""

    value: int
    name: str
    description: str | None = None
