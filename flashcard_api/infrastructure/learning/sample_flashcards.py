"""Starter flashcards inserted into an empty store at startup."""

import structlog

from flashcard_api.application.common.unit_of_work import UnitOfWork
from flashcard_api.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashcard_api.application.learning.use_cases.dtos import FlashcardCreateData, FlashcardFilter
from flashcard_api.domain.learning.value_objects import Category, DifficultyLevel, WordType

logger = structlog.get_logger(__name__)

SAMPLE_FLASHCARDS = (
    FlashcardCreateData(
        kanji="犬",
        hiragana="いぬ",
        meaning="狗",
        example="私の犬はとても可愛いです。",
        word_type=WordType.SINO_JAPANESE,
        difficulty=DifficultyLevel.BEGINNER,
        category=Category.ANIMALS,
    ),
    FlashcardCreateData(
        katakana="コーヒー",
        meaning="咖啡",
        example="朝のコーヒーは美味しいです。",
        word_type=WordType.FOREIGN,
        difficulty=DifficultyLevel.BEGINNER,
        category=Category.FOOD,
    ),
    FlashcardCreateData(
        hiragana="おはよう",
        meaning="早安",
        example="おはようございます。",
        word_type=WordType.NATIVE,
        difficulty=DifficultyLevel.BEGINNER,
        category=Category.GENERAL,
    ),
    FlashcardCreateData(
        katakana="コンピューター",
        meaning="電腦",
        example="新しいコンピューターを買いました。",
        word_type=WordType.FOREIGN,
        difficulty=DifficultyLevel.INTERMEDIATE,
        category=Category.GENERAL,
    ),
)


def seed_sample_flashcards(
    repository: FlashcardRepositoryProtocol, unit_of_work: UnitOfWork
) -> int:
    """
    Insert SAMPLE_FLASHCARDS when the store holds no flashcards.

    Returns:
        Number of flashcards inserted
    """
    with unit_of_work:
        if repository.count(FlashcardFilter()) > 0:
            return 0
        for data in SAMPLE_FLASHCARDS:
            repository.add(data.to_entity())
        unit_of_work.commit()

    logger.info("seeded_sample_flashcards", count=len(SAMPLE_FLASHCARDS))
    return len(SAMPLE_FLASHCARDS)
