"""Mapper for Flashcard ORM ↔ Domain conversion."""

from datetime import UTC, datetime

from flashcard_api.domain.common.value_objects import FlashcardId
from flashcard_api.domain.learning.entities.flashcard import Flashcard
from flashcard_api.domain.learning.value_objects import Category, DifficultyLevel, WordType
from flashcard_api.models import Flashcard as FlashcardORM


def _as_utc(value: datetime | None) -> datetime | None:
    # SQLite hands back naive datetimes; they were written as UTC
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class FlashcardMapper:
    """Mapper for Flashcard ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: FlashcardORM) -> Flashcard:
        """Convert ORM model to domain entity."""
        return Flashcard.create_with_id(
            id=FlashcardId(orm_model.id),
            meaning=orm_model.meaning,
            kanji=orm_model.kanji or "",
            hiragana=orm_model.hiragana or "",
            katakana=orm_model.katakana or "",
            example=orm_model.example,
            word_type=WordType(orm_model.word_type),
            difficulty=DifficultyLevel(orm_model.difficulty),
            category=Category(orm_model.category),
            created_date=_as_utc(orm_model.created_date),
            last_reviewed_date=_as_utc(orm_model.last_reviewed_date),
            review_count=orm_model.review_count,
            is_favorite=orm_model.is_favorite,
        )

    def to_orm(
        self, domain_entity: Flashcard, orm_model: FlashcardORM | None = None
    ) -> FlashcardORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Update existing; id and created_date never change
            orm_model.kanji = domain_entity.kanji
            orm_model.hiragana = domain_entity.hiragana
            orm_model.katakana = domain_entity.katakana
            orm_model.meaning = domain_entity.meaning
            orm_model.example = domain_entity.example
            orm_model.word_type = int(domain_entity.word_type)
            orm_model.difficulty = int(domain_entity.difficulty)
            orm_model.category = int(domain_entity.category)
            orm_model.last_reviewed_date = domain_entity.last_reviewed_date
            orm_model.review_count = domain_entity.review_count
            orm_model.is_favorite = domain_entity.is_favorite
            return orm_model

        # Create new
        return FlashcardORM(
            id=domain_entity.id.value if domain_entity.id.is_assigned else None,
            kanji=domain_entity.kanji,
            hiragana=domain_entity.hiragana,
            katakana=domain_entity.katakana,
            meaning=domain_entity.meaning,
            example=domain_entity.example,
            word_type=int(domain_entity.word_type),
            difficulty=int(domain_entity.difficulty),
            category=int(domain_entity.category),
            created_date=domain_entity.created_date,
            last_reviewed_date=domain_entity.last_reviewed_date,
            review_count=domain_entity.review_count,
            is_favorite=domain_entity.is_favorite,
        )
