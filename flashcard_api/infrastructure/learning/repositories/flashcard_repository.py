"""Repository for Flashcard domain entities backed by SQLAlchemy."""

from sqlalchemy import ColumnElement, Select, exists, func, or_, select
from sqlalchemy.orm import Session

from flashcard_api.application.common.pagination import Pagination
from flashcard_api.application.learning.use_cases.dtos import FlashcardFilter
from flashcard_api.domain.common.value_objects import FlashcardId
from flashcard_api.domain.learning.entities.flashcard import Flashcard
from flashcard_api.domain.learning.value_objects import Category, DifficultyLevel
from flashcard_api.infrastructure.learning.mappers.flashcard_mapper import FlashcardMapper
from flashcard_api.models import Flashcard as FlashcardORM

# Largest value of the INTEGER id column (int32 on PostgreSQL)
MAX_FLASHCARD_ID = 2**31 - 1
# Largest OFFSET/LIMIT the drivers accept (signed 64-bit)
MAX_ROW_COUNT = 2**63 - 1


class FlashcardRepository:
    """
    Repository for Flashcard domain entities.

    Writes are flushed, not committed; the unit of work owns the transaction.
    """

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = FlashcardMapper()

    def find_all(self, filters: FlashcardFilter, pagination: Pagination) -> list[Flashcard]:
        """
        Get flashcards matching the filters.

        Args:
            filters: Equality filters and optional search term
            pagination: Page to return

        Returns:
            List of flashcard entities ordered by id ASC
        """
        # No table holds that many rows
        if pagination.offset > MAX_ROW_COUNT:
            return []

        stmt = (
            select(FlashcardORM)
            .where(*self._conditions(filters))
            .order_by(FlashcardORM.id.asc())
            .offset(pagination.offset)
        )
        if pagination.limit is not None:
            stmt = stmt.limit(min(pagination.limit, MAX_ROW_COUNT))
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def count(self, filters: FlashcardFilter) -> int:
        """Count flashcards matching the filters."""
        stmt = select(func.count(FlashcardORM.id)).where(*self._conditions(filters))
        return self.db.execute(stmt).scalar() or 0

    def find_by_id(self, flashcard_id: FlashcardId) -> Flashcard | None:
        """
        Find a flashcard by ID.

        Args:
            flashcard_id: The flashcard ID

        Returns:
            Flashcard entity if found, None otherwise
        """
        orm_model = self._get(flashcard_id)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def add(self, flashcard: Flashcard) -> Flashcard:
        """Insert a new flashcard and return it with its database id."""
        orm_model = self.mapper.to_orm(flashcard)
        self.db.add(orm_model)
        self.db.flush()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def save(self, flashcard: Flashcard) -> Flashcard:
        """
        Write the state of an existing flashcard.

        Raises:
            ValueError: If the flashcard is not stored
        """
        orm_model = self._get(flashcard.id)
        if not orm_model:
            raise ValueError(f"Flashcard {flashcard.id.value} not found")
        self.mapper.to_orm(flashcard, orm_model)
        self.db.flush()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def delete(self, flashcard_id: FlashcardId) -> bool:
        """
        Delete a flashcard.

        Returns:
            True if deleted, False if not found
        """
        orm_model = self._get(flashcard_id)
        if not orm_model:
            return False

        self.db.delete(orm_model)
        self.db.flush()
        return True

    def find_random(
        self,
        count: int,
        category: Category | None = None,
        difficulty: DifficultyLevel | None = None,
    ) -> list[Flashcard]:
        """Pick up to `count` flashcards in database-random order."""
        stmt: Select[tuple[FlashcardORM]] = select(FlashcardORM)
        if category is not None:
            stmt = stmt.where(FlashcardORM.category == int(category))
        if difficulty is not None:
            stmt = stmt.where(FlashcardORM.difficulty == int(difficulty))
        stmt = stmt.order_by(func.random()).limit(count)
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def exists_with_forms(self, kanji: str, hiragana: str, katakana: str) -> bool:
        """Check whether a flashcard with exactly these three written forms exists."""
        stmt = select(
            exists().where(
                FlashcardORM.kanji == kanji,
                FlashcardORM.hiragana == hiragana,
                FlashcardORM.katakana == katakana,
            )
        )
        return bool(self.db.execute(stmt).scalar())

    def _get(self, flashcard_id: FlashcardId) -> FlashcardORM | None:
        # Ids past the column range cannot exist and would overflow the driver
        if flashcard_id.value > MAX_FLASHCARD_ID:
            return None
        return self.db.get(FlashcardORM, flashcard_id.value)

    @staticmethod
    def _conditions(filters: FlashcardFilter) -> list[ColumnElement[bool]]:
        conditions: list[ColumnElement[bool]] = []
        if filters.category is not None:
            conditions.append(FlashcardORM.category == int(filters.category))
        if filters.difficulty is not None:
            conditions.append(FlashcardORM.difficulty == int(filters.difficulty))
        if filters.word_type is not None:
            conditions.append(FlashcardORM.word_type == int(filters.word_type))
        if filters.is_favorite is not None:
            conditions.append(FlashcardORM.is_favorite == filters.is_favorite)
        if filters.search_term:
            term = filters.search_term
            conditions.append(
                or_(
                    FlashcardORM.kanji.icontains(term, autoescape=True),
                    FlashcardORM.hiragana.icontains(term, autoescape=True),
                    FlashcardORM.katakana.icontains(term, autoescape=True),
                    FlashcardORM.meaning.icontains(term, autoescape=True),
                )
            )
        return conditions
