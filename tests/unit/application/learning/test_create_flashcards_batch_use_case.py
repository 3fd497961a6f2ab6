from sqlalchemy.orm import Session

from flashcard_api.application.common.pagination import Pagination
from flashcard_api.application.common.unit_of_work import UnitOfWork
from flashcard_api.application.learning.use_cases.batch.create_flashcards_batch_use_case import (
    CreateFlashcardsBatchUseCase,
)
from flashcard_api.application.learning.use_cases.dtos import FlashcardCreateData, FlashcardFilter
from flashcard_api.domain.learning.entities.flashcard import Flashcard
from flashcard_api.infrastructure.common.unit_of_work import (
    InMemoryUnitOfWork,
    SqlAlchemyUnitOfWork,
)
from flashcard_api.infrastructure.learning.repositories import (
    FlashcardRepository,
    InMemoryFlashcardRepository,
)


class RecordingUnitOfWork(UnitOfWork):
    def __init__(self) -> None:
        self.commits = 0
        self.rollbacks = 0

    def commit(self) -> None:
        self.commits += 1

    def rollback(self) -> None:
        self.rollbacks += 1


class FailingFlashcardRepository(InMemoryFlashcardRepository):
    """Fails on the n-th insert."""

    def __init__(self, fail_on: int) -> None:
        super().__init__()
        self.fail_on = fail_on
        self.adds = 0

    def add(self, flashcard: Flashcard) -> Flashcard:
        self.adds += 1
        if self.adds == self.fail_on:
            raise RuntimeError("connection lost")
        return super().add(flashcard)


class FailingSqlFlashcardRepository(FlashcardRepository):
    """Fails on the n-th insert, after the earlier rows were flushed."""

    def __init__(self, db: Session, fail_on: int) -> None:
        super().__init__(db)
        self.fail_on = fail_on
        self.adds = 0

    def add(self, flashcard: Flashcard) -> Flashcard:
        self.adds += 1
        if self.adds == self.fail_on:
            raise RuntimeError("connection lost")
        return super().add(flashcard)


def _items(*meanings: str) -> list[FlashcardCreateData]:
    return [FlashcardCreateData(meaning=m, kanji=f"字{i}") for i, m in enumerate(meanings)]


def test_create_batch() -> None:
    repository = InMemoryFlashcardRepository()
    unit_of_work = RecordingUnitOfWork()
    use_case = CreateFlashcardsBatchUseCase(repository, unit_of_work)

    result = use_case.create_batch(_items("One", "Two", "Three"))

    assert result.total_processed == 3
    assert result.success_count == 3
    assert result.error_count == 0
    assert [f.id.value for f in result.created_flashcards] == [1, 2, 3]
    assert unit_of_work.commits == 1
    assert unit_of_work.rollbacks == 0


def test_counts_add_up() -> None:
    """Test every item is counted exactly once as success or error."""
    repository = InMemoryFlashcardRepository()
    use_case = CreateFlashcardsBatchUseCase(repository, InMemoryUnitOfWork())
    items = [
        FlashcardCreateData(meaning="Dog", kanji="犬"),
        FlashcardCreateData(meaning="", kanji="猫"),
        FlashcardCreateData(meaning="Dog again", kanji="犬"),
        FlashcardCreateData(meaning="Bird", kanji="鳥"),
    ]

    result = use_case.create_batch(items)

    assert result.success_count + result.error_count == result.total_processed == 4
    assert result.success_count == 2
    assert result.error_messages == [
        "Item 2: Invariant violation in Flashcard: Meaning cannot be empty",
        "Duplicate flashcard: 犬",
    ]


def test_validate_only_stores_nothing() -> None:
    repository = InMemoryFlashcardRepository()
    use_case = CreateFlashcardsBatchUseCase(repository, InMemoryUnitOfWork())

    result = use_case.create_batch(_items("One", "Two"), validate_only=True)

    assert result.success_count == 2
    assert result.created_flashcards == []
    assert repository.count(FlashcardFilter()) == 0


def test_unexpected_failure_discards_batch() -> None:
    """Test a storage failure rolls back and reports every item as failed."""
    repository = FailingFlashcardRepository(fail_on=2)
    unit_of_work = RecordingUnitOfWork()
    use_case = CreateFlashcardsBatchUseCase(repository, unit_of_work)

    result = use_case.create_batch(_items("One", "Two", "Three"))

    assert result.total_processed == 3
    assert result.success_count == 0
    assert result.error_count == 3
    assert result.error_messages == ["Batch operation failed: connection lost"]
    assert result.created_flashcards == []
    assert unit_of_work.commits == 0
    assert unit_of_work.rollbacks == 1


def test_unexpected_failure_discards_flushed_rows(db_session: Session) -> None:
    """Test rows flushed before a storage failure are rolled back."""
    repository = FailingSqlFlashcardRepository(db_session, fail_on=3)
    use_case = CreateFlashcardsBatchUseCase(repository, SqlAlchemyUnitOfWork(db_session))

    result = use_case.create_batch(_items("One", "Two", "Three"))

    assert result.success_count == 0
    assert result.error_count == 3
    assert repository.adds == 3
    assert FlashcardRepository(db_session).count(FlashcardFilter()) == 0


def test_batch_results_are_stored_in_order() -> None:
    repository = InMemoryFlashcardRepository()
    use_case = CreateFlashcardsBatchUseCase(repository, InMemoryUnitOfWork())

    use_case.create_batch(_items("One", "Two"))

    stored = repository.find_all(FlashcardFilter(), Pagination())
    assert [f.meaning for f in stored] == ["One", "Two"]
