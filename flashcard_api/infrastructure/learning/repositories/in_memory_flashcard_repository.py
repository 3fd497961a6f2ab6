"""In-process flashcard store used when no database is configured."""

import random
import threading
from dataclasses import replace

from flashcard_api.application.common.pagination import Pagination
from flashcard_api.application.learning.use_cases.dtos import FlashcardFilter
from flashcard_api.domain.common.value_objects import FlashcardId
from flashcard_api.domain.learning.entities.flashcard import Flashcard
from flashcard_api.domain.learning.value_objects import Category, DifficultyLevel


class InMemoryFlashcardRepository:
    """
    Flashcard repository holding entities in an id-ordered list.

    Ids come from a counter that only moves forward, so a deleted id is never
    handed out again. Callers get copies; changes reach the store through
    add() and save(). Contents are lost when the process exits.
    """

    def __init__(self) -> None:
        self._flashcards: list[Flashcard] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def find_all(self, filters: FlashcardFilter, pagination: Pagination) -> list[Flashcard]:
        with self._lock:
            matches = [f for f in self._flashcards if filters.matches(f)]
        return [replace(f) for f in pagination.window(matches)]

    def count(self, filters: FlashcardFilter) -> int:
        with self._lock:
            return sum(1 for f in self._flashcards if filters.matches(f))

    def find_by_id(self, flashcard_id: FlashcardId) -> Flashcard | None:
        with self._lock:
            index = self._index_of(flashcard_id)
            return replace(self._flashcards[index]) if index is not None else None

    def add(self, flashcard: Flashcard) -> Flashcard:
        with self._lock:
            stored = replace(flashcard, id=FlashcardId(self._next_id))
            self._next_id += 1
            self._flashcards.append(stored)
            return replace(stored)

    def save(self, flashcard: Flashcard) -> Flashcard:
        with self._lock:
            index = self._index_of(flashcard.id)
            if index is None:
                raise ValueError(f"Flashcard {flashcard.id.value} not found")
            # created_date is fixed at creation
            stored = replace(flashcard, created_date=self._flashcards[index].created_date)
            self._flashcards[index] = stored
            return replace(stored)

    def delete(self, flashcard_id: FlashcardId) -> bool:
        with self._lock:
            index = self._index_of(flashcard_id)
            if index is None:
                return False
            del self._flashcards[index]
            return True

    def find_random(
        self,
        count: int,
        category: Category | None = None,
        difficulty: DifficultyLevel | None = None,
    ) -> list[Flashcard]:
        pool_filter = FlashcardFilter(category=category, difficulty=difficulty)
        with self._lock:
            pool = [f for f in self._flashcards if pool_filter.matches(f)]
        picked = random.sample(pool, k=min(count, len(pool)))
        return [replace(f) for f in picked]

    def exists_with_forms(self, kanji: str, hiragana: str, katakana: str) -> bool:
        key = (kanji, hiragana, katakana)
        with self._lock:
            return any(f.forms_key == key for f in self._flashcards)

    def _index_of(self, flashcard_id: FlashcardId) -> int | None:
        for index, flashcard in enumerate(self._flashcards):
            if flashcard.id == flashcard_id:
                return index
        return None
