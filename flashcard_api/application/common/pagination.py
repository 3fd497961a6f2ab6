"""Page selection for list and export queries."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Pagination:
    """
    A 1-based page of a result ordered by the store.

    `page_size=None` selects everything, which exports use.
    """

    page: int = 1
    page_size: int | None = 10

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError("Page must be at least 1")
        if self.page_size is not None and self.page_size < 1:
            raise ValueError("Page size must be at least 1")

    @classmethod
    def unbounded(cls) -> "Pagination":
        return cls(page=1, page_size=None)

    @property
    def offset(self) -> int:
        """Rows to skip (SQL OFFSET)."""
        return 0 if self.page_size is None else (self.page - 1) * self.page_size

    @property
    def limit(self) -> int | None:
        """Rows to return (SQL LIMIT); None means no limit."""
        return self.page_size

    def window(self, items: Sequence[T]) -> list[T]:
        """Cut this page out of an already ordered sequence."""
        if self.limit is None:
            return list(items[self.offset :])
        return list(items[self.offset : self.offset + self.limit])
