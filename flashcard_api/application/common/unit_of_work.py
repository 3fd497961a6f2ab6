"""
Transaction boundary for use cases.

Use cases open the unit of work as a context manager and call commit()
once every write has succeeded:

    with self.unit_of_work:
        flashcard = self.flashcard_repository.add(data.to_entity())
        self.unit_of_work.commit()

Leaving the block through an exception rolls back instead.
"""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Self


class UnitOfWork(ABC):
    """Port implemented per flashcard store in the infrastructure layer."""

    @abstractmethod
    def commit(self) -> None: ...

    @abstractmethod
    def rollback(self) -> None: ...

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if exc_type is not None:
            self.rollback()
