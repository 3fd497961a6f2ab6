"""Identity base classes for domain entities."""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar


@dataclass(frozen=True)
class EntityId:
    """
    Typed wrapper around a store-assigned integer id.

    Zero is the placeholder of an entity that has not been stored yet.
    """

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"{type(self).__name__} cannot be negative")

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> Self:
        """Placeholder id; the store assigns the real one on insert."""
        return cls(0)

    @property
    def is_assigned(self) -> bool:
        return self.value > 0


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """Domain object with an identity; subclasses declare `id: IdType`."""

    id: IdType
