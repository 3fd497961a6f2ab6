from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class FlashcardId(EntityId):
    """Id of a flashcard."""
