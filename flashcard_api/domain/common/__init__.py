"""Base classes and errors shared by the domain model."""

from .entity import Entity, EntityId
from .exceptions import DomainError, InvariantViolationError

__all__ = [
    "DomainError",
    "Entity",
    "EntityId",
    "InvariantViolationError",
]
