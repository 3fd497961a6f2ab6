"""Errors raised when a domain rule is broken."""


class DomainError(Exception):
    """Base class for domain errors; `message` is safe to show to API clients."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvariantViolationError(DomainError):
    """An entity would end up in a state its rules forbid."""

    def __init__(self, entity: str, invariant: str) -> None:
        super().__init__(f"Invariant violation in {entity}: {invariant}")
        self.entity = entity
        self.invariant = invariant
