"""Unit of work adapters for the two flashcard stores."""

from sqlalchemy.orm import Session

from flashcard_api.application.common.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """Commits or rolls back the request's SQLAlchemy session."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()


class InMemoryUnitOfWork(UnitOfWork):
    """The in-memory store applies writes immediately and has no rollback."""

    def commit(self) -> None:
        pass

    def rollback(self) -> None:
        pass
