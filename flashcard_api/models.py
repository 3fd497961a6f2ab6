"""Database models."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Integer, String, Text, false, func
from sqlalchemy.orm import Mapped, mapped_column

from flashcard_api.database import Base


class Flashcard(Base):
    """Vocabulary flashcard. Enumerations are stored as their integer codes."""

    __tablename__ = "flashcards"
    # Never hand out the id of a deleted row again on SQLite
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    kanji: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    hiragana: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    katakana: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    meaning: Mapped[str] = mapped_column(String(500), nullable=False)
    example: Mapped[str | None] = mapped_column(Text, nullable=True)
    word_type: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    difficulty: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    category: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    created_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False, index=True
    )
    last_reviewed_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    review_count: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default="0"
    )
    is_favorite: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false(), index=True
    )

    def __repr__(self) -> str:
        """String representation of Flashcard."""
        return f"<Flashcard(id={self.id}, meaning='{self.meaning[:50]}')>"
