"""
CSV reading and writing for flashcard import, export and templates.

Import files carry the IMPORT_COLUMNS header; exports add the bookkeeping
columns from EXPORT_COLUMNS, which the importer ignores. Enumerations are
written as their integer codes.
"""

import csv
import io
from collections.abc import Iterable
from dataclasses import dataclass

from flashcard_api.domain.learning.entities.flashcard import Flashcard
from flashcard_api.exceptions import ValidationError

IMPORT_COLUMNS = (
    "Kanji",
    "Hiragana",
    "Katakana",
    "Meaning",
    "Example",
    "WordType",
    "Difficulty",
    "Category",
)
EXPORT_COLUMNS = (*IMPORT_COLUMNS, "CreatedDate", "ReviewCount", "IsFavorite")

TEMPLATE_ROWS = (
    ("犬", "いぬ", "", "狗", "私の犬はとても可愛いです。", "1", "1", "1"),
    ("", "", "コーヒー", "咖啡", "朝のコーヒーは美味しいです。", "2", "1", "3"),
    ("", "おはよう", "", "早安", "おはようございます。", "0", "1", "0"),
)


class CsvFormatError(ValidationError):
    """The uploaded file is not a readable flashcard CSV."""


@dataclass(frozen=True)
class FlashcardCsvRecord:
    """One raw data row of an import file, before validation."""

    line_number: int
    kanji: str
    hiragana: str
    katakana: str
    meaning: str
    example: str
    word_type: str
    difficulty: str
    category: str


class FlashcardCsvService:
    """Converts between flashcards and their CSV representation."""

    def read_records(self, content: bytes) -> list[FlashcardCsvRecord]:
        """
        Parse an import file.

        Args:
            content: Raw file bytes, UTF-8 with or without a byte order mark

        Returns:
            One record per data row, blank rows skipped

        Raises:
            CsvFormatError: If the file is not UTF-8 or lacks required columns
        """
        try:
            text = content.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise CsvFormatError("CSV file must be UTF-8 encoded") from e

        reader = csv.DictReader(io.StringIO(text, newline=""))
        if reader.fieldnames is None:
            raise CsvFormatError("CSV file has no header row")
        reader.fieldnames = [name.strip() for name in reader.fieldnames]

        missing = [column for column in IMPORT_COLUMNS if column not in reader.fieldnames]
        if missing:
            raise CsvFormatError(f"CSV file is missing columns: {', '.join(missing)}")

        records = []
        for row in reader:
            records.append(
                FlashcardCsvRecord(
                    line_number=reader.line_num,
                    kanji=row["Kanji"] or "",
                    hiragana=row["Hiragana"] or "",
                    katakana=row["Katakana"] or "",
                    meaning=row["Meaning"] or "",
                    example=row["Example"] or "",
                    word_type=(row["WordType"] or "").strip(),
                    difficulty=(row["Difficulty"] or "").strip(),
                    category=(row["Category"] or "").strip(),
                )
            )
        return records

    def write_flashcards(self, flashcards: Iterable[Flashcard]) -> bytes:
        """Serialize flashcards to export CSV bytes (UTF-8 with BOM, header always present)."""
        buffer = io.StringIO(newline="")
        writer = csv.writer(buffer)
        writer.writerow(EXPORT_COLUMNS)
        for flashcard in flashcards:
            writer.writerow(
                [
                    flashcard.kanji,
                    flashcard.hiragana,
                    flashcard.katakana,
                    flashcard.meaning,
                    flashcard.example or "",
                    int(flashcard.word_type),
                    int(flashcard.difficulty),
                    int(flashcard.category),
                    flashcard.created_date.strftime("%Y-%m-%d") if flashcard.created_date else "",
                    flashcard.review_count,
                    flashcard.is_favorite,
                ]
            )
        return buffer.getvalue().encode("utf-8-sig")

    def template(self) -> bytes:
        """Import template: header plus sample rows."""
        buffer = io.StringIO(newline="")
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(IMPORT_COLUMNS)
        writer.writerows(TEMPLATE_ROWS)
        return buffer.getvalue().encode("utf-8")
