from .flashcard_csv_service import FlashcardCsvRecord, FlashcardCsvService

__all__ = ["FlashcardCsvRecord", "FlashcardCsvService"]
