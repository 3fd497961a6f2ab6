from flashcard_api.exceptions import NotFoundError


class FlashcardNotFoundError(NotFoundError):
    """Raised by use cases addressing a flashcard id the store does not hold."""

    def __init__(self, flashcard_id: int) -> None:
        super().__init__(f"No flashcard with id {flashcard_id}")
        self.flashcard_id = flashcard_id
