"""Application errors rendered as JSON `{"detail": message}` responses."""

from starlette import status


class FlashcardApiError(Exception):
    """Base error; subclasses pick the HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(FlashcardApiError):
    """The addressed resource does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class ValidationError(FlashcardApiError):
    """The request is well-formed but its values are not acceptable."""

    status_code = status.HTTP_400_BAD_REQUEST


class ServiceError(FlashcardApiError):
    """An unexpected failure while serving the request."""
