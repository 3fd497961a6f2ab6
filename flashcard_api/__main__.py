"""Run the API with uvicorn: python -m flashcard_api."""

import uvicorn

from flashcard_api.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("flashcard_api.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
