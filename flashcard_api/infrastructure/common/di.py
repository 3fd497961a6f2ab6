import threading
from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from flashcard_api.core import container
from flashcard_api.database import DatabaseSession

T = TypeVar("T")

# container.db is shared by every thread of the request threadpool
_override_lock = threading.Lock()


def inject_use_case(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """
    Wrap a container provider as a FastAPI dependency.

    In database mode the request's session is bound to `container.db` while
    the use case and its repositories are built. The override and the build
    happen under one lock so concurrent requests never pick up each other's
    session. In memory mode there is no session and the provider is called
    as is.
    """

    def dependency(db: DatabaseSession) -> T:
        if db is None:
            return provider()
        with _override_lock, container.db.override(db):
            return provider()

    return dependency
