from collections.abc import Callable
from threading import Lock
from typing import TypeVar

from dependency_injector.providers import Provider

from noteswise.core import container
from noteswise.database import DatabaseSession

T = TypeVar("T")

# container.db is shared by every request; sync endpoints build use cases in
# FastAPI's threadpool
_override_lock = Lock()


def inject_use_case(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """
    Create a FastAPI dependency building a use case from a container provider.

    The request-scoped session is bound to container.db only while the use
    case graph is constructed; the built repositories keep their own reference.
    """

    def dependency(db: DatabaseSession) -> T:
        with _override_lock, container.db.override(db):
            return provider()

    return dependency
