"""Bridge between FastAPI dependencies and the dependency injection container."""

from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from flashdeck.core import container
from flashdeck.database import DatabaseSession

T = TypeVar("T")


def inject_use_case(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """
    Turn a container provider into a FastAPI dependency.

    The provider is resolved while ``container.db`` points at the request's
    session, so every repository in the object graph shares that session.
    """

    def resolve(db: DatabaseSession) -> T:
        with container.db.override(db):
            return provider()

    return resolve
