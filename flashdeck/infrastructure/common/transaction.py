"""Transaction boundary for repository write operations."""

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.orm import Session


@contextmanager
def atomic(db: Session) -> Iterator[Session]:
    """
    Run a block as one transaction.

    Commits when the block finishes and rolls back if it raises, so an
    ownership check and the write it guards succeed or fail together.
    """
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
