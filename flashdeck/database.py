"""Engine, sessions and the declarative base for the deck and card tables."""

from collections.abc import Generator
from sqlite3 import Connection as SQLiteConnection
from typing import Annotated, Any

from fastapi import Depends
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from flashdeck.config import Settings, get_settings

SQLITE_MEMORY_URL = "sqlite:///:memory:"


class Base(DeclarativeBase):
    """Base class for all database models."""


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection: Any, _connection_record: Any) -> None:
    """Turn on foreign key enforcement so ON DELETE CASCADE works on SQLite."""
    if isinstance(dbapi_connection, SQLiteConnection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def build_engine(database_url: str) -> Engine:
    """
    Create an engine for the given URL.

    SQLite is used for local runs and tests; an in-memory database keeps one
    shared connection so every session sees the same tables.
    """
    if database_url.startswith("sqlite"):
        if database_url == SQLITE_MEMORY_URL:
            return create_engine(
                database_url,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        return create_engine(database_url, connect_args={"check_same_thread": False})

    return create_engine(
        database_url,
        pool_size=20,
        max_overflow=30,
        pool_pre_ping=True,
        pool_recycle=3600,
    )


# Application-scoped, set up by the app lifespan
_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def initialize_database(settings: Settings) -> None:
    """Create the engine and session factory for the configured database."""
    global _engine, _session_factory  # noqa: PLW0603

    _engine = build_engine(settings.DATABASE_URL)
    _session_factory = sessionmaker(autocommit=False, autoflush=False, bind=_engine)


def get_session_factory(
    settings: Annotated[Settings, Depends(get_settings)],
) -> sessionmaker[Session]:
    """Get the session factory, creating it on first use outside the lifespan."""
    if _session_factory is None:
        initialize_database(settings)
    assert _session_factory is not None
    return _session_factory


def dispose_engine() -> None:
    """Close pooled connections on shutdown."""
    global _engine, _session_factory  # noqa: PLW0603
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _session_factory = None


def get_db(
    session_factory: Annotated[sessionmaker[Session], Depends(get_session_factory)],
) -> Generator[Session, None, None]:
    """Yield a request-scoped session; repositories commit their own writes."""
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


DatabaseSession = Annotated[Session, Depends(get_db)]
