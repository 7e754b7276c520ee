"""Pytest configuration and fixtures."""

import os
from collections.abc import Callable, Generator
from typing import Any

os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["ENVIRONMENT"] = "test"
os.environ.pop("AI_PROVIDER", None)

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402

from flashdeck import models  # noqa: E402
from flashdeck.database import SQLITE_MEMORY_URL, Base, build_engine, get_db  # noqa: E402
from flashdeck.infrastructure.identity.dependencies import (  # noqa: E402
    USER_FEATURES_HEADER,
    USER_ID_HEADER,
)
from flashdeck.main import app  # noqa: E402

# In-memory SQLite on one shared connection, so the TestClient thread sees the same tables
test_engine = build_engine(SQLITE_MEMORY_URL)

TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

TEST_USER_ID = "user_alice"
OTHER_USER_ID = "user_bob"


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session, acting as the test user."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app, headers={USER_ID_HEADER: TEST_USER_ID}) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def pro_headers() -> dict[str, str]:
    """Headers of a subscriber with every paid feature."""
    return {
        USER_ID_HEADER: TEST_USER_ID,
        USER_FEATURES_HEADER: "unlimited_decks,ai_flashcard_generation",
    }


@pytest.fixture
def other_user_headers() -> dict[str, str]:
    return {USER_ID_HEADER: OTHER_USER_ID}


@pytest.fixture
def create_deck(db_session: Session) -> Callable[..., models.Deck]:
    """Factory inserting a deck row directly."""

    def _create(
        name: str = "Test Deck",
        description: str | None = "A deck for tests",
        user_id: str = TEST_USER_ID,
    ) -> models.Deck:
        deck = models.Deck(user_id=user_id, name=name, description=description)
        db_session.add(deck)
        db_session.commit()
        db_session.refresh(deck)
        return deck

    return _create


@pytest.fixture
def create_card(db_session: Session) -> Callable[..., models.Card]:
    """Factory inserting a card row directly."""

    def _create(deck: models.Deck, front: str = "Question", back: str = "Answer") -> models.Card:
        card = models.Card(deck_id=deck.id, front=front, back=back)
        db_session.add(card)
        db_session.commit()
        db_session.refresh(card)
        return card

    return _create


@pytest.fixture
def test_deck(create_deck: Callable[..., models.Deck]) -> models.Deck:
    """A deck owned by the test user."""
    return create_deck()


@pytest.fixture
def other_deck(create_deck: Callable[..., models.Deck]) -> models.Deck:
    """A deck owned by another user."""
    return create_deck(name="Someone else's deck", user_id=OTHER_USER_ID)
