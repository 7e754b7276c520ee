"""Tests for DeckRepository ownership scoping and cascade deletion."""

import warnings
from collections.abc import Callable
from datetime import UTC, datetime

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import SAWarning
from sqlalchemy.orm import Session

from flashdeck import models
from flashdeck.domain.common.value_objects import DeckId, UserId
from flashdeck.domain.learning.entities.deck import DeckDetails
from flashdeck.exceptions import DeckNotFoundError
from flashdeck.infrastructure.learning.repositories import DeckRepository

ALICE = UserId("user_alice")
BOB = UserId("user_bob")


class TestDeckRepositoryReads:
    def test_create_then_get_round_trip(self, db_session: Session) -> None:
        repo = DeckRepository(db_session)

        created = repo.create_deck(ALICE, DeckDetails(name="Spanish", description="Verbs"))
        fetched = repo.get_deck(created.id, ALICE)

        assert fetched is not None
        assert fetched.id == created.id
        assert fetched.name == "Spanish"
        assert fetched.description == "Verbs"
        assert fetched.owner_id == ALICE
        assert fetched.created_at == fetched.updated_at
        assert fetched.created_at.tzinfo is not None

    def test_get_deck_of_other_user_returns_none(
        self, db_session: Session, other_deck: models.Deck
    ) -> None:
        repo = DeckRepository(db_session)
        assert repo.get_deck(DeckId(other_deck.id), ALICE) is None
        assert repo.get_deck(DeckId(other_deck.id), BOB) is not None

    def test_get_missing_deck_returns_none(self, db_session: Session) -> None:
        assert DeckRepository(db_session).get_deck(DeckId(99999), ALICE) is None

    def test_list_decks_only_returns_own(
        self,
        db_session: Session,
        create_deck: Callable[..., models.Deck],
        other_deck: models.Deck,
    ) -> None:
        first = create_deck(name="First")
        second = create_deck(name="Second")
        repo = DeckRepository(db_session)

        decks = repo.list_decks(ALICE)

        assert [deck.id.value for deck in decks] == [first.id, second.id]
        assert all(deck.owner_id == ALICE for deck in decks)
        assert repo.count_decks(ALICE) == 2
        assert repo.count_decks(BOB) == 1

    def test_list_with_card_counts(
        self,
        db_session: Session,
        create_deck: Callable[..., models.Deck],
        create_card: Callable[..., models.Card],
    ) -> None:
        empty = create_deck(name="Empty")
        full = create_deck(name="Full")
        create_card(full)
        create_card(full)
        repo = DeckRepository(db_session)

        counts = {deck.name: count for deck, count in repo.list_decks_with_card_counts(ALICE)}

        assert counts == {empty.name: 0, full.name: 2}

    def test_list_with_card_counts_most_recently_updated_first(
        self, db_session: Session, create_deck: Callable[..., models.Deck]
    ) -> None:
        edited_recently = create_deck(name="Edited recently")
        edited_earlier = create_deck(name="Edited earlier")
        edited_recently.updated_at = datetime(2026, 1, 2, tzinfo=UTC)
        edited_earlier.updated_at = datetime(2026, 1, 1, tzinfo=UTC)
        db_session.commit()

        items = DeckRepository(db_session).list_decks_with_card_counts(ALICE)

        assert [deck.id.value for deck, _ in items] == [edited_recently.id, edited_earlier.id]


class TestDeckRepositoryWrites:
    def test_update_overwrites_and_advances_updated_at(self, db_session: Session) -> None:
        repo = DeckRepository(db_session)
        deck = repo.create_deck(ALICE, DeckDetails(name="Old", description="Old description"))

        updated = repo.update_deck(deck.id, ALICE, DeckDetails(name="New"))

        assert updated.name == "New"
        assert updated.description is None
        assert updated.updated_at >= deck.updated_at
        assert updated.created_at == deck.created_at

    def test_update_of_other_users_deck_raises_and_leaves_it_unchanged(
        self, db_session: Session, other_deck: models.Deck
    ) -> None:
        repo = DeckRepository(db_session)

        with pytest.raises(DeckNotFoundError):
            repo.update_deck(DeckId(other_deck.id), ALICE, DeckDetails(name="Hijacked"))

        unchanged = repo.get_deck(DeckId(other_deck.id), BOB)
        assert unchanged is not None
        assert unchanged.name == other_deck.name

    def test_delete_removes_deck_and_its_cards(
        self,
        db_session: Session,
        test_deck: models.Deck,
        create_card: Callable[..., models.Card],
    ) -> None:
        create_card(test_deck)
        create_card(test_deck)
        deck_id = test_deck.id
        repo = DeckRepository(db_session)

        repo.delete_deck(DeckId(deck_id), ALICE)

        assert repo.get_deck(DeckId(deck_id), ALICE) is None
        remaining = db_session.execute(
            select(func.count(models.Card.id)).where(models.Card.deck_id == deck_id)
        ).scalar()
        assert remaining == 0

    def test_delete_with_loaded_cards_issues_no_stale_deletes(
        self,
        db_session: Session,
        test_deck: models.Deck,
        create_card: Callable[..., models.Card],
    ) -> None:
        """Test that a loaded cards collection is not deleted a second time."""
        create_card(test_deck)
        create_card(test_deck)
        assert len(test_deck.cards) == 2
        repo = DeckRepository(db_session)

        with warnings.catch_warnings():
            warnings.simplefilter("error", SAWarning)
            repo.delete_deck(DeckId(test_deck.id), ALICE)

        assert db_session.scalar(select(func.count(models.Card.id))) == 0

    def test_second_delete_raises(self, db_session: Session, test_deck: models.Deck) -> None:
        repo = DeckRepository(db_session)
        repo.delete_deck(DeckId(test_deck.id), ALICE)

        with pytest.raises(DeckNotFoundError):
            repo.delete_deck(DeckId(test_deck.id), ALICE)

    def test_delete_of_other_users_deck_raises(
        self,
        db_session: Session,
        other_deck: models.Deck,
        create_card: Callable[..., models.Card],
    ) -> None:
        create_card(other_deck)
        repo = DeckRepository(db_session)

        with pytest.raises(DeckNotFoundError):
            repo.delete_deck(DeckId(other_deck.id), ALICE)

        assert repo.get_deck(DeckId(other_deck.id), BOB) is not None
        assert repo.list_decks_with_card_counts(BOB)[0][1] == 1

    def test_foreign_key_cascade_removes_cards(
        self, db_session: Session, test_deck: models.Deck, create_card: Callable[..., models.Card]
    ) -> None:
        create_card(test_deck)
        deck_id = test_deck.id

        db_session.execute(models.Deck.__table__.delete().where(models.Deck.id == deck_id))
        db_session.commit()

        remaining = db_session.execute(
            select(func.count(models.Card.id)).where(models.Card.deck_id == deck_id)
        ).scalar()
        assert remaining == 0
