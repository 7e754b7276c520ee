"""Tests for CardRepository ownership scoping and batch writes."""

from collections.abc import Callable
from datetime import UTC, datetime

import pytest
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from flashdeck import models
from flashdeck.domain.common.value_objects import CardId, DeckId, UserId
from flashdeck.domain.learning.entities.card import CardContent
from flashdeck.exceptions import CardNotFoundError, DeckNotFoundError
from flashdeck.infrastructure.learning.repositories import CardRepository

ALICE = UserId("user_alice")
BOB = UserId("user_bob")


def _count_cards(db_session: Session, deck_id: int) -> int:
    stmt = select(func.count(models.Card.id)).where(models.Card.deck_id == deck_id)
    return db_session.execute(stmt).scalar() or 0


class TestCardRepositoryReads:
    def test_create_then_get_round_trip(
        self, db_session: Session, test_deck: models.Deck
    ) -> None:
        repo = CardRepository(db_session)

        created = repo.create_card(
            DeckId(test_deck.id), ALICE, CardContent(front="Hola", back="Hello")
        )
        fetched = repo.get_card(created.id, ALICE)

        assert fetched is not None
        assert fetched.deck_id == DeckId(test_deck.id)
        assert (fetched.front, fetched.back) == ("Hola", "Hello")

    def test_card_in_other_users_deck_is_invisible(
        self,
        db_session: Session,
        other_deck: models.Deck,
        create_card: Callable[..., models.Card],
    ) -> None:
        card = create_card(other_deck)
        repo = CardRepository(db_session)

        assert repo.get_card(CardId(card.id), ALICE) is None
        assert repo.get_card(CardId(card.id), BOB) is not None
        assert repo.list_cards(DeckId(other_deck.id), ALICE) is None
        assert repo.list_user_cards(ALICE) == []

    def test_list_cards_of_empty_deck_is_empty_list(
        self, db_session: Session, test_deck: models.Deck
    ) -> None:
        assert CardRepository(db_session).list_cards(DeckId(test_deck.id), ALICE) == []

    def test_list_cards_most_recently_updated_first(
        self,
        db_session: Session,
        test_deck: models.Deck,
        create_card: Callable[..., models.Card],
    ) -> None:
        edited_earlier = create_card(test_deck, front="Earlier")
        edited_recently = create_card(test_deck, front="Recently")
        edited_recently.updated_at = datetime(2026, 1, 2, tzinfo=UTC)
        edited_earlier.updated_at = datetime(2026, 1, 1, tzinfo=UTC)
        db_session.commit()

        cards = CardRepository(db_session).list_cards(DeckId(test_deck.id), ALICE)

        assert cards is not None
        assert [card.front for card in cards] == ["Recently", "Earlier"]

    def test_list_user_cards_spans_decks(
        self,
        db_session: Session,
        create_deck: Callable[..., models.Deck],
        create_card: Callable[..., models.Card],
        other_deck: models.Deck,
    ) -> None:
        first = create_deck(name="First")
        second = create_deck(name="Second")
        create_card(first, front="A")
        create_card(second, front="B")
        create_card(other_deck, front="Not mine")

        items = CardRepository(db_session).list_user_cards(ALICE)

        assert [(card.front, deck_name) for card, deck_name in items] == [
            ("A", "First"),
            ("B", "Second"),
        ]


class TestCardRepositoryWrites:
    def test_create_in_other_users_deck_raises(
        self, db_session: Session, other_deck: models.Deck
    ) -> None:
        repo = CardRepository(db_session)

        with pytest.raises(DeckNotFoundError):
            repo.create_card(DeckId(other_deck.id), ALICE, CardContent(front="Q", back="A"))

        assert _count_cards(db_session, other_deck.id) == 0

    def test_create_cards_stores_all_in_order(
        self, db_session: Session, test_deck: models.Deck
    ) -> None:
        contents = [CardContent(front=f"Q{i}", back=f"A{i}") for i in range(5)]

        cards = CardRepository(db_session).create_cards(DeckId(test_deck.id), ALICE, contents)

        assert [card.front for card in cards] == [f"Q{i}" for i in range(5)]
        assert all(card.id.value > 0 for card in cards)
        assert _count_cards(db_session, test_deck.id) == 5

    def test_create_cards_is_all_or_nothing(
        self, db_session: Session, test_deck: models.Deck, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def failing_commit() -> None:
            db_session.flush()
            raise RuntimeError("commit failed")

        monkeypatch.setattr(db_session, "commit", failing_commit)
        contents = [CardContent(front=f"Q{i}", back=f"A{i}") for i in range(5)]

        with pytest.raises(RuntimeError):
            CardRepository(db_session).create_cards(DeckId(test_deck.id), ALICE, contents)

        assert _count_cards(db_session, test_deck.id) == 0

    def test_update_card(
        self,
        db_session: Session,
        test_deck: models.Deck,
        create_card: Callable[..., models.Card],
    ) -> None:
        card = create_card(test_deck)
        before = CardRepository(db_session).get_card(CardId(card.id), ALICE)
        assert before is not None

        updated = CardRepository(db_session).update_card(
            CardId(card.id), ALICE, CardContent(front="New Q", back="New A")
        )

        assert (updated.front, updated.back) == ("New Q", "New A")
        assert updated.updated_at >= before.updated_at

    def test_update_card_of_other_user_raises(
        self,
        db_session: Session,
        other_deck: models.Deck,
        create_card: Callable[..., models.Card],
    ) -> None:
        card = create_card(other_deck, front="Original")
        repo = CardRepository(db_session)

        with pytest.raises(CardNotFoundError):
            repo.update_card(CardId(card.id), ALICE, CardContent(front="Hijacked", back="x"))

        unchanged = repo.get_card(CardId(card.id), BOB)
        assert unchanged is not None
        assert unchanged.front == "Original"

    def test_delete_card_then_second_delete_raises(
        self,
        db_session: Session,
        test_deck: models.Deck,
        create_card: Callable[..., models.Card],
    ) -> None:
        card = create_card(test_deck)
        repo = CardRepository(db_session)

        repo.delete_card(CardId(card.id), ALICE)

        assert repo.get_card(CardId(card.id), ALICE) is None
        with pytest.raises(CardNotFoundError):
            repo.delete_card(CardId(card.id), ALICE)

    def test_delete_all_cards_keeps_deck(
        self,
        db_session: Session,
        test_deck: models.Deck,
        create_card: Callable[..., models.Card],
    ) -> None:
        create_card(test_deck)
        create_card(test_deck)
        repo = CardRepository(db_session)

        assert repo.delete_all_cards(DeckId(test_deck.id), ALICE) is None
        assert repo.list_cards(DeckId(test_deck.id), ALICE) == []

    def test_delete_all_cards_of_other_user_raises(
        self,
        db_session: Session,
        other_deck: models.Deck,
        create_card: Callable[..., models.Card],
    ) -> None:
        create_card(other_deck)

        with pytest.raises(DeckNotFoundError):
            CardRepository(db_session).delete_all_cards(DeckId(other_deck.id), ALICE)

        assert _count_cards(db_session, other_deck.id) == 1
