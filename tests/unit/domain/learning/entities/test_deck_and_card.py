"""Tests for Deck and Card entities and their value objects."""

from datetime import UTC, datetime, timedelta

import pytest

from flashdeck.domain.common.exceptions import ValidationError
from flashdeck.domain.common.value_objects import CardId, DeckId, UserId
from flashdeck.domain.learning.entities.card import Card, CardContent
from flashdeck.domain.learning.entities.deck import Deck, DeckDetails


class TestDeckDetails:
    def test_valid_details(self) -> None:
        details = DeckDetails(name="Spanish", description="Common verbs")
        assert details.has_description

    def test_name_required(self) -> None:
        with pytest.raises(ValidationError, match="Deck name is required"):
            DeckDetails(name="")

    def test_whitespace_name_is_kept(self) -> None:
        assert DeckDetails(name="   ").name == "   "

    def test_name_length_boundary(self) -> None:
        DeckDetails(name="x" * 255)
        with pytest.raises(ValidationError, match="Deck name is too long"):
            DeckDetails(name="x" * 256)

    def test_description_length_boundary(self) -> None:
        DeckDetails(name="Deck", description="x" * 1000)
        with pytest.raises(ValidationError, match="Description is too long"):
            DeckDetails(name="Deck", description="x" * 1001)

    def test_blank_description_is_not_context(self) -> None:
        assert not DeckDetails(name="Deck", description="  ").has_description
        assert not DeckDetails(name="Deck").has_description


class TestCardContent:
    def test_question_required(self) -> None:
        with pytest.raises(ValidationError, match="Question is required"):
            CardContent(front="", back="Answer")

    def test_whitespace_sides_are_kept(self) -> None:
        content = CardContent(front=" ", back="\t")

        assert content.front == " "
        assert content.back == "\t"

    def test_answer_required(self) -> None:
        with pytest.raises(ValidationError, match="Answer is required"):
            CardContent(front="Question", back="")

    def test_side_length_boundary(self) -> None:
        CardContent(front="x" * 1000, back="y" * 1000)
        with pytest.raises(ValidationError, match="Question is too long"):
            CardContent(front="x" * 1001, back="y")
        with pytest.raises(ValidationError, match="Answer is too long"):
            CardContent(front="x", back="y" * 1001)


class TestDeck:
    def test_create_stamps_both_timestamps(self) -> None:
        now = datetime.now(UTC)
        deck = Deck.create(owner_id=UserId("user_1"), details=DeckDetails(name="D"), now=now)

        assert deck.id == DeckId(0)
        assert deck.created_at == deck.updated_at == now
        assert deck.is_owned_by(UserId("user_1"))
        assert not deck.is_owned_by(UserId("user_2"))

    def test_update_never_moves_updated_at_backwards(self) -> None:
        now = datetime.now(UTC)
        deck = Deck.create(owner_id=UserId("user_1"), details=DeckDetails(name="D"), now=now)

        deck.update_details(DeckDetails(name="Renamed"), now=now - timedelta(seconds=5))

        assert deck.name == "Renamed"
        assert deck.updated_at == now

    def test_entities_compare_by_id(self) -> None:
        now = datetime.now(UTC)
        first = Deck.create_with_id(DeckId(1), UserId("u"), "A", None, now, now)
        second = Deck.create_with_id(DeckId(1), UserId("u"), "B", "changed", now, now)
        assert first == second


class TestCard:
    def test_update_content_refreshes_updated_at(self) -> None:
        created = datetime(2026, 1, 1, tzinfo=UTC)
        card = Card.create(DeckId(1), CardContent(front="Q", back="A"), now=created)
        later = created + timedelta(minutes=1)

        card.update_content(CardContent(front="Q2", back="A2"), now=later)

        assert (card.front, card.back) == ("Q2", "A2")
        assert card.updated_at == later
        assert card.created_at == created
        assert card.id == CardId(0)


class TestIds:
    @pytest.mark.parametrize("value", ["", "   ", "x" * 256])
    def test_invalid_user_id(self, value: str) -> None:
        with pytest.raises(ValidationError):
            UserId(value)

    def test_negative_ids_rejected(self) -> None:
        with pytest.raises(ValidationError):
            DeckId(-1)
        with pytest.raises(ValidationError):
            CardId(-1)
