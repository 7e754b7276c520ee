"""Ownership-scoped statements shared by the learning repositories."""

from sqlalchemy import Select, select
from sqlalchemy.orm import Session

from flashdeck.domain.common.value_objects import CardId, DeckId, UserId
from flashdeck.exceptions import DeckNotFoundError
from flashdeck.models import Card as CardORM
from flashdeck.models import Deck as DeckORM


def owned_deck(deck_id: DeckId, user_id: UserId) -> Select[tuple[DeckORM]]:
    """Select a deck only if it is owned by the user."""
    return select(DeckORM).where(
        DeckORM.id == deck_id.value,
        DeckORM.user_id == user_id.value,
    )


def owned_card(card_id: CardId, user_id: UserId) -> Select[tuple[CardORM]]:
    """Select a card only if its deck is owned by the user."""
    return (
        select(CardORM)
        .join(DeckORM, CardORM.deck_id == DeckORM.id)
        .where(
            CardORM.id == card_id.value,
            DeckORM.user_id == user_id.value,
        )
    )


def lock_owned_deck(db: Session, deck_id: DeckId, user_id: UserId) -> DeckORM:
    """
    Load an owned deck and lock its row for the rest of the transaction.

    Raises:
        DeckNotFoundError: If deck does not exist or is not owned by user
    """
    stmt = owned_deck(deck_id, user_id).with_for_update()
    orm_model = db.execute(stmt).scalar_one_or_none()
    if orm_model is None:
        raise DeckNotFoundError(deck_id.value)
    return orm_model
