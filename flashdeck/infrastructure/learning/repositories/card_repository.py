"""Repository for Card domain entities."""

from collections.abc import Sequence

import structlog
from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from flashdeck.domain.common.value_objects import CardId, DeckId, UserId
from flashdeck.domain.learning.entities.card import Card, CardContent
from flashdeck.exceptions import CardNotFoundError
from flashdeck.infrastructure.common.transaction import atomic
from flashdeck.infrastructure.learning.mappers import CardMapper
from flashdeck.infrastructure.learning.repositories.ownership import (
    lock_owned_deck,
    owned_card,
    owned_deck,
)
from flashdeck.models import Card as CardORM
from flashdeck.models import Deck as DeckORM
from flashdeck.models import utc_now

logger = structlog.get_logger(__name__)


class CardRepository:
    """
    Ownership-scoped repository for cards.

    A card is owned through its deck, so every statement joins or checks the
    deck's owner. Writes lock the owning deck row before touching cards.
    """

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = CardMapper()

    def get_card(self, card_id: CardId, user_id: UserId) -> Card | None:
        """
        Find a card by ID with ownership check via its deck.

        Args:
            card_id: The card ID
            user_id: The user ID for ownership verification

        Returns:
            Card entity if found and its deck is owned by user, None otherwise
        """
        orm_model = self.db.execute(owned_card(card_id, user_id)).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def list_user_cards(self, user_id: UserId) -> list[tuple[Card, str]]:
        """
        Get all cards across all decks owned by the user.

        Returns:
            List of (Card entity, deck name) tuples grouped by deck
        """
        stmt = (
            select(CardORM, DeckORM.name)
            .join(DeckORM, CardORM.deck_id == DeckORM.id)
            .where(DeckORM.user_id == user_id.value)
            .order_by(CardORM.deck_id, CardORM.id)
        )
        results = self.db.execute(stmt).all()
        return [(self.mapper.to_domain(card_orm), deck_name) for card_orm, deck_name in results]

    def list_cards(self, deck_id: DeckId, user_id: UserId) -> list[Card] | None:
        """
        Get all cards of a deck.

        Args:
            deck_id: The deck ID
            user_id: The user ID for ownership verification

        Returns:
            List of card entities ordered by updated_at DESC, or None if the
            deck is not owned by user
        """
        deck_orm = self.db.execute(owned_deck(deck_id, user_id)).scalar_one_or_none()
        if deck_orm is None:
            return None

        stmt = (
            select(CardORM)
            .where(CardORM.deck_id == deck_id.value)
            .order_by(CardORM.updated_at.desc(), CardORM.id.desc())
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def create_card(self, deck_id: DeckId, user_id: UserId, content: CardContent) -> Card:
        """
        Add a card to an owned deck.

        Raises:
            DeckNotFoundError: If deck does not exist or is not owned by user
        """
        return self.create_cards(deck_id, user_id, [content])[0]

    def create_cards(
        self, deck_id: DeckId, user_id: UserId, contents: Sequence[CardContent]
    ) -> list[Card]:
        """
        Add several cards to an owned deck in one insert.

        Either every card is stored or none is.

        Args:
            deck_id: The deck ID
            user_id: The user ID for ownership verification
            contents: Validated questions and answers

        Returns:
            Created card entities, in input order

        Raises:
            DeckNotFoundError: If deck does not exist or is not owned by user
        """
        now = utc_now()
        with atomic(self.db):
            lock_owned_deck(self.db, deck_id, user_id)
            orm_models = [
                self.mapper.to_orm(Card.create(deck_id=deck_id, content=content, now=now))
                for content in contents
            ]
            self.db.add_all(orm_models)

        for orm_model in orm_models:
            self.db.refresh(orm_model)
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def update_card(self, card_id: CardId, user_id: UserId, content: CardContent) -> Card:
        """
        Overwrite a card's question and answer.

        Raises:
            CardNotFoundError: If card does not exist or its deck is not owned by user
        """
        with atomic(self.db):
            orm_model = self._lock_owned_card(card_id, user_id)
            card = self.mapper.to_domain(orm_model)
            card.update_content(content, now=utc_now())
            self.mapper.to_orm(card, orm_model)
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def delete_card(self, card_id: CardId, user_id: UserId) -> None:
        """
        Delete a card.

        Raises:
            CardNotFoundError: If card does not exist or its deck is not owned by user
        """
        with atomic(self.db):
            orm_model = self._lock_owned_card(card_id, user_id)
            self.db.delete(orm_model)

    def delete_all_cards(self, deck_id: DeckId, user_id: UserId) -> None:
        """
        Delete every card of an owned deck.

        Raises:
            DeckNotFoundError: If deck does not exist or is not owned by user
        """
        with atomic(self.db):
            lock_owned_deck(self.db, deck_id, user_id)
            result = self.db.execute(delete(CardORM).where(CardORM.deck_id == deck_id.value))

        logger.debug("deck_cards_deleted", deck_id=deck_id.value, card_count=result.rowcount)

    def _lock_owned_card(self, card_id: CardId, user_id: UserId) -> CardORM:
        """Load an owned card, locking it and its deck for the transaction."""
        stmt = owned_card(card_id, user_id).with_for_update()
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        if orm_model is None:
            raise CardNotFoundError(card_id.value)
        return orm_model
