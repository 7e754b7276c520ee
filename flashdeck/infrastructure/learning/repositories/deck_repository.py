"""Repository for Deck domain entities."""

import structlog
from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from flashdeck.domain.common.value_objects import DeckId, UserId
from flashdeck.domain.learning.entities.deck import Deck, DeckDetails
from flashdeck.infrastructure.common.transaction import atomic
from flashdeck.infrastructure.learning.mappers import DeckMapper
from flashdeck.infrastructure.learning.repositories.ownership import (
    lock_owned_deck,
    owned_deck,
)
from flashdeck.models import Card as CardORM
from flashdeck.models import Deck as DeckORM
from flashdeck.models import utc_now

logger = structlog.get_logger(__name__)


class DeckRepository:
    """
    Ownership-scoped repository for decks.

    Reads return None or an empty list for decks the user does not own. Writes
    raise DeckNotFoundError instead; "missing" and "not yours" are the same
    condition to the caller.
    """

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = DeckMapper()

    def get_deck(self, deck_id: DeckId, user_id: UserId) -> Deck | None:
        """
        Find a deck by ID with user ownership check.

        Args:
            deck_id: The deck ID
            user_id: The user ID for ownership verification

        Returns:
            Deck entity if found and owned by user, None otherwise
        """
        orm_model = self.db.execute(owned_deck(deck_id, user_id)).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def list_decks(self, user_id: UserId) -> list[Deck]:
        """Get all decks owned by the user, oldest first."""
        stmt = select(DeckORM).where(DeckORM.user_id == user_id.value).order_by(DeckORM.id)
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def list_decks_with_card_counts(self, user_id: UserId) -> list[tuple[Deck, int]]:
        """
        Get the user's decks with the number of cards in each.

        Args:
            user_id: The user ID

        Returns:
            List of (Deck entity, card_count) tuples ordered by updated_at DESC
        """
        card_count_subq = (
            select(func.count(CardORM.id))
            .where(CardORM.deck_id == DeckORM.id)
            .correlate(DeckORM)
            .scalar_subquery()
            .label("card_count")
        )

        stmt = (
            select(DeckORM, card_count_subq)
            .where(DeckORM.user_id == user_id.value)
            .order_by(DeckORM.updated_at.desc(), DeckORM.id.desc())
        )
        results = self.db.execute(stmt).all()
        return [(self.mapper.to_domain(deck_orm), card_count) for deck_orm, card_count in results]

    def count_decks(self, user_id: UserId) -> int:
        """Count decks owned by the user."""
        stmt = select(func.count(DeckORM.id)).where(DeckORM.user_id == user_id.value)
        return self.db.execute(stmt).scalar() or 0

    def create_deck(self, user_id: UserId, details: DeckDetails) -> Deck:
        """
        Create a deck for the user.

        Quota is not checked here; callers consult the quota policy first.

        Args:
            user_id: Owner of the new deck
            details: Validated name and description

        Returns:
            Created deck entity with database-generated values
        """
        deck = Deck.create(owner_id=user_id, details=details, now=utc_now())
        orm_model = self.mapper.to_orm(deck)
        with atomic(self.db):
            self.db.add(orm_model)
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def update_deck(self, deck_id: DeckId, user_id: UserId, details: DeckDetails) -> Deck:
        """
        Overwrite a deck's name and description.

        Args:
            deck_id: The deck ID
            user_id: The user ID for ownership verification
            details: Validated name and description

        Returns:
            Updated deck entity

        Raises:
            DeckNotFoundError: If deck does not exist or is not owned by user
        """
        with atomic(self.db):
            orm_model = lock_owned_deck(self.db, deck_id, user_id)
            deck = self.mapper.to_domain(orm_model)
            deck.update_details(details, now=utc_now())
            self.mapper.to_orm(deck, orm_model)
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def delete_deck(self, deck_id: DeckId, user_id: UserId) -> None:
        """
        Delete a deck together with all of its cards.

        Cards are removed in the same transaction; the foreign key cascade
        covers rows inserted by other writers.

        Raises:
            DeckNotFoundError: If deck does not exist or is not owned by user
        """
        with atomic(self.db):
            orm_model = lock_owned_deck(self.db, deck_id, user_id)
            result = self.db.execute(delete(CardORM).where(CardORM.deck_id == deck_id.value))
            self.db.delete(orm_model)

        logger.debug("deck_deleted_with_cards", deck_id=deck_id.value, card_count=result.rowcount)
