"""Mapper for Card ORM ↔ Domain conversion."""

from flashdeck.domain.common.value_objects import CardId, DeckId
from flashdeck.domain.learning.entities.card import Card
from flashdeck.infrastructure.learning.mappers.timestamps import as_utc
from flashdeck.models import Card as CardORM


class CardMapper:
    """Mapper for Card ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: CardORM) -> Card:
        """Convert ORM model to domain entity."""
        return Card.create_with_id(
            id=CardId(orm_model.id),
            deck_id=DeckId(orm_model.deck_id),
            front=orm_model.front,
            back=orm_model.back,
            created_at=as_utc(orm_model.created_at),
            updated_at=as_utc(orm_model.updated_at),
        )

    def to_orm(self, domain_entity: Card, orm_model: CardORM | None = None) -> CardORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Update existing; a card never moves between decks
            orm_model.front = domain_entity.front
            orm_model.back = domain_entity.back
            orm_model.updated_at = domain_entity.updated_at
            return orm_model

        # Create new
        return CardORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            deck_id=domain_entity.deck_id.value,
            front=domain_entity.front,
            back=domain_entity.back,
            created_at=domain_entity.created_at,
            updated_at=domain_entity.updated_at,
        )
