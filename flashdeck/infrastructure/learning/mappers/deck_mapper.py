"""Mapper for Deck ORM ↔ Domain conversion."""

from flashdeck.domain.common.value_objects import DeckId, UserId
from flashdeck.domain.learning.entities.deck import Deck
from flashdeck.infrastructure.learning.mappers.timestamps import as_utc
from flashdeck.models import Deck as DeckORM


class DeckMapper:
    """Mapper for Deck ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: DeckORM) -> Deck:
        """Convert ORM model to domain entity."""
        return Deck.create_with_id(
            id=DeckId(orm_model.id),
            owner_id=UserId(orm_model.user_id),
            name=orm_model.name,
            description=orm_model.description,
            created_at=as_utc(orm_model.created_at),
            updated_at=as_utc(orm_model.updated_at),
        )

    def to_orm(self, domain_entity: Deck, orm_model: DeckORM | None = None) -> DeckORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Update existing; ownership never changes
            orm_model.name = domain_entity.name
            orm_model.description = domain_entity.description
            orm_model.updated_at = domain_entity.updated_at
            return orm_model

        # Create new
        return DeckORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            user_id=domain_entity.owner_id.value,
            name=domain_entity.name,
            description=domain_entity.description,
            created_at=domain_entity.created_at,
            updated_at=domain_entity.updated_at,
        )
