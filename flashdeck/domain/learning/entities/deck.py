"""
Deck entity: a named, user-owned collection of cards.
"""

from dataclasses import dataclass
from datetime import datetime

from flashdeck.constants import MAX_DECK_DESCRIPTION_LENGTH, MAX_DECK_NAME_LENGTH
from flashdeck.domain.common.entity import Entity
from flashdeck.domain.common.exceptions import ValidationError
from flashdeck.domain.common.value_object import ValueObject
from flashdeck.domain.common.value_objects import DeckId, UserId


@dataclass(frozen=True)
class DeckDetails(ValueObject):
    """
    User-editable fields of a deck.

    Business Rules:
    - Name is required and at most 255 characters
    - Description is optional and at most 1000 characters
    """

    name: str
    description: str | None = None

    def __post_init__(self) -> None:
        """Validate fields."""
        if not self.name:
            raise ValidationError("Deck name is required", field="name")
        if len(self.name) > MAX_DECK_NAME_LENGTH:
            raise ValidationError("Deck name is too long", field="name")
        if self.description is not None and len(self.description) > MAX_DECK_DESCRIPTION_LENGTH:
            raise ValidationError("Description is too long", field="description")

    @property
    def has_description(self) -> bool:
        return self.description is not None and bool(self.description.strip())


@dataclass(eq=False)
class Deck(Entity[DeckId]):
    """
    Deck of study cards.

    Business Rules:
    - A deck is owned by exactly one user
    - updated_at is refreshed on every change and never moves backwards
    """

    id: DeckId
    owner_id: UserId
    name: str
    description: str | None
    created_at: datetime
    updated_at: datetime

    @property
    def details(self) -> DeckDetails:
        return DeckDetails(name=self.name, description=self.description)

    def is_owned_by(self, user_id: UserId) -> bool:
        return self.owner_id == user_id

    def update_details(self, details: DeckDetails, now: datetime) -> None:
        """
        Overwrite name and description and refresh updated_at.

        Args:
            details: Validated new field values
            now: Current time
        """
        self.name = details.name
        self.description = details.description
        self.updated_at = max(self.updated_at, now)

    @classmethod
    def create(cls, owner_id: UserId, details: DeckDetails, now: datetime) -> "Deck":
        """Create a new deck (ID will be 0 until persisted)."""
        return cls(
            id=DeckId.generate(),
            owner_id=owner_id,
            name=details.name,
            description=details.description,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def create_with_id(
        cls,
        id: DeckId,
        owner_id: UserId,
        name: str,
        description: str | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Deck":
        """Reconstitute a deck from persistence."""
        return cls(
            id=id,
            owner_id=owner_id,
            name=name,
            description=description,
            created_at=created_at,
            updated_at=updated_at,
        )
