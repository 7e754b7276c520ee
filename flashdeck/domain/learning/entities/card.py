"""
Card entity: a front/back question-answer pair belonging to one deck.
"""

from dataclasses import dataclass
from datetime import datetime

from flashdeck.constants import MAX_CARD_SIDE_LENGTH
from flashdeck.domain.common.entity import Entity
from flashdeck.domain.common.exceptions import ValidationError
from flashdeck.domain.common.value_object import ValueObject
from flashdeck.domain.common.value_objects import CardId, DeckId


@dataclass(frozen=True)
class CardContent(ValueObject):
    """
    Question and answer of a card.

    Business Rules:
    - Front (question) and back (answer) are required
    - Each side is at most 1000 characters

    Applied equally to manually entered and generated cards.
    """

    front: str
    back: str

    def __post_init__(self) -> None:
        """Validate fields."""
        if not self.front:
            raise ValidationError("Question is required", field="front")
        if len(self.front) > MAX_CARD_SIDE_LENGTH:
            raise ValidationError("Question is too long", field="front")
        if not self.back:
            raise ValidationError("Answer is required", field="back")
        if len(self.back) > MAX_CARD_SIDE_LENGTH:
            raise ValidationError("Answer is too long", field="back")


@dataclass(eq=False)
class Card(Entity[CardId]):
    """
    Study card.

    Business Rules:
    - A card always belongs to exactly one deck
    - Ownership by a user is derived from the deck
    """

    id: CardId
    deck_id: DeckId
    front: str
    back: str
    created_at: datetime
    updated_at: datetime

    @property
    def content(self) -> CardContent:
        return CardContent(front=self.front, back=self.back)

    def update_content(self, content: CardContent, now: datetime) -> None:
        """
        Overwrite front and back and refresh updated_at.

        Args:
            content: Validated new question and answer
            now: Current time
        """
        self.front = content.front
        self.back = content.back
        self.updated_at = max(self.updated_at, now)

    @classmethod
    def create(cls, deck_id: DeckId, content: CardContent, now: datetime) -> "Card":
        """Create a new card (ID will be 0 until persisted)."""
        return cls(
            id=CardId.generate(),
            deck_id=deck_id,
            front=content.front,
            back=content.back,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def create_with_id(
        cls,
        id: CardId,
        deck_id: DeckId,
        front: str,
        back: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Card":
        """Reconstitute a card from persistence."""
        return cls(
            id=id,
            deck_id=deck_id,
            front=front,
            back=back,
            created_at=created_at,
            updated_at=updated_at,
        )
