"""Pydantic schemas for Deck API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field

from flashdeck.constants import MAX_DECK_DESCRIPTION_LENGTH, MAX_DECK_NAME_LENGTH
from flashdeck.domain.learning.entities.deck import Deck as DeckEntity


class DeckBase(BaseModel):
    """Base schema for Deck."""

    name: str = Field(
        ..., min_length=1, max_length=MAX_DECK_NAME_LENGTH, description="Deck name"
    )
    description: str | None = Field(
        None, max_length=MAX_DECK_DESCRIPTION_LENGTH, description="Optional deck description"
    )


class DeckCreateRequest(DeckBase):
    """Schema for creating a deck."""


class DeckUpdateRequest(DeckBase):
    """Schema for updating a deck; both fields are overwritten."""


class Deck(DeckBase):
    """Schema for Deck response."""

    id: int
    user_id: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, deck: DeckEntity) -> "Deck":
        return cls(
            id=deck.id.value,
            user_id=deck.owner_id.value,
            name=deck.name,
            description=deck.description,
            created_at=deck.created_at,
            updated_at=deck.updated_at,
        )


class DeckWithCardCount(Deck):
    """Schema for a deck in the dashboard list."""

    card_count: int = Field(..., ge=0, description="Number of cards in the deck")


class DeckResponse(BaseModel):
    """Schema for single deck responses."""

    success: bool = Field(..., description="Whether the operation was successful")
    message: str = Field(..., description="Response message")
    deck: Deck = Field(..., description="The deck")


class DecksListResponse(BaseModel):
    """Schema for list of decks response."""

    decks: list[DeckWithCardCount] = Field(..., description="Decks, most recently updated first")
