"""Pydantic schemas for Card API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field

from flashdeck.constants import MAX_CARD_SIDE_LENGTH, MAX_GENERATED_CARDS, MIN_GENERATED_CARDS
from flashdeck.domain.learning.entities.card import Card as CardEntity


class CardBase(BaseModel):
    """Base schema for Card."""

    front: str = Field(
        ..., min_length=1, max_length=MAX_CARD_SIDE_LENGTH, description="Question text"
    )
    back: str = Field(..., min_length=1, max_length=MAX_CARD_SIDE_LENGTH, description="Answer text")


class CardCreateRequest(CardBase):
    """Schema for creating a card."""


class CardUpdateRequest(CardBase):
    """Schema for updating a card; both sides are overwritten."""


class Card(CardBase):
    """Schema for Card response."""

    id: int
    deck_id: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, card: CardEntity) -> "Card":
        return cls(
            id=card.id.value,
            deck_id=card.deck_id.value,
            front=card.front,
            back=card.back,
            created_at=card.created_at,
            updated_at=card.updated_at,
        )


class CardWithDeckName(Card):
    """Schema for a card in the cross-deck list."""

    deck_name: str = Field(..., description="Name of the deck the card belongs to")


class CardResponse(BaseModel):
    """Schema for single card responses."""

    success: bool = Field(..., description="Whether the operation was successful")
    message: str = Field(..., description="Response message")
    card: Card = Field(..., description="The card")


class CardsListResponse(BaseModel):
    """Schema for list of cards response."""

    cards: list[Card] = Field(..., description="Cards")


class UserCardsListResponse(BaseModel):
    """Schema for every card the user owns."""

    cards: list[CardWithDeckName] = Field(..., description="Cards, grouped by deck")


class CardGenerateRequest(BaseModel):
    """Schema for requesting AI-generated cards."""

    count: int = Field(
        MAX_GENERATED_CARDS,
        ge=MIN_GENERATED_CARDS,
        le=MAX_GENERATED_CARDS,
        description="Number of cards to generate",
    )


class CardGenerateResponse(BaseModel):
    """Schema for AI card generation response."""

    success: bool = Field(..., description="Whether the generation was successful")
    message: str = Field(..., description="Response message")
    count: int = Field(..., description="Number of cards created")
    cards: list[Card] = Field(..., description="Created cards")
