"""Learning context schemas."""

from flashdeck.infrastructure.learning.schemas.card_schemas import (
    Card,
    CardBase,
    CardCreateRequest,
    CardGenerateRequest,
    CardGenerateResponse,
    CardResponse,
    CardsListResponse,
    CardUpdateRequest,
    CardWithDeckName,
    UserCardsListResponse,
)
from flashdeck.infrastructure.learning.schemas.deck_schemas import (
    Deck,
    DeckBase,
    DeckCreateRequest,
    DeckResponse,
    DecksListResponse,
    DeckUpdateRequest,
    DeckWithCardCount,
)

__all__ = [
    "Card",
    "CardBase",
    "CardCreateRequest",
    "CardGenerateRequest",
    "CardGenerateResponse",
    "CardResponse",
    "CardUpdateRequest",
    "CardWithDeckName",
    "CardsListResponse",
    "Deck",
    "DeckBase",
    "DeckCreateRequest",
    "DeckResponse",
    "DeckUpdateRequest",
    "DeckWithCardCount",
    "DecksListResponse",
    "UserCardsListResponse",
]
