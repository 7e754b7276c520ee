"""Infrastructure layer repositories for learning bounded context."""

from flashdeck.infrastructure.learning.repositories.card_repository import CardRepository
from flashdeck.infrastructure.learning.repositories.deck_repository import DeckRepository

__all__ = ["CardRepository", "DeckRepository"]
