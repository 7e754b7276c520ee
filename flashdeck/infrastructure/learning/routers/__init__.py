"""Learning context routers."""

from flashdeck.infrastructure.learning.routers import cards, decks

__all__ = ["cards", "decks"]
