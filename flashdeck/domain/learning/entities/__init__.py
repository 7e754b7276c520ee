from .card import Card, CardContent
from .deck import Deck, DeckDetails

__all__ = [
    "Card",
    "CardContent",
    "Deck",
    "DeckDetails",
]
