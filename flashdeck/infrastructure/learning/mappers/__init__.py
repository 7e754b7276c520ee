from .card_mapper import CardMapper
from .deck_mapper import DeckMapper

__all__ = [
    "CardMapper",
    "DeckMapper",
]
