from .card_generator import CardGeneratorProtocol, GeneratedCard
from .card_repository import CardRepositoryProtocol
from .deck_repository import DeckRepositoryProtocol

__all__ = [
    "CardGeneratorProtocol",
    "CardRepositoryProtocol",
    "DeckRepositoryProtocol",
    "GeneratedCard",
]
