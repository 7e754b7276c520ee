"""Use case for card operations."""

import structlog

from flashdeck.application.learning.protocols.card_repository import CardRepositoryProtocol
from flashdeck.domain.common.value_objects import CardId, DeckId, UserId
from flashdeck.domain.learning.entities.card import Card, CardContent
from flashdeck.exceptions import CardNotFoundError, DeckNotFoundError

logger = structlog.get_logger(__name__)


class CardManagementUseCase:
    """Use case for card CRUD operations."""

    def __init__(self, card_repository: CardRepositoryProtocol) -> None:
        """Initialize use case with repository protocol."""
        self.card_repository = card_repository

    def list_user_cards(self, user_id: str) -> list[tuple[Card, str]]:
        """Get every card across the user's decks, paired with its deck name."""
        return self.card_repository.list_user_cards(UserId(user_id))

    def get_card(self, card_id: int, user_id: str) -> Card:
        """
        Get a single card.

        Raises:
            CardNotFoundError: If card does not exist or is not owned by user
        """
        card = self.card_repository.get_card(CardId(card_id), UserId(user_id))
        if card is None:
            raise CardNotFoundError(card_id)
        return card

    def list_cards(self, deck_id: int, user_id: str) -> list[Card]:
        """
        Get all cards of a deck, most recently updated first.

        Raises:
            DeckNotFoundError: If deck does not exist or is not owned by user
        """
        cards = self.card_repository.list_cards(DeckId(deck_id), UserId(user_id))
        if cards is None:
            raise DeckNotFoundError(deck_id)
        return cards

    def create_card(self, deck_id: int, user_id: str, front: str, back: str) -> Card:
        """
        Create a new card in a deck.

        Args:
            deck_id: ID of the deck
            user_id: ID of the user
            front: Question text
            back: Answer text

        Returns:
            Created card domain entity

        Raises:
            ValidationError: If front or back is invalid
            DeckNotFoundError: If deck does not exist or is not owned by user
        """
        content = CardContent(front=front, back=back)
        card = self.card_repository.create_card(DeckId(deck_id), UserId(user_id), content)

        logger.info("created_card", card_id=card.id.value, deck_id=deck_id)
        return card

    def update_card(self, card_id: int, user_id: str, front: str, back: str) -> Card:
        """
        Update a card's question and answer.

        Raises:
            ValidationError: If front or back is invalid
            CardNotFoundError: If card does not exist or is not owned by user
        """
        content = CardContent(front=front, back=back)
        card = self.card_repository.update_card(CardId(card_id), UserId(user_id), content)

        logger.info("updated_card", card_id=card_id)
        return card

    def delete_card(self, card_id: int, user_id: str) -> None:
        """
        Delete a card.

        Raises:
            CardNotFoundError: If card does not exist or is not owned by user
        """
        self.card_repository.delete_card(CardId(card_id), UserId(user_id))
        logger.info("deleted_card", card_id=card_id)

    def delete_all_cards(self, deck_id: int, user_id: str) -> None:
        """
        Delete every card of a deck.

        Raises:
            DeckNotFoundError: If deck does not exist or is not owned by user
        """
        self.card_repository.delete_all_cards(DeckId(deck_id), UserId(user_id))
        logger.info("deleted_all_cards", deck_id=deck_id)
