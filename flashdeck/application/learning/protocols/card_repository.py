"""Protocol for Card repository in learning context."""

from collections.abc import Sequence
from typing import Protocol

from flashdeck.domain.common.value_objects import CardId, DeckId, UserId
from flashdeck.domain.learning.entities.card import Card, CardContent


class CardRepositoryProtocol(Protocol):
    """Protocol for Card repository operations, scoped by deck ownership."""

    def get_card(self, card_id: CardId, user_id: UserId) -> Card | None:
        """
        Find a card by ID with ownership check via its deck.

        Returns:
            Card entity if found and owned by user, None otherwise
        """
        ...

    def list_user_cards(self, user_id: UserId) -> list[tuple[Card, str]]:
        """Get all cards across the user's decks, each with its deck name."""
        ...

    def list_cards(self, deck_id: DeckId, user_id: UserId) -> list[Card] | None:
        """
        Get all cards of a deck.

        Returns:
            Cards ordered by updated_at DESC, or None if the deck is not owned
        """
        ...

    def create_card(self, deck_id: DeckId, user_id: UserId, content: CardContent) -> Card:
        """
        Add a card to an owned deck.

        Raises:
            DeckNotFoundError: If deck does not exist or is not owned by user
        """
        ...

    def create_cards(
        self, deck_id: DeckId, user_id: UserId, contents: Sequence[CardContent]
    ) -> list[Card]:
        """
        Add several cards to an owned deck, all or nothing.

        Raises:
            DeckNotFoundError: If deck does not exist or is not owned by user
        """
        ...

    def update_card(self, card_id: CardId, user_id: UserId, content: CardContent) -> Card:
        """
        Overwrite a card's question and answer.

        Raises:
            CardNotFoundError: If card does not exist or is not owned by user
        """
        ...

    def delete_card(self, card_id: CardId, user_id: UserId) -> None:
        """
        Delete a card.

        Raises:
            CardNotFoundError: If card does not exist or is not owned by user
        """
        ...

    def delete_all_cards(self, deck_id: DeckId, user_id: UserId) -> None:
        """
        Delete every card of an owned deck.

        Raises:
            DeckNotFoundError: If deck does not exist or is not owned by user
        """
        ...
