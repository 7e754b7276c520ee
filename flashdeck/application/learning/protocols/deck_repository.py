"""Protocol for Deck repository in learning context."""

from typing import Protocol

from flashdeck.domain.common.value_objects import DeckId, UserId
from flashdeck.domain.learning.entities.deck import Deck, DeckDetails


class DeckRepositoryProtocol(Protocol):
    """Protocol for ownership-scoped Deck repository operations."""

    def get_deck(self, deck_id: DeckId, user_id: UserId) -> Deck | None:
        """
        Find a deck by ID with user ownership check.

        Returns:
            Deck entity if found and owned by user, None otherwise
        """
        ...

    def list_decks(self, user_id: UserId) -> list[Deck]:
        """Get all decks owned by the user."""
        ...

    def list_decks_with_card_counts(self, user_id: UserId) -> list[tuple[Deck, int]]:
        """Get the user's decks with card counts, most recently updated first."""
        ...

    def count_decks(self, user_id: UserId) -> int:
        """Count decks owned by the user."""
        ...

    def create_deck(self, user_id: UserId, details: DeckDetails) -> Deck:
        """Create a deck for the user without checking quota."""
        ...

    def update_deck(self, deck_id: DeckId, user_id: UserId, details: DeckDetails) -> Deck:
        """
        Overwrite a deck's name and description.

        Raises:
            DeckNotFoundError: If deck does not exist or is not owned by user
        """
        ...

    def delete_deck(self, deck_id: DeckId, user_id: UserId) -> None:
        """
        Delete a deck and all of its cards.

        Raises:
            DeckNotFoundError: If deck does not exist or is not owned by user
        """
        ...
