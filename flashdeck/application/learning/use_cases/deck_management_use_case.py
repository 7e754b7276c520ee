"""Use case for deck management operations."""

import structlog

from flashdeck.application.learning.protocols.deck_repository import DeckRepositoryProtocol
from flashdeck.domain.common.value_objects import DeckId, UserId
from flashdeck.domain.learning.entities.deck import Deck, DeckDetails
from flashdeck.domain.learning.services.deck_quota_policy import DeckQuotaPolicy, Entitlements
from flashdeck.exceptions import DeckNotFoundError, QuotaExceededError

logger = structlog.get_logger(__name__)


class DeckManagementUseCase:
    """Use case for deck CRUD operations, including the free-tier deck quota."""

    def __init__(
        self,
        deck_repository: DeckRepositoryProtocol,
        quota_policy: DeckQuotaPolicy,
    ) -> None:
        """Initialize use case with repository protocol and quota policy."""
        self.deck_repository = deck_repository
        self.quota_policy = quota_policy

    def list_decks(self, user_id: str) -> list[tuple[Deck, int]]:
        """
        Get the user's decks with card counts, most recently updated first.

        Args:
            user_id: ID of the user

        Returns:
            List of (deck, card_count) tuples
        """
        return self.deck_repository.list_decks_with_card_counts(UserId(user_id))

    def get_deck(self, deck_id: int, user_id: str) -> Deck:
        """
        Get a single deck.

        Raises:
            DeckNotFoundError: If deck does not exist or is not owned by user
        """
        deck = self.deck_repository.get_deck(DeckId(deck_id), UserId(user_id))
        if deck is None:
            raise DeckNotFoundError(deck_id)
        return deck

    def create_deck(
        self,
        user_id: str,
        name: str,
        description: str | None,
        entitlements: Entitlements,
    ) -> Deck:
        """
        Create a new deck if the user's quota allows it.

        The deck count is read right before the insert. Two concurrent requests
        can still both pass the check, which lets a free user end up one deck
        over the cap; this is accepted as a soft limit.

        Args:
            user_id: ID of the user
            name: Deck name
            description: Optional deck description
            entitlements: Billing facts for the user

        Returns:
            Created deck domain entity

        Raises:
            ValidationError: If name or description is invalid
            QuotaExceededError: If the user may not own another deck
        """
        details = DeckDetails(name=name, description=description)
        user_id_vo = UserId(user_id)

        deck_count = self.deck_repository.count_decks(user_id_vo)
        if not self.quota_policy.can_create_deck(
            user_id_vo, deck_count, entitlements.unlimited_decks
        ):
            logger.info("deck_quota_exceeded", user_id=user_id, deck_count=deck_count)
            raise QuotaExceededError(self.quota_policy.limit)

        deck = self.deck_repository.create_deck(user_id_vo, details)

        logger.info("created_deck", deck_id=deck.id.value, user_id=user_id)
        return deck

    def update_deck(
        self, deck_id: int, user_id: str, name: str, description: str | None
    ) -> Deck:
        """
        Update a deck's name and description.

        Raises:
            ValidationError: If name or description is invalid
            DeckNotFoundError: If deck does not exist or is not owned by user
        """
        details = DeckDetails(name=name, description=description)
        deck = self.deck_repository.update_deck(DeckId(deck_id), UserId(user_id), details)

        logger.info("updated_deck", deck_id=deck_id)
        return deck

    def delete_deck(self, deck_id: int, user_id: str) -> None:
        """
        Delete a deck and all of its cards.

        Raises:
            DeckNotFoundError: If deck does not exist or is not owned by user
        """
        self.deck_repository.delete_deck(DeckId(deck_id), UserId(user_id))
        logger.info("deleted_deck", deck_id=deck_id)
