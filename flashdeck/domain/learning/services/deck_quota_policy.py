"""Domain policy deciding whether a user may create another deck."""

from dataclasses import dataclass

from flashdeck.constants import (
    AI_CARD_GENERATION_FEATURE,
    FREE_DECK_LIMIT,
    UNLIMITED_DECKS_FEATURE,
)
from flashdeck.domain.common.value_object import ValueObject
from flashdeck.domain.common.value_objects import UserId


@dataclass(frozen=True)
class Entitlements(ValueObject):
    """Billing facts about the acting user, supplied by the authentication provider."""

    unlimited_decks: bool = False
    ai_card_generation: bool = False

    @classmethod
    def from_features(cls, features: set[str] | frozenset[str]) -> "Entitlements":
        """Build entitlements from the provider's feature keys."""
        return cls(
            unlimited_decks=UNLIMITED_DECKS_FEATURE in features,
            ai_card_generation=AI_CARD_GENERATION_FEATURE in features,
        )


class DeckQuotaPolicy:
    """
    Stateless policy for the free-tier deck cap.

    Counting is the repository's job and entitlement resolution belongs to the
    billing provider; both arrive here as plain parameters.
    """

    limit: int = FREE_DECK_LIMIT

    def can_create_deck(
        self,
        user_id: UserId,
        current_deck_count: int,
        has_unlimited_entitlement: bool,
    ) -> bool:
        """
        Decide whether the user may create one more deck.

        Args:
            user_id: The acting user
            current_deck_count: Number of decks the user owns right now
            has_unlimited_entitlement: Whether the user is exempt from the cap

        Returns:
            True if entitled or below the cap
        """
        return has_unlimited_entitlement or current_deck_count < self.limit
