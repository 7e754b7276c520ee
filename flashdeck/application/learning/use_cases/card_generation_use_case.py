"""Use case for generating cards with an external AI generator."""

import structlog

from flashdeck.application.learning.protocols.card_generator import CardGeneratorProtocol
from flashdeck.application.learning.protocols.card_repository import CardRepositoryProtocol
from flashdeck.application.learning.protocols.deck_repository import DeckRepositoryProtocol
from flashdeck.constants import (
    AI_CARD_GENERATION_FEATURE,
    MAX_GENERATED_CARDS,
    MIN_GENERATED_CARDS,
)
from flashdeck.domain.common.exceptions import ValidationError
from flashdeck.domain.common.value_objects import DeckId, UserId
from flashdeck.domain.learning.entities.card import Card, CardContent
from flashdeck.domain.learning.entities.deck import Deck
from flashdeck.domain.learning.services.deck_quota_policy import Entitlements
from flashdeck.exceptions import DeckNotFoundError, ExternalServiceError, PremiumFeatureError

logger = structlog.get_logger(__name__)


def build_topic(deck: Deck) -> str:
    """Topic handed to the generator: the deck name plus its description as context."""
    return f"{deck.name}. Context: {deck.description}"


class CardGenerationUseCase:
    """Use case for filling a deck with AI-generated cards."""

    def __init__(
        self,
        deck_repository: DeckRepositoryProtocol,
        card_repository: CardRepositoryProtocol,
        card_generator: CardGeneratorProtocol,
    ) -> None:
        """Initialize use case with repository protocols and the generator."""
        self.deck_repository = deck_repository
        self.card_repository = card_repository
        self.card_generator = card_generator

    async def generate_cards(
        self,
        deck_id: int,
        user_id: str,
        entitlements: Entitlements,
        count: int = MAX_GENERATED_CARDS,
    ) -> list[Card]:
        """
        Generate cards for a deck and store them.

        The generator's output is untrusted: every candidate goes through the
        same validation as a manually entered card, and one bad candidate
        rejects the whole batch.

        Args:
            deck_id: ID of the deck to fill
            user_id: ID of the user
            entitlements: Billing facts for the user
            count: Number of cards to request

        Returns:
            Created card domain entities

        Raises:
            PremiumFeatureError: If the user is not entitled to AI generation
            ValidationError: If count is out of range or the deck has no description
            DeckNotFoundError: If deck does not exist or is not owned by user
            ExternalServiceError: If the generator fails or returns malformed cards
        """
        if not entitlements.ai_card_generation:
            raise PremiumFeatureError(
                AI_CARD_GENERATION_FEATURE,
                "AI flashcard generation is only available for Pro subscribers.",
            )
        if not MIN_GENERATED_CARDS <= count <= MAX_GENERATED_CARDS:
            raise ValidationError(
                f"Card count must be between {MIN_GENERATED_CARDS} and {MAX_GENERATED_CARDS}",
                field="count",
                value=count,
            )

        deck_id_vo = DeckId(deck_id)
        user_id_vo = UserId(user_id)

        deck = self.deck_repository.get_deck(deck_id_vo, user_id_vo)
        if deck is None:
            raise DeckNotFoundError(deck_id)
        if not deck.details.has_description:
            raise ValidationError(
                "Please add a description to your deck first. "
                "AI needs context to generate relevant flashcards.",
                field="description",
            )

        try:
            generated = await self.card_generator.generate_cards(build_topic(deck), count)
        except Exception as e:
            logger.error("card_generation_failed", deck_id=deck_id, error=str(e), exc_info=True)
            reason = str(e).lower()
            if "rate limit" in reason:
                raise ExternalServiceError(
                    "AI service is temporarily busy. Please try again in a moment."
                ) from e
            if "api key" in reason:
                raise ExternalServiceError(
                    "AI service configuration error. Please contact support."
                ) from e
            raise ExternalServiceError("Failed to generate flashcards. Please try again.") from e

        try:
            contents = [CardContent(front=card.front, back=card.back) for card in generated]
        except ValidationError as e:
            logger.warning("card_generation_malformed_output", deck_id=deck_id, error=e.message)
            raise ExternalServiceError("AI service returned malformed flashcards.") from e

        cards = self.card_repository.create_cards(deck_id_vo, user_id_vo, contents)

        logger.info("generated_cards", deck_id=deck_id, card_count=len(cards))
        return cards
