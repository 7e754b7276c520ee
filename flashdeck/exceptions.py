"""Custom exception hierarchy for flashdeck application."""

from fastapi import HTTPException
from starlette import status


class FlashdeckError(Exception):
    """Base exception for all flashdeck errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(FlashdeckError):
    """
    Resource not found, or not owned by the caller.

    The two cases are deliberately indistinguishable so that the existence of
    other users' data never leaks.
    """

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class DeckNotFoundError(NotFoundError):
    """Deck not found or not owned by the caller."""

    def __init__(self, deck_id: int | None = None) -> None:
        """Initialize with deck ID."""
        self.deck_id = deck_id
        super().__init__("Deck not found or unauthorized")


class CardNotFoundError(NotFoundError):
    """Card not found or its deck is not owned by the caller."""

    def __init__(self, card_id: int | None = None) -> None:
        """Initialize with card ID."""
        self.card_id = card_id
        super().__init__("Card not found or unauthorized")


class QuotaExceededError(FlashdeckError):
    """The user reached the deck limit of the free tier."""

    def __init__(self, limit: int) -> None:
        """Initialize with the limit that was hit."""
        self.limit = limit
        super().__init__(
            "Deck limit reached. Upgrade to Pro for unlimited decks.",
            status_code=403,
        )


class PremiumFeatureError(FlashdeckError):
    """The user lacks the entitlement for a paid feature."""

    def __init__(self, feature: str, message: str) -> None:
        """Initialize with the missing feature key."""
        self.feature = feature
        super().__init__(message, status_code=403)


class ExternalServiceError(FlashdeckError):
    """An external collaborator (e.g. the card generator) failed or misbehaved."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 502 status code."""
        super().__init__(message, status_code=502)


class FeatureDisabledError(FlashdeckError):
    """A server-level feature is switched off by configuration."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 410 status code."""
        super().__init__(message, status_code=410)


CredentialsException = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Could not validate credentials",
)
