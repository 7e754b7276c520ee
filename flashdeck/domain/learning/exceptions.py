"""Learning module domain exceptions."""

from flashdeck.domain.common.exceptions import DomainError


class EmptyStudySessionError(DomainError):
    """Raised when a study session is started over a deck with no cards."""

    def __init__(self) -> None:
        super().__init__("Cannot study a deck without cards")
