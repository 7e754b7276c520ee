"""Use case for starting a study session over a deck."""

import random

import structlog

from flashdeck.application.learning.protocols.card_repository import CardRepositoryProtocol
from flashdeck.domain.common.value_objects import DeckId, UserId
from flashdeck.domain.learning.services.study_session import StudySession
from flashdeck.exceptions import DeckNotFoundError

logger = structlog.get_logger(__name__)


class StudySessionUseCase:
    """Loads a deck's cards once and hands them to a new study session."""

    def __init__(self, card_repository: CardRepositoryProtocol) -> None:
        """Initialize use case with repository protocol."""
        self.card_repository = card_repository

    def start_session(
        self,
        deck_id: int,
        user_id: str,
        shuffle: bool = False,
        rng: random.Random | None = None,
    ) -> StudySession:
        """
        Start a study session.

        The session works on a snapshot; later edits to the deck are not
        reflected until a new session is started.

        Args:
            deck_id: ID of the deck to study
            user_id: ID of the user
            shuffle: Start in a random order
            rng: Random source for shuffling

        Returns:
            A fresh study session

        Raises:
            DeckNotFoundError: If deck does not exist or is not owned by user
            EmptyStudySessionError: If the deck has no cards
        """
        cards = self.card_repository.list_cards(DeckId(deck_id), UserId(user_id))
        if cards is None:
            raise DeckNotFoundError(deck_id)

        session = StudySession(cards, rng=rng)
        if shuffle:
            session.shuffle()

        logger.info("started_study_session", deck_id=deck_id, card_count=session.total)
        return session
