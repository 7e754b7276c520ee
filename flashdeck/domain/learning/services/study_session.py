"""
Study session state machine.

A study session walks through one snapshot of a deck's cards. It never talks
to the database: the caller loads the cards once and drives the session
through its transitions (flip, next, previous, shuffle, restart and the two
marking actions). Completion and score are derived views, not states, so the
session stays fully interactive after the last card has been answered.
"""

import random
from collections.abc import Sequence
from dataclasses import dataclass

from flashdeck.domain.common.exceptions import ValidationError
from flashdeck.domain.common.value_objects import CardId
from flashdeck.domain.learning.entities.card import Card
from flashdeck.domain.learning.exceptions import EmptyStudySessionError


@dataclass(frozen=True)
class StudyScore:
    """Score of a session at a point in time."""

    correct: int
    incorrect: int
    unanswered: int
    total: int


class StudySession:
    """
    In-memory review of a deck's cards.

    Marking a card that was already marked overwrites the earlier answer, so
    ``correct + incorrect`` never exceeds the number of cards.
    """

    def __init__(self, cards: Sequence[Card], rng: random.Random | None = None) -> None:
        """
        Start a session over a snapshot of cards.

        Args:
            cards: Cards in the order they were loaded; must not be empty
            rng: Random source for shuffling (defaults to a fresh ``random.Random``)

        Raises:
            EmptyStudySessionError: If ``cards`` is empty
            ValidationError: If two cards share an id
        """
        if not cards:
            raise EmptyStudySessionError()

        self._cards: dict[CardId, Card] = {card.id: card for card in cards}
        if len(self._cards) != len(cards):
            raise ValidationError("Study session cards must have distinct ids", field="cards")
        self._snapshot_order: tuple[CardId, ...] = tuple(card.id for card in cards)
        self._rng = rng or random.Random()

        self.order: tuple[CardId, ...] = self._snapshot_order
        self.position = 0
        self.revealed = False
        self.is_shuffled = False
        self._answers: dict[CardId, bool] = {}

    # --- derived views ---

    @property
    def total(self) -> int:
        return len(self.order)

    @property
    def current_card(self) -> Card:
        return self._cards[self.order[self.position]]

    @property
    def correct(self) -> int:
        return sum(1 for answer in self._answers.values() if answer)

    @property
    def incorrect(self) -> int:
        return sum(1 for answer in self._answers.values() if not answer)

    @property
    def is_first(self) -> bool:
        return self.position == 0

    @property
    def is_last(self) -> bool:
        return self.position == self.total - 1

    @property
    def is_complete(self) -> bool:
        """The last card is showing its answer."""
        return self.is_last and self.revealed

    @property
    def progress(self) -> float:
        """Percentage of cards reached so far."""
        return (self.position + 1) / self.total * 100

    @property
    def score(self) -> StudyScore:
        correct = self.correct
        incorrect = self.incorrect
        return StudyScore(
            correct=correct,
            incorrect=incorrect,
            unanswered=self.total - correct - incorrect,
            total=self.total,
        )

    def answer_for(self, card_id: CardId) -> bool | None:
        """Recorded answer for a card: True, False, or None if not marked."""
        return self._answers.get(card_id)

    # --- transitions ---

    def flip(self) -> None:
        self.revealed = not self.revealed

    def next(self) -> None:
        """Move to the next card, staying on the last one at the end."""
        if self.position < self.total - 1:
            self.position += 1
            self.revealed = False

    def previous(self) -> None:
        """Move to the previous card, staying on the first one at the start."""
        if self.position > 0:
            self.position -= 1
            self.revealed = False

    def shuffle(self) -> None:
        """Start over in a random order of the complete snapshot."""
        order = list(self._snapshot_order)
        self._rng.shuffle(order)
        self._reset(tuple(order))
        self.is_shuffled = True

    def restart(self) -> None:
        """Start over in the original order."""
        self._reset(self._snapshot_order)
        self.is_shuffled = False

    def mark_correct(self) -> None:
        """
        Record the current card as answered correctly and advance.

        Precondition: the answer has been revealed. Not enforced; the review
        screen only offers marking after a flip.
        """
        self._mark(True)

    def mark_incorrect(self) -> None:
        """
        Record the current card as answered incorrectly and advance.

        Precondition: the answer has been revealed (see ``mark_correct``).
        """
        self._mark(False)

    def _mark(self, correct: bool) -> None:
        self._answers[self.order[self.position]] = correct
        self.next()

    def _reset(self, order: tuple[CardId, ...]) -> None:
        self.order = order
        self.position = 0
        self.revealed = False
        self._answers = {}
