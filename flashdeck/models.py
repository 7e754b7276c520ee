"""Database models."""

from datetime import UTC, datetime

from sqlalchemy import DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from flashdeck.database import Base


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(UTC)


class Deck(Base):
    """Deck model: a named collection of cards owned by one user."""

    __tablename__ = "decks"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, nullable=False
    )

    cards: Mapped[list["Card"]] = relationship(
        back_populates="deck",
        passive_deletes="all",
    )

    def __repr__(self) -> str:
        """String representation of Deck."""
        return f"<Deck(id={self.id}, name='{self.name}')>"


class Card(Base):
    """Card model: a front/back question-answer pair belonging to a deck."""

    __tablename__ = "cards"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    deck_id: Mapped[int] = mapped_column(
        ForeignKey("decks.id", ondelete="CASCADE"), nullable=False, index=True
    )
    front: Mapped[str] = mapped_column(Text, nullable=False)
    back: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, nullable=False
    )

    deck: Mapped[Deck] = relationship(back_populates="cards")

    def __repr__(self) -> str:
        """String representation of Card."""
        return f"<Card(id={self.id}, front='{self.front[:50]}...')>"
