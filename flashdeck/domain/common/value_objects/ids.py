from dataclasses import dataclass

from ..entity import EntityId
from ..exceptions import ValidationError

MAX_USER_ID_LENGTH = 255


@dataclass(frozen=True)
class UserId(EntityId):
    """
    Opaque user identifier issued by the authentication provider.

    Only compared for equality; never created or interpreted here.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValidationError("UserId must be a non-empty string", field="user_id")
        if len(self.value) > MAX_USER_ID_LENGTH:
            raise ValidationError(
                f"UserId must be at most {MAX_USER_ID_LENGTH} characters", field="user_id"
            )


@dataclass(frozen=True)
class DeckId(EntityId):
    """Strongly-typed deck identifier."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValidationError("DeckId must be non-negative", field="deck_id")

    @classmethod
    def generate(cls) -> "DeckId":
        return cls(0)  # Database assigns real ID


@dataclass(frozen=True)
class CardId(EntityId):
    """Strongly-typed card identifier."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValidationError("CardId must be non-negative", field="card_id")

    @classmethod
    def generate(cls) -> "CardId":
        return cls(0)  # Database assigns real ID
