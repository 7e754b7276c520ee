from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class GeneratedCard:
    front: str
    back: str


class CardGeneratorProtocol(Protocol):
    async def generate_cards(self, topic: str, count: int) -> list[GeneratedCard]: ...
