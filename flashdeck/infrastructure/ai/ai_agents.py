from pydantic import BaseModel
from pydantic_ai import Agent

from flashdeck.infrastructure.ai.ai_model import get_ai_model


class CardSuggestion(BaseModel):
    front: str
    back: str


def get_card_generation_agent() -> Agent[None, list[CardSuggestion]]:
    return Agent(
        get_ai_model(),
        output_type=list[CardSuggestion],
        instructions="""
        Generate study flashcards about the topic the user gives you.

        Requirements:
        - Create clear, concise questions for the front of each card
        - Provide accurate, helpful answers for the back of each card
        - Focus on key concepts and important details
        - Ensure questions are appropriate for study and memorization
        - Make each flashcard unique and valuable for learning
        - Vary the types of questions (definitions, explanations, applications, etc.)
        - Keep questions focused and answers comprehensive but concise
        - Keep each side under 1000 characters

        Format output into a list of cards where:
        front: [Standalone question]
        back: [Precise answer]
        """,
    )
