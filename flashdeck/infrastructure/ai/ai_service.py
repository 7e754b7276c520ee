from flashdeck.application.learning.protocols.card_generator import GeneratedCard
from flashdeck.infrastructure.ai.ai_agents import get_card_generation_agent


class AIService:
    async def generate_cards(self, topic: str, count: int) -> list[GeneratedCard]:
        agent = get_card_generation_agent()
        result = await agent.run(f"Generate exactly {count} flashcards about: {topic}")
        return [GeneratedCard(front=s.front, back=s.back) for s in result.output]
