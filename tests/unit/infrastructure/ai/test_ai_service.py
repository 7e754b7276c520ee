"""Tests for the pydantic-ai backed card generator."""

from unittest.mock import patch

import pytest
from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.models.test import TestModel as SchemaDrivenModel

from flashdeck.application.learning.protocols import GeneratedCard
from flashdeck.config import Settings
from flashdeck.infrastructure.ai.ai_model import build_model
from flashdeck.infrastructure.ai.ai_service import AIService


class TestAIService:
    @pytest.mark.asyncio
    async def test_generate_cards_returns_generated_cards(self) -> None:
        with patch(
            "flashdeck.infrastructure.ai.ai_agents.get_ai_model", return_value=SchemaDrivenModel()
        ):
            cards = await AIService().generate_cards("Python. Context: closures", 3)

        assert all(isinstance(card, GeneratedCard) for card in cards)


class TestGetModel:
    def test_no_provider_configured(self) -> None:
        with pytest.raises(RuntimeError):
            build_model(Settings())

    def test_provider_requires_model_name(self) -> None:
        with pytest.raises(ValueError, match="AI_MODEL_NAME is required"):
            Settings(AI_PROVIDER="anthropic", ANTHROPIC_API_KEY="test")

    def test_openai_provider(self) -> None:
        settings = Settings(
            AI_PROVIDER="openai", AI_MODEL_NAME="gpt-4o-mini", OPENAI_API_KEY="test"
        )

        assert isinstance(build_model(settings), OpenAIChatModel)
