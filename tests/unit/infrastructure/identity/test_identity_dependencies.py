"""Tests for the identity header dependency."""

import pytest
from fastapi import HTTPException

from flashdeck.infrastructure.identity.dependencies import get_current_user, parse_features


class TestParseFeatures:
    def test_splits_and_strips(self) -> None:
        assert parse_features(" unlimited_decks , ai_flashcard_generation,") == frozenset(
            {"unlimited_decks", "ai_flashcard_generation"}
        )

    @pytest.mark.parametrize("raw", [None, "", " , "])
    def test_empty(self, raw: str | None) -> None:
        assert parse_features(raw) == frozenset()


class TestGetCurrentUser:
    @pytest.mark.asyncio
    async def test_builds_entitlements(self) -> None:
        user = await get_current_user("user_1", "ai_flashcard_generation")

        assert user.id == "user_1"
        assert user.entitlements.ai_card_generation is True
        assert user.entitlements.unlimited_decks is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize("user_id", [None, "", "   "])
    async def test_missing_user_id(self, user_id: str | None) -> None:
        with pytest.raises(HTTPException) as exc_info:
            await get_current_user(user_id, None)

        assert exc_info.value.status_code == 401
