"""FastAPI route guards."""

from collections.abc import Awaitable, Callable
from functools import wraps
from typing import ParamSpec, TypeVar

import structlog

from flashdeck.config import get_settings
from flashdeck.exceptions import FeatureDisabledError

P = ParamSpec("P")
R = TypeVar("R")

logger = structlog.get_logger(__name__)


def require_ai_enabled(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
    """
    Guard an async endpoint that needs an AI provider.

    Responds with 410 Gone when the server runs without AI settings, before
    the endpoint body (and its generator call) runs.
    """

    @wraps(func)
    async def guarded(*args: P.args, **kwargs: P.kwargs) -> R:
        if not get_settings().ai_enabled:
            logger.info("ai_endpoint_disabled", endpoint=func.__name__)
            raise FeatureDisabledError("AI features are not enabled on this server")
        return await func(*args, **kwargs)

    return guarded
