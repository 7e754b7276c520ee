"""
FastAPI dependencies for the acting user's identity.

Tokens are verified upstream by the authentication provider's gateway, which
forwards the verified user ID and the user's billing features as headers.
Nothing here re-validates them.
"""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Header

from flashdeck.domain.common.exceptions import ValidationError
from flashdeck.domain.common.value_objects import UserId
from flashdeck.domain.learning.services.deck_quota_policy import Entitlements
from flashdeck.exceptions import CredentialsException

USER_ID_HEADER = "X-User-Id"
USER_FEATURES_HEADER = "X-User-Features"


@dataclass(frozen=True)
class CurrentUser:
    """Verified identity and entitlements of the caller."""

    id: str
    entitlements: Entitlements


def parse_features(raw: str | None) -> frozenset[str]:
    """Split a comma separated feature header into feature keys."""
    if not raw:
        return frozenset()
    return frozenset(feature.strip() for feature in raw.split(",") if feature.strip())


async def get_current_user(
    x_user_id: Annotated[str | None, Header(alias=USER_ID_HEADER)] = None,
    x_user_features: Annotated[str | None, Header(alias=USER_FEATURES_HEADER)] = None,
) -> CurrentUser:
    """
    Get the current user from the trusted identity headers.

    Raises:
        CredentialsException: If no usable user ID was forwarded
    """
    if x_user_id is None:
        raise CredentialsException
    try:
        user_id = UserId(x_user_id)
    except ValidationError:
        raise CredentialsException from None

    return CurrentUser(
        id=user_id.value,
        entitlements=Entitlements.from_features(parse_features(x_user_features)),
    )
