from .deck_quota_policy import DeckQuotaPolicy, Entitlements
from .study_session import StudyScore, StudySession

__all__ = [
    "DeckQuotaPolicy",
    "Entitlements",
    "StudyScore",
    "StudySession",
]
