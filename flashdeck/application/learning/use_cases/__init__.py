from .card_generation_use_case import CardGenerationUseCase
from .card_management_use_case import CardManagementUseCase
from .deck_management_use_case import DeckManagementUseCase
from .study_session_use_case import StudySessionUseCase

__all__ = [
    "CardGenerationUseCase",
    "CardManagementUseCase",
    "DeckManagementUseCase",
    "StudySessionUseCase",
]
