from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from flashdeck.application.learning.use_cases.card_generation_use_case import (
    CardGenerationUseCase,
)
from flashdeck.application.learning.use_cases.card_management_use_case import (
    CardManagementUseCase,
)
from flashdeck.application.learning.use_cases.deck_management_use_case import (
    DeckManagementUseCase,
)
from flashdeck.application.learning.use_cases.study_session_use_case import StudySessionUseCase
from flashdeck.domain.learning.services.deck_quota_policy import DeckQuotaPolicy
from flashdeck.infrastructure.ai.ai_service import AIService
from flashdeck.infrastructure.learning.repositories import CardRepository, DeckRepository


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    # Repositories
    deck_repository = providers.Factory(DeckRepository, db=db)
    card_repository = providers.Factory(CardRepository, db=db)

    # Domain services (pure domain logic, no db)
    deck_quota_policy = providers.Singleton(DeckQuotaPolicy)

    # External services
    card_generator = providers.Singleton(AIService)

    # Learning module use cases
    deck_management_use_case = providers.Factory(
        DeckManagementUseCase,
        deck_repository=deck_repository,
        quota_policy=deck_quota_policy,
    )

    card_management_use_case = providers.Factory(
        CardManagementUseCase,
        card_repository=card_repository,
    )

    card_generation_use_case = providers.Factory(
        CardGenerationUseCase,
        deck_repository=deck_repository,
        card_repository=card_repository,
        card_generator=card_generator,
    )

    study_session_use_case = providers.Factory(
        StudySessionUseCase,
        card_repository=card_repository,
    )


# Initialize container
container = Container()
