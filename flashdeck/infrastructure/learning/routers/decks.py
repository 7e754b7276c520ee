"""API routes for deck management and the cards inside a deck."""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from flashdeck.application.learning.use_cases.card_generation_use_case import (
    CardGenerationUseCase,
)
from flashdeck.application.learning.use_cases.card_management_use_case import (
    CardManagementUseCase,
)
from flashdeck.application.learning.use_cases.deck_management_use_case import (
    DeckManagementUseCase,
)
from flashdeck.core import container
from flashdeck.domain.common.exceptions import DomainError
from flashdeck.exceptions import FlashdeckError
from flashdeck.infrastructure.common.dependencies import require_ai_enabled
from flashdeck.infrastructure.common.di import inject_use_case
from flashdeck.infrastructure.common.schemas import SuccessResponse
from flashdeck.infrastructure.identity.dependencies import CurrentUser, get_current_user
from flashdeck.infrastructure.learning.schemas import (
    Card,
    CardCreateRequest,
    CardGenerateRequest,
    CardGenerateResponse,
    CardResponse,
    CardsListResponse,
    Deck,
    DeckCreateRequest,
    DeckResponse,
    DecksListResponse,
    DeckUpdateRequest,
    DeckWithCardCount,
)

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/decks", tags=["decks"])

UNEXPECTED_ERROR = "An unexpected error occurred. Please try again later."


@router.get("", response_model=DecksListResponse, status_code=status.HTTP_200_OK)
def list_decks(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    use_case: DeckManagementUseCase = Depends(
        inject_use_case(container.deck_management_use_case)
    ),
) -> DecksListResponse:
    """
    List the user's decks with their card counts, most recently updated first.

    Returns:
        DecksListResponse with decks
    """
    try:
        items = use_case.list_decks(current_user.id)
        decks = [
            DeckWithCardCount(**Deck.from_entity(deck).model_dump(), card_count=card_count)
            for deck, card_count in items
        ]
        return DecksListResponse(decks=decks)
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error("failed_to_list_decks", error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.post("", response_model=DeckResponse, status_code=status.HTTP_201_CREATED)
def create_deck(
    request: DeckCreateRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    use_case: DeckManagementUseCase = Depends(
        inject_use_case(container.deck_management_use_case)
    ),
) -> DeckResponse:
    """
    Create a deck.

    Free users may own at most three decks; the unlimited decks entitlement
    lifts the cap.

    Raises:
        HTTPException: 403 if the deck limit is reached
    """
    try:
        deck = use_case.create_deck(
            user_id=current_user.id,
            name=request.name,
            description=request.description,
            entitlements=current_user.entitlements,
        )
        return DeckResponse(
            success=True,
            message="Deck created successfully",
            deck=Deck.from_entity(deck),
        )
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error("failed_to_create_deck", error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.get("/{deck_id}", response_model=DeckResponse, status_code=status.HTTP_200_OK)
def get_deck(
    deck_id: int,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    use_case: DeckManagementUseCase = Depends(
        inject_use_case(container.deck_management_use_case)
    ),
) -> DeckResponse:
    """Get a single deck."""
    try:
        deck = use_case.get_deck(deck_id, current_user.id)
        return DeckResponse(success=True, message="Deck found", deck=Deck.from_entity(deck))
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error("failed_to_get_deck", deck_id=deck_id, error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.put("/{deck_id}", response_model=DeckResponse, status_code=status.HTTP_200_OK)
def update_deck(
    deck_id: int,
    request: DeckUpdateRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    use_case: DeckManagementUseCase = Depends(
        inject_use_case(container.deck_management_use_case)
    ),
) -> DeckResponse:
    """
    Update a deck's name and description.

    Args:
        deck_id: ID of the deck to update
        request: Request containing the new name and description
        use_case: DeckManagementUseCase injected via dependency container

    Returns:
        Updated deck
    """
    try:
        deck = use_case.update_deck(
            deck_id=deck_id,
            user_id=current_user.id,
            name=request.name,
            description=request.description,
        )
        return DeckResponse(
            success=True,
            message="Deck updated successfully",
            deck=Deck.from_entity(deck),
        )
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error("failed_to_update_deck", deck_id=deck_id, error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.delete("/{deck_id}", response_model=SuccessResponse, status_code=status.HTTP_200_OK)
def delete_deck(
    deck_id: int,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    use_case: DeckManagementUseCase = Depends(
        inject_use_case(container.deck_management_use_case)
    ),
) -> SuccessResponse:
    """Delete a deck together with all of its cards."""
    try:
        use_case.delete_deck(deck_id, current_user.id)
        return SuccessResponse(success=True, message="Deck deleted successfully")
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error("failed_to_delete_deck", deck_id=deck_id, error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.get(
    "/{deck_id}/cards", response_model=CardsListResponse, status_code=status.HTTP_200_OK
)
def list_deck_cards(
    deck_id: int,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    use_case: CardManagementUseCase = Depends(
        inject_use_case(container.card_management_use_case)
    ),
) -> CardsListResponse:
    """Get all cards of a deck, most recently updated first."""
    try:
        cards = use_case.list_cards(deck_id, current_user.id)
        return CardsListResponse(cards=[Card.from_entity(card) for card in cards])
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error("failed_to_list_deck_cards", deck_id=deck_id, error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.post(
    "/{deck_id}/cards", response_model=CardResponse, status_code=status.HTTP_201_CREATED
)
def create_card(
    deck_id: int,
    request: CardCreateRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    use_case: CardManagementUseCase = Depends(
        inject_use_case(container.card_management_use_case)
    ),
) -> CardResponse:
    """
    Create a card in a deck.

    Args:
        deck_id: ID of the deck
        request: Request containing question and answer
        use_case: CardManagementUseCase injected via dependency container

    Returns:
        Created card
    """
    try:
        card = use_case.create_card(
            deck_id=deck_id,
            user_id=current_user.id,
            front=request.front,
            back=request.back,
        )
        return CardResponse(
            success=True,
            message="Card created successfully",
            card=Card.from_entity(card),
        )
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error("failed_to_create_card", deck_id=deck_id, error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.delete(
    "/{deck_id}/cards", response_model=SuccessResponse, status_code=status.HTTP_200_OK
)
def delete_deck_cards(
    deck_id: int,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    use_case: CardManagementUseCase = Depends(
        inject_use_case(container.card_management_use_case)
    ),
) -> SuccessResponse:
    """Delete every card in a deck, keeping the deck itself."""
    try:
        use_case.delete_all_cards(deck_id, current_user.id)
        return SuccessResponse(success=True, message="All cards deleted")
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error("failed_to_delete_deck_cards", deck_id=deck_id, error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.post(
    "/{deck_id}/cards/generate",
    response_model=CardGenerateResponse,
    status_code=status.HTTP_201_CREATED,
)
@require_ai_enabled
async def generate_cards(
    deck_id: int,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    request: CardGenerateRequest | None = None,
    use_case: CardGenerationUseCase = Depends(
        inject_use_case(container.card_generation_use_case)
    ),
) -> CardGenerateResponse:
    """
    Generate cards for a deck with AI and store them.

    Requires the AI flashcard generation entitlement and a deck description
    to use as context.
    """
    count = request.count if request is not None else CardGenerateRequest().count
    try:
        cards = await use_case.generate_cards(
            deck_id=deck_id,
            user_id=current_user.id,
            entitlements=current_user.entitlements,
            count=count,
        )
        return CardGenerateResponse(
            success=True,
            message=f"Generated {len(cards)} flashcards",
            count=len(cards),
            cards=[Card.from_entity(card) for card in cards],
        )
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error("failed_to_generate_cards", deck_id=deck_id, error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e
