"""API routes for card management."""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from flashdeck.application.learning.use_cases.card_management_use_case import (
    CardManagementUseCase,
)
from flashdeck.core import container
from flashdeck.domain.common.exceptions import DomainError
from flashdeck.exceptions import FlashdeckError
from flashdeck.infrastructure.common.di import inject_use_case
from flashdeck.infrastructure.common.schemas import SuccessResponse
from flashdeck.infrastructure.identity.dependencies import CurrentUser, get_current_user
from flashdeck.infrastructure.learning.schemas import (
    Card,
    CardResponse,
    CardUpdateRequest,
    CardWithDeckName,
    UserCardsListResponse,
)

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/cards", tags=["cards"])


@router.get("", response_model=UserCardsListResponse, status_code=status.HTTP_200_OK)
def list_cards(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    use_case: CardManagementUseCase = Depends(
        inject_use_case(container.card_management_use_case)
    ),
) -> UserCardsListResponse:
    """Get every card in every deck the user owns, with its deck name."""
    try:
        items = use_case.list_user_cards(current_user.id)
        cards = [
            CardWithDeckName(**Card.from_entity(card).model_dump(), deck_name=deck_name)
            for card, deck_name in items
        ]
        return UserCardsListResponse(cards=cards)
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error("failed_to_list_cards", error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/{card_id}", response_model=CardResponse, status_code=status.HTTP_200_OK)
def get_card(
    card_id: int,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    use_case: CardManagementUseCase = Depends(
        inject_use_case(container.card_management_use_case)
    ),
) -> CardResponse:
    """Get a single card."""
    try:
        card = use_case.get_card(card_id, current_user.id)
        return CardResponse(success=True, message="Card found", card=Card.from_entity(card))
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error("failed_to_get_card", card_id=card_id, error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.put("/{card_id}", response_model=CardResponse, status_code=status.HTTP_200_OK)
def update_card(
    card_id: int,
    request: CardUpdateRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    use_case: CardManagementUseCase = Depends(
        inject_use_case(container.card_management_use_case)
    ),
) -> CardResponse:
    """
    Update a card's question and answer.

    Args:
        card_id: ID of the card to update
        request: Request containing updated question and answer
        use_case: CardManagementUseCase injected via dependency container

    Returns:
        Updated card

    Raises:
        HTTPException: If card not found or update fails
    """
    try:
        card = use_case.update_card(
            card_id=card_id,
            user_id=current_user.id,
            front=request.front,
            back=request.back,
        )
        return CardResponse(
            success=True,
            message="Card updated successfully",
            card=Card.from_entity(card),
        )
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error("failed_to_update_card", card_id=card_id, error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.delete("/{card_id}", response_model=SuccessResponse, status_code=status.HTTP_200_OK)
def delete_card(
    card_id: int,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    use_case: CardManagementUseCase = Depends(
        inject_use_case(container.card_management_use_case)
    ),
) -> SuccessResponse:
    """
    Delete a card.

    Raises:
        HTTPException: If card not found or deletion fails
    """
    try:
        use_case.delete_card(card_id, current_user.id)
        return SuccessResponse(success=True, message="Card deleted successfully")
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error("failed_to_delete_card", card_id=card_id, error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
