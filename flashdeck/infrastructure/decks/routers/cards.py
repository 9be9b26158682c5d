"""Endpoints for individual cards."""

import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from flashdeck.application.decks.card_actions import CardActions
from flashdeck.core import container
from flashdeck.exceptions import FlashdeckError
from flashdeck.infrastructure.common.di import inject_use_case
from flashdeck.infrastructure.common.results import unwrap_or_raise
from flashdeck.infrastructure.common.schemas import SuccessResponse
from flashdeck.infrastructure.decks.schemas import (
    Card,
    CardResponse,
    CardUpdateRequest,
    CardUpdateResponse,
)
from flashdeck.infrastructure.identity.dependencies import CurrentCaller

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/cards", tags=["cards"])


@router.get("/{card_id}", response_model=CardResponse, status_code=status.HTTP_200_OK)
def get_card(
    card_id: int,
    caller: CurrentCaller,
    use_case: CardActions = Depends(inject_use_case(container.card_actions)),
) -> CardResponse:
    card = unwrap_or_raise(use_case.get_card(caller, card_id))
    if card is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Card not found")
    return CardResponse(card=Card.model_validate(card))


@router.put("/{card_id}", response_model=CardUpdateResponse, status_code=status.HTTP_200_OK)
def update_card(
    card_id: int,
    request: CardUpdateRequest,
    caller: CurrentCaller,
    use_case: CardActions = Depends(inject_use_case(container.card_actions)),
) -> CardUpdateResponse:
    """
    Update the front and/or back of a card.

    Args:
        card_id: ID of the card to update
        request: Sides to change
        caller: Resolved caller identity
        use_case: CardActions injected via dependency container

    Returns:
        Updated card

    Raises:
        HTTPException: If the card is not the caller's or validation fails
    """
    try:
        data = {"card_id": card_id, **request.model_dump(exclude_unset=True)}
        card = unwrap_or_raise(use_case.update_card(caller, data))
        return CardUpdateResponse(
            success=True,
            message="Card updated successfully",
            card=Card.model_validate(card),
        )
    except (HTTPException, FlashdeckError):
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
    caller: CurrentCaller,
    use_case: CardActions = Depends(inject_use_case(container.card_actions)),
) -> SuccessResponse:
    unwrap_or_raise(use_case.delete_card(caller, {"card_id": card_id}))
    return SuccessResponse(success=True, message="Card deleted successfully")
