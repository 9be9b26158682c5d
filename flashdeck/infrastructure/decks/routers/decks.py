"""Deck endpoints."""

import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from flashdeck.application.decks.deck_actions import DeckActions
from flashdeck.core import container
from flashdeck.exceptions import FlashdeckError
from flashdeck.infrastructure.common.di import inject_use_case
from flashdeck.infrastructure.common.results import unwrap_or_raise
from flashdeck.infrastructure.common.schemas import SuccessResponse
from flashdeck.infrastructure.decks.schemas import (
    Deck,
    DeckCreateRequest,
    DeckCreateResponse,
    DeckQuotaResponse,
    DeckResponse,
    DecksListResponse,
    DeckUpdateRequest,
    DeckUpdateResponse,
    DeckWithCardCount,
)
from flashdeck.infrastructure.identity.dependencies import CurrentCaller

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/decks", tags=["decks"])

UNEXPECTED_ERROR = "An unexpected error occurred. Please try again later."


@router.get("", response_model=DecksListResponse, status_code=status.HTTP_200_OK)
def list_decks(
    caller: CurrentCaller,
    use_case: DeckActions = Depends(inject_use_case(container.deck_actions)),
) -> DecksListResponse:
    """
    Get the caller's decks with card counts.

    Decks are ordered by last update, newest first.
    """
    try:
        rows = unwrap_or_raise(use_case.list_decks(caller))
        return DecksListResponse(
            decks=[
                DeckWithCardCount(**Deck.model_validate(deck).model_dump(), card_count=count)
                for deck, count in rows
            ]
        )
    except (HTTPException, FlashdeckError):
        raise
    except Exception as e:
        logger.error("failed_to_list_decks", error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.post("", response_model=DeckCreateResponse, status_code=status.HTTP_201_CREATED)
def create_deck(
    request: DeckCreateRequest,
    caller: CurrentCaller,
    use_case: DeckActions = Depends(inject_use_case(container.deck_actions)),
) -> DeckCreateResponse:
    """
    Create a deck.

    Fails with 403 when the caller's plan allows no more decks.
    """
    try:
        deck = unwrap_or_raise(use_case.create_deck(caller, request.model_dump(exclude_none=True)))
        return DeckCreateResponse(
            success=True,
            message="Deck created successfully",
            deck=Deck.model_validate(deck),
        )
    except (HTTPException, FlashdeckError):
        raise
    except Exception as e:
        logger.error("failed_to_create_deck", error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.get("/quota", response_model=DeckQuotaResponse, status_code=status.HTTP_200_OK)
def get_deck_quota(
    caller: CurrentCaller,
    use_case: DeckActions = Depends(inject_use_case(container.deck_actions)),
) -> DeckQuotaResponse:
    """Check whether the caller may create another deck."""
    quota = unwrap_or_raise(use_case.get_quota_status(caller))
    return DeckQuotaResponse(
        allowed=quota.allowed, reason=quota.reason, deck_count=quota.deck_count
    )


@router.get("/{deck_id}", response_model=DeckResponse, status_code=status.HTTP_200_OK)
def get_deck(
    deck_id: int,
    caller: CurrentCaller,
    use_case: DeckActions = Depends(inject_use_case(container.deck_actions)),
) -> DeckResponse:
    deck = unwrap_or_raise(use_case.get_deck(caller, deck_id))
    if deck is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Deck not found")
    return DeckResponse(deck=Deck.model_validate(deck))


@router.put("/{deck_id}", response_model=DeckUpdateResponse, status_code=status.HTTP_200_OK)
def update_deck(
    deck_id: int,
    request: DeckUpdateRequest,
    caller: CurrentCaller,
    use_case: DeckActions = Depends(inject_use_case(container.deck_actions)),
) -> DeckUpdateResponse:
    """
    Update a deck's title and/or description.

    Only fields present in the body are changed.
    """
    try:
        data = {"deck_id": deck_id, **request.model_dump(exclude_unset=True)}
        deck = unwrap_or_raise(use_case.update_deck(caller, data))
        return DeckUpdateResponse(
            success=True,
            message="Deck updated successfully",
            deck=Deck.model_validate(deck),
        )
    except (HTTPException, FlashdeckError):
        raise
    except Exception as e:
        logger.error("failed_to_update_deck", deck_id=deck_id, error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.delete("/{deck_id}", response_model=SuccessResponse, status_code=status.HTTP_200_OK)
def delete_deck(
    deck_id: int,
    caller: CurrentCaller,
    use_case: DeckActions = Depends(inject_use_case(container.deck_actions)),
) -> SuccessResponse:
    """Delete a deck and all of its cards."""
    unwrap_or_raise(use_case.delete_deck(caller, {"deck_id": deck_id}))
    return SuccessResponse(success=True, message="Deck deleted successfully")
