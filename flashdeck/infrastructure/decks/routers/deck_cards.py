"""Card endpoints scoped to a deck: listing, creation, AI generation and study."""

import structlog
from fastapi import APIRouter, Depends, HTTPException, Request, status

from flashdeck.application.decks.ai_generation import GenerateFlashcardsUseCase
from flashdeck.application.decks.card_actions import CardActions
from flashdeck.application.decks.study_session import StudySessionUseCase
from flashdeck.config import get_settings
from flashdeck.core import container
from flashdeck.exceptions import FlashdeckError
from flashdeck.infrastructure.common.dependencies import require_ai_enabled
from flashdeck.infrastructure.common.di import inject_use_case
from flashdeck.infrastructure.common.rate_limit import limiter
from flashdeck.infrastructure.common.results import unwrap_or_raise
from flashdeck.infrastructure.decks.schemas import (
    Card,
    CardCreateRequest,
    CardCreateResponse,
    CardGenerateRequest,
    CardGenerateResponse,
    CardsListResponse,
    Deck,
    GenerationMetadata,
    StudySetResponse,
)
from flashdeck.infrastructure.identity.dependencies import CurrentCaller

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/decks", tags=["cards"])


@router.get("/{deck_id}/cards", response_model=CardsListResponse, status_code=status.HTTP_200_OK)
def list_cards(
    deck_id: int,
    caller: CurrentCaller,
    use_case: CardActions = Depends(inject_use_case(container.card_actions)),
) -> CardsListResponse:
    """Get the cards of a deck, most recently updated first."""
    cards = unwrap_or_raise(use_case.list_cards(caller, deck_id))
    return CardsListResponse(cards=[Card.model_validate(card) for card in cards])


@router.post(
    "/{deck_id}/cards",
    response_model=CardCreateResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_card(
    deck_id: int,
    request: CardCreateRequest,
    caller: CurrentCaller,
    use_case: CardActions = Depends(inject_use_case(container.card_actions)),
) -> CardCreateResponse:
    """
    Create a card in a deck.

    Args:
        deck_id: ID of the deck
        request: Front and back of the card
        caller: Resolved caller identity
        use_case: CardActions injected via dependency container

    Returns:
        Created card

    Raises:
        HTTPException: If validation fails or the deck is not the caller's
    """
    try:
        data = {"deck_id": deck_id, **request.model_dump(exclude_none=True)}
        card = unwrap_or_raise(use_case.create_card(caller, data))
        return CardCreateResponse(
            success=True,
            message="Card created successfully",
            card=Card.model_validate(card),
        )
    except (HTTPException, FlashdeckError):
        raise
    except Exception as e:
        logger.error("failed_to_create_card", deck_id=deck_id, error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post(
    "/{deck_id}/cards/generate",
    response_model=CardGenerateResponse,
    status_code=status.HTTP_201_CREATED,
)
@limiter.limit(get_settings().AI_GENERATION_RATE_LIMIT)  # type: ignore[misc]
@require_ai_enabled
async def generate_cards(
    request: Request,
    deck_id: int,
    body: CardGenerateRequest,
    caller: CurrentCaller,
    use_case: GenerateFlashcardsUseCase = Depends(
        inject_use_case(container.generate_flashcards_use_case)
    ),
) -> CardGenerateResponse:
    """
    Generate cards for a deck with AI from its title and description.

    Requires the AI flashcard entitlement (or the pro plan) and a deck
    description.
    """
    result = await use_case.generate(caller, deck_id, count=body.count, difficulty=body.difficulty)
    outcome = unwrap_or_raise(result)

    metadata = None
    if outcome.metadata is not None:
        metadata = GenerationMetadata(
            topic=outcome.metadata.topic,
            total_cards=outcome.metadata.total_cards,
            estimated_study_time=outcome.metadata.estimated_study_time,
        )
    return CardGenerateResponse(
        success=True,
        message=f"Generated {len(outcome.cards)} flashcards",
        cards=[Card.model_validate(card) for card in outcome.cards],
        metadata=metadata,
    )


@router.get("/{deck_id}/study", response_model=StudySetResponse, status_code=status.HTTP_200_OK)
def get_study_set(
    deck_id: int,
    caller: CurrentCaller,
    shuffle: bool = False,
    use_case: StudySessionUseCase = Depends(inject_use_case(container.study_session_use_case)),
) -> StudySetResponse:
    """
    Get a deck and its cards for a study session.

    Fails with 409 when the deck has no cards yet.
    """
    study_set = unwrap_or_raise(use_case.get_study_set(caller, deck_id, shuffle=shuffle))
    return StudySetResponse(
        deck=Deck.model_validate(study_set.deck),
        cards=[Card.model_validate(card) for card in study_set.cards],
    )
