"""Deck and card API schemas."""

from flashdeck.infrastructure.decks.schemas.card_schemas import (
    Card,
    CardCreateRequest,
    CardCreateResponse,
    CardGenerateRequest,
    CardGenerateResponse,
    CardResponse,
    CardsListResponse,
    CardUpdateRequest,
    CardUpdateResponse,
    GenerationMetadata,
    StudySetResponse,
)
from flashdeck.infrastructure.decks.schemas.deck_schemas import (
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

__all__ = [
    "Card",
    "CardCreateRequest",
    "CardCreateResponse",
    "CardGenerateRequest",
    "CardGenerateResponse",
    "CardResponse",
    "CardUpdateRequest",
    "CardUpdateResponse",
    "CardsListResponse",
    "Deck",
    "DeckCreateRequest",
    "DeckCreateResponse",
    "DeckQuotaResponse",
    "DeckResponse",
    "DeckUpdateRequest",
    "DeckUpdateResponse",
    "DeckWithCardCount",
    "DecksListResponse",
    "GenerationMetadata",
    "StudySetResponse",
]
