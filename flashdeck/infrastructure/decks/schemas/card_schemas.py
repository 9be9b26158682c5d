"""Pydantic schemas for card API request/response."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from flashdeck.infrastructure.decks.schemas.deck_schemas import Deck


class CardCreateRequest(BaseModel):
    """Both sides are required; the card actions report what is missing."""

    front: str | None = Field(None, description="Front side of the card")
    back: str | None = Field(None, description="Back side of the card")


class CardUpdateRequest(BaseModel):
    """Partial card update; omitted sides are left unchanged."""

    front: str | None = Field(None, description="New front side")
    back: str | None = Field(None, description="New back side")


class CardGenerateRequest(BaseModel):
    count: int = Field(20, description="Number of cards to generate (1-50)")
    difficulty: str = Field("medium", description="One of easy, medium, hard")


class Card(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    deck_id: int
    front: str
    back: str
    created_at: datetime
    updated_at: datetime


class CardsListResponse(BaseModel):
    cards: list[Card]


class CardResponse(BaseModel):
    card: Card


class CardCreateResponse(BaseModel):
    success: bool
    message: str
    card: Card


class CardUpdateResponse(BaseModel):
    success: bool
    message: str
    card: Card


class GenerationMetadata(BaseModel):
    topic: str
    total_cards: int
    estimated_study_time: int | None = None


class CardGenerateResponse(BaseModel):
    success: bool
    message: str
    cards: list[Card]
    metadata: GenerationMetadata | None = None


class StudySetResponse(BaseModel):
    """A deck and its cards, in study order."""

    deck: Deck
    cards: list[Card]
