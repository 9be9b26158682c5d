"""Pydantic schemas for deck API request/response."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class DeckCreateRequest(BaseModel):
    """Request body for creating a deck.

    Required-ness and length constraints are enforced by the deck actions so
    that every violation is reported in one message.
    """

    title: str | None = Field(None, description="Deck title")
    description: str | None = Field(None, description="Optional deck description")


class DeckUpdateRequest(BaseModel):
    """Partial deck update. Send ``description: null`` to clear it."""

    title: str | None = Field(None, description="New deck title")
    description: str | None = Field(None, description="New deck description")


class Deck(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str | None
    user_id: str
    created_at: datetime
    updated_at: datetime


class DeckWithCardCount(Deck):
    card_count: int = Field(..., ge=0, description="Number of cards in the deck")


class DecksListResponse(BaseModel):
    decks: list[DeckWithCardCount]


class DeckResponse(BaseModel):
    deck: Deck


class DeckCreateResponse(BaseModel):
    success: bool
    message: str
    deck: Deck


class DeckUpdateResponse(BaseModel):
    success: bool
    message: str
    deck: Deck


class DeckQuotaResponse(BaseModel):
    """Whether the caller may create another deck right now."""

    allowed: bool
    reason: str | None = None
    deck_count: int
