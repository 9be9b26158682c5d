"""Deck and card routers."""

from flashdeck.infrastructure.decks.routers.cards import router as cards_router
from flashdeck.infrastructure.decks.routers.deck_cards import router as deck_cards_router
from flashdeck.infrastructure.decks.routers.decks import router as decks_router

__all__ = [
    "cards_router",
    "deck_cards_router",
    "decks_router",
]
