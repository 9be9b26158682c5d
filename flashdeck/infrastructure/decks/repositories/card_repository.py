"""Card repository for database operations."""

import structlog
from sqlalchemy import select
from sqlalchemy.orm import Session

from flashdeck.domain.identity import Caller
from flashdeck.exceptions import CardNotFoundError
from flashdeck.infrastructure.decks.repositories.deck_repository import (
    DeckRepository,
    require_user_id,
)
from flashdeck.models import Card, Deck, utcnow

logger = structlog.get_logger(__name__)


class CardRepository:
    """Repository for Card database operations.

    Cards carry no owner column; every method re-derives ownership from the
    parent deck instead of trusting a previously fetched object.
    """

    def __init__(self, db: Session) -> None:
        """Initialize repository with database session."""
        self.db = db
        self.deck_repository = DeckRepository(db)

    def list_for_deck(self, caller: Caller, deck_id: int) -> list[Card]:
        """
        Get all cards of an owned deck.

        Args:
            caller: Resolved caller identity
            deck_id: ID of the parent deck

        Returns:
            List of cards ordered by updated_at DESC

        Raises:
            DeckNotFoundError: If the deck is missing or owned by someone else
        """
        self.deck_repository.get_owned_or_raise(caller, deck_id)

        stmt = (
            select(Card)
            .where(Card.deck_id == deck_id)
            .order_by(Card.updated_at.desc(), Card.id.desc())
        )
        return list(self.db.execute(stmt).scalars().all())

    def get(self, caller: Caller, card_id: int) -> Card | None:
        """Get a card by ID through a card -> deck join filtered on the deck owner."""
        user_id = require_user_id(caller)
        stmt = (
            select(Card)
            .join(Deck, Card.deck_id == Deck.id)
            .where(Card.id == card_id, Deck.user_id == user_id)
            .limit(1)
        )
        return self.db.execute(stmt).scalars().first()

    def _get_owned_or_raise(self, caller: Caller, card_id: int) -> Card:
        card = self.get(caller, card_id)
        if card is None:
            raise CardNotFoundError(card_id)
        return card

    def create(self, caller: Caller, deck_id: int, front: str, back: str) -> Card:
        """
        Create a card in an owned deck.

        Raises:
            DeckNotFoundError: If the deck is missing or owned by someone else
        """
        self.deck_repository.get_owned_or_raise(caller, deck_id)

        card = Card(deck_id=deck_id, front=front, back=back)
        self.db.add(card)
        self.db.commit()
        self.db.refresh(card)
        logger.info("card_created", card_id=card.id, deck_id=deck_id)
        return card

    def update(self, caller: Caller, card_id: int, fields: dict[str, str]) -> Card:
        """
        Update front and/or back of a card in an owned deck.

        Only the provided fields change; updated_at is always refreshed.

        Raises:
            CardNotFoundError: If no card matched both id and deck owner
        """
        card = self._get_owned_or_raise(caller, card_id)

        if "front" in fields:
            card.front = fields["front"]
        if "back" in fields:
            card.back = fields["back"]
        card.updated_at = utcnow()

        self.db.commit()
        self.db.refresh(card)
        logger.info("card_updated", card_id=card_id, fields=sorted(fields))
        return card

    def delete(self, caller: Caller, card_id: int) -> None:
        """
        Delete a card from an owned deck.

        Raises:
            CardNotFoundError: If no card matched both id and deck owner
        """
        card = self._get_owned_or_raise(caller, card_id)
        self.db.delete(card)
        self.db.commit()
        logger.info("card_deleted", card_id=card_id)
