"""Deck repository for database operations."""

import structlog
from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from flashdeck.domain.identity import Caller
from flashdeck.domain.quota import check_deck_quota
from flashdeck.exceptions import DeckNotFoundError, QuotaExceededError, UnauthorizedError
from flashdeck.models import Card, Deck, utcnow

logger = structlog.get_logger(__name__)


def require_user_id(caller: Caller) -> str:
    """Return the caller's user id or fail before any query runs."""
    if caller.user_id is None:
        raise UnauthorizedError
    return caller.user_id


class DeckRepository:
    """Repository for Deck database operations, scoped to the caller."""

    def __init__(self, db: Session) -> None:
        """Initialize repository with database session."""
        self.db = db

    def list_for_caller(self, caller: Caller) -> list[tuple[Deck, int]]:
        """
        Get all decks owned by the caller with their card counts.

        Args:
            caller: Resolved caller identity

        Returns:
            List of (deck, card_count) tuples ordered by updated_at DESC
        """
        user_id = require_user_id(caller)

        card_count_subq = (
            select(func.count(Card.id))
            .where(Card.deck_id == Deck.id)
            .correlate(Deck)
            .scalar_subquery()
            .label("card_count")
        )
        stmt = (
            select(Deck, card_count_subq)
            .where(Deck.user_id == user_id)
            .order_by(Deck.updated_at.desc(), Deck.id.desc())
        )
        return [(deck, card_count or 0) for deck, card_count in self.db.execute(stmt).all()]

    def get(self, caller: Caller, deck_id: int) -> Deck | None:
        """Get a deck by ID, returning None unless the caller owns it."""
        user_id = require_user_id(caller)
        stmt = select(Deck).where(Deck.id == deck_id, Deck.user_id == user_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_owned_or_raise(self, caller: Caller, deck_id: int) -> Deck:
        """
        Get a deck by ID for system callers that need a hard failure.

        Raises:
            DeckNotFoundError: If the deck is missing or owned by someone else
        """
        deck = self.get(caller, deck_id)
        if deck is None:
            raise DeckNotFoundError(deck_id)
        return deck

    def count_for_caller(self, caller: Caller) -> int:
        user_id = require_user_id(caller)
        stmt = select(func.count(Deck.id)).where(Deck.user_id == user_id)
        return self.db.execute(stmt).scalar() or 0

    def create(self, caller: Caller, title: str, description: str | None) -> Deck:
        """
        Create a deck owned by the caller.

        The quota is re-checked here against a fresh count so a stale UI read
        cannot bypass it. Check and insert are not wrapped in one transaction.

        Raises:
            QuotaExceededError: If the caller's plan does not allow another deck
        """
        user_id = require_user_id(caller)

        decision = check_deck_quota(caller, self.count_for_caller(caller))
        if not decision.allowed:
            logger.info("deck_quota_exceeded", user_id=user_id, reason=decision.reason)
            raise QuotaExceededError(decision.reason or "Deck limit reached")

        deck = Deck(title=title, description=description, user_id=user_id)
        self.db.add(deck)
        self.db.commit()
        self.db.refresh(deck)
        logger.info("deck_created", deck_id=deck.id, user_id=user_id)
        return deck

    def update(self, caller: Caller, deck_id: int, fields: dict[str, str | None]) -> Deck | None:
        """
        Update title and/or description of an owned deck.

        Returns:
            Updated deck, or None if no deck matched both id and owner
        """
        deck = self.get(caller, deck_id)
        if deck is None:
            return None

        if "title" in fields and fields["title"] is not None:
            deck.title = fields["title"]
        if "description" in fields:
            deck.description = fields["description"]
        deck.updated_at = utcnow()

        self.db.commit()
        self.db.refresh(deck)
        logger.info("deck_updated", deck_id=deck_id, fields=sorted(fields))
        return deck

    def delete(self, caller: Caller, deck_id: int) -> bool:
        """
        Delete an owned deck.

        Child cards are removed by the ON DELETE CASCADE foreign key as part
        of the same statement.

        Returns:
            True if deleted, False if no deck matched both id and owner
        """
        user_id = require_user_id(caller)
        stmt = delete(Deck).where(Deck.id == deck_id, Deck.user_id == user_id)
        result = self.db.execute(stmt)
        self.db.commit()

        deleted = bool(result.rowcount)
        if deleted:
            logger.info("deck_deleted", deck_id=deck_id, user_id=user_id)
        return deleted
