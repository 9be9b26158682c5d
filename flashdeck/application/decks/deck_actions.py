"""Use case for deck operations."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from flashdeck.application.common.outcomes import ActionError, failure_from_exception
from flashdeck.application.common.result import Result, Success
from flashdeck.application.decks.protocols import DeckRepositoryProtocol, ViewInvalidatorProtocol
from flashdeck.application.decks.validation import (
    CreateDeckInput,
    DeckIdInput,
    UpdateDeckInput,
)
from flashdeck.domain.identity import Caller
from flashdeck.domain.quota import check_deck_quota
from flashdeck.exceptions import DeckNotFoundError, UnauthorizedError
from flashdeck.infrastructure.views.invalidator import DASHBOARD_PATH, deck_page_path
from flashdeck.models import Deck


@dataclass(frozen=True)
class QuotaStatus:
    """Quota decision plus the count it was based on."""

    allowed: bool
    reason: str | None
    deck_count: int


class DeckActions:
    """Use case for deck listing, creation, update and deletion."""

    def __init__(
        self,
        deck_repository: DeckRepositoryProtocol,
        view_invalidator: ViewInvalidatorProtocol,
    ) -> None:
        """Initialize use case with repository and invalidation collaborators."""
        self.deck_repository = deck_repository
        self.view_invalidator = view_invalidator

    def list_decks(self, caller: Caller) -> Result[list[tuple[Deck, int]], ActionError]:
        """List the caller's decks with card counts, most recently updated first."""
        try:
            return Success(self.deck_repository.list_for_caller(caller))
        except Exception as e:
            return failure_from_exception(e, "Failed to load decks", action="list_decks")

    def get_deck(self, caller: Caller, deck_id: int) -> Result[Deck | None, ActionError]:
        """
        Get one deck for display.

        A missing or foreign deck is a successful ``None`` so callers can
        render a "not found" state instead of failing.
        """
        try:
            validated = DeckIdInput(deck_id=deck_id)
            return Success(self.deck_repository.get(caller, validated.deck_id))
        except Exception as e:
            return failure_from_exception(e, "Failed to load deck", action="get_deck")

    def get_quota_status(self, caller: Caller) -> Result[QuotaStatus, ActionError]:
        """Evaluate the deck quota without creating anything."""
        try:
            if not caller.is_authenticated:
                raise UnauthorizedError
            deck_count = self.deck_repository.count_for_caller(caller)
            decision = check_deck_quota(caller, deck_count)
            return Success(
                QuotaStatus(allowed=decision.allowed, reason=decision.reason, deck_count=deck_count)
            )
        except Exception as e:
            return failure_from_exception(e, "Failed to check deck quota", action="quota_status")

    def create_deck(self, caller: Caller, data: Mapping[str, Any]) -> Result[Deck, ActionError]:
        """
        Create a deck owned by the caller.

        Args:
            caller: Resolved caller identity
            data: Untrusted input with ``title`` and optional ``description``

        Returns:
            Success with the created deck, or Failure on validation, quota
            or authorization errors
        """
        try:
            validated = CreateDeckInput.model_validate(data)
            deck = self.deck_repository.create(caller, validated.title, validated.description)
        except Exception as e:
            return failure_from_exception(e, "Failed to create deck", action="create_deck")

        self.view_invalidator.invalidate(DASHBOARD_PATH)
        self.view_invalidator.invalidate(deck_page_path(deck.id))
        return Success(deck)

    def update_deck(self, caller: Caller, data: Mapping[str, Any]) -> Result[Deck, ActionError]:
        """Apply a partial title/description update to an owned deck."""
        try:
            validated = UpdateDeckInput.model_validate(data)
            deck = self.deck_repository.update(
                caller, validated.deck_id, validated.changed_fields()
            )
            if deck is None:
                raise DeckNotFoundError(validated.deck_id)
        except Exception as e:
            return failure_from_exception(e, "Failed to update deck", action="update_deck")

        self.view_invalidator.invalidate(deck_page_path(deck.id))
        return Success(deck)

    def delete_deck(self, caller: Caller, data: Mapping[str, Any]) -> Result[None, ActionError]:
        """Delete an owned deck together with all of its cards."""
        try:
            validated = DeckIdInput.model_validate(data)
            if not self.deck_repository.delete(caller, validated.deck_id):
                raise DeckNotFoundError(validated.deck_id)
        except Exception as e:
            return failure_from_exception(e, "Failed to delete deck", action="delete_deck")

        self.view_invalidator.invalidate(DASHBOARD_PATH)
        return Success(None)
