"""Use case for card operations."""

from collections.abc import Mapping
from typing import Any

from flashdeck.application.common.outcomes import ActionError, failure_from_exception
from flashdeck.application.common.result import Result, Success
from flashdeck.application.decks.protocols import CardRepositoryProtocol, ViewInvalidatorProtocol
from flashdeck.application.decks.validation import (
    CardIdInput,
    CreateCardInput,
    DeckIdInput,
    UpdateCardInput,
)
from flashdeck.domain.identity import Caller
from flashdeck.infrastructure.views.invalidator import ALL_DECK_PAGES, deck_page_path
from flashdeck.models import Card


class CardActions:
    """Use case for card CRUD operations inside owned decks."""

    def __init__(
        self,
        card_repository: CardRepositoryProtocol,
        view_invalidator: ViewInvalidatorProtocol,
    ) -> None:
        """Initialize use case with repository and invalidation collaborators."""
        self.card_repository = card_repository
        self.view_invalidator = view_invalidator

    def list_cards(self, caller: Caller, deck_id: int) -> Result[list[Card], ActionError]:
        """
        List the cards of an owned deck, most recently updated first.

        Unlike ``DeckActions.get_deck`` a missing deck is a failure here.
        """
        try:
            validated = DeckIdInput(deck_id=deck_id)
            return Success(self.card_repository.list_for_deck(caller, validated.deck_id))
        except Exception as e:
            return failure_from_exception(e, "Failed to load cards", action="list_cards")

    def get_card(self, caller: Caller, card_id: int) -> Result[Card | None, ActionError]:
        try:
            validated = CardIdInput(card_id=card_id)
            return Success(self.card_repository.get(caller, validated.card_id))
        except Exception as e:
            return failure_from_exception(e, "Failed to load card", action="get_card")

    def create_card(self, caller: Caller, data: Mapping[str, Any]) -> Result[Card, ActionError]:
        """
        Create a card in an owned deck.

        Args:
            caller: Resolved caller identity
            data: Untrusted input with ``deck_id``, ``front`` and ``back``

        Returns:
            Success with the created card, or Failure with a user-safe message
        """
        try:
            validated = CreateCardInput.model_validate(data)
            card = self.card_repository.create(
                caller, validated.deck_id, validated.front, validated.back
            )
        except Exception as e:
            return failure_from_exception(e, "Failed to create card", action="create_card")

        self.view_invalidator.invalidate(deck_page_path(validated.deck_id))
        return Success(card)

    def update_card(self, caller: Caller, data: Mapping[str, Any]) -> Result[Card, ActionError]:
        """
        Update front and/or back of a card.

        The owning deck id is not part of the input, so every deck page is
        invalidated.
        """
        try:
            validated = UpdateCardInput.model_validate(data)
            card = self.card_repository.update(
                caller, validated.card_id, validated.changed_fields()
            )
        except Exception as e:
            return failure_from_exception(e, "Failed to update card", action="update_card")

        self.view_invalidator.invalidate(ALL_DECK_PAGES)
        return Success(card)

    def delete_card(self, caller: Caller, data: Mapping[str, Any]) -> Result[None, ActionError]:
        try:
            validated = CardIdInput.model_validate(data)
            self.card_repository.delete(caller, validated.card_id)
        except Exception as e:
            return failure_from_exception(e, "Failed to delete card", action="delete_card")

        self.view_invalidator.invalidate(ALL_DECK_PAGES)
        return Success(None)
