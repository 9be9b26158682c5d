"""Use case for loading a deck's study set."""

import random
from dataclasses import dataclass

from flashdeck.application.common.outcomes import ActionError, failure_from_exception
from flashdeck.application.common.result import Result, Success
from flashdeck.application.decks.protocols import CardRepositoryProtocol, DeckRepositoryProtocol
from flashdeck.application.decks.validation import DeckIdInput
from flashdeck.domain.identity import Caller
from flashdeck.exceptions import DeckNotFoundError, EmptyDeckError
from flashdeck.models import Card, Deck


@dataclass
class StudySet:
    deck: Deck
    cards: list[Card]


class StudySessionUseCase:
    """Read-only view of a deck and its cards for a study session."""

    def __init__(
        self,
        deck_repository: DeckRepositoryProtocol,
        card_repository: CardRepositoryProtocol,
        rng: random.Random | None = None,
    ) -> None:
        self.deck_repository = deck_repository
        self.card_repository = card_repository
        self.rng = rng or random.Random()  # noqa: S311

    def get_study_set(
        self, caller: Caller, deck_id: int, *, shuffle: bool = False
    ) -> Result[StudySet, ActionError]:
        """
        Load the deck and its cards.

        The deck is checked before its cards are read. Study state (flips,
        scores, position) lives entirely on the client.

        Raises nothing; failures come back as Failure:
            - deck missing or foreign: "Deck not found or unauthorized"
            - deck without cards: "This deck has no cards to study yet"
        """
        try:
            validated = DeckIdInput(deck_id=deck_id)
            deck = self.deck_repository.get(caller, validated.deck_id)
            if deck is None:
                raise DeckNotFoundError(validated.deck_id)
            cards = self.card_repository.list_for_deck(caller, validated.deck_id)
            if not cards:
                raise EmptyDeckError(validated.deck_id)
        except Exception as e:
            return failure_from_exception(e, "Failed to load study set", action="study_set")

        if shuffle:
            cards = list(cards)
            self.rng.shuffle(cards)
        return Success(StudySet(deck=deck, cards=cards))
