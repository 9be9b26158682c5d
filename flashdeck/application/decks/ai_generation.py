"""Use case for AI flashcard generation."""

from dataclasses import dataclass
from typing import Any

import structlog
from pydantic import ValidationError as PydanticValidationError

from flashdeck.application.common.outcomes import ActionError, failure_from_exception
from flashdeck.application.common.result import Result, Success
from flashdeck.application.decks.protocols import (
    CardRepositoryProtocol,
    DeckRepositoryProtocol,
    FlashcardGeneratorProtocol,
    GeneratedFlashcard,
    GenerationMetadata,
    ViewInvalidatorProtocol,
)
from flashdeck.application.decks.validation import (
    DEFAULT_GENERATED_CARDS,
    CreateCardInput,
    GenerateCardsInput,
    format_validation_error,
)
from flashdeck.domain.identity import AI_FLASHCARD_GENERATION, PRO_PLAN, Caller
from flashdeck.exceptions import (
    DeckNotFoundError,
    DescriptionRequiredError,
    UnauthorizedError,
    UpgradeRequiredError,
)
from flashdeck.infrastructure.views.invalidator import deck_page_path
from flashdeck.models import Card

logger = structlog.get_logger(__name__)


@dataclass
class GenerationOutcome:
    """Cards persisted from one generation run."""

    cards: list[Card]
    metadata: GenerationMetadata | None


def can_generate_flashcards(caller: Caller) -> bool:
    """Whether the caller's plan includes AI generation."""
    return caller.has_feature(AI_FLASHCARD_GENERATION) or caller.has_plan(PRO_PLAN)


def select_usable_cards(
    deck_id: int, flashcards: list[GeneratedFlashcard], count: int
) -> list[CreateCardInput]:
    """
    Keep generated pairs that satisfy the card constraints, at most ``count``.

    Empty or overlong pairs are discarded and logged. Pairs beyond the
    requested count are dropped.
    """
    usable: list[CreateCardInput] = []
    for position, flashcard in enumerate(flashcards):
        if len(usable) == count:
            logger.warning(
                "generated_cards_over_requested",
                deck_id=deck_id,
                requested=count,
                dropped=len(flashcards) - position,
            )
            break
        try:
            usable.append(
                CreateCardInput(deck_id=deck_id, front=flashcard.front, back=flashcard.back)
            )
        except PydanticValidationError as e:
            logger.warning(
                "generated_card_discarded",
                deck_id=deck_id,
                position=position,
                reason=format_validation_error(e),
            )
    return usable


class GenerateFlashcardsUseCase:
    """Generate cards for a deck from its title and description."""

    def __init__(
        self,
        deck_repository: DeckRepositoryProtocol,
        card_repository: CardRepositoryProtocol,
        generator: FlashcardGeneratorProtocol,
        view_invalidator: ViewInvalidatorProtocol,
    ) -> None:
        self.deck_repository = deck_repository
        self.card_repository = card_repository
        self.generator = generator
        self.view_invalidator = view_invalidator

    async def generate(
        self,
        caller: Caller,
        deck_id: Any,  # noqa: ANN401
        count: Any = DEFAULT_GENERATED_CARDS,  # noqa: ANN401
        difficulty: Any = "medium",  # noqa: ANN401
    ) -> Result[GenerationOutcome, ActionError]:
        """
        Generate and persist flashcards for an owned deck.

        Preconditions are checked in order and the first failure wins:
        authentication, AI entitlement, deck ownership, non-empty description.

        Generated pairs are checked against the card length limits and capped
        at ``count`` before anything is stored.

        Cards are inserted one by one through the regular card-creation path,
        each in its own commit. If an insert fails midway the cards created
        before it stay in the deck.

        Args:
            caller: Resolved caller identity
            deck_id: ID of the target deck
            count: Number of cards to request from the generator
            difficulty: One of easy, medium, hard

        Returns:
            Success with created cards and generation metadata, or Failure
        """
        try:
            validated = GenerateCardsInput(deck_id=deck_id, count=count, difficulty=difficulty)

            if not caller.is_authenticated:
                raise UnauthorizedError
            if not can_generate_flashcards(caller):
                raise UpgradeRequiredError

            deck = self.deck_repository.get(caller, validated.deck_id)
            if deck is None:
                raise DeckNotFoundError(validated.deck_id)
            if not deck.description or not deck.description.strip():
                raise DescriptionRequiredError

            generated = await self.generator.generate(
                deck.title, deck.description, validated.count, validated.difficulty
            )

            usable = select_usable_cards(validated.deck_id, generated.flashcards, validated.count)
            created_cards = [
                self.card_repository.create(caller, card.deck_id, card.front, card.back)
                for card in usable
            ]
        except Exception as e:
            return failure_from_exception(
                e, "Failed to generate flashcards", action="generate_flashcards", deck_id=deck_id
            )

        self.view_invalidator.invalidate(deck_page_path(validated.deck_id))
        logger.info(
            "ai_flashcards_generated",
            deck_id=validated.deck_id,
            requested=validated.count,
            created=len(created_cards),
        )
        return Success(GenerationOutcome(cards=created_cards, metadata=generated.metadata))
