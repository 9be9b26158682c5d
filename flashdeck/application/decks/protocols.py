"""Protocols for the collaborators used by deck and card actions."""

from dataclasses import dataclass, field
from typing import Literal, Protocol

from flashdeck.domain.identity import Caller
from flashdeck.models import Card, Deck


class DeckRepositoryProtocol(Protocol):
    """Ownership-checked deck persistence."""

    def list_for_caller(self, caller: Caller) -> list[tuple[Deck, int]]:
        """
        Get the caller's decks with their card counts.

        Returns:
            List of (deck, card_count) ordered by updated_at DESC
        """
        ...

    def get(self, caller: Caller, deck_id: int) -> Deck | None: ...

    def get_owned_or_raise(self, caller: Caller, deck_id: int) -> Deck: ...

    def count_for_caller(self, caller: Caller) -> int: ...

    def create(self, caller: Caller, title: str, description: str | None) -> Deck:
        """
        Create a deck owned by the caller after re-checking the quota.

        Raises:
            QuotaExceededError: If the quota policy denies creation
        """
        ...

    def update(self, caller: Caller, deck_id: int, fields: dict[str, str | None]) -> Deck | None:
        """
        Update an owned deck.

        Returns:
            Updated deck, or None if no owned deck matched
        """
        ...

    def delete(self, caller: Caller, deck_id: int) -> bool:
        """
        Delete an owned deck and, through the cascade, its cards.

        Returns:
            True if deleted, False if no owned deck matched
        """
        ...


class CardRepositoryProtocol(Protocol):
    """Card persistence with ownership derived through the parent deck."""

    def list_for_deck(self, caller: Caller, deck_id: int) -> list[Card]: ...

    def get(self, caller: Caller, card_id: int) -> Card | None: ...

    def create(self, caller: Caller, deck_id: int, front: str, back: str) -> Card: ...

    def update(self, caller: Caller, card_id: int, fields: dict[str, str]) -> Card: ...

    def delete(self, caller: Caller, card_id: int) -> None: ...


@dataclass(frozen=True)
class GeneratedFlashcard:
    front: str
    back: str
    difficulty: str | None = None
    tags: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class GenerationMetadata:
    topic: str
    total_cards: int
    estimated_study_time: int | None = None


@dataclass(frozen=True)
class GeneratedFlashcards:
    """Structured output of the flashcard generator."""

    flashcards: list[GeneratedFlashcard]
    metadata: GenerationMetadata | None = None


class FlashcardGeneratorProtocol(Protocol):
    """External AI content generator."""

    async def generate(
        self,
        title: str,
        description: str | None,
        count: int,
        difficulty: str,
    ) -> GeneratedFlashcards:
        """
        Generate front/back pairs for a topic.

        Raises:
            GeneratorParseError: If the model output is malformed
            GeneratorRateLimitError: If the provider is rate limiting
        """
        ...


class ViewInvalidatorProtocol(Protocol):
    """Signal that a rendered path is stale after a mutation."""

    def invalidate(self, path: str, scope: Literal["page", "layout"] = "page") -> None: ...
