"""Tests for GenerateFlashcardsUseCase."""

from unittest.mock import AsyncMock, patch

from sqlalchemy import select
from sqlalchemy.orm import Session

from flashdeck import models
from flashdeck.application.common.outcomes import ErrorKind
from flashdeck.application.decks.ai_generation import (
    GenerateFlashcardsUseCase,
    can_generate_flashcards,
    select_usable_cards,
)
from flashdeck.application.decks.protocols import GeneratedFlashcard
from flashdeck.domain.identity import AI_FLASHCARD_GENERATION, PRO_PLAN, Caller
from flashdeck.infrastructure.decks.repositories import CardRepository, DeckRepository
from flashdeck.infrastructure.views.invalidator import LoggingViewInvalidator
from tests.conftest import FakeFlashcardGenerator, create_test_deck


def _use_case(
    db_session: Session, generator: FakeFlashcardGenerator
) -> tuple[GenerateFlashcardsUseCase, LoggingViewInvalidator]:
    invalidator = LoggingViewInvalidator()
    use_case = GenerateFlashcardsUseCase(
        deck_repository=DeckRepository(db_session),
        card_repository=CardRepository(db_session),
        generator=generator,
        view_invalidator=invalidator,
    )
    return use_case, invalidator


def test_can_generate_flashcards() -> None:
    assert can_generate_flashcards(Caller.for_user("u", features=[AI_FLASHCARD_GENERATION]))
    assert can_generate_flashcards(Caller.for_user("u", plan=PRO_PLAN))
    assert not can_generate_flashcards(Caller.for_user("u", plan="free"))


class TestGenerateFlashcardsUseCase:
    async def test_persists_every_generated_card(
        self, db_session: Session, owner: Caller, test_deck: models.Deck
    ) -> None:
        generator = FakeFlashcardGenerator()
        use_case, invalidator = _use_case(db_session, generator)

        result = await use_case.generate(owner, test_deck.id, count=5, difficulty="hard")

        assert result.is_success
        outcome = result.unwrap()
        assert len(outcome.cards) == 5
        assert {card.deck_id for card in outcome.cards} == {test_deck.id}
        assert outcome.metadata is not None
        assert outcome.metadata.total_cards == 5
        assert generator.calls[0]["difficulty"] == "hard"
        assert invalidator.invalidated_paths == [f"/decks/{test_deck.id}"]

    async def test_preconditions_are_checked_in_order(
        self, db_session: Session
    ) -> None:
        """An anonymous caller is unauthorized even for a deck that does not exist."""
        generator = FakeFlashcardGenerator()
        use_case, _ = _use_case(db_session, generator)

        anonymous = await use_case.generate(Caller.anonymous(), 999)
        no_entitlement = await use_case.generate(Caller.for_user("u"), 999)
        missing_deck = await use_case.generate(
            Caller.for_user("u", features=[AI_FLASHCARD_GENERATION]), 999
        )

        assert anonymous.unwrap_error().kind == ErrorKind.UNAUTHORIZED
        assert no_entitlement.unwrap_error().kind == ErrorKind.UPGRADE_REQUIRED
        assert missing_deck.unwrap_error().message == "Deck not found or unauthorized"
        assert generator.calls == []

    async def test_generator_failure_is_mapped(
        self, db_session: Session, owner: Caller, test_deck: models.Deck
    ) -> None:
        generator = FakeFlashcardGenerator()
        generator.generate = AsyncMock(side_effect=ValueError("schema mismatch at $.flashcards"))  # type: ignore[method-assign]
        use_case, invalidator = _use_case(db_session, generator)

        result = await use_case.generate(owner, test_deck.id)

        assert result.is_failure
        assert result.unwrap_error().message == "Failed to generate flashcards"
        assert invalidator.invalidated_paths == []

    async def test_mid_batch_failure_keeps_earlier_cards(
        self, db_session: Session, owner: Caller
    ) -> None:
        deck = create_test_deck(db_session)
        deck_id = deck.id
        use_case, _ = _use_case(db_session, FakeFlashcardGenerator())

        original_create = CardRepository.create
        calls = {"n": 0}

        def flaky_create(
            self: CardRepository, caller: Caller, deck_id: int, front: str, back: str
        ) -> models.Card:
            calls["n"] += 1
            if calls["n"] == 4:
                raise RuntimeError("disk I/O error")
            return original_create(self, caller, deck_id, front, back)

        with patch.object(CardRepository, "create", flaky_create):
            result = await use_case.generate(owner, deck_id, count=10)

        assert result.is_failure
        assert result.unwrap_error().kind == ErrorKind.INTERNAL
        persisted = db_session.execute(
            select(models.Card).where(models.Card.deck_id == deck_id)
        ).all()
        assert len(persisted) == 3

    async def test_generated_batch_is_capped_and_checked(
        self, db_session: Session, owner: Caller, test_deck: models.Deck
    ) -> None:
        generator = FakeFlashcardGenerator()
        generator.flashcards = [GeneratedFlashcard(front="x" * 1500, back="too long")] + [
            GeneratedFlashcard(front=f"Q{i}", back=f"A{i}") for i in range(7)
        ]
        use_case, _ = _use_case(db_session, generator)

        result = await use_case.generate(owner, test_deck.id, count=3)

        assert result.is_success
        assert [card.front for card in result.unwrap().cards] == ["Q0", "Q1", "Q2"]
        persisted = db_session.execute(
            select(models.Card).where(models.Card.deck_id == test_deck.id)
        ).scalars().all()
        assert len(persisted) == 3
        assert max(len(card.front) for card in persisted) <= 1000


def test_select_usable_cards_skips_empty_and_overlong_sides() -> None:
    flashcards = [
        GeneratedFlashcard(front="", back="A"),
        GeneratedFlashcard(front="Q", back="b" * 1001),
        GeneratedFlashcard(front="Q1", back="A1"),
        GeneratedFlashcard(front="q" * 1000, back="A2"),
    ]

    usable = select_usable_cards(7, flashcards, count=5)

    assert [(card.deck_id, card.back) for card in usable] == [(7, "A1"), (7, "A2")]
