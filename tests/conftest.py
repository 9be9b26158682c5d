"""Pytest configuration and fixtures."""

import os

# Settings are read once and cached, so the test environment must be in place
# before anything from flashdeck is imported.
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("SECRET_KEY", "test-secret-key-with-at-least-32-bytes-of-entropy")
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("AI_PROVIDER", "openai")
os.environ.setdefault("AI_MODEL_NAME", "gpt-4o-mini")
os.environ.setdefault("OPENAI_API_KEY", "test-key")

from collections.abc import Generator  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from dependency_injector import providers  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402

from flashdeck import models  # noqa: E402
from flashdeck.application.decks.protocols import (  # noqa: E402
    GeneratedFlashcard,
    GeneratedFlashcards,
    GenerationMetadata,
)
from flashdeck.core import container  # noqa: E402
from flashdeck.database import Base, create_database_engine, get_db  # noqa: E402
from flashdeck.domain.identity import (  # noqa: E402
    AI_FLASHCARD_GENERATION,
    THREE_DECK_LIMIT,
    UNLIMITED_DECKS,
    Caller,
)
from flashdeck.infrastructure.identity.token_service import create_access_token  # noqa: E402
from flashdeck.main import app  # noqa: E402

# Test database URL (in-memory SQLite, one shared connection, FK pragma on)
TEST_DATABASE_URL = "sqlite:///:memory:"

test_engine = create_database_engine(TEST_DATABASE_URL)

TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

OWNER_ID = "user_owner"
OTHER_USER_ID = "user_other"


class FakeFlashcardGenerator:
    """Generator double returning ``count`` numbered cards, or raising ``error``.

    Set ``flashcards`` to return a fixed batch regardless of ``count``.
    """

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []
        self.error: Exception | None = None
        self.flashcards: list[GeneratedFlashcard] | None = None

    async def generate(
        self,
        title: str,
        description: str | None,
        count: int,
        difficulty: str,
    ) -> GeneratedFlashcards:
        self.calls.append(
            {"title": title, "description": description, "count": count, "difficulty": difficulty}
        )
        if self.error is not None:
            raise self.error
        if self.flashcards is not None:
            return GeneratedFlashcards(flashcards=self.flashcards)
        return GeneratedFlashcards(
            flashcards=[
                GeneratedFlashcard(front=f"Front {i}", back=f"Back {i}", difficulty=difficulty)
                for i in range(1, count + 1)
            ],
            metadata=GenerationMetadata(topic=title, total_cards=count, estimated_study_time=10),
        )


def auth_headers(
    user_id: str = OWNER_ID,
    features: list[str] | None = None,
    plan: str | None = None,
) -> dict[str, str]:
    """Build an Authorization header for a caller with the given entitlements."""
    token = create_access_token(user_id, features=features, plan=plan)
    return {"Authorization": f"Bearer {token}"}


def create_test_deck(
    db_session: Session,
    user_id: str = OWNER_ID,
    title: str = "Test Deck",
    description: str | None = "A deck for tests",
) -> models.Deck:
    """Insert a deck directly, bypassing quota and validation."""
    deck = models.Deck(title=title, description=description, user_id=user_id)
    db_session.add(deck)
    db_session.commit()
    db_session.refresh(deck)
    return deck


def create_test_card(
    db_session: Session, deck: models.Deck, front: str = "Question", back: str = "Answer"
) -> models.Card:
    card = models.Card(deck_id=deck.id, front=front, back=back)
    db_session.add(card)
    db_session.commit()
    db_session.refresh(card)
    return card


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def fake_generator() -> FakeFlashcardGenerator:
    return FakeFlashcardGenerator()


@pytest.fixture
def client(
    db_session: Session, fake_generator: FakeFlashcardGenerator
) -> Generator[TestClient, Any, None]:
    """Create a test client with database session and a fake flashcard generator."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    container.flashcard_generator.override(providers.Object(fake_generator))

    with TestClient(app) as test_client:
        yield test_client

    container.flashcard_generator.reset_override()
    app.dependency_overrides.clear()


@pytest.fixture
def owner() -> Caller:
    return Caller.for_user(OWNER_ID, features=[UNLIMITED_DECKS, AI_FLASHCARD_GENERATION])


@pytest.fixture
def other_user() -> Caller:
    return Caller.for_user(OTHER_USER_ID, features=[UNLIMITED_DECKS])


@pytest.fixture
def limited_user() -> Caller:
    return Caller.for_user("user_limited", features=[THREE_DECK_LIMIT])


@pytest.fixture
def owner_headers() -> dict[str, str]:
    return auth_headers(OWNER_ID, features=[UNLIMITED_DECKS, AI_FLASHCARD_GENERATION])


@pytest.fixture
def other_headers() -> dict[str, str]:
    return auth_headers(OTHER_USER_ID, features=[UNLIMITED_DECKS])


@pytest.fixture
def test_deck(db_session: Session) -> models.Deck:
    return create_test_deck(db_session)


@pytest.fixture
def test_card(db_session: Session, test_deck: models.Deck) -> models.Card:
    return create_test_card(db_session, test_deck)
