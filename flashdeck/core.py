from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from flashdeck.application.decks.ai_generation import GenerateFlashcardsUseCase
from flashdeck.application.decks.card_actions import CardActions
from flashdeck.application.decks.deck_actions import DeckActions
from flashdeck.application.decks.study_session import StudySessionUseCase
from flashdeck.infrastructure.ai.flashcard_generator import PydanticAIFlashcardGenerator
from flashdeck.infrastructure.decks.repositories import CardRepository, DeckRepository
from flashdeck.infrastructure.views.invalidator import LoggingViewInvalidator


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    # Repositories
    deck_repository = providers.Factory(DeckRepository, db=db)
    card_repository = providers.Factory(CardRepository, db=db)

    # External collaborators
    flashcard_generator = providers.Singleton(PydanticAIFlashcardGenerator)
    view_invalidator = providers.Factory(LoggingViewInvalidator)

    # Use cases
    deck_actions = providers.Factory(
        DeckActions,
        deck_repository=deck_repository,
        view_invalidator=view_invalidator,
    )
    card_actions = providers.Factory(
        CardActions,
        card_repository=card_repository,
        view_invalidator=view_invalidator,
    )
    generate_flashcards_use_case = providers.Factory(
        GenerateFlashcardsUseCase,
        deck_repository=deck_repository,
        card_repository=card_repository,
        generator=flashcard_generator,
        view_invalidator=view_invalidator,
    )
    study_session_use_case = providers.Factory(
        StudySessionUseCase,
        deck_repository=deck_repository,
        card_repository=card_repository,
    )


# Initialize container
container = Container()
