import structlog
from pydantic_ai.exceptions import ModelHTTPError, UnexpectedModelBehavior

from flashdeck.application.decks.protocols import (
    GeneratedFlashcard,
    GeneratedFlashcards,
    GenerationMetadata,
)
from flashdeck.exceptions import GeneratorError, GeneratorParseError, GeneratorRateLimitError
from flashdeck.infrastructure.ai.ai_agents import get_flashcard_generation_agent
from flashdeck.infrastructure.ai.prompts import build_generation_prompt

logger = structlog.get_logger(__name__)


class PydanticAIFlashcardGenerator:
    async def generate(
        self,
        title: str,
        description: str | None,
        count: int,
        difficulty: str,
    ) -> GeneratedFlashcards:
        prompt = build_generation_prompt(title, description, count, difficulty)
        agent = get_flashcard_generation_agent()

        try:
            result = await agent.run(prompt)
        except UnexpectedModelBehavior as e:
            logger.warning("flashcard_generation_unparseable", title=title, error=str(e))
            raise GeneratorParseError from e
        except ModelHTTPError as e:
            logger.warning(
                "flashcard_generation_http_error", title=title, status_code=e.status_code
            )
            if e.status_code == 429:
                raise GeneratorRateLimitError from e
            raise GeneratorError from e

        output = result.output
        metadata = None
        if output.metadata is not None:
            metadata = GenerationMetadata(
                topic=output.metadata.topic,
                total_cards=output.metadata.total_cards,
                estimated_study_time=output.metadata.estimated_study_time,
            )
        return GeneratedFlashcards(
            flashcards=[
                GeneratedFlashcard(
                    front=card.front,
                    back=card.back,
                    difficulty=card.difficulty,
                    tags=list(card.tags),
                )
                for card in output.flashcards
            ],
            metadata=metadata,
        )
