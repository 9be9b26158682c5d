from typing import Literal

from pydantic import BaseModel, Field
from pydantic_ai import Agent

from flashdeck.infrastructure.ai.ai_model import get_ai_model


class FlashcardOutput(BaseModel):
    front: str = Field(min_length=1)
    back: str = Field(min_length=1)
    difficulty: Literal["easy", "medium", "hard"] | None = None
    tags: list[str] = Field(default_factory=list)


class FlashcardMetadataOutput(BaseModel):
    topic: str
    total_cards: int
    estimated_study_time: int | None = Field(
        default=None, description="Estimated study time in minutes"
    )


class FlashcardSetOutput(BaseModel):
    flashcards: list[FlashcardOutput]
    metadata: FlashcardMetadataOutput | None = None


def get_flashcard_generation_agent() -> Agent[None, FlashcardSetOutput]:
    return Agent(
        get_ai_model(),
        output_type=FlashcardSetOutput,
        instructions="""
        You create flashcards for a study deck. Follow the card count, difficulty
        and card format given in the prompt exactly. Every card needs a non-empty
        front and back. Keep each card focused on a single fact, term or phrase.
        Fill in metadata with the topic and the number of cards produced.
        """,
        model_settings={"temperature": 0.7},
    )
