"""Input validation for deck and card actions.

These schemas are the single place where length and identifier constraints
live. Every violated constraint is reported, not just the first one.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500
CARD_TEXT_MAX_LENGTH = 1000
MAX_GENERATED_CARDS = 50
DEFAULT_GENERATED_CARDS = 20

Difficulty = Literal["easy", "medium", "hard"]

_FIELD_LABELS = {
    "title": "Title",
    "description": "Description",
    "front": "Front content",
    "back": "Back content",
    "deck_id": "Deck id",
    "card_id": "Card id",
    "count": "Card count",
    "difficulty": "Difficulty",
}

_MESSAGE_TEMPLATES = {
    "missing": "{label} is required",
    "string_too_short": "{label} is required",
    "string_too_long": "{label} is too long",
    "string_type": "{label} must be text",
    "greater_than": "{label} must be a positive integer",
    "int_type": "{label} must be a positive integer",
    "int_parsing": "{label} must be a positive integer",
    "int_from_float": "{label} must be a positive integer",
    "less_than_equal": "{label} must be at most {le}",
    "greater_than_equal": "{label} must be at least {ge}",
    "literal_error": "{label} must be one of: {expected}",
}


class _ActionInput(BaseModel):
    model_config = ConfigDict(extra="ignore")


class DeckIdInput(_ActionInput):
    deck_id: int = Field(..., gt=0)


class CardIdInput(_ActionInput):
    card_id: int = Field(..., gt=0)


class CreateDeckInput(_ActionInput):
    """Input for creating a deck."""

    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH)
    description: str | None = Field(None, max_length=DESCRIPTION_MAX_LENGTH)


class UpdateDeckInput(DeckIdInput):
    """Partial deck update; omitted fields are left unchanged.

    An explicit ``None`` description clears it, a ``None`` title is ignored.
    """

    title: str | None = Field(None, min_length=1, max_length=TITLE_MAX_LENGTH)
    description: str | None = Field(None, max_length=DESCRIPTION_MAX_LENGTH)

    def changed_fields(self) -> dict[str, str | None]:
        """Fields the caller actually supplied, ready for the repository."""
        fields: dict[str, str | None] = {}
        if self.title is not None:
            fields["title"] = self.title
        if "description" in self.model_fields_set:
            fields["description"] = self.description
        return fields


class CreateCardInput(DeckIdInput):
    front: str = Field(..., min_length=1, max_length=CARD_TEXT_MAX_LENGTH)
    back: str = Field(..., min_length=1, max_length=CARD_TEXT_MAX_LENGTH)


class UpdateCardInput(CardIdInput):
    """Partial card update; front and back are independently optional."""

    front: str | None = Field(None, min_length=1, max_length=CARD_TEXT_MAX_LENGTH)
    back: str | None = Field(None, min_length=1, max_length=CARD_TEXT_MAX_LENGTH)

    def changed_fields(self) -> dict[str, str]:
        fields: dict[str, str] = {}
        if self.front is not None:
            fields["front"] = self.front
        if self.back is not None:
            fields["back"] = self.back
        return fields


class GenerateCardsInput(DeckIdInput):
    count: int = Field(DEFAULT_GENERATED_CARDS, ge=1, le=MAX_GENERATED_CARDS)
    difficulty: Difficulty = "medium"


def _describe_error(error: dict[str, object]) -> str:
    loc = error.get("loc") or ()
    field = str(loc[0]) if isinstance(loc, tuple) and loc else "input"
    label = _FIELD_LABELS.get(field, field)
    template = _MESSAGE_TEMPLATES.get(str(error.get("type")))
    if template is None:
        return f"{label}: {error.get('msg')}"
    ctx = error.get("ctx")
    return template.format(label=label, **(ctx if isinstance(ctx, dict) else {}))


def format_validation_error(exc: PydanticValidationError) -> str:
    """
    Join every violated constraint into one message.

    Example:
        "Validation failed: Title is too long, Description is too long"
    """
    messages = [_describe_error(dict(error)) for error in exc.errors()]
    return f"Validation failed: {', '.join(messages)}"
