"""Uniform failure payload for action outcomes."""

from dataclasses import dataclass
from enum import StrEnum

import structlog
from pydantic import ValidationError as PydanticValidationError

from flashdeck.application.common.result import Failure
from flashdeck.application.decks.validation import format_validation_error
from flashdeck.exceptions import (
    CardNotFoundError,
    DeckNotFoundError,
    EmptyDeckError,
    FlashdeckError,
    GeneratorError,
    QuotaExceededError,
    UnauthorizedError,
    UpgradeRequiredError,
    ValidationError,
)

logger = structlog.get_logger(__name__)


class ErrorKind(StrEnum):
    """Category of a failed action, used to pick the HTTP status."""

    VALIDATION = "validation"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    QUOTA_EXCEEDED = "quota_exceeded"
    UPGRADE_REQUIRED = "upgrade_required"
    EMPTY_DECK = "empty_deck"
    GENERATOR = "generator"
    INTERNAL = "internal"


_KIND_BY_EXCEPTION: list[tuple[type[FlashdeckError], ErrorKind]] = [
    (UnauthorizedError, ErrorKind.UNAUTHORIZED),
    (DeckNotFoundError, ErrorKind.NOT_FOUND),
    (CardNotFoundError, ErrorKind.NOT_FOUND),
    (ValidationError, ErrorKind.VALIDATION),
    (QuotaExceededError, ErrorKind.QUOTA_EXCEEDED),
    (UpgradeRequiredError, ErrorKind.UPGRADE_REQUIRED),
    (EmptyDeckError, ErrorKind.EMPTY_DECK),
    (GeneratorError, ErrorKind.GENERATOR),
]


@dataclass(frozen=True)
class ActionError:
    """User-safe description of why an action failed."""

    message: str
    kind: ErrorKind
    status_code: int

    @classmethod
    def from_exception(cls, exc: FlashdeckError) -> "ActionError":
        """Build from a deliberately constructed domain exception."""
        kind = next(
            (k for exc_type, k in _KIND_BY_EXCEPTION if isinstance(exc, exc_type)),
            ErrorKind.NOT_FOUND if exc.status_code == 404 else ErrorKind.INTERNAL,
        )
        return cls(message=exc.message, kind=kind, status_code=exc.status_code)

    @classmethod
    def validation(cls, message: str) -> "ActionError":
        return cls(message=message, kind=ErrorKind.VALIDATION, status_code=422)

    @classmethod
    def internal(cls, message: str) -> "ActionError":
        return cls(message=message, kind=ErrorKind.INTERNAL, status_code=500)


def failure_from_exception(
    exc: Exception, fallback_message: str, **log_context: object
) -> Failure[ActionError]:
    """
    Convert an exception caught at an action boundary into a Failure.

    Validation errors become one joined message, domain errors keep their
    message, and anything else is logged and replaced by ``fallback_message``.
    """
    if isinstance(exc, PydanticValidationError):
        return Failure(ActionError.validation(format_validation_error(exc)))
    if isinstance(exc, FlashdeckError):
        return Failure(ActionError.from_exception(exc))

    logger.error("action_failed", error=str(exc), exc_info=True, **log_context)
    return Failure(ActionError.internal(fallback_message))
