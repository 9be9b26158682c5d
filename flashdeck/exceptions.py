"""Custom exception hierarchy for flashdeck."""

from fastapi import HTTPException
from starlette import status


class FlashdeckError(Exception):
    """Base exception for all flashdeck errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class UnauthorizedError(FlashdeckError):
    """No caller identity was resolved for the request."""

    def __init__(self, message: str = "Unauthorized") -> None:
        """Initialize with message and 401 status code."""
        super().__init__(message, status_code=401)


class NotFoundError(FlashdeckError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class DeckNotFoundError(NotFoundError):
    """Deck does not exist or belongs to someone else.

    The two cases share one message so non-owners cannot discover deck ids.
    """

    def __init__(self, deck_id: int | None = None) -> None:
        """Initialize with the deck ID that failed the ownership check."""
        self.deck_id = deck_id
        super().__init__("Deck not found or unauthorized")


class CardNotFoundError(NotFoundError):
    """Card does not exist or its deck belongs to someone else."""

    def __init__(self, card_id: int | None = None) -> None:
        """Initialize with the card ID that failed the ownership check."""
        self.card_id = card_id
        super().__init__("Card not found or unauthorized")


class ValidationError(FlashdeckError):
    """Validation error."""

    def __init__(self, message: str, status_code: int = 422) -> None:
        """Initialize with message and 422 status code by default."""
        super().__init__(message, status_code=status_code)


class DescriptionRequiredError(ValidationError):
    """Deck has no description to use as generation context."""

    def __init__(self) -> None:
        """Initialize with the fixed user-facing message."""
        super().__init__("Please add a description to your deck before generating AI flashcards")


class QuotaExceededError(FlashdeckError):
    """Deck creation denied by the caller's plan quota."""

    def __init__(self, reason: str) -> None:
        """Initialize with the human-readable denial reason."""
        self.reason = reason
        super().__init__(reason, status_code=403)


class UpgradeRequiredError(FlashdeckError):
    """Caller lacks the entitlement needed for a paid feature."""

    def __init__(
        self, message: str = "AI flashcard generation requires a Pro subscription"
    ) -> None:
        """Initialize with message and 403 status code."""
        super().__init__(message, status_code=403)


class EmptyDeckError(FlashdeckError):
    """Deck has no cards to study."""

    def __init__(self, deck_id: int) -> None:
        """Initialize with deck ID."""
        self.deck_id = deck_id
        super().__init__("This deck has no cards to study yet", status_code=409)


class GeneratorError(FlashdeckError):
    """Upstream flashcard generator failed."""

    def __init__(
        self, message: str = "Failed to generate flashcards", status_code: int = 502
    ) -> None:
        """Initialize with message and 502 status code by default."""
        super().__init__(message, status_code=status_code)


class GeneratorParseError(GeneratorError):
    """Generator returned output that does not match the flashcard schema."""

    def __init__(self) -> None:
        """Initialize with the fixed user-facing message."""
        super().__init__(
            "Failed to generate valid flashcards. Please try again with a different prompt."
        )


class GeneratorRateLimitError(GeneratorError):
    """Generator provider is rate limiting requests."""

    def __init__(self) -> None:
        """Initialize with the fixed user-facing message and 429 status code."""
        super().__init__(
            "AI service is currently busy. Please try again in a moment.",
            status_code=429,
        )


CredentialsException = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Could not validate credentials",
    headers={"WWW-Authenticate": "Bearer"},
)
