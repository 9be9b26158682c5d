"""
Result type for action outcomes.

Every deck and card action returns either a Success carrying the created,
updated or fetched value, or a Failure carrying a user-safe error. Callers
can always tell the two apart without inspecting internal state.

Example:
    result = card_actions.create_card(caller, {"deck_id": 1, "front": "Q1", "back": "A1"})
    if result.is_success:
        card = result.unwrap()
    else:
        print(result.unwrap_error().message)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success value type
E = TypeVar("E")  # Error type


@dataclass(frozen=True)
class Success(Generic[T]):
    """Represents a successful result containing a value."""

    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Get the success value."""
        return self.value

    def unwrap_error(self) -> None:
        """Raises ValueError - Success has no error."""
        raise ValueError("Cannot get error from Success result")

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Represents a failed result containing an error."""

    error: E

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def unwrap(self) -> None:
        """Raises ValueError - Failure has no value."""
        raise ValueError("Cannot get value from Failure result")

    def unwrap_error(self) -> E:
        """Get the error."""
        return self.error

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"


Result = Success[T] | Failure[E]
