"""
Caller identity resolved from the identity provider.

The identity provider is external; this value object is the only shape the
rest of the application sees. It is passed explicitly into every repository,
policy and action call instead of being looked up from ambient request state.
"""

from dataclasses import dataclass, field
from typing import Self

# Entitlement (feature) names issued by the identity provider's billing plans
UNLIMITED_DECKS = "unlimited_decks"
THREE_DECK_LIMIT = "3_deck_limit"
AI_FLASHCARD_GENERATION = "ai_flashcard_generation"

PRO_PLAN = "pro"


@dataclass(frozen=True)
class Caller:
    """Authenticated (or anonymous) caller of a single request."""

    user_id: str | None
    features: frozenset[str] = field(default_factory=frozenset)
    plan: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None

    def has_feature(self, feature: str) -> bool:
        """Whether the caller's plan grants the named feature."""
        return feature in self.features

    def has_plan(self, plan: str) -> bool:
        return self.plan == plan

    @classmethod
    def anonymous(cls) -> Self:
        """Caller for a request that carried no identity."""
        return cls(user_id=None)

    @classmethod
    def for_user(
        cls, user_id: str, features: list[str] | None = None, plan: str | None = None
    ) -> Self:
        return cls(user_id=user_id, features=frozenset(features or ()), plan=plan)
