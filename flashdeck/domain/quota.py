"""Deck quota policy.

Pure decision logic with no database access: the caller supplies the current
owned-deck count. The same function backs the quota status endpoint and the
re-check done right before a deck insert.
"""

from dataclasses import dataclass

from flashdeck.domain.identity import THREE_DECK_LIMIT, UNLIMITED_DECKS, Caller

LIMITED_PLAN_MAX_DECKS = 3

DECK_LIMIT_REACHED_REASON = (
    f"You have reached the maximum of {LIMITED_PLAN_MAX_DECKS} decks on your current plan. "
    "Upgrade to create more decks."
)


@dataclass(frozen=True)
class QuotaDecision:
    """Outcome of a quota check."""

    allowed: bool
    reason: str | None = None


def check_deck_quota(caller: Caller, current_deck_count: int) -> QuotaDecision:
    """
    Decide whether the caller may create another deck.

    Args:
        caller: Resolved caller with entitlement flags
        current_deck_count: Number of decks the caller owns right now

    Returns:
        QuotaDecision with a human-readable reason when denied
    """
    if not caller.is_authenticated:
        return QuotaDecision(allowed=False, reason="Unauthorized")

    if caller.has_feature(UNLIMITED_DECKS):
        return QuotaDecision(allowed=True)

    if caller.has_feature(THREE_DECK_LIMIT) and current_deck_count >= LIMITED_PLAN_MAX_DECKS:
        return QuotaDecision(allowed=False, reason=DECK_LIMIT_REACHED_REASON)

    return QuotaDecision(allowed=True)
