"""
Domain module.

Pure decision logic with no I/O:
- Caller: resolved identity and entitlements of one request
- check_deck_quota: plan-gated deck creation policy
"""

from .identity import Caller
from .quota import QuotaDecision, check_deck_quota

__all__ = [
    "Caller",
    "QuotaDecision",
    "check_deck_quota",
]
