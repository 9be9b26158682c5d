"""Access token creation and verification.

Tokens are issued by the identity provider and signed with the shared
``SECRET_KEY``. ``create_access_token`` exists for tests and operator tooling.
"""

from collections.abc import Iterable
from datetime import UTC, datetime, timedelta

import jwt
from jwt import InvalidTokenError
from pydantic import BaseModel

from flashdeck.config import get_settings

ALGORITHM = "HS256"


class TokenClaims(BaseModel):
    """Verified claims of an access token."""

    user_id: str
    features: list[str] = []
    plan: str | None = None


def create_access_token(
    user_id: str,
    features: Iterable[str] | None = None,
    plan: str | None = None,
    expires_delta: timedelta | None = None,
) -> str:
    """Create an access token carrying the caller's entitlements."""
    settings = get_settings()
    expire = datetime.now(UTC) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode = {
        "sub": user_id,
        "features": list(features or []),
        "plan": plan,
        "exp": expire,
        "type": "access",
    }
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=ALGORITHM)


def verify_access_token(token: str) -> TokenClaims | None:
    """Verify an access token and return its claims if valid."""
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
    except InvalidTokenError:
        return None

    if payload.get("type") != "access":
        return None
    user_id = payload.get("sub")
    if not user_id or not isinstance(user_id, str):
        return None

    features = payload.get("features") or []
    if not isinstance(features, list):
        return None
    plan = payload.get("plan")
    return TokenClaims(
        user_id=user_id,
        features=[str(f) for f in features],
        plan=plan if isinstance(plan, str) else None,
    )
