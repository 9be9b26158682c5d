"""FastAPI dependencies for caller identity."""

from typing import Annotated

import structlog
from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer

from flashdeck.domain.identity import Caller
from flashdeck.exceptions import CredentialsException
from flashdeck.infrastructure.identity.token_service import verify_access_token

logger = structlog.get_logger(__name__)

# Tokens are minted by the identity provider, tokenUrl only feeds the OpenAPI docs
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token", auto_error=False)


async def get_caller(token: Annotated[str | None, Depends(oauth2_scheme)]) -> Caller:
    """
    Resolve the caller from an optional bearer token.

    Args:
        token: JWT access token from the Authorization header, if any

    Returns:
        Anonymous caller when no token was sent, otherwise the token's caller

    Raises:
        CredentialsException: If a token was sent but is invalid or expired
    """
    if token is None:
        return Caller.anonymous()

    claims = verify_access_token(token)
    if claims is None:
        logger.info("invalid_access_token")
        raise CredentialsException

    return Caller.for_user(claims.user_id, features=claims.features, plan=claims.plan)


CurrentCaller = Annotated[Caller, Depends(get_caller)]
