from typing import TypeVar

from fastapi import HTTPException

from flashdeck.application.common.outcomes import ActionError
from flashdeck.application.common.result import Failure, Result

T = TypeVar("T")


def unwrap_or_raise(result: Result[T, ActionError]) -> T:
    """Return the success value or raise the failure as an HTTP error."""
    if isinstance(result, Failure):
        error = result.unwrap_error()
        raise HTTPException(status_code=error.status_code, detail=error.message)
    return result.unwrap()
