"""
Application common module.

Contains shared building blocks for use cases:
- Result: Success/Failure outcome of an action
- ActionError: user-safe failure payload
"""

from .outcomes import ActionError, ErrorKind, failure_from_exception
from .result import Failure, Result, Success

__all__ = [
    "ActionError",
    "ErrorKind",
    "Failure",
    "Result",
    "Success",
    "failure_from_exception",
]
