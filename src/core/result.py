"""Result types for railway-oriented programming.

Token lifecycle operations fail in expected, well-defined ways (expired
token, unknown token, wrong password). Those outcomes are returned as values
instead of raised, so every caller has to decide what to do with them.

Usage:
    def rotate(token: str) -> Result[TokenPair, TokenError]:
        record = store.find_active(token)
        if record is None:
            return Failure(error=TokenError.invalid_refresh_token())
        return Success(value=pair)

    match service.rotate(token):
        case Success(value=pair):
            ...
        case Failure(error=error):
            log(error.code.value)
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


Result: TypeAlias = Success[T] | Failure[E]
