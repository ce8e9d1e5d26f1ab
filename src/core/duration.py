"""Human-readable duration parsing for token lifetimes.

Token lifetimes are configured as short offsets such as ``"15m"``,
``"15 minutes"``, ``"7d"`` or ``"1 hour"``. A bare integer is read as
seconds. They are converted to ``timedelta`` once at startup and then added
to the issue time of each token.

Usage:
    >>> from src.core.duration import parse_duration
    >>> parse_duration("15m")
    Success(value=datetime.timedelta(seconds=900))
    >>> parse_duration("fortnight")
    Failure(error=DomainError(code=<ErrorCode.INVALID_DURATION: ...>, ...))
"""

import re
from datetime import timedelta

from src.core.constants import MAX_DURATION_SECONDS
from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success

_DURATION_PATTERN = re.compile(r"^\s*(?P<amount>\d+)\s*(?P<unit>[a-zA-Z]*)\s*$")

_UNIT_SECONDS: dict[str, int] = {
    "": 1,
    "s": 1,
    "sec": 1,
    "secs": 1,
    "second": 1,
    "seconds": 1,
    "m": 60,
    "min": 60,
    "mins": 60,
    "minute": 60,
    "minutes": 60,
    "h": 3600,
    "hr": 3600,
    "hrs": 3600,
    "hour": 3600,
    "hours": 3600,
    "d": 86400,
    "day": 86400,
    "days": 86400,
}


def parse_duration(text: str) -> Result[timedelta, DomainError]:
    """Parse a human-readable duration into a timedelta.

    Args:
        text: Offset such as "30s", "15 minutes", "12h", "7 days" or "900".

    Returns:
        Success(timedelta) for a positive, well-formed duration of at most
        MAX_DURATION_SECONDS.
        Failure(DomainError) with ErrorCode.INVALID_DURATION otherwise.
    """
    match = _DURATION_PATTERN.match(text or "")
    if match is None:
        return Failure(error=_invalid(text))

    unit = match.group("unit").lower()
    multiplier = _UNIT_SECONDS.get(unit)
    if multiplier is None:
        return Failure(error=_invalid(text))

    seconds = int(match.group("amount")) * multiplier
    if not 0 < seconds <= MAX_DURATION_SECONDS:
        return Failure(error=_invalid(text))

    return Success(value=timedelta(seconds=seconds))


def _invalid(text: str) -> DomainError:
    return DomainError(
        code=ErrorCode.INVALID_DURATION,
        message=f"Invalid duration: {text!r}. Use forms like '30s', '15m', '12h', '7d'.",
    )
