"""Clock abstraction.

Every component that reads the current time accepts a ``clock`` callable so
tests can pin or advance time without patching the standard library.
"""

from collections.abc import Callable
from datetime import UTC, datetime
from typing import TypeAlias

Clock: TypeAlias = Callable[[], datetime]


def utc_now() -> datetime:
    """Return the current time as a timezone-aware UTC datetime."""
    return datetime.now(UTC)
