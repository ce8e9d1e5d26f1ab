"""Opaque token generator protocol.

Opaque tokens back the single-use email verification and password reset
flows. They carry no meaning of their own; the token store is the source
of truth.
"""

from datetime import datetime
from typing import Protocol


class OpaqueTokenGeneratorProtocol(Protocol):
    """Random token generation interface.

    Implementations:
        - OpaqueTokenGenerator: ``secrets.token_hex(32)`` (64 hex chars)
    """

    def generate(self) -> str:
        """Return a new cryptographically random token string."""
        ...

    def expiry_from(self, now: datetime, seconds: int) -> datetime:
        """Return ``now`` plus ``seconds``."""
        ...
