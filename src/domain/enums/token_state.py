"""Lifecycle state of a persisted token.

Token rows store their lifecycle in nullable timestamp columns
(``revoked_at`` / ``used_at``, ``expires_at``). The state is derived from
those timestamps once, at load time, so call sites compare enum members
instead of re-implementing timestamp logic.

State machine (no transition back to ACTIVE):

    ACTIVE --revoke--> REVOKED   (refresh tokens)
    ACTIVE --consume-> USED      (verification / reset tokens)
    ACTIVE --time----> EXPIRED   (implicit, garbage-collected later)
"""

from datetime import datetime
from enum import Enum


class TokenState(str, Enum):
    """Derived state of a token record."""

    ACTIVE = "active"
    REVOKED = "revoked"
    USED = "used"
    EXPIRED = "expired"


def derive_token_state(
    *,
    closed_at: datetime | None,
    closed_state: TokenState,
    expires_at: datetime,
    now: datetime,
) -> TokenState:
    """Derive a token's state from its timestamps.

    A closed token (revoked or used) reports ``closed_state`` even when it is
    also past expiry. A token is still active at exactly ``expires_at``.

    Args:
        closed_at: ``revoked_at`` or ``used_at`` of the record.
        closed_state: REVOKED for refresh tokens, USED for single-use tokens.
        expires_at: Expiry timestamp of the record.
        now: Current time (timezone-aware).

    Returns:
        Derived TokenState.
    """
    if closed_at is not None:
        return closed_state
    if now > expires_at:
        return TokenState.EXPIRED
    return TokenState.ACTIVE
