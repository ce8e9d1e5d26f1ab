"""Reasons a refresh token leaves the ACTIVE state.

Stored alongside ``revoked_at`` for audit. The reason never changes the
outcome of a later lookup: every revoked token is rejected the same way.
"""

from enum import Enum


class RevocationReason(str, Enum):
    """Why a refresh token was revoked."""

    LOGOUT = "logout"
    LOGOUT_ALL = "logout_all"
    ROTATED = "rotated"
    PASSWORD_CHANGED = "password_changed"
    PASSWORD_RESET = "password_reset"
