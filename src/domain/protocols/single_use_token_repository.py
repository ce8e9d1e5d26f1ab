"""Shared shape of single-use token persistence.

Email verification and password reset tokens have identical storage and
lifecycle: one random token per row, consumed once, time-boxed. The two
concrete ports alias this protocol so call sites stay explicit about which
kind of token they handle.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID

from src.domain.enums import TokenState, derive_token_state


@dataclass
class SingleUseTokenData:
    """Data transfer object for a single-use token row."""

    id: UUID
    user_id: UUID
    token: str
    expires_at: datetime
    created_at: datetime
    used_at: datetime | None = None

    def state(self, now: datetime) -> TokenState:
        """Lifecycle state at ``now`` (USED wins over EXPIRED)."""
        return derive_token_state(
            closed_at=self.used_at,
            closed_state=TokenState.USED,
            expires_at=self.expires_at,
            now=now,
        )


class SingleUseTokenRepository(Protocol):
    """Protocol for single-use token persistence operations."""

    async def create(
        self,
        user_id: UUID,
        token: str,
        expires_at: datetime,
    ) -> SingleUseTokenData:
        """Persist a new unused token.

        Args:
            user_id: Owner of the token.
            token: Random hex token (64 characters, 32 bytes).
            expires_at: Expiry timestamp.

        Returns:
            Created token data.
        """
        ...

    async def find_active(self, token: str) -> SingleUseTokenData | None:
        """Find an unused token by its string.

        Does NOT check expiration. An expired token is returned so the
        caller can report "expired" rather than "invalid".
        """
        ...

    async def mark_used(self, token: str) -> bool:
        """Mark a token used if it is still unused.

        Returns:
            True if this call consumed the token, False if it was already
            used (or never existed). A False result is not an error.
        """
        ...

    async def delete_for_user(self, user_id: UUID) -> int:
        """Delete every token of a user. Returns the number deleted."""
        ...

    async def delete_expired(self, now: datetime) -> int:
        """Delete rows past expiry. Returns the number deleted."""
        ...
