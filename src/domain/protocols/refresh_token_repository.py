"""RefreshTokenRepository protocol (port) for domain layer.

This protocol defines the interface for refresh token persistence that the
token lifecycle needs. Infrastructure provides concrete implementations.

Following hexagonal architecture:
- Domain defines what it needs (protocol/port)
- Infrastructure provides implementation (adapter)
- Domain has no knowledge of how tokens are stored

Atomicity:
    Every state change is a conditional write (``WHERE revoked_at IS NULL``)
    so two callers racing on the same token cannot both win. Implementations
    flush but never commit; the caller's unit of work owns the transaction.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID

from src.domain.enums import RevocationReason, TokenState, derive_token_state


@dataclass
class RefreshTokenData:
    """Data transfer object for refresh token information.

    Used by protocol methods to return token data without
    exposing infrastructure model classes to domain/application layers.
    """

    id: UUID
    user_id: UUID
    token: str
    expires_at: datetime
    created_at: datetime
    revoked_at: datetime | None = None
    revoked_reason: RevocationReason | None = None
    replaced_by_token: str | None = None

    def state(self, now: datetime) -> TokenState:
        """Lifecycle state at ``now`` (REVOKED wins over EXPIRED)."""
        return derive_token_state(
            closed_at=self.revoked_at,
            closed_state=TokenState.REVOKED,
            expires_at=self.expires_at,
            now=now,
        )


class RefreshTokenRepository(Protocol):
    """Protocol for refresh token persistence operations.

    Token Lifecycle:
        1. Created at login / registration
        2. Looked up (active only) on refresh
        3. Rotated on every refresh (old revoked, new created)
        4. Revoked on logout, logout-all, password change or reset
        5. Expired rows deleted by the cleanup job

    Implementations:
        - RefreshTokenRepository (SQLAlchemy): src/infrastructure/persistence/repositories/
    """

    async def create(
        self,
        user_id: UUID,
        token: str,
        expires_at: datetime,
    ) -> RefreshTokenData:
        """Persist a new active refresh token.

        Args:
            user_id: Owner of the token.
            token: Signed refresh token string (unique).
            expires_at: Expiry timestamp of the row.

        Returns:
            Created RefreshTokenData.
        """
        ...

    async def find_active(self, token: str) -> RefreshTokenData | None:
        """Find a refresh token that has not been revoked.

        Does NOT check expiration; the caller distinguishes EXPIRED via
        ``RefreshTokenData.state``.

        Args:
            token: Refresh token string.

        Returns:
            RefreshTokenData if found and not revoked, None otherwise.
        """
        ...

    async def revoke(
        self,
        token: str,
        reason: RevocationReason,
        replacement: str | None = None,
    ) -> bool:
        """Revoke one token if it is still active.

        Args:
            token: Refresh token string.
            reason: Revocation reason recorded for audit.
            replacement: Token that replaced this one (rotation only).

        Returns:
            True if this call revoked the token, False if it was unknown or
            already revoked.
        """
        ...

    async def rotate(
        self,
        old_token: str,
        new_token: str,
        user_id: UUID,
        expires_at: datetime,
    ) -> RefreshTokenData | None:
        """Atomically revoke ``old_token`` and persist ``new_token``.

        Returns:
            The new RefreshTokenData, or None when ``old_token`` was no
            longer active (another caller rotated or revoked it first). In
            that case nothing is written.
        """
        ...

    async def revoke_all_for_user(
        self,
        user_id: UUID,
        reason: RevocationReason,
        except_token: str | None = None,
    ) -> int:
        """Revoke every active token of a user in one statement.

        Args:
            user_id: Owner of the tokens.
            reason: Revocation reason recorded for audit.
            except_token: Token to keep active (the caller's own session).

        Returns:
            Number of tokens revoked.
        """
        ...

    async def list_active_for_user(
        self,
        user_id: UUID,
        now: datetime,
    ) -> list[RefreshTokenData]:
        """List a user's unrevoked, unexpired tokens, newest first."""
        ...

    async def delete_expired(self, now: datetime) -> int:
        """Delete rows past expiry. Returns the number deleted."""
        ...
