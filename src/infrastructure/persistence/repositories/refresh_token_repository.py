"""RefreshTokenRepository - SQLAlchemy implementation for refresh token persistence.

Every state change is a conditional UPDATE whose affected-row count decides
the outcome, so concurrent callers on the same token serialize on the row
instead of on a read. Rotation and bulk revocation of one user additionally
lock the owning users row first, so a bulk revoke never runs beside a
rotation and misses the token that rotation inserts. The repository only
flushes; the session owner commits or rolls back.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.engine import CursorResult
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.clock import Clock, utc_now
from src.domain.enums import RevocationReason
from src.domain.protocols.refresh_token_repository import RefreshTokenData
from src.infrastructure.persistence.models.refresh_token import RefreshToken
from src.infrastructure.persistence.models.user import User as UserModel


def _to_data(model: RefreshToken) -> RefreshTokenData:
    """Convert database model to domain DTO."""
    return RefreshTokenData(
        id=model.id,
        user_id=model.user_id,
        token=model.token,
        expires_at=model.expires_at,
        created_at=model.created_at,
        revoked_at=model.revoked_at,
        revoked_reason=(
            RevocationReason(model.revoked_reason) if model.revoked_reason else None
        ),
        replaced_by_token=model.replaced_by_token,
    )


class RefreshTokenRepository:
    """SQLAlchemy implementation for refresh token persistence.

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = RefreshTokenRepository(session)
        ...     token = await repo.find_active(refresh_token)
    """

    def __init__(self, session: AsyncSession, clock: Clock = utc_now) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
            clock: Source of revocation and creation timestamps.
        """
        self.session = session
        self._clock = clock

    async def create(
        self,
        user_id: UUID,
        token: str,
        expires_at: datetime,
    ) -> RefreshTokenData:
        """Persist a new active refresh token.

        Raises:
            IntegrityError: If the token string already exists or the user
                does not exist.
        """
        model = RefreshToken(
            user_id=user_id,
            token=token,
            expires_at=expires_at,
            created_at=self._clock(),
        )
        self.session.add(model)
        await self.session.flush()
        return _to_data(model)

    async def find_active(self, token: str) -> RefreshTokenData | None:
        """Find an unrevoked refresh token (expiry not checked)."""
        stmt = (
            select(RefreshToken)
            .where(RefreshToken.token == token)
            .where(RefreshToken.revoked_at.is_(None))
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return _to_data(model) if model else None

    async def revoke(
        self,
        token: str,
        reason: RevocationReason,
        replacement: str | None = None,
    ) -> bool:
        """Revoke one token if still active.

        Returns:
            True if this call revoked it, False otherwise.
        """
        stmt = (
            update(RefreshToken)
            .where(RefreshToken.token == token)
            .where(RefreshToken.revoked_at.is_(None))
            .values(
                revoked_at=self._clock(),
                revoked_reason=reason.value,
                replaced_by_token=replacement,
            )
            .execution_options(synchronize_session=False)
        )
        result: CursorResult = await self.session.execute(stmt)  # type: ignore[assignment]
        return result.rowcount == 1

    async def rotate(
        self,
        old_token: str,
        new_token: str,
        user_id: UUID,
        expires_at: datetime,
    ) -> RefreshTokenData | None:
        """Revoke ``old_token`` (reason: rotated) and persist ``new_token``.

        The owner is locked first (see ``lock_owner``). The revoke is a
        conditional update on ``revoked_at IS NULL``. If it matches no row,
        another caller already rotated or revoked the token and nothing is
        written.

        Returns:
            The new token data, or None if ``old_token`` was not active.
        """
        await self.lock_owner(user_id)
        claimed = await self.revoke(
            old_token,
            RevocationReason.ROTATED,
            replacement=new_token,
        )
        if not claimed:
            return None
        return await self.create(user_id, new_token, expires_at)

    async def revoke_all_for_user(
        self,
        user_id: UUID,
        reason: RevocationReason,
        except_token: str | None = None,
    ) -> int:
        """Revoke every active token of a user in a single UPDATE.

        Holds the owner lock, so a rotation of the same user either commits
        before this statement (its new token is revoked here) or starts after
        it (and finds its old token revoked).

        Returns:
            Number of tokens revoked.
        """
        await self.lock_owner(user_id)
        stmt = (
            update(RefreshToken)
            .where(RefreshToken.user_id == user_id)
            .where(RefreshToken.revoked_at.is_(None))
            .values(revoked_at=self._clock(), revoked_reason=reason.value)
            .execution_options(synchronize_session=False)
        )
        if except_token is not None:
            stmt = stmt.where(RefreshToken.token != except_token)
        result: CursorResult = await self.session.execute(stmt)  # type: ignore[assignment]
        return result.rowcount

    async def lock_owner(self, user_id: UUID) -> None:
        """Row-lock the user until the transaction ends.

        SELECT ... FOR UPDATE on PostgreSQL. SQLite has no row locks; it
        allows one writer at a time and the clause is not emitted.
        """
        await self.session.execute(
            select(UserModel.id).where(UserModel.id == user_id).with_for_update()
        )

    async def list_active_for_user(
        self,
        user_id: UUID,
        now: datetime,
    ) -> list[RefreshTokenData]:
        """List unrevoked, unexpired tokens of a user, newest first."""
        stmt = (
            select(RefreshToken)
            .where(RefreshToken.user_id == user_id)
            .where(RefreshToken.revoked_at.is_(None))
            .where(RefreshToken.expires_at >= now)
            .order_by(RefreshToken.created_at.desc(), RefreshToken.id.desc())
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return [_to_data(model) for model in result.scalars().all()]

    async def delete_expired(self, now: datetime) -> int:
        """Delete tokens whose expiry is before ``now``.

        Returns:
            Number of rows deleted.
        """
        stmt = (
            delete(RefreshToken)
            .where(RefreshToken.expires_at < now)
            .execution_options(synchronize_session=False)
        )
        result: CursorResult = await self.session.execute(stmt)  # type: ignore[assignment]
        return result.rowcount
