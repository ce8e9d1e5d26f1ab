"""Shared SQLAlchemy implementation of single-use token persistence.

Email verification and password reset tokens share one table shape and one
lifecycle, so both repositories are thin subclasses binding a model class
and a DTO class.
"""

from datetime import datetime
from typing import Generic, TypeVar
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.engine import CursorResult
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.clock import Clock, utc_now
from src.domain.protocols.single_use_token_repository import SingleUseTokenData
from src.infrastructure.persistence.models import (
    EmailVerificationToken,
    PasswordResetToken,
)


M = TypeVar("M", EmailVerificationToken, PasswordResetToken)
D = TypeVar("D", bound=SingleUseTokenData)


class SingleUseTokenRepositoryBase(Generic[M, D]):
    """Base repository for single-use tokens.

    Subclasses set ``model`` and ``data_class``.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    model: type[M]
    data_class: type[D]

    def __init__(self, session: AsyncSession, clock: Clock = utc_now) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
            clock: Source of creation and consumption timestamps.
        """
        self.session = session
        self._clock = clock

    def _to_data(self, model: M) -> D:
        return self.data_class(
            id=model.id,
            user_id=model.user_id,
            token=model.token,
            expires_at=model.expires_at,
            created_at=model.created_at,
            used_at=model.used_at,
        )

    async def create(self, user_id: UUID, token: str, expires_at: datetime) -> D:
        """Persist a new unused token.

        Raises:
            IntegrityError: If the token string already exists or the user
                does not exist.
        """
        instance = self.model(
            user_id=user_id,
            token=token,
            expires_at=expires_at,
            created_at=self._clock(),
        )
        self.session.add(instance)
        await self.session.flush()
        return self._to_data(instance)

    async def find_active(self, token: str) -> D | None:
        """Find an unused token (expiry not checked)."""
        stmt = (
            select(self.model)
            .where(self.model.token == token)
            .where(self.model.used_at.is_(None))
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        instance = result.scalar_one_or_none()
        return self._to_data(instance) if instance else None

    async def mark_used(self, token: str) -> bool:
        """Consume a token with ``UPDATE ... WHERE used_at IS NULL``.

        Returns:
            True if this call consumed the token, False if it was already
            used or does not exist.
        """
        stmt = (
            update(self.model)
            .where(self.model.token == token)
            .where(self.model.used_at.is_(None))
            .values(used_at=self._clock())
            .execution_options(synchronize_session=False)
        )
        result: CursorResult = await self.session.execute(stmt)  # type: ignore[assignment]
        return result.rowcount == 1

    async def delete_for_user(self, user_id: UUID) -> int:
        """Delete every token of a user. Returns the number deleted."""
        stmt = (
            delete(self.model)
            .where(self.model.user_id == user_id)
            .execution_options(synchronize_session=False)
        )
        result: CursorResult = await self.session.execute(stmt)  # type: ignore[assignment]
        return result.rowcount

    async def delete_expired(self, now: datetime) -> int:
        """Delete tokens whose expiry is before ``now``."""
        stmt = (
            delete(self.model)
            .where(self.model.expires_at < now)
            .execution_options(synchronize_session=False)
        )
        result: CursorResult = await self.session.execute(stmt)  # type: ignore[assignment]
        return result.rowcount
