"""Repository factories.

Repositories are request-scoped: each one wraps the AsyncSession of the
current unit of work, so everything built from one session commits or rolls
back together.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from src.infrastructure.persistence.repositories import (
    EmailVerificationTokenRepository,
    PasswordResetTokenRepository,
    RefreshTokenRepository,
    UserRepository,
)


def get_user_repository(session: AsyncSession) -> UserRepository:
    return UserRepository(session=session)


def get_refresh_token_repository(session: AsyncSession) -> RefreshTokenRepository:
    return RefreshTokenRepository(session=session)


def get_email_verification_token_repository(
    session: AsyncSession,
) -> EmailVerificationTokenRepository:
    return EmailVerificationTokenRepository(session=session)


def get_password_reset_token_repository(
    session: AsyncSession,
) -> PasswordResetTokenRepository:
    return PasswordResetTokenRepository(session=session)
