"""Shared test helpers (plain functions and classes, not fixtures)."""

from datetime import UTC, datetime, timedelta

from uuid_extensions import uuid7

from src.application.services import TokenLifecycleService
from src.domain.entities import User
from src.domain.enums import UserRole
from src.infrastructure.persistence.repositories import (
    EmailVerificationTokenRepository,
    PasswordResetTokenRepository,
    RefreshTokenRepository,
    UserRepository,
)
from src.infrastructure.security import OpaqueTokenGenerator

TEST_SECRET_KEY = "x" * 32
TEST_ISSUER = "warden-test"
TEST_AUDIENCE = "warden-test-clients"
START_TIME = datetime(2030, 1, 1, 12, 0, 0, tzinfo=UTC)


class FakeClock:
    """Settable clock.

    Usage:
        clock = FakeClock()
        codec = JWTService(..., clock=clock)
        clock.advance(minutes=16)
    """

    def __init__(self, now: datetime = START_TIME) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **delta: float) -> None:
        self.now = self.now + timedelta(**delta)


def make_user(
    email: str = "alice@example.com",
    username: str = "alice",
    password_hash: str = "hashed_password",
    role: UserRole = UserRole.USER,
    is_active: bool = True,
    email_verified: bool = False,
    now: datetime = START_TIME,
) -> User:
    """Create a domain User with all required fields."""
    return User(
        id=uuid7(),
        email=email,
        username=username,
        password_hash=password_hash,
        role=role,
        is_active=is_active,
        email_verified=email_verified,
        created_at=now,
        updated_at=now,
    )


def build_service(session, clock, token_codec, logger) -> TokenLifecycleService:
    """Wire a TokenLifecycleService on one session."""
    return TokenLifecycleService(
        user_repo=UserRepository(session, clock=clock),
        refresh_token_repo=RefreshTokenRepository(session, clock=clock),
        verification_token_repo=EmailVerificationTokenRepository(session, clock=clock),
        reset_token_repo=PasswordResetTokenRepository(session, clock=clock),
        token_codec=token_codec,
        token_generator=OpaqueTokenGenerator(),
        logger=logger,
        email_verification_expiry_seconds=86400,
        password_reset_expiry_seconds=3600,
        clock=clock,
    )
