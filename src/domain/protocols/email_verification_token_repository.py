"""EmailVerificationTokenRepository protocol (port) for domain layer.

Token Lifecycle:
    1. Created at registration or resend (24-hour default expiry); any
       earlier token of the user is deleted first
    2. Consumed once by the verify-email flow
    3. Expired rows cleaned up periodically
"""

from typing import Protocol

from src.domain.protocols.single_use_token_repository import (
    SingleUseTokenData,
    SingleUseTokenRepository,
)


class EmailVerificationTokenData(SingleUseTokenData):
    """Email verification token row."""


class EmailVerificationTokenRepository(SingleUseTokenRepository, Protocol):
    """Protocol for email verification token persistence.

    Implementations:
        - EmailVerificationTokenRepository (SQLAlchemy): src/infrastructure/persistence/repositories/
    """
