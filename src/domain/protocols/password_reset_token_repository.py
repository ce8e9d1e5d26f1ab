"""PasswordResetTokenRepository protocol (port) for domain layer.

Token Lifecycle:
    1. Created by forgot-password (1-hour default expiry); any earlier
       token of the user is deleted first
    2. Optionally checked without consuming (reset form pre-check)
    3. Consumed together with the password update and session revocation
    4. Expired rows cleaned up periodically
"""

from typing import Protocol

from src.domain.protocols.single_use_token_repository import (
    SingleUseTokenData,
    SingleUseTokenRepository,
)


class PasswordResetTokenData(SingleUseTokenData):
    """Password reset token row."""


class PasswordResetTokenRepository(SingleUseTokenRepository, Protocol):
    """Protocol for password reset token persistence.

    Implementations:
        - PasswordResetTokenRepository (SQLAlchemy): src/infrastructure/persistence/repositories/
    """
