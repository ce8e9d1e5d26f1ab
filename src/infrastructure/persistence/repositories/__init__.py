"""Repository implementations (adapters) for the persistence ports."""

from src.infrastructure.persistence.repositories.email_verification_token_repository import (
    EmailVerificationTokenRepository,
)
from src.infrastructure.persistence.repositories.password_reset_token_repository import (
    PasswordResetTokenRepository,
)
from src.infrastructure.persistence.repositories.refresh_token_repository import (
    RefreshTokenRepository,
)
from src.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = [
    "EmailVerificationTokenRepository",
    "PasswordResetTokenRepository",
    "RefreshTokenRepository",
    "UserRepository",
]
