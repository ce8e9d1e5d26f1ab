"""Database models for persistence layer.

These are infrastructure concerns and should not be imported by the domain
layer. Repositories map them to domain dataclasses.

Models Organization:
    - user.py: User model
    - refresh_token.py: Refresh token model
    - email_verification_token.py: Email verification token model
    - password_reset_token.py: Password reset token model
    - single_use_token.py: Columns shared by the two single-use token tables
"""

from src.infrastructure.persistence.models.email_verification_token import (
    EmailVerificationToken,
)
from src.infrastructure.persistence.models.password_reset_token import (
    PasswordResetToken,
)
from src.infrastructure.persistence.models.refresh_token import RefreshToken
from src.infrastructure.persistence.models.user import User

__all__ = [
    "EmailVerificationToken",
    "PasswordResetToken",
    "RefreshToken",
    "User",
]
