"""PasswordResetTokenRepository - SQLAlchemy implementation."""

from src.domain.protocols.password_reset_token_repository import (
    PasswordResetTokenData,
)
from src.infrastructure.persistence.models.password_reset_token import (
    PasswordResetToken,
)
from src.infrastructure.persistence.repositories.single_use_token_repository import (
    SingleUseTokenRepositoryBase,
)


class PasswordResetTokenRepository(
    SingleUseTokenRepositoryBase[PasswordResetToken, PasswordResetTokenData]
):
    """SQLAlchemy implementation for password reset token persistence.

    Consumption (mark_used) runs in the same session as the password
    update and the refresh token revocation, so all three commit together.
    """

    model = PasswordResetToken
    data_class = PasswordResetTokenData
