"""Password reset token table.

Consuming a row happens in the same transaction as the password update and
the revocation of every refresh token of the user. Default lifetime is one
hour.
"""

from src.infrastructure.persistence.base import BaseModel
from src.infrastructure.persistence.models.single_use_token import (
    SingleUseTokenMixin,
)


class PasswordResetToken(SingleUseTokenMixin, BaseModel):
    __tablename__ = "password_reset_tokens"
