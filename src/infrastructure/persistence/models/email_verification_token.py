"""Email verification token table.

Issued at registration and on resend (any earlier token of the user is
deleted first), consumed by verify-email, removed by cleanup after
``expires_at``. Default lifetime is 24 hours.
"""

from src.infrastructure.persistence.base import BaseModel
from src.infrastructure.persistence.models.single_use_token import (
    SingleUseTokenMixin,
)


class EmailVerificationToken(SingleUseTokenMixin, BaseModel):
    __tablename__ = "email_verification_tokens"
