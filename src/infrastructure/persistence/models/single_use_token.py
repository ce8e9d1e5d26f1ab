"""Columns shared by the single-use token tables.

Email verification and password reset tokens are opaque 64-character hex
strings that live for a fixed window and can be consumed once. A row is
closed by setting ``used_at`` with a conditional UPDATE; it is never
reopened.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from src.core.constants import TOKEN_HEX_LENGTH
from src.infrastructure.persistence.base import UTCDateTime


class SingleUseTokenMixin:
    """user_id / token / expires_at / used_at for a single-use token table.

    Foreign Keys:
        - user_id: References users(id) ON DELETE CASCADE
    """

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    token: Mapped[str] = mapped_column(
        String(TOKEN_HEX_LENGTH),
        nullable=False,
        unique=True,
        index=True,
    )

    expires_at: Mapped[datetime] = mapped_column(
        UTCDateTime,
        nullable=False,
        index=True,
    )

    used_at: Mapped[datetime | None] = mapped_column(
        UTCDateTime,
        nullable=True,
        default=None,
    )

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__}("
            f"id={self.id}, "  # type: ignore[attr-defined]
            f"user_id={self.user_id}, "
            f"used={self.used_at is not None}"
            f")>"
        )
