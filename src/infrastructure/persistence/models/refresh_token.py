"""Refresh token table.

A signed refresh token is only honoured while its row is open: present,
``revoked_at`` NULL and ``expires_at`` not yet passed. Rotation closes the
row (reason ``rotated``) and records the successor in ``replaced_by_token``.
Closed rows are kept for audit until cleanup removes them after expiry.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel, UTCDateTime

# Signed HS256 refresh tokens stay well under this.
MAX_TOKEN_LENGTH = 1024


class RefreshToken(BaseModel):
    """One login session.

    Indexes:
        - ix_refresh_tokens_user_id: bulk revocation (logout-all, password change)
        - ix_refresh_tokens_token: unique lookup on refresh and logout
        - ix_refresh_tokens_expires_at: cleanup
        - idx_refresh_tokens_active: open sessions per user (partial on PostgreSQL)
    """

    __tablename__ = "refresh_tokens"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    token: Mapped[str] = mapped_column(
        String(MAX_TOKEN_LENGTH),
        nullable=False,
        unique=True,
        index=True,
        comment="Signed refresh token",
    )
    expires_at: Mapped[datetime] = mapped_column(
        UTCDateTime,
        nullable=False,
        index=True,
        comment="Timestamp when token expires",
    )
    revoked_at: Mapped[datetime | None] = mapped_column(
        UTCDateTime,
        nullable=True,
        default=None,
        comment="Timestamp when token was revoked (nullable)",
    )
    revoked_reason: Mapped[str | None] = mapped_column(
        String(32),
        nullable=True,
        default=None,
        comment="Reason for revocation (logout, rotated, password_changed, ...)",
    )
    replaced_by_token: Mapped[str | None] = mapped_column(
        String(MAX_TOKEN_LENGTH),
        nullable=True,
        default=None,
        comment="Token issued in place of this one by rotation",
    )

    __table_args__ = (
        Index(
            "idx_refresh_tokens_active",
            "user_id",
            "revoked_at",
            postgresql_where="revoked_at IS NULL",
        ),
    )

    def __repr__(self) -> str:
        state = "revoked" if self.revoked_at is not None else "open"
        return f"<RefreshToken(id={self.id}, user_id={self.user_id}, {state})>"
