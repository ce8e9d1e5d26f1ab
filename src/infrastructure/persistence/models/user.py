"""Users table.

Only the columns the token lifecycle reads are modelled here. Access tokens
embed ``email``, ``username``, ``role`` and ``email_verified``; ``is_active``
gates login and refresh rotation.
"""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from src.domain.enums import UserRole
from src.infrastructure.persistence.base import BaseMutableModel


class User(BaseMutableModel):
    """Account row referenced (ON DELETE CASCADE) by every token table."""

    __tablename__ = "users"

    # Stored lowercase; login lookups normalise before querying
    email: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True, index=True
    )
    username: Mapped[str] = mapped_column(
        String(50), nullable=False, unique=True, index=True
    )
    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="bcrypt digest",
    )
    role: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=UserRole.USER.value,
        comment="admin | moderator | user",
    )
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    email_verified: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username={self.username!r}, role={self.role!r})>"
