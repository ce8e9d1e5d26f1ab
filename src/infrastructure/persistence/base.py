"""Declarative base classes and column types for all database models.

Hierarchy:
    BaseModel (id, created_at)
        ├── BaseMutableModel (+ updated_at): users
        └── refresh_tokens, email_verification_tokens, password_reset_tokens

Domain entities never inherit from these; repositories map rows to domain
dataclasses.

Timestamps are assigned in Python rather than by the database. Rows are
then fully populated after a flush, so no attribute needs an implicit
reload (which an AsyncSession cannot do).
"""

from datetime import UTC, datetime
from uuid import UUID as PythonUUID

from sqlalchemy import DateTime, Dialect, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.types import TypeDecorator
from uuid_extensions import uuid7

from src.core.clock import utc_now


class UTCDateTime(TypeDecorator[datetime]):
    """DateTime column that always round-trips timezone-aware UTC values.

    PostgreSQL stores ``timestamptz`` and returns aware values. SQLite has
    no timezone support and returns naive values, which are tagged as UTC
    on the way out.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(
        self, value: datetime | None, dialect: Dialect
    ) -> datetime | None:
        if value is None:
            return None
        if value.tzinfo is None:
            msg = "Naive datetime passed to a UTC column"
            raise ValueError(msg)
        return value.astimezone(UTC)

    def process_result_value(
        self, value: datetime | None, dialect: Dialect
    ) -> datetime | None:
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)


class BaseModel(DeclarativeBase):
    """Base class for all database models.

    Provides common fields that ALL database models need:
    - id: UUID v7 primary key (time-ordered)
    - created_at: Timestamp when record was created (UTC)
    """

    __abstract__ = True

    id: Mapped[PythonUUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid7,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime,
        nullable=False,
        default=utc_now,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"


class BaseMutableModel(BaseModel):
    """BaseModel plus updated_at, refreshed from the clock on every UPDATE.

    Token tables are append-then-close (a single revoke/use update), so
    they derive from BaseModel directly and carry no updated_at.
    """

    __abstract__ = True

    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime,
        nullable=False,
        default=utc_now,
        onupdate=utc_now,
        server_default=func.now(),
    )
