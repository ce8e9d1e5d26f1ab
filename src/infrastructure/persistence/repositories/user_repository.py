"""UserRepository - SQLAlchemy implementation of UserRepository protocol.

Adapter for hexagonal architecture.
Maps between domain User entities and database UserModel.
"""

from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.engine import CursorResult
from sqlalchemy.exc import NoResultFound
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.clock import Clock, utc_now
from src.domain.entities.user import User
from src.domain.enums import UserRole
from src.infrastructure.persistence.models.user import User as UserModel


class UserRepository:
    """SQLAlchemy implementation of UserRepository protocol.

    This class does NOT inherit from UserRepository protocol (Protocol uses
    structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = UserRepository(session)
        ...     user = await repo.find_by_email("user@example.com")
    """

    def __init__(self, session: AsyncSession, clock: Clock = utc_now) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
            clock: Source of updated_at timestamps.
        """
        self.session = session
        self._clock = clock

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID.

        Returns:
            Domain User entity if found, None otherwise.
        """
        stmt = (
            select(UserModel)
            .where(UserModel.id == user_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return self._to_domain(user_model)

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email address (case-insensitive)."""
        stmt = (
            select(UserModel)
            .where(func.lower(UserModel.email) == email.strip().lower())
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return self._to_domain(user_model)

    async def find_by_username(self, username: str) -> User | None:
        """Find user by username (exact match)."""
        stmt = (
            select(UserModel)
            .where(UserModel.username == username)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return self._to_domain(user_model)

    async def save(self, user: User) -> None:
        """Create new user in database.

        Email is stored lowercase.

        Raises:
            IntegrityError: If email or username already exists.
        """
        user_model = UserModel(
            id=user.id,
            email=user.email.strip().lower(),
            username=user.username,
            password_hash=user.password_hash,
            role=user.role.value,
            is_active=user.is_active,
            email_verified=user.email_verified,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
        self.session.add(user_model)
        await self.session.flush()

    async def update_password(self, user_id: UUID, password_hash: str) -> None:
        """Replace the password hash of a user.

        Raises:
            NoResultFound: If the user does not exist.
        """
        await self._update(user_id, password_hash=password_hash)

    async def set_email_verified(self, user_id: UUID) -> None:
        """Mark the user's email address as verified.

        Raises:
            NoResultFound: If the user does not exist.
        """
        await self._update(user_id, email_verified=True)

    async def _update(self, user_id: UUID, **values: object) -> None:
        stmt = (
            update(UserModel)
            .where(UserModel.id == user_id)
            .values(updated_at=self._clock(), **values)
            .execution_options(synchronize_session=False)
        )
        result: CursorResult = await self.session.execute(stmt)  # type: ignore[assignment]
        if result.rowcount == 0:
            msg = f"User {user_id} not found"
            raise NoResultFound(msg)

    def _to_domain(self, user_model: UserModel) -> User:
        """Convert database model to domain entity."""
        return User(
            id=user_model.id,
            email=user_model.email,
            username=user_model.username,
            password_hash=user_model.password_hash,
            role=UserRole(user_model.role),
            is_active=user_model.is_active,
            email_verified=user_model.email_verified,
            created_at=user_model.created_at,
            updated_at=user_model.updated_at,
        )
