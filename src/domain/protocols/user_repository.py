"""UserRepository protocol for user persistence.

The token lifecycle depends on users only through this port. Implementations
flush changes into the caller's transaction and never commit on their own.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities import User


class UserRepository(Protocol):
    """User repository protocol (port).

    Implementations:
        - UserRepository (SQLAlchemy): src/infrastructure/persistence/repositories/

    Example:
        >>> class InMemoryUserRepository:
        ...     async def find_by_email(self, email: str) -> User | None:
        ...         ...
        >>> # Structurally compatible with UserRepository
    """

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID.

        Args:
            user_id: User's unique identifier.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email address (case-insensitive).

        Args:
            email: Email address to look up.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def find_by_username(self, username: str) -> User | None:
        """Find user by username."""
        ...

    async def save(self, user: User) -> None:
        """Persist a new user.

        Raises:
            IntegrityError: If email or username already exists (database
                constraint). Callers check uniqueness first.
        """
        ...

    async def update_password(self, user_id: UUID, password_hash: str) -> None:
        """Replace the password hash of a user.

        Args:
            user_id: User's unique identifier.
            password_hash: New bcrypt digest.

        Raises:
            NoResultFound: If the user does not exist.
        """
        ...

    async def set_email_verified(self, user_id: UUID) -> None:
        """Mark the user's email address as verified.

        Raises:
            NoResultFound: If the user does not exist.
        """
        ...
