"""User domain entity.

Pure business data, no framework dependencies. The token lifecycle only
reads users (claims for access tokens, active flag on rotation); writes go
through the UserRepository port.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.enums import UserRole


@dataclass
class User:
    """User account as seen by the authentication flows.

    Attributes:
        id: Unique user identifier (UUID v7).
        email: Email address, unique across users.
        username: Display/login handle, unique across users.
        password_hash: Bcrypt digest (never plaintext).
        role: Authorization role carried in access tokens.
        is_active: Deactivated users cannot log in or rotate tokens.
        email_verified: Whether the email address has been confirmed.
        created_at: Creation timestamp (UTC).
        updated_at: Last modification timestamp (UTC).

    Example:
        >>> user = User(
        ...     id=uuid7(),
        ...     email="user@example.com",
        ...     username="user",
        ...     password_hash="$2b$12$...",
        ...     role=UserRole.USER,
        ...     is_active=True,
        ...     email_verified=False,
        ...     created_at=now,
        ...     updated_at=now,
        ... )
        >>> user.can_authenticate()
        True
    """

    id: UUID
    email: str
    username: str
    password_hash: str
    role: UserRole
    is_active: bool
    email_verified: bool
    created_at: datetime
    updated_at: datetime

    def can_authenticate(self) -> bool:
        """Check if the account may obtain new tokens."""
        return self.is_active
