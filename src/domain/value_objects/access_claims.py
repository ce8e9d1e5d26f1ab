"""Access token claims value object.

Access tokens carry everything a protected resource needs to authorize a
request without a user lookup. Refresh tokens carry only the subject, so
this value object is never built from a refresh token.
"""

from dataclasses import dataclass
from typing import Any
from uuid import UUID

from src.domain.entities import User
from src.domain.enums import UserRole


@dataclass(frozen=True, slots=True, kw_only=True)
class AccessClaims:
    """Identity claims embedded in an access token.

    Attributes:
        user_id: Subject of the token (``sub``).
        email: User email at issue time.
        username: Username at issue time.
        role: Authorization role at issue time.
        email_verified: Verification status at issue time.
    """

    user_id: UUID
    email: str
    username: str
    role: UserRole
    email_verified: bool

    @classmethod
    def from_user(cls, user: User) -> "AccessClaims":
        """Build claims from the current state of a user."""
        return cls(
            user_id=user.id,
            email=user.email,
            username=user.username,
            role=user.role,
            email_verified=user.email_verified,
        )

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "AccessClaims":
        """Build claims from a verified JWT payload.

        Raises:
            KeyError: If a required claim is missing.
            ValueError: If ``sub`` is not a UUID or ``role`` is unknown.
        """
        return cls(
            user_id=UUID(payload["sub"]),
            email=payload["email"],
            username=payload["username"],
            role=UserRole(payload["role"]),
            email_verified=bool(payload["email_verified"]),
        )

    def to_payload(self) -> dict[str, Any]:
        """Serialize to JWT identity claims (standard claims excluded)."""
        return {
            "sub": str(self.user_id),
            "email": self.email,
            "username": self.username,
            "role": self.role.value,
            "email_verified": self.email_verified,
        }
