"""Authentication commands (CQRS write operations).

Commands represent user intent to change system state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic
- Commands don't return values (handlers return Result types)

Input shape (email format, password strength) is validated before a command
is built; handlers assume well-formed fields.
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.enums import UserRole


@dataclass(frozen=True, kw_only=True)
class RegisterUser:
    """Register new user account.

    Creates the user and, when email verification is enabled, issues a
    verification token and emails it.

    Example:
        >>> command = RegisterUser(
        ...     email="user@example.com",
        ...     username="user",
        ...     password="SecurePass123!",
        ... )
        >>> result = await handler.handle(command)
    """

    email: str
    username: str
    password: str
    role: UserRole = UserRole.USER


@dataclass(frozen=True, kw_only=True)
class LoginUser:
    """Authenticate credentials and open a new session (token pair)."""

    email: str
    password: str


@dataclass(frozen=True, kw_only=True)
class RefreshAccessToken:
    """Exchange a refresh token for a new token pair."""

    refresh_token: str


@dataclass(frozen=True, kw_only=True)
class LogoutUser:
    """End the session identified by a refresh token."""

    refresh_token: str


@dataclass(frozen=True, kw_only=True)
class LogoutAllSessions:
    """End every session of a user."""

    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class VerifyEmail:
    """Confirm an email address with the token from the verification email."""

    token: str


@dataclass(frozen=True, kw_only=True)
class ResendVerification:
    """Issue and send a fresh verification token."""

    email: str


@dataclass(frozen=True, kw_only=True)
class RequestPasswordReset:
    """Issue and send a password reset token."""

    email: str


@dataclass(frozen=True, kw_only=True)
class ConfirmPasswordReset:
    """Set a new password with a reset token.

    Every session of the user is revoked on success.
    """

    token: str
    new_password: str


@dataclass(frozen=True, kw_only=True)
class ChangePassword:
    """Change the password of an authenticated user.

    Attributes:
        user_id: Authenticated user.
        current_password: Proof of knowledge of the current password.
        new_password: Replacement password (plain text, will be hashed).
        current_refresh_token: Session to keep; every other session is
            revoked. None revokes all sessions.
    """

    user_id: UUID
    current_password: str
    new_password: str
    current_refresh_token: str | None = None


@dataclass(frozen=True, kw_only=True)
class CleanupExpiredTokens:
    """Delete expired rows of every token kind."""
