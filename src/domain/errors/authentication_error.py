"""Authentication flow domain errors.

Errors returned by the registration, login and password flows. Like
TokenError these are values carried in Failure, never raised.
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode
from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthError(DomainError):
    """Failure of an authentication flow.

    INVALID_CREDENTIALS covers both "no such email" and
    "wrong password" so login responses do not reveal registered emails.
    """

    @classmethod
    def invalid_credentials(
        cls,
        message: str = "Invalid email or password",
    ) -> "AuthError":
        return cls(code=ErrorCode.INVALID_CREDENTIALS, message=message)

    @classmethod
    def account_inactive(cls) -> "AuthError":
        return cls(
            code=ErrorCode.ACCOUNT_INACTIVE,
            message="Account is inactive. Please contact support.",
        )

    @classmethod
    def user_not_found(cls) -> "AuthError":
        return cls(code=ErrorCode.USER_NOT_FOUND, message="User not found")

    @classmethod
    def email_already_exists(cls) -> "AuthError":
        return cls(
            code=ErrorCode.EMAIL_ALREADY_EXISTS,
            message="Email already registered",
        )

    @classmethod
    def username_already_exists(cls) -> "AuthError":
        return cls(
            code=ErrorCode.USERNAME_ALREADY_EXISTS,
            message="Username already taken",
        )

    @classmethod
    def email_already_verified(cls) -> "AuthError":
        return cls(
            code=ErrorCode.EMAIL_ALREADY_VERIFIED,
            message="Email is already verified",
        )
