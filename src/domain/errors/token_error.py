"""Token lifecycle domain errors.

Every failure of the token lifecycle is a value, never an exception. Each
error carries a stable ErrorCode (the external contract) and a message
specific enough for the caller to act on (log in again, request a new
email, and so on).

Usage:
    from src.domain.errors import TokenError

    match service.rotate(refresh_token):
        case Failure(error) if error.code == ErrorCode.REFRESH_TOKEN_EXPIRED:
            ...
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode
from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class TokenError(DomainError):
    """Failure raised by the token codec or the token lifecycle service."""

    @classmethod
    def token_expired(cls) -> "TokenError":
        return cls(code=ErrorCode.TOKEN_EXPIRED, message="Token has expired")

    @classmethod
    def token_invalid(cls) -> "TokenError":
        return cls(code=ErrorCode.TOKEN_INVALID, message="Invalid token")

    @classmethod
    def invalid_refresh_token(cls) -> "TokenError":
        return cls(
            code=ErrorCode.INVALID_REFRESH_TOKEN,
            message="Invalid refresh token",
        )

    @classmethod
    def refresh_token_expired(cls) -> "TokenError":
        return cls(
            code=ErrorCode.REFRESH_TOKEN_EXPIRED,
            message="Refresh token has expired. Please log in again.",
        )

    @classmethod
    def invalid_verification_token(cls) -> "TokenError":
        return cls(
            code=ErrorCode.INVALID_VERIFICATION_TOKEN,
            message="Invalid verification token",
        )

    @classmethod
    def verification_token_expired(cls) -> "TokenError":
        return cls(
            code=ErrorCode.VERIFICATION_TOKEN_EXPIRED,
            message=(
                "Verification token has expired. "
                "Please request a new verification email."
            ),
        )

    @classmethod
    def invalid_reset_token(cls) -> "TokenError":
        return cls(code=ErrorCode.INVALID_RESET_TOKEN, message="Invalid reset token")

    @classmethod
    def reset_token_expired(cls) -> "TokenError":
        return cls(
            code=ErrorCode.RESET_TOKEN_EXPIRED,
            message="Reset token has expired. Please request a new password reset.",
        )
