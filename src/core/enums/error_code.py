"""Domain-level error codes (machine-readable).

The string value of each member is the stable external error code that an
HTTP layer maps to a response. Values never change once released.

Categories:
- Signed token errors (TOKEN_*)
- Refresh token errors (*_REFRESH_TOKEN*)
- Single-use token errors (*_VERIFICATION_TOKEN*, *_RESET_TOKEN*)
- Configuration errors (INVALID_DURATION)
- Credential / account errors
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Signed token errors
    TOKEN_EXPIRED = "token_expired"
    TOKEN_INVALID = "token_invalid"

    # Refresh token errors
    INVALID_REFRESH_TOKEN = "invalid_refresh_token"
    REFRESH_TOKEN_EXPIRED = "refresh_token_expired"

    # Email verification token errors
    INVALID_VERIFICATION_TOKEN = "invalid_verification_token"
    VERIFICATION_TOKEN_EXPIRED = "verification_token_expired"

    # Password reset token errors
    INVALID_RESET_TOKEN = "invalid_reset_token"
    RESET_TOKEN_EXPIRED = "reset_token_expired"

    # Configuration errors
    INVALID_DURATION = "invalid_duration"

    # Credential and account errors
    INVALID_CREDENTIALS = "invalid_credentials"
    ACCOUNT_INACTIVE = "account_inactive"
    USER_NOT_FOUND = "user_not_found"
    EMAIL_ALREADY_EXISTS = "email_already_exists"
    USERNAME_ALREADY_EXISTS = "username_already_exists"
    EMAIL_ALREADY_VERIFIED = "email_already_verified"
