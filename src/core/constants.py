"""Centralized constants for internal implementation details.

This module contains constants that are internal implementation details,
NOT environment-specific configuration. For environment-specific settings,
use `src/core/config.py` instead.

Example:
    >>> from src.core.constants import TOKEN_BYTES
    >>> token = secrets.token_hex(TOKEN_BYTES)
"""

# =============================================================================
# Token and Key Lengths
# =============================================================================

TOKEN_BYTES: int = 32
"""Number of bytes for opaque token generation (32 bytes = 256 bits)."""

TOKEN_HEX_LENGTH: int = 64
"""Length of hex-encoded opaque token string (TOKEN_BYTES * 2)."""

MIN_SECRET_KEY_LENGTH: int = 32
"""Minimum HMAC signing secret length in bytes (256 bits)."""

BCRYPT_ROUNDS_DEFAULT: int = 12
"""Default bcrypt work factor (cost parameter)."""


# =============================================================================
# Token Defaults
# =============================================================================

JWT_ALGORITHM: str = "HS256"
"""Symmetric signing algorithm for access and refresh tokens."""

EMAIL_VERIFICATION_EXPIRY_SECONDS_DEFAULT: int = 86400
"""Default lifetime of an email verification token (24 hours)."""

PASSWORD_RESET_EXPIRY_SECONDS_DEFAULT: int = 3600
"""Default lifetime of a password reset token (1 hour)."""

TOKEN_PREVIEW_LENGTH: int = 8
"""Number of leading characters of a token that may appear in logs."""

MAX_DURATION_SECONDS: int = 3650 * 86400
"""Longest configurable token lifetime (3650 days). Keeps ``now + lifetime``
within the datetime range."""


# =============================================================================
# Maintenance
# =============================================================================

TOKEN_CLEANUP_INTERVAL_SECONDS_DEFAULT: int = 3600
"""Default interval between expired-token cleanup runs."""


# =============================================================================
# User-facing messages
# =============================================================================

GENERIC_VERIFICATION_SENT_MESSAGE: str = (
    "If the email exists, a verification link has been sent."
)
"""Response for resend-verification regardless of whether the account exists."""

GENERIC_RESET_SENT_MESSAGE: str = (
    "If the email exists, a password reset link has been sent."
)
"""Response for forgot-password regardless of whether the account exists."""
