"""Domain errors package.

Usage:
    from src.domain.errors import AuthError, TokenError
"""

from src.domain.errors.authentication_error import AuthError
from src.domain.errors.token_error import TokenError

__all__ = [
    "AuthError",
    "TokenError",
]
