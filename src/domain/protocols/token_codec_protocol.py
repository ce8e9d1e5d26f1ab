"""Signed token codec protocol for domain layer.

Defines the interface for minting and verifying signed (JWT) access and
refresh tokens. Infrastructure provides the HMAC implementation.

Token Strategy:
    - Access tokens: short-lived, full identity claims, stateless validation
    - Refresh tokens: long-lived, minimal claims (subject only), always
      paired with a row in the refresh token store
"""

from datetime import timedelta
from typing import Any, Protocol
from uuid import UUID

from src.core.result import Result
from src.domain.errors import TokenError
from src.domain.value_objects import AccessClaims


class TokenCodecProtocol(Protocol):
    """Signed token generation and verification interface.

    Implementations:
        - JWTService: HS256 with configurable lifetimes (production)

    Usage:
        token = codec.generate_access_token(AccessClaims.from_user(user))

        match codec.verify_access_token(token):
            case Success(value=claims):
                ...
            case Failure(error=error):
                # error.code is TOKEN_EXPIRED or TOKEN_INVALID
                ...
    """

    def generate_access_token(self, claims: AccessClaims) -> str:
        """Mint a signed access token carrying full identity claims."""
        ...

    def generate_refresh_token(self, user_id: UUID) -> str:
        """Mint a signed refresh token carrying only the subject.

        Each call returns a distinct token, even within the same second.
        """
        ...

    def verify(self, token: str) -> Result[dict[str, Any], TokenError]:
        """Verify signature, issuer, audience and expiry.

        Returns:
            Success(payload) when valid.
            Failure(TOKEN_EXPIRED) when past expiry.
            Failure(TOKEN_INVALID) for any other problem.
        """
        ...

    def verify_access_token(self, token: str) -> Result[AccessClaims, TokenError]:
        """Verify a token and require it to be an access token."""
        ...

    def decode_unsafe(self, token: str) -> dict[str, Any] | None:
        """Decode without verification. Diagnostics only, never for auth."""
        ...

    @property
    def access_token_lifetime(self) -> timedelta:
        """Lifetime of access tokens, reported to clients as expires_in."""
        ...

    @property
    def refresh_token_lifetime(self) -> timedelta:
        """Lifetime of refresh tokens, used for the store row expiry."""
        ...
