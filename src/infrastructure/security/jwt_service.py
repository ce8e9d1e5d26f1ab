"""JWT token codec (adapter).

This service implements the TokenCodecProtocol using PyJWT with HMAC-SHA256.

Architecture:
    - Implements TokenCodecProtocol (no inheritance required)
    - Structural typing via Protocol
    - Injected via dependency container

Security:
    - HMAC-SHA256 (HS256) algorithm
    - 256-bit secret key minimum
    - Issuer and audience pinned to configured values
    - Unique JWT ID (jti) on every token

Expiry:
    PyJWT compares ``exp`` with the wall clock. The codec disables that check
    and compares ``exp`` with its injected clock instead, so issuance and
    verification always agree on what "now" is. A token is still valid at
    exactly ``exp`` and expired after it, the same boundary as a stored
    token row and its ``expires_at``.
"""

from datetime import timedelta
from typing import Any
from uuid import UUID

import jwt
from jwt.exceptions import InvalidTokenError
from uuid_extensions import uuid7

from src.core.clock import Clock, utc_now
from src.core.constants import JWT_ALGORITHM, MIN_SECRET_KEY_LENGTH
from src.core.result import Failure, Result, Success
from src.domain.errors import TokenError
from src.domain.value_objects import AccessClaims

ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"

_REQUIRED_CLAIMS = ["sub", "iss", "aud", "iat", "exp", "type"]


class JWTService:
    """JWT access and refresh token codec.

    Usage:
        codec = JWTService(
            secret_key=settings.secret_key,
            issuer=settings.jwt_issuer,
            audience=settings.jwt_audience,
            access_token_lifetime=settings.access_token_lifetime,
            refresh_token_lifetime=settings.refresh_token_lifetime,
        )

        token = codec.generate_access_token(AccessClaims.from_user(user))
        result = codec.verify_access_token(token)
    """

    def __init__(
        self,
        secret_key: str,
        issuer: str,
        audience: str,
        access_token_lifetime: timedelta,
        refresh_token_lifetime: timedelta,
        clock: Clock = utc_now,
    ) -> None:
        """Initialize JWT codec.

        Args:
            secret_key: Secret key for HMAC-SHA256 signing.
                MUST be at least 256 bits (32 bytes) for security.
            issuer: Value of the ``iss`` claim, required on verification.
            audience: Value of the ``aud`` claim, required on verification.
            access_token_lifetime: Lifetime of access tokens.
            refresh_token_lifetime: Lifetime of refresh tokens.
            clock: Source of the current UTC time.

        Raises:
            ValueError: If secret_key is too short (< 32 bytes) or a
                lifetime is not positive.
        """
        if len(secret_key.encode("utf-8")) < MIN_SECRET_KEY_LENGTH:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)
        if access_token_lifetime <= timedelta(0) or refresh_token_lifetime <= timedelta(0):
            msg = "Token lifetimes must be positive"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._issuer = issuer
        self._audience = audience
        self._access_token_lifetime = access_token_lifetime
        self._refresh_token_lifetime = refresh_token_lifetime
        self._clock = clock
        self._algorithm = JWT_ALGORITHM

    @property
    def access_token_lifetime(self) -> timedelta:
        return self._access_token_lifetime

    @property
    def refresh_token_lifetime(self) -> timedelta:
        return self._refresh_token_lifetime

    def generate_access_token(self, claims: AccessClaims) -> str:
        """Generate a signed access token.

        Args:
            claims: Identity claims of the user.

        Returns:
            JWT string (header.payload.signature).

        Example:
            >>> token = codec.generate_access_token(AccessClaims.from_user(user))
            >>> len(token.split("."))
            3
        """
        payload = claims.to_payload()
        payload["type"] = ACCESS_TOKEN_TYPE
        return self._encode(payload, self._access_token_lifetime)

    def generate_refresh_token(self, user_id: UUID) -> str:
        """Generate a signed refresh token.

        Carries only the subject. Identity claims are re-read from the user
        store whenever the refresh token is rotated.

        Args:
            user_id: Subject of the token.

        Returns:
            JWT string, unique per call (random jti).
        """
        payload: dict[str, Any] = {"sub": str(user_id), "type": REFRESH_TOKEN_TYPE}
        return self._encode(payload, self._refresh_token_lifetime)

    def verify(self, token: str) -> Result[dict[str, Any], TokenError]:
        """Verify a token and return its payload.

        Args:
            token: JWT string.

        Returns:
            Success(payload) if signature, issuer, audience and expiry are
            valid. Failure(TOKEN_EXPIRED) if only the expiry check failed.
            Failure(TOKEN_INVALID) otherwise.

        Note:
            A token with a bad signature is reported as invalid even when
            it is also expired.
        """
        try:
            payload: dict[str, Any] = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                audience=self._audience,
                issuer=self._issuer,
                options={
                    "verify_exp": False,
                    "verify_iat": False,
                    "require": _REQUIRED_CLAIMS,
                },
            )
        except InvalidTokenError:
            return Failure(error=TokenError.token_invalid())

        expires_at = payload["exp"]
        if not isinstance(expires_at, int | float) or isinstance(expires_at, bool):
            return Failure(error=TokenError.token_invalid())
        if self._clock().timestamp() > expires_at:
            return Failure(error=TokenError.token_expired())

        return Success(value=payload)

    def verify_access_token(self, token: str) -> Result[AccessClaims, TokenError]:
        """Verify an access token and extract its identity claims.

        Refresh tokens are rejected as TOKEN_INVALID even though their
        signature is valid.
        """
        match self.verify(token):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=payload):
                if payload.get("type") != ACCESS_TOKEN_TYPE:
                    return Failure(error=TokenError.token_invalid())
                try:
                    return Success(value=AccessClaims.from_payload(payload))
                except (KeyError, ValueError):
                    return Failure(error=TokenError.token_invalid())

    def decode_unsafe(self, token: str) -> dict[str, Any] | None:
        """Decode a token WITHOUT verifying anything.

        For diagnostics only (for example, logging the subject of a rejected
        token). Never base an authorization decision on the result.

        Returns:
            Payload dict, or None if the token is not a decodable JWT.
        """
        try:
            payload: dict[str, Any] = jwt.decode(
                token,
                options={"verify_signature": False},
                algorithms=[self._algorithm],
            )
        except InvalidTokenError:
            return None
        return payload

    def _encode(self, payload: dict[str, Any], lifetime: timedelta) -> str:
        now = self._clock()
        payload.update(
            {
                "iss": self._issuer,
                "aud": self._audience,
                "iat": int(now.timestamp()),
                "exp": int((now + lifetime).timestamp()),
                "jti": str(uuid7()),
            }
        )
        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token
