"""Opaque token generator.

Produces the random tokens behind email verification and password reset
links.

Token Strategy:
    - 32-byte random hex string (64 characters)
    - 2^256 possibilities (unguessable)
    - Stored in plain text; the unique column constraint is the only
      collision guard
"""

import secrets
from datetime import datetime, timedelta

from src.core.constants import TOKEN_BYTES


class OpaqueTokenGenerator:
    """Cryptographically random token generation.

    Usage:
        generator = OpaqueTokenGenerator()
        token = generator.generate()
        expires_at = generator.expiry_from(clock(), 86400)
    """

    def generate(self) -> str:
        """Generate a new opaque token.

        Returns:
            64-character hex string (32 bytes of entropy).

        Example:
            >>> token = OpaqueTokenGenerator().generate()
            >>> len(token)
            64
        """
        return secrets.token_hex(TOKEN_BYTES)

    def expiry_from(self, now: datetime, seconds: int) -> datetime:
        """Calculate the expiry timestamp of a token issued at ``now``."""
        return now + timedelta(seconds=seconds)
