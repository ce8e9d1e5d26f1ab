"""Domain enums for business logic.

Available Enums:
    - UserRole: Roles embedded in access tokens (admin, moderator, user)
    - TokenState: Derived lifecycle state of a persisted token
    - RevocationReason: Why a refresh token was revoked
"""

from src.domain.enums.revocation_reason import RevocationReason
from src.domain.enums.token_state import TokenState, derive_token_state
from src.domain.enums.user_role import UserRole

__all__ = [
    "RevocationReason",
    "TokenState",
    "UserRole",
    "derive_token_state",
]
