"""User roles embedded in access tokens.

Role Hierarchy:
    admin > moderator > user

The role travels inside the access token so protected resources can make
authorization decisions without a user lookup. It is re-read from the user
store on every refresh-token rotation, so a role change takes effect at the
next rotation at the latest.

Usage:
    from src.domain.enums import UserRole

    if claims.role == UserRole.ADMIN:
        ...
"""

from enum import Enum


class UserRole(str, Enum):
    """User roles for authorization claims.

    String Enum:
        Inherits from str so the value serializes directly into JWT claims.
    """

    ADMIN = "admin"
    MODERATOR = "moderator"
    USER = "user"
