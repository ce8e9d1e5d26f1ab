"""Security adapters: token codec, opaque token generator, password hashing."""

from src.infrastructure.security.bcrypt_password_service import (
    BcryptPasswordService,
)
from src.infrastructure.security.jwt_service import JWTService
from src.infrastructure.security.opaque_token_generator import OpaqueTokenGenerator

__all__ = [
    "BcryptPasswordService",
    "JWTService",
    "OpaqueTokenGenerator",
]
