"""Domain protocols (ports).

Application code depends on these interfaces; infrastructure provides the
adapters.
"""

from src.domain.protocols.email_service_protocol import EmailServiceProtocol
from src.domain.protocols.email_verification_token_repository import (
    EmailVerificationTokenData,
    EmailVerificationTokenRepository,
)
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.opaque_token_generator_protocol import (
    OpaqueTokenGeneratorProtocol,
)
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from src.domain.protocols.password_reset_token_repository import (
    PasswordResetTokenData,
    PasswordResetTokenRepository,
)
from src.domain.protocols.refresh_token_repository import (
    RefreshTokenData,
    RefreshTokenRepository,
)
from src.domain.protocols.single_use_token_repository import (
    SingleUseTokenData,
    SingleUseTokenRepository,
)
from src.domain.protocols.token_codec_protocol import TokenCodecProtocol
from src.domain.protocols.user_repository import UserRepository

__all__ = [
    "EmailServiceProtocol",
    "EmailVerificationTokenData",
    "EmailVerificationTokenRepository",
    "LoggerProtocol",
    "OpaqueTokenGeneratorProtocol",
    "PasswordHashingProtocol",
    "PasswordResetTokenData",
    "PasswordResetTokenRepository",
    "RefreshTokenData",
    "RefreshTokenRepository",
    "SingleUseTokenData",
    "SingleUseTokenRepository",
    "TokenCodecProtocol",
    "UserRepository",
]
