"""Command handlers for authentication and token maintenance."""

from src.application.commands.handlers.change_password_handler import (
    ChangePasswordHandler,
)
from src.application.commands.handlers.cleanup_expired_tokens_handler import (
    CleanupExpiredTokensHandler,
)
from src.application.commands.handlers.confirm_password_reset_handler import (
    ConfirmPasswordResetHandler,
)
from src.application.commands.handlers.login_user_handler import (
    LoginResult,
    LoginUserHandler,
)
from src.application.commands.handlers.logout_user_handler import (
    LogoutAllSessionsHandler,
    LogoutUserHandler,
)
from src.application.commands.handlers.refresh_access_token_handler import (
    RefreshAccessTokenHandler,
)
from src.application.commands.handlers.register_user_handler import (
    RegisterUserHandler,
    RegistrationResult,
)
from src.application.commands.handlers.request_password_reset_handler import (
    RequestPasswordResetHandler,
)
from src.application.commands.handlers.resend_verification_handler import (
    ResendVerificationHandler,
)
from src.application.commands.handlers.verify_email_handler import (
    VerifyEmailHandler,
)

__all__ = [
    "ChangePasswordHandler",
    "CleanupExpiredTokensHandler",
    "ConfirmPasswordResetHandler",
    "LoginResult",
    "LoginUserHandler",
    "LogoutAllSessionsHandler",
    "LogoutUserHandler",
    "RefreshAccessTokenHandler",
    "RegisterUserHandler",
    "RegistrationResult",
    "RequestPasswordResetHandler",
    "ResendVerificationHandler",
    "VerifyEmailHandler",
]
