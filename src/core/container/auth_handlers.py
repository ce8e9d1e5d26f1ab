"""Authentication handler and token lifecycle factories.

Request-scoped: every factory takes the AsyncSession of the current unit of
work.

Usage:
    async with get_database().get_session() as session:
        handler = get_login_user_handler(session)
        result = await handler.handle(LoginUser(email=..., password=...))
"""

from sqlalchemy.ext.asyncio import AsyncSession

from src.application.commands.handlers import (
    ChangePasswordHandler,
    CleanupExpiredTokensHandler,
    ConfirmPasswordResetHandler,
    LoginUserHandler,
    LogoutAllSessionsHandler,
    LogoutUserHandler,
    RefreshAccessTokenHandler,
    RegisterUserHandler,
    RequestPasswordResetHandler,
    ResendVerificationHandler,
    VerifyEmailHandler,
)
from src.application.services import TokenLifecycleService
from src.core.config import get_settings
from src.core.container.infrastructure import (
    get_dummy_password_hash,
    get_email_service,
    get_logger,
    get_password_service,
    get_token_codec,
    get_token_generator,
)
from src.core.container.repositories import (
    get_email_verification_token_repository,
    get_password_reset_token_repository,
    get_refresh_token_repository,
    get_user_repository,
)


def get_token_lifecycle_service(session: AsyncSession) -> TokenLifecycleService:
    """Build the token lifecycle service on one session."""
    settings = get_settings()
    return TokenLifecycleService(
        user_repo=get_user_repository(session),
        refresh_token_repo=get_refresh_token_repository(session),
        verification_token_repo=get_email_verification_token_repository(session),
        reset_token_repo=get_password_reset_token_repository(session),
        token_codec=get_token_codec(),
        token_generator=get_token_generator(),
        logger=get_logger(),
        email_verification_expiry_seconds=settings.email_verification_expiry_seconds,
        password_reset_expiry_seconds=settings.password_reset_expiry_seconds,
    )


def get_register_user_handler(session: AsyncSession) -> RegisterUserHandler:
    return RegisterUserHandler(
        user_repo=get_user_repository(session),
        token_service=get_token_lifecycle_service(session),
        password_service=get_password_service(),
        email_service=get_email_service(),
        logger=get_logger(),
        email_verification_enabled=get_settings().email_verification_enabled,
    )


def get_login_user_handler(session: AsyncSession) -> LoginUserHandler:
    return LoginUserHandler(
        user_repo=get_user_repository(session),
        token_service=get_token_lifecycle_service(session),
        password_service=get_password_service(),
        logger=get_logger(),
        dummy_password_hash=get_dummy_password_hash(),
    )


def get_refresh_access_token_handler(session: AsyncSession) -> RefreshAccessTokenHandler:
    return RefreshAccessTokenHandler(token_service=get_token_lifecycle_service(session))


def get_logout_user_handler(session: AsyncSession) -> LogoutUserHandler:
    return LogoutUserHandler(token_service=get_token_lifecycle_service(session))


def get_logout_all_sessions_handler(session: AsyncSession) -> LogoutAllSessionsHandler:
    return LogoutAllSessionsHandler(token_service=get_token_lifecycle_service(session))


def get_verify_email_handler(session: AsyncSession) -> VerifyEmailHandler:
    return VerifyEmailHandler(
        user_repo=get_user_repository(session),
        token_service=get_token_lifecycle_service(session),
        email_service=get_email_service(),
        logger=get_logger(),
    )


def get_resend_verification_handler(session: AsyncSession) -> ResendVerificationHandler:
    return ResendVerificationHandler(
        user_repo=get_user_repository(session),
        token_service=get_token_lifecycle_service(session),
        email_service=get_email_service(),
        logger=get_logger(),
    )


def get_request_password_reset_handler(
    session: AsyncSession,
) -> RequestPasswordResetHandler:
    return RequestPasswordResetHandler(
        user_repo=get_user_repository(session),
        token_service=get_token_lifecycle_service(session),
        email_service=get_email_service(),
        logger=get_logger(),
    )


def get_confirm_password_reset_handler(
    session: AsyncSession,
) -> ConfirmPasswordResetHandler:
    return ConfirmPasswordResetHandler(
        user_repo=get_user_repository(session),
        token_service=get_token_lifecycle_service(session),
        password_service=get_password_service(),
        email_service=get_email_service(),
        logger=get_logger(),
    )


def get_change_password_handler(session: AsyncSession) -> ChangePasswordHandler:
    return ChangePasswordHandler(
        user_repo=get_user_repository(session),
        token_service=get_token_lifecycle_service(session),
        password_service=get_password_service(),
        email_service=get_email_service(),
        logger=get_logger(),
    )


def get_cleanup_expired_tokens_handler(
    session: AsyncSession,
) -> CleanupExpiredTokensHandler:
    return CleanupExpiredTokensHandler(token_service=get_token_lifecycle_service(session))
