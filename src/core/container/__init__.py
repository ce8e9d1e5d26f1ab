"""Container module - Centralized dependency injection.

The container is the composition root: the only place that reads Settings
and picks adapters. Everything below receives its collaborators through
constructors.

The container is organized into modules:
- infrastructure: App-scoped services (database, logging, codec, hashing, email)
- repositories: Session-scoped repository factories
- auth_handlers: Token lifecycle service and command handler factories
- jobs: Background job factories

Usage:
    from src.core.container import get_database, get_login_user_handler

    async with get_database().get_session() as session:
        result = await get_login_user_handler(session).handle(command)
"""

from src.core.container.auth_handlers import (
    get_change_password_handler,
    get_cleanup_expired_tokens_handler,
    get_confirm_password_reset_handler,
    get_login_user_handler,
    get_logout_all_sessions_handler,
    get_logout_user_handler,
    get_refresh_access_token_handler,
    get_register_user_handler,
    get_request_password_reset_handler,
    get_resend_verification_handler,
    get_token_lifecycle_service,
    get_verify_email_handler,
)
from src.core.container.infrastructure import (
    get_database,
    get_dummy_password_hash,
    get_email_service,
    get_logger,
    get_password_service,
    get_token_codec,
    get_token_generator,
)
from src.core.container.jobs import get_token_cleanup_job, run_token_cleanup
from src.core.container.repositories import (
    get_email_verification_token_repository,
    get_password_reset_token_repository,
    get_refresh_token_repository,
    get_user_repository,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_dummy_password_hash",
    "get_email_service",
    "get_logger",
    "get_password_service",
    "get_token_codec",
    "get_token_generator",
    # Repositories
    "get_email_verification_token_repository",
    "get_password_reset_token_repository",
    "get_refresh_token_repository",
    "get_user_repository",
    # Token lifecycle and handlers
    "get_token_lifecycle_service",
    "get_change_password_handler",
    "get_cleanup_expired_tokens_handler",
    "get_confirm_password_reset_handler",
    "get_login_user_handler",
    "get_logout_all_sessions_handler",
    "get_logout_user_handler",
    "get_refresh_access_token_handler",
    "get_register_user_handler",
    "get_request_password_reset_handler",
    "get_resend_verification_handler",
    "get_verify_email_handler",
    # Jobs
    "get_token_cleanup_job",
    "run_token_cleanup",
]
