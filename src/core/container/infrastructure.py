"""Infrastructure service factories.

Application-scoped singletons (``@lru_cache()``). Settings are read here and
only here; everything below the container receives plain constructor
arguments.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import get_settings
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.domain.protocols import (
        EmailServiceProtocol,
        LoggerProtocol,
        OpaqueTokenGeneratorProtocol,
        PasswordHashingProtocol,
        TokenCodecProtocol,
    )


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Use ``get_database().get_session()`` for a unit of work.
    """
    settings = get_settings()
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    ).bind(app=settings.app_name, environment=settings.environment.value)


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get password hashing service singleton (app-scoped).

    Cost factor comes from ``BCRYPT_ROUNDS`` (12 by default).
    """
    from src.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(cost_factor=get_settings().bcrypt_rounds)


@lru_cache()
def get_dummy_password_hash() -> str:
    """Digest verified during login for unknown emails (timing parity)."""
    import secrets

    return get_password_service().hash_password(secrets.token_urlsafe(16))


@lru_cache()
def get_token_codec() -> "TokenCodecProtocol":
    """Get JWT codec singleton (app-scoped).

    Lifetimes were parsed and validated when Settings loaded.
    """
    from src.infrastructure.security import JWTService

    settings = get_settings()
    return JWTService(
        secret_key=settings.secret_key,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
        access_token_lifetime=settings.access_token_lifetime,
        refresh_token_lifetime=settings.refresh_token_lifetime,
    )


@lru_cache()
def get_token_generator() -> "OpaqueTokenGeneratorProtocol":
    """Get opaque token generator singleton (app-scoped)."""
    from src.infrastructure.security import OpaqueTokenGenerator

    return OpaqueTokenGenerator()


@lru_cache()
def get_email_service() -> "EmailServiceProtocol":
    """Get email service singleton (app-scoped).

    Returns:
        StubEmailService in every environment; no delivery adapter is wired
        yet.
    """
    from src.infrastructure.email import StubEmailService

    settings = get_settings()
    return StubEmailService(
        logger=get_logger(),
        frontend_url=settings.frontend_url,
        app_name=settings.app_name,
    )
