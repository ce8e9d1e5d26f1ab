"""Pytest configuration and shared fixtures.

This configuration ensures:
1. Settings can load without a .env file (test values set below)
2. Every integration test gets its own SQLite database file
3. Time is controlled by an injectable clock, never by sleeping
4. Bcrypt runs at the minimum cost factor
"""

import inspect
import os
from datetime import timedelta
from unittest.mock import Mock

import pytest
import pytest_asyncio

# Settings are read lazily by the container; these must be in place before
# any test calls get_settings().
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./warden-test.db")
os.environ.setdefault("SECRET_KEY", "test-secret-key-that-is-at-least-32-bytes")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from src.infrastructure.email import StubEmailService  # noqa: E402
from src.infrastructure.persistence.database import Database  # noqa: E402
from src.infrastructure.persistence.repositories import UserRepository  # noqa: E402
from src.infrastructure.security import BcryptPasswordService, JWTService  # noqa: E402
from tests.helpers import (  # noqa: E402
    TEST_AUDIENCE,
    TEST_ISSUER,
    TEST_SECRET_KEY,
    FakeClock,
    build_service,
    make_user,
)


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real database"
    )


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions.

    This ensures all async tests are properly marked even if
    the developer forgets to add @pytest.mark.asyncio.
    """
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)


@pytest.fixture
def clock():
    """Provide a FakeClock pinned to START_TIME."""
    return FakeClock()


@pytest.fixture
def mock_logger():
    """Provide a mock logger for testing.

    Returns a Mock object with the LoggerProtocol methods. ``bind`` returns
    the same mock so bound calls can be asserted on it directly.

    Usage:
        def test_something(mock_logger):
            job = TokenCleanupJob(cleanup=..., logger=mock_logger)
            mock_logger.info.assert_called()
    """
    logger = Mock()
    logger.bind.return_value = logger
    logger.with_context.return_value = logger
    return logger


@pytest.fixture
def token_codec(clock):
    """Provide a JWT codec on the fake clock (15m access, 7d refresh)."""
    return JWTService(
        secret_key=TEST_SECRET_KEY,
        issuer=TEST_ISSUER,
        audience=TEST_AUDIENCE,
        access_token_lifetime=timedelta(minutes=15),
        refresh_token_lifetime=timedelta(days=7),
        clock=clock,
    )


@pytest.fixture
def password_service():
    """Provide bcrypt at the minimum cost factor."""
    return BcryptPasswordService(cost_factor=4)


@pytest.fixture
def email_service(mock_logger):
    """Provide a StubEmailService with an empty outbox."""
    return StubEmailService(logger=mock_logger, frontend_url="http://app.test")


@pytest_asyncio.fixture
async def test_database(tmp_path):
    """Provide a fresh SQLite database with all tables created.

    Returns the Database object (not a session), allowing tests to open
    several independent sessions.

    Usage:
        async def test_something(test_database):
            async with test_database.get_session() as session1:
                ...
            async with test_database.get_session() as session2:
                ...
    """
    db = Database(database_url=f"sqlite+aiosqlite:///{tmp_path / 'warden.db'}")
    await db.create_all()
    yield db
    await db.close()


@pytest_asyncio.fixture
async def session(test_database):
    """Provide one session (unit of work), committed at teardown."""
    async with test_database.get_session() as session:
        yield session


@pytest.fixture
def lifecycle_service(session, clock, token_codec, mock_logger):
    """Provide a TokenLifecycleService on the shared test session."""
    return build_service(session, clock, token_codec, mock_logger)


@pytest_asyncio.fixture
async def saved_user(session, clock, password_service):
    """Persist an active, unverified user whose password is 'OldPass123!'."""
    user = make_user(
        password_hash=password_service.hash_password("OldPass123!"),
        now=clock(),
    )
    await UserRepository(session, clock=clock).save(user)
    return user
