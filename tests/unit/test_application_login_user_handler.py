"""Unit tests for LoginUserHandler.

Tests cover:
- Successful login (returns tokens)
- Invalid credentials (user not found, wrong password) with one message
- Timing parity: unknown email still costs one password verification
- Account inactive

Architecture:
- Unit tests for application handler (mocked dependencies)
- Mock repository protocols and the token lifecycle service
"""

from unittest.mock import AsyncMock, Mock

import pytest

from src.application.commands.auth_commands import LoginUser
from src.application.commands.handlers.login_user_handler import (
    LoginResult,
    LoginUserHandler,
)
from src.application.services import TokenPair
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from tests.helpers import make_user

PAIR = TokenPair(access_token="access", refresh_token="refresh", expires_in=900)


def build_handler(user=None, password_ok=True):
    user_repo = AsyncMock()
    user_repo.find_by_email.return_value = user
    token_service = AsyncMock()
    token_service.issue_token_pair.return_value = PAIR
    password_service = Mock()
    password_service.verify_password.return_value = password_ok
    handler = LoginUserHandler(
        user_repo=user_repo,
        token_service=token_service,
        password_service=password_service,
        logger=Mock(),
        dummy_password_hash="$2b$04$dummy",
    )
    return handler, token_service, password_service


@pytest.mark.unit
class TestLoginUserHandler:
    async def test_login_success_returns_tokens(self):
        user = make_user(email_verified=True)
        handler, token_service, _ = build_handler(user=user)

        result = await handler.handle(
            LoginUser(email=user.email, password="SecurePass123!")
        )

        assert result == Success(
            value=LoginResult(user_id=user.id, email_verified=True, tokens=PAIR)
        )
        token_service.issue_token_pair.assert_awaited_once_with(user)

    async def test_unknown_email_verifies_dummy_hash(self):
        handler, token_service, password_service = build_handler(user=None)

        result = await handler.handle(
            LoginUser(email="nobody@example.com", password="whatever")
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_CREDENTIALS
        password_service.verify_password.assert_called_once_with(
            "whatever", "$2b$04$dummy"
        )
        token_service.issue_token_pair.assert_not_awaited()

    async def test_wrong_password_same_error_as_unknown_email(self):
        user = make_user()
        handler, token_service, _ = build_handler(user=user, password_ok=False)
        unknown_handler, _, _ = build_handler(user=None)

        wrong = await handler.handle(LoginUser(email=user.email, password="bad"))
        unknown = await unknown_handler.handle(
            LoginUser(email="nobody@example.com", password="bad")
        )

        assert wrong == unknown
        token_service.issue_token_pair.assert_not_awaited()

    async def test_inactive_account_rejected_after_password_check(self):
        user = make_user(is_active=False)
        handler, token_service, _ = build_handler(user=user)

        result = await handler.handle(LoginUser(email=user.email, password="ok"))

        assert result.error.code == ErrorCode.ACCOUNT_INACTIVE
        token_service.issue_token_pair.assert_not_awaited()

    async def test_dummy_hash_computed_lazily(self):
        password_service = Mock()
        password_service.hash_password.return_value = "$2b$04$lazy"
        password_service.verify_password.return_value = False
        user_repo = AsyncMock()
        user_repo.find_by_email.return_value = None
        handler = LoginUserHandler(
            user_repo=user_repo,
            token_service=AsyncMock(),
            password_service=password_service,
            logger=Mock(),
        )

        await handler.handle(LoginUser(email="a@example.com", password="x"))
        await handler.handle(LoginUser(email="b@example.com", password="y"))

        password_service.hash_password.assert_called_once()
        password_service.verify_password.assert_called_with("y", "$2b$04$lazy")
