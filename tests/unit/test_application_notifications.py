"""Unit tests for the fire-and-forget notification helper."""

from unittest.mock import AsyncMock

import pytest
from uuid_extensions import uuid7

from src.application.commands.handlers.notifications import send_notification


@pytest.mark.unit
class TestSendNotification:
    async def test_successful_send_returns_true(self, mock_logger):
        send = AsyncMock()

        sent = await send_notification(
            mock_logger, send(), kind="welcome_email", user_id=uuid7()
        )

        assert sent is True
        mock_logger.error.assert_not_called()

    async def test_failure_is_logged_and_swallowed(self, mock_logger):
        error = TimeoutError("smtp timeout")
        send = AsyncMock(side_effect=error)
        user_id = uuid7()

        sent = await send_notification(
            mock_logger, send(), kind="password_reset_email", user_id=user_id
        )

        assert sent is False
        mock_logger.error.assert_called_once_with(
            "Notification failed",
            error=error,
            notification="password_reset_email",
            user_id=str(user_id),
        )
