"""Unit tests for StubEmailService.

Tests cover:
- Links built from the frontend URL
- Subjects per message kind
- Only a token preview reaches the log
"""

import pytest

from src.infrastructure.email import SentEmail
from tests.helpers import make_user


@pytest.mark.unit
class TestStubEmailService:
    async def test_verification_email_link(self, email_service):
        user = make_user()

        await email_service.send_verification_email(user, "a" * 64)

        assert email_service.outbox == [
            SentEmail(
                to_email=user.email,
                subject="Verify Your Email Address - Warden",
                link=f"http://app.test/verify-email?token={'a' * 64}",
            )
        ]

    async def test_password_reset_email_link(self, email_service):
        await email_service.send_password_reset_email(make_user(), "b" * 64)

        sent = email_service.outbox[-1]
        assert sent.subject == "Password Reset Request - Warden"
        assert sent.link == f"http://app.test/reset-password?token={'b' * 64}"

    async def test_notices_have_no_link(self, email_service):
        user = make_user()

        await email_service.send_password_changed_notification(user)
        await email_service.send_welcome_email(user)

        assert [m.subject for m in email_service.outbox] == [
            "Password Changed Successfully - Warden",
            "Welcome to Warden!",
        ]
        assert all(m.link is None for m in email_service.outbox)

    async def test_only_token_preview_logged(self, email_service, mock_logger):
        await email_service.send_verification_email(make_user(), "c" * 64)

        context = mock_logger.info.call_args.kwargs
        assert context["token_preview"] == "c" * 8
        assert "c" * 64 not in str(mock_logger.mock_calls)
