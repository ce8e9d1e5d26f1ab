"""Unit tests for TokenLifecycleService branches that are awkward to reach
with a real database.

Tests cover:
- Rotation loses the conditional swap (returns INVALID_REFRESH_TOKEN)
- Refresh token whose owner no longer exists
- Only token previews are logged
- Verification token lost to a concurrent consumer
"""

from datetime import timedelta
from unittest.mock import AsyncMock, Mock

import pytest
from uuid_extensions import uuid7

from src.application.services import TokenLifecycleService, token_preview
from src.core.enums import ErrorCode
from src.domain.protocols import EmailVerificationTokenData, RefreshTokenData
from tests.helpers import START_TIME, FakeClock, make_user

REFRESH_TOKEN = "header.payload-with-a-long-body.signature"


def refresh_record(user_id):
    return RefreshTokenData(
        id=uuid7(),
        user_id=user_id,
        token=REFRESH_TOKEN,
        expires_at=START_TIME + timedelta(days=7),
        created_at=START_TIME,
    )


def build_service(**overrides):
    codec = Mock()
    codec.generate_access_token.return_value = "new-access"
    codec.generate_refresh_token.return_value = "new-refresh"
    codec.refresh_token_lifetime = timedelta(days=7)
    codec.access_token_lifetime = timedelta(minutes=15)
    deps = {
        "user_repo": AsyncMock(),
        "refresh_token_repo": AsyncMock(),
        "verification_token_repo": AsyncMock(),
        "reset_token_repo": AsyncMock(),
        "token_codec": codec,
        "token_generator": Mock(),
        "logger": Mock(),
        "clock": FakeClock(),
    }
    deps.update(overrides)
    return TokenLifecycleService(**deps), deps


@pytest.mark.unit
class TestRotateBranches:
    async def test_lost_swap_is_invalid(self):
        user = make_user()
        service, deps = build_service()
        deps["refresh_token_repo"].find_active.return_value = refresh_record(user.id)
        deps["refresh_token_repo"].rotate.return_value = None
        deps["user_repo"].find_by_id.return_value = user

        result = await service.rotate(REFRESH_TOKEN)

        assert result.error.code == ErrorCode.INVALID_REFRESH_TOKEN
        deps["logger"].warning.assert_called_once()

    async def test_deleted_owner_is_invalid(self):
        service, deps = build_service()
        deps["refresh_token_repo"].find_active.return_value = refresh_record(uuid7())
        deps["user_repo"].find_by_id.return_value = None

        result = await service.rotate(REFRESH_TOKEN)

        assert result.error.code == ErrorCode.INVALID_REFRESH_TOKEN
        deps["refresh_token_repo"].rotate.assert_not_awaited()

    async def test_swap_arguments(self):
        user = make_user()
        service, deps = build_service()
        deps["refresh_token_repo"].find_active.return_value = refresh_record(user.id)
        deps["user_repo"].find_by_id.return_value = user

        result = await service.rotate(REFRESH_TOKEN)

        assert result.value.refresh_token == "new-refresh"
        assert result.value.expires_in == 900
        deps["refresh_token_repo"].rotate.assert_awaited_once_with(
            old_token=REFRESH_TOKEN,
            new_token="new-refresh",
            user_id=user.id,
            expires_at=START_TIME + timedelta(days=7),
        )

    async def test_full_token_never_logged(self):
        service, deps = build_service()
        deps["refresh_token_repo"].find_active.return_value = None

        await service.rotate(REFRESH_TOKEN)
        await service.logout(REFRESH_TOKEN)

        logged = [str(call) for call in deps["logger"].mock_calls]
        assert all(REFRESH_TOKEN not in entry for entry in logged)
        assert any(token_preview(REFRESH_TOKEN) in entry for entry in logged)


@pytest.mark.unit
async def test_verification_token_lost_to_concurrent_consumer():
    service, deps = build_service()
    deps["verification_token_repo"].find_active.return_value = (
        EmailVerificationTokenData(
            id=uuid7(),
            user_id=uuid7(),
            token="v" * 64,
            expires_at=START_TIME + timedelta(hours=1),
            created_at=START_TIME,
        )
    )
    deps["verification_token_repo"].mark_used.return_value = False

    result = await service.consume_verification_token("v" * 64)

    assert result.error.code == ErrorCode.INVALID_VERIFICATION_TOKEN


@pytest.mark.unit
def test_token_preview_truncates():
    assert token_preview("abcdefghijklmnop") == "abcdefgh..."
