"""Unit tests for token state derivation.

Tests cover:
- ACTIVE up to and including expires_at
- EXPIRED strictly after expires_at
- Closed state (revoked / used) wins over expiry
- DTO state() helpers
"""

from datetime import timedelta

import pytest
from uuid_extensions import uuid7

from src.domain.enums import RevocationReason, TokenState, derive_token_state
from src.domain.protocols import EmailVerificationTokenData, RefreshTokenData
from tests.helpers import START_TIME

EXPIRES_AT = START_TIME + timedelta(hours=1)


@pytest.mark.unit
class TestDeriveTokenState:
    def test_active_before_expiry(self):
        state = derive_token_state(
            closed_at=None,
            closed_state=TokenState.REVOKED,
            expires_at=EXPIRES_AT,
            now=START_TIME,
        )
        assert state is TokenState.ACTIVE

    def test_active_at_exact_expiry(self):
        state = derive_token_state(
            closed_at=None,
            closed_state=TokenState.REVOKED,
            expires_at=EXPIRES_AT,
            now=EXPIRES_AT,
        )
        assert state is TokenState.ACTIVE

    def test_expired_after_expiry(self):
        state = derive_token_state(
            closed_at=None,
            closed_state=TokenState.USED,
            expires_at=EXPIRES_AT,
            now=EXPIRES_AT + timedelta(microseconds=1),
        )
        assert state is TokenState.EXPIRED

    @pytest.mark.parametrize("closed_state", [TokenState.REVOKED, TokenState.USED])
    def test_closed_wins_over_expired(self, closed_state):
        state = derive_token_state(
            closed_at=START_TIME,
            closed_state=closed_state,
            expires_at=EXPIRES_AT,
            now=EXPIRES_AT + timedelta(days=1),
        )
        assert state is closed_state


@pytest.mark.unit
class TestTokenDataState:
    def test_refresh_token_revoked(self):
        data = RefreshTokenData(
            id=uuid7(),
            user_id=uuid7(),
            token="t",
            expires_at=EXPIRES_AT,
            created_at=START_TIME,
            revoked_at=START_TIME,
            revoked_reason=RevocationReason.LOGOUT,
        )
        assert data.state(START_TIME) is TokenState.REVOKED

    def test_verification_token_used(self):
        data = EmailVerificationTokenData(
            id=uuid7(),
            user_id=uuid7(),
            token="t",
            expires_at=EXPIRES_AT,
            created_at=START_TIME,
            used_at=START_TIME,
        )
        assert data.state(START_TIME) is TokenState.USED

    def test_verification_token_expired(self):
        data = EmailVerificationTokenData(
            id=uuid7(),
            user_id=uuid7(),
            token="t",
            expires_at=EXPIRES_AT,
            created_at=START_TIME,
        )
        assert data.state(EXPIRES_AT + timedelta(seconds=1)) is TokenState.EXPIRED
