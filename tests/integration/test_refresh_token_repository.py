"""Integration tests for RefreshTokenRepository.

Tests cover:
- Create and find active token
- Conditional revoke (only the first caller wins)
- Rotation (old revoked with replacement recorded, new created)
- Revoke-all with and without a kept session
- Listing active sessions
- Deleting expired rows

Architecture:
- Integration tests with a real SQLite database (aiosqlite)
- Separate sessions where commit boundaries matter
"""

from datetime import timedelta

import pytest
from sqlalchemy.exc import IntegrityError

from src.domain.enums import RevocationReason, TokenState
from src.infrastructure.persistence.repositories import (
    RefreshTokenRepository,
    UserRepository,
)
from tests.helpers import make_user


@pytest.fixture
def repo(session, clock):
    return RefreshTokenRepository(session, clock=clock)


@pytest.mark.integration
class TestRefreshTokenCreateAndFind:
    async def test_create_then_find_active(self, repo, saved_user, clock):
        expires_at = clock() + timedelta(days=7)

        created = await repo.create(saved_user.id, "token-1", expires_at)
        found = await repo.find_active("token-1")

        assert found == created
        assert found.user_id == saved_user.id
        assert found.expires_at == expires_at
        assert found.created_at == clock()
        assert found.state(clock()) is TokenState.ACTIVE

    async def test_find_unknown_returns_none(self, repo):
        assert await repo.find_active("missing") is None

    async def test_find_active_returns_expired_unrevoked_row(
        self, repo, saved_user, clock
    ):
        await repo.create(saved_user.id, "token-1", clock() + timedelta(minutes=1))
        clock.advance(minutes=2)

        found = await repo.find_active("token-1")

        assert found.state(clock()) is TokenState.EXPIRED

    async def test_duplicate_token_rejected(self, repo, session, saved_user, clock):
        await repo.create(saved_user.id, "token-1", clock() + timedelta(days=1))

        with pytest.raises(IntegrityError):
            await repo.create(saved_user.id, "token-1", clock() + timedelta(days=1))
        await session.rollback()


@pytest.mark.integration
class TestRefreshTokenRevoke:
    async def test_revoke_is_conditional(self, repo, saved_user, clock):
        await repo.create(saved_user.id, "token-1", clock() + timedelta(days=1))

        assert await repo.revoke("token-1", RevocationReason.LOGOUT) is True
        assert await repo.revoke("token-1", RevocationReason.LOGOUT) is False
        assert await repo.find_active("token-1") is None

    async def test_revoke_unknown_returns_false(self, repo):
        assert await repo.revoke("missing", RevocationReason.LOGOUT) is False

    async def test_rotate_records_replacement(self, repo, saved_user, clock):
        await repo.create(saved_user.id, "old", clock() + timedelta(days=1))
        clock.advance(seconds=5)

        new = await repo.rotate(
            old_token="old",
            new_token="new",
            user_id=saved_user.id,
            expires_at=clock() + timedelta(days=7),
        )

        assert new.token == "new"
        assert new.created_at == clock()
        assert await repo.find_active("old") is None
        sessions = await repo.list_active_for_user(saved_user.id, clock())
        assert [s.token for s in sessions] == ["new"]

    async def test_rotate_revoked_token_writes_nothing(self, repo, saved_user, clock):
        await repo.create(saved_user.id, "old", clock() + timedelta(days=1))
        await repo.revoke("old", RevocationReason.LOGOUT)

        new = await repo.rotate(
            old_token="old",
            new_token="new",
            user_id=saved_user.id,
            expires_at=clock() + timedelta(days=7),
        )

        assert new is None
        assert await repo.find_active("new") is None

    async def test_revoke_all_except_current(self, repo, saved_user, clock):
        for token in ("a", "b", "c"):
            await repo.create(saved_user.id, token, clock() + timedelta(days=1))

        count = await repo.revoke_all_for_user(
            saved_user.id, RevocationReason.PASSWORD_CHANGED, except_token="b"
        )

        assert count == 2
        sessions = await repo.list_active_for_user(saved_user.id, clock())
        assert [s.token for s in sessions] == ["b"]

    async def test_revoke_all_leaves_other_users_alone(
        self, repo, session, saved_user, clock
    ):
        other = make_user(email="bob@example.com", username="bob")
        await UserRepository(session, clock=clock).save(other)
        await repo.create(saved_user.id, "mine", clock() + timedelta(days=1))
        await repo.create(other.id, "theirs", clock() + timedelta(days=1))

        count = await repo.revoke_all_for_user(
            saved_user.id, RevocationReason.LOGOUT_ALL
        )

        assert count == 1
        assert await repo.find_active("theirs") is not None


@pytest.mark.integration
class TestRefreshTokenListAndCleanup:
    async def test_list_active_newest_first_without_expired(
        self, repo, saved_user, clock
    ):
        await repo.create(saved_user.id, "short", clock() + timedelta(minutes=5))
        clock.advance(seconds=1)
        await repo.create(saved_user.id, "older", clock() + timedelta(days=1))
        clock.advance(seconds=1)
        await repo.create(saved_user.id, "newer", clock() + timedelta(days=1))
        await repo.create(saved_user.id, "revoked", clock() + timedelta(days=1))
        await repo.revoke("revoked", RevocationReason.LOGOUT)
        clock.advance(minutes=10)

        sessions = await repo.list_active_for_user(saved_user.id, clock())

        assert [s.token for s in sessions] == ["newer", "older"]

    async def test_delete_expired_only(self, repo, saved_user, clock):
        await repo.create(saved_user.id, "expired", clock() + timedelta(minutes=1))
        await repo.create(saved_user.id, "boundary", clock() + timedelta(minutes=2))
        await repo.create(saved_user.id, "live", clock() + timedelta(days=1))
        clock.advance(minutes=2)

        deleted = await repo.delete_expired(clock())

        assert deleted == 1
        assert await repo.find_active("expired") is None
        assert await repo.find_active("boundary") is not None
        assert await repo.find_active("live") is not None
