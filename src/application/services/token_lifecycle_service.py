"""Token lifecycle service.

Owns every state transition of the three persisted token kinds and the
minting of signed access/refresh tokens.

State machines:
    Refresh token:      ACTIVE --revoke(reason)--> REVOKED
                        ACTIVE --time-----------> EXPIRED
    Verification/reset: ACTIVE --consume--------> USED
                        ACTIVE --time-----------> EXPIRED

No transition leads back to ACTIVE.

Consistency:
    The service holds no state between calls. All repositories handed to
    one service instance share a single AsyncSession, so each public
    operation runs inside the caller's unit of work: the session scope
    commits on success and rolls back if anything raises. Every
    "find, then act" sequence ends in a conditional write (``WHERE
    revoked_at IS NULL`` / ``WHERE used_at IS NULL``), so a racing caller
    loses cleanly instead of double-spending a token.

Usage:
    async with database.get_session() as session:
        service = get_token_lifecycle_service(session)
        match await service.rotate(refresh_token):
            case Success(value=pair):
                ...
            case Failure(error=error):
                ...
"""

from collections.abc import Callable
from dataclasses import dataclass
from uuid import UUID

from src.core.clock import Clock, utc_now
from src.core.constants import (
    EMAIL_VERIFICATION_EXPIRY_SECONDS_DEFAULT,
    PASSWORD_RESET_EXPIRY_SECONDS_DEFAULT,
    TOKEN_PREVIEW_LENGTH,
)
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities import User
from src.domain.enums import RevocationReason, TokenState
from src.domain.errors import AuthError, TokenError
from src.domain.protocols import (
    EmailVerificationTokenRepository,
    LoggerProtocol,
    OpaqueTokenGeneratorProtocol,
    PasswordResetTokenRepository,
    RefreshTokenData,
    RefreshTokenRepository,
    SingleUseTokenData,
    TokenCodecProtocol,
    UserRepository,
)
from src.domain.value_objects import AccessClaims


@dataclass(frozen=True, kw_only=True)
class TokenPair:
    """Access and refresh token issued together.

    Attributes:
        access_token: Signed short-lived access token.
        refresh_token: Signed long-lived refresh token (stored server-side).
        token_type: Always "bearer".
        expires_in: Access token lifetime in seconds.
    """

    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    expires_in: int


@dataclass(frozen=True, kw_only=True)
class CleanupReport:
    """Rows removed by one expired-token cleanup pass."""

    refresh_tokens: int
    verification_tokens: int
    reset_tokens: int

    @property
    def total(self) -> int:
        return self.refresh_tokens + self.verification_tokens + self.reset_tokens


def token_preview(token: str) -> str:
    """Return a log-safe prefix of a token."""
    return f"{token[:TOKEN_PREVIEW_LENGTH]}..."


class TokenLifecycleService:
    """Issue, rotate, consume and revoke authentication tokens.

    Dependencies (injected via constructor):
        - UserRepository: fresh claims on rotation, password update on reset
        - RefreshTokenRepository: refresh token rows
        - EmailVerificationTokenRepository: verification token rows
        - PasswordResetTokenRepository: reset token rows
        - TokenCodecProtocol: signed token minting
        - OpaqueTokenGeneratorProtocol: random single-use tokens
        - LoggerProtocol: structured logging (token previews only)
    """

    def __init__(
        self,
        *,
        user_repo: UserRepository,
        refresh_token_repo: RefreshTokenRepository,
        verification_token_repo: EmailVerificationTokenRepository,
        reset_token_repo: PasswordResetTokenRepository,
        token_codec: TokenCodecProtocol,
        token_generator: OpaqueTokenGeneratorProtocol,
        logger: LoggerProtocol,
        email_verification_expiry_seconds: int = EMAIL_VERIFICATION_EXPIRY_SECONDS_DEFAULT,
        password_reset_expiry_seconds: int = PASSWORD_RESET_EXPIRY_SECONDS_DEFAULT,
        clock: Clock = utc_now,
    ) -> None:
        self._user_repo = user_repo
        self._refresh_token_repo = refresh_token_repo
        self._verification_token_repo = verification_token_repo
        self._reset_token_repo = reset_token_repo
        self._token_codec = token_codec
        self._token_generator = token_generator
        self._logger = logger
        self._email_verification_expiry_seconds = email_verification_expiry_seconds
        self._password_reset_expiry_seconds = password_reset_expiry_seconds
        self._clock = clock

    async def issue_token_pair(self, user: User) -> TokenPair:
        """Mint an access/refresh pair and persist the refresh token.

        Existing sessions of the user are left untouched, so a user may
        hold several active refresh tokens (one per device).

        Args:
            user: Authenticated user.

        Returns:
            TokenPair with a new access token and a new refresh token.
        """
        access_token = self._token_codec.generate_access_token(
            AccessClaims.from_user(user)
        )
        refresh_token = self._token_codec.generate_refresh_token(user.id)
        await self._refresh_token_repo.create(
            user_id=user.id,
            token=refresh_token,
            expires_at=self._clock() + self._token_codec.refresh_token_lifetime,
        )

        self._logger.info(
            "Token pair issued",
            user_id=str(user.id),
            refresh_token=token_preview(refresh_token),
        )
        return self._pair(access_token, refresh_token)

    async def rotate(self, refresh_token: str) -> Result[TokenPair, DomainError]:
        """Exchange a refresh token for a new pair (rotation-on-use).

        Flow:
            1. Look up the token among unrevoked rows
            2. Reject it if past expiry (row stays as is)
            3. Load the user for fresh claims
            4. Mint the new pair
            5. Conditionally revoke the old row and insert the new one

        A revoked token is indistinguishable from an unknown one. Replaying
        a token that was already rotated therefore yields
        INVALID_REFRESH_TOKEN and leaves the rest of the chain active.

        Returns:
            Success(TokenPair) on rotation.
            Failure(INVALID_REFRESH_TOKEN) if unknown, revoked, owned by a
                deleted user, or rotated concurrently by another caller.
            Failure(REFRESH_TOKEN_EXPIRED) if known but past expiry.
            Failure(ACCOUNT_INACTIVE) if the owner has been deactivated.
        """
        # Step 1: Active row lookup
        record = await self._refresh_token_repo.find_active(refresh_token)
        if record is None:
            self._logger.warning(
                "Refresh rejected: token unknown or revoked",
                refresh_token=token_preview(refresh_token),
            )
            return Failure(error=TokenError.invalid_refresh_token())

        # Step 2: Expiry
        now = self._clock()
        if record.state(now) is TokenState.EXPIRED:
            self._logger.info(
                "Refresh rejected: token expired",
                user_id=str(record.user_id),
            )
            return Failure(error=TokenError.refresh_token_expired())

        # Step 3: Fresh user claims
        user = await self._user_repo.find_by_id(record.user_id)
        if user is None:
            return Failure(error=TokenError.invalid_refresh_token())
        if not user.can_authenticate():
            return Failure(error=AuthError.account_inactive())

        # Step 4: Mint
        access_token = self._token_codec.generate_access_token(
            AccessClaims.from_user(user)
        )
        new_refresh_token = self._token_codec.generate_refresh_token(user.id)

        # Step 5: Atomic swap
        rotated = await self._refresh_token_repo.rotate(
            old_token=refresh_token,
            new_token=new_refresh_token,
            user_id=user.id,
            expires_at=now + self._token_codec.refresh_token_lifetime,
        )
        if rotated is None:
            self._logger.warning(
                "Refresh rejected: token rotated concurrently",
                user_id=str(user.id),
                refresh_token=token_preview(refresh_token),
            )
            return Failure(error=TokenError.invalid_refresh_token())

        self._logger.info("Refresh token rotated", user_id=str(user.id))
        return Success(value=self._pair(access_token, new_refresh_token))

    async def logout(self, refresh_token: str) -> Result[None, DomainError]:
        """Revoke one refresh token.

        Always succeeds: logging out with an unknown, expired or already
        revoked token is a no-op.
        """
        revoked = await self._refresh_token_repo.revoke(
            refresh_token, RevocationReason.LOGOUT
        )
        self._logger.info(
            "Logout",
            refresh_token=token_preview(refresh_token),
            revoked=revoked,
        )
        return Success(value=None)

    async def revoke_all_sessions(
        self,
        user_id: UUID,
        reason: RevocationReason = RevocationReason.LOGOUT_ALL,
        except_token: str | None = None,
    ) -> int:
        """Revoke every active refresh token of a user.

        Args:
            user_id: Owner of the tokens.
            reason: Revocation reason recorded on each row.
            except_token: Session to keep (the caller's own).

        Returns:
            Number of tokens revoked.
        """
        count = await self._refresh_token_repo.revoke_all_for_user(
            user_id=user_id,
            reason=reason,
            except_token=except_token,
        )
        self._logger.info(
            "Sessions revoked",
            user_id=str(user_id),
            reason=reason.value,
            count=count,
            kept_current=except_token is not None,
        )
        return count

    async def list_active_sessions(self, user_id: UUID) -> list[RefreshTokenData]:
        """List a user's unrevoked, unexpired refresh tokens, newest first."""
        return await self._refresh_token_repo.list_active_for_user(
            user_id, self._clock()
        )

    async def issue_verification_token(self, user_id: UUID) -> str:
        """Replace any earlier verification token with a new one.

        Returns:
            The new opaque token (to be emailed, never logged).
        """
        await self._verification_token_repo.delete_for_user(user_id)
        token = self._token_generator.generate()
        await self._verification_token_repo.create(
            user_id=user_id,
            token=token,
            expires_at=self._token_generator.expiry_from(
                self._clock(), self._email_verification_expiry_seconds
            ),
        )
        self._logger.info("Verification token issued", user_id=str(user_id))
        return token

    async def consume_verification_token(
        self, token: str
    ) -> Result[UUID, TokenError]:
        """Consume a verification token.

        An expired token is reported as such and stays unused.

        Returns:
            Success(user_id) when consumed.
            Failure(INVALID_VERIFICATION_TOKEN) if unknown or already used.
            Failure(VERIFICATION_TOKEN_EXPIRED) if past expiry.
        """
        match await self._claim(
            self._verification_token_repo,
            token,
            invalid=TokenError.invalid_verification_token,
            expired=TokenError.verification_token_expired,
        ):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=record):
                self._logger.info(
                    "Verification token consumed", user_id=str(record.user_id)
                )
                return Success(value=record.user_id)

    async def issue_reset_token(self, user_id: UUID) -> str:
        """Replace any earlier reset token with a new one.

        Returns:
            The new opaque token (to be emailed, never logged).
        """
        await self._reset_token_repo.delete_for_user(user_id)
        token = self._token_generator.generate()
        await self._reset_token_repo.create(
            user_id=user_id,
            token=token,
            expires_at=self._token_generator.expiry_from(
                self._clock(), self._password_reset_expiry_seconds
            ),
        )
        self._logger.info("Password reset token issued", user_id=str(user_id))
        return token

    async def check_reset_token(self, token: str) -> Result[UUID, TokenError]:
        """Validate a reset token without consuming it.

        Lets a client reject a stale link before the user types a new
        password.
        """
        record = await self._reset_token_repo.find_active(token)
        if record is None:
            return Failure(error=TokenError.invalid_reset_token())
        if record.state(self._clock()) is TokenState.EXPIRED:
            return Failure(error=TokenError.reset_token_expired())
        return Success(value=record.user_id)

    async def consume_reset_token(
        self, token: str, new_password_hash: str
    ) -> Result[UUID, TokenError]:
        """Consume a reset token, set the new password, revoke all sessions.

        Order:
            1. Claim the token (conditional mark-used)
            2. Update the password hash
            3. Revoke every refresh token of the user (reason: password_reset)

        All three writes belong to the caller's transaction. If the password
        update raises, nothing is committed and no session is revoked.

        Args:
            token: Reset token from the email link.
            new_password_hash: Already-hashed new password.

        Returns:
            Success(user_id) when the password was reset.
            Failure(INVALID_RESET_TOKEN) if unknown or already used.
            Failure(RESET_TOKEN_EXPIRED) if past expiry.
        """
        match await self._claim(
            self._reset_token_repo,
            token,
            invalid=TokenError.invalid_reset_token,
            expired=TokenError.reset_token_expired,
        ):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=record):
                await self._user_repo.update_password(
                    record.user_id, new_password_hash
                )
                await self.revoke_all_sessions(
                    record.user_id, RevocationReason.PASSWORD_RESET
                )
                self._logger.info(
                    "Password reset completed", user_id=str(record.user_id)
                )
                return Success(value=record.user_id)

    async def cleanup_expired(self) -> CleanupReport:
        """Delete every expired row of all three token kinds.

        Only rows already past expiry are touched, so this can run
        concurrently with normal traffic.
        """
        now = self._clock()
        report = CleanupReport(
            refresh_tokens=await self._refresh_token_repo.delete_expired(now),
            verification_tokens=await self._verification_token_repo.delete_expired(now),
            reset_tokens=await self._reset_token_repo.delete_expired(now),
        )
        self._logger.info(
            "Expired tokens deleted",
            refresh_tokens=report.refresh_tokens,
            verification_tokens=report.verification_tokens,
            reset_tokens=report.reset_tokens,
        )
        return report

    def _pair(self, access_token: str, refresh_token: str) -> TokenPair:
        return TokenPair(
            access_token=access_token,
            refresh_token=refresh_token,
            expires_in=int(self._token_codec.access_token_lifetime.total_seconds()),
        )

    async def _claim(
        self,
        repo: EmailVerificationTokenRepository | PasswordResetTokenRepository,
        token: str,
        *,
        invalid: Callable[[], TokenError],
        expired: Callable[[], TokenError],
    ) -> Result[SingleUseTokenData, TokenError]:
        record = await repo.find_active(token)
        if record is None:
            return Failure(error=invalid())
        if record.state(self._clock()) is TokenState.EXPIRED:
            return Failure(error=expired())
        # Lost a race with another consumer of the same token.
        if not await repo.mark_used(token):
            return Failure(error=invalid())
        return Success(value=record)
