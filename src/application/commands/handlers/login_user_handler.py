"""Login handler.

Flow:
1. Find user by email
2. Verify password (a dummy hash is verified for unknown emails so both
   failure paths cost one bcrypt verification)
3. Check the account is active
4. Issue a new token pair (other sessions stay open)
5. Return Success(LoginResult)
"""

import secrets
from dataclasses import dataclass
from uuid import UUID

from src.application.commands.auth_commands import LoginUser
from src.application.services.token_lifecycle_service import (
    TokenLifecycleService,
    TokenPair,
)
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.errors import AuthError
from src.domain.protocols import (
    LoggerProtocol,
    PasswordHashingProtocol,
    UserRepository,
)


@dataclass(frozen=True, kw_only=True)
class LoginResult:
    """Response data for successful login."""

    user_id: UUID
    email_verified: bool
    tokens: TokenPair


class LoginUserHandler:
    """Handler for LoginUser command.

    Unknown email and wrong password both return INVALID_CREDENTIALS with
    the same message.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        token_service: TokenLifecycleService,
        password_service: PasswordHashingProtocol,
        logger: LoggerProtocol,
        dummy_password_hash: str | None = None,
    ) -> None:
        """Initialize login handler with dependencies.

        Args:
            user_repo: User repository.
            token_service: Issues the token pair.
            password_service: Password verification.
            logger: Structured logger.
            dummy_password_hash: Digest verified against when the email is
                unknown. Computed on first use when not supplied.
        """
        self._user_repo = user_repo
        self._token_service = token_service
        self._password_service = password_service
        self._logger = logger
        self._dummy_password_hash = dummy_password_hash

    async def handle(self, cmd: LoginUser) -> Result[LoginResult, DomainError]:
        """Handle login command.

        Returns:
            Success(LoginResult) with a new token pair.
            Failure(INVALID_CREDENTIALS) or Failure(ACCOUNT_INACTIVE).
        """
        # Step 1: Find user
        user = await self._user_repo.find_by_email(cmd.email)

        # Step 2: Verify password
        if user is None:
            self._password_service.verify_password(cmd.password, self._dummy_hash())
            self._logger.info("Login failed: unknown email")
            return Failure(error=AuthError.invalid_credentials())

        if not self._password_service.verify_password(cmd.password, user.password_hash):
            self._logger.info("Login failed: wrong password", user_id=str(user.id))
            return Failure(error=AuthError.invalid_credentials())

        # Step 3: Active account
        if not user.can_authenticate():
            self._logger.info("Login failed: account inactive", user_id=str(user.id))
            return Failure(error=AuthError.account_inactive())

        # Step 4: Token pair
        tokens = await self._token_service.issue_token_pair(user)

        self._logger.info("User logged in", user_id=str(user.id))
        return Success(
            value=LoginResult(
                user_id=user.id,
                email_verified=user.email_verified,
                tokens=tokens,
            )
        )

    def _dummy_hash(self) -> str:
        if self._dummy_password_hash is None:
            self._dummy_password_hash = self._password_service.hash_password(
                secrets.token_urlsafe(16)
            )
        return self._dummy_password_hash
