"""Registration handler.

Flow:
1. Check email uniqueness
2. Check username uniqueness
3. Hash password
4. Create User entity (pre-verified when email verification is disabled)
5. Save user
6. Issue verification token and send it (send failure is logged only)
7. Return Success(RegistrationResult)

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols)
- NO infrastructure imports (repositories are injected via protocols)
"""

from dataclasses import dataclass
from uuid import UUID

from uuid_extensions import uuid7

from src.application.commands.auth_commands import RegisterUser
from src.application.commands.handlers.notifications import send_notification
from src.application.services.token_lifecycle_service import TokenLifecycleService
from src.core.clock import Clock, utc_now
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities import User
from src.domain.errors import AuthError
from src.domain.protocols import (
    EmailServiceProtocol,
    LoggerProtocol,
    PasswordHashingProtocol,
    UserRepository,
)

REGISTERED_VERIFY_MESSAGE = (
    "Registration successful. Please check your email to verify your account."
)
REGISTERED_MESSAGE = "Registration successful. You can now log in."


@dataclass(frozen=True, kw_only=True)
class RegistrationResult:
    """Response data for successful registration."""

    user_id: UUID
    email_verified: bool
    message: str


class RegisterUserHandler:
    """Handler for RegisterUser command."""

    def __init__(
        self,
        user_repo: UserRepository,
        token_service: TokenLifecycleService,
        password_service: PasswordHashingProtocol,
        email_service: EmailServiceProtocol,
        logger: LoggerProtocol,
        email_verification_enabled: bool = True,
        clock: Clock = utc_now,
    ) -> None:
        """Initialize registration handler with dependencies.

        Args:
            user_repo: User repository for persistence.
            token_service: Issues the email verification token.
            password_service: Password hashing service.
            email_service: Sends the verification email.
            logger: Structured logger.
            email_verification_enabled: When False, users are created
                already verified and no email is sent.
            clock: Source of created_at/updated_at.
        """
        self._user_repo = user_repo
        self._token_service = token_service
        self._password_service = password_service
        self._email_service = email_service
        self._logger = logger
        self._email_verification_enabled = email_verification_enabled
        self._clock = clock

    async def handle(self, cmd: RegisterUser) -> Result[RegistrationResult, DomainError]:
        """Handle registration command.

        Returns:
            Success(RegistrationResult) on success.
            Failure(EMAIL_ALREADY_EXISTS) or Failure(USERNAME_ALREADY_EXISTS).
        """
        email = cmd.email.strip().lower()

        # Step 1-2: Uniqueness
        if await self._user_repo.find_by_email(email) is not None:
            return Failure(error=AuthError.email_already_exists())
        if await self._user_repo.find_by_username(cmd.username) is not None:
            return Failure(error=AuthError.username_already_exists())

        # Step 3-5: Create user
        now = self._clock()
        user = User(
            id=uuid7(),
            email=email,
            username=cmd.username,
            password_hash=self._password_service.hash_password(cmd.password),
            role=cmd.role,
            is_active=True,
            email_verified=not self._email_verification_enabled,
            created_at=now,
            updated_at=now,
        )
        await self._user_repo.save(user)

        self._logger.info(
            "User registered",
            user_id=str(user.id),
            username=user.username,
            email_verified=user.email_verified,
        )

        if not self._email_verification_enabled:
            return Success(
                value=RegistrationResult(
                    user_id=user.id,
                    email_verified=True,
                    message=REGISTERED_MESSAGE,
                )
            )

        # Step 6: Verification email
        token = await self._token_service.issue_verification_token(user.id)
        await send_notification(
            self._logger,
            self._email_service.send_verification_email(user, token),
            kind="verification_email",
            user_id=user.id,
        )

        return Success(
            value=RegistrationResult(
                user_id=user.id,
                email_verified=False,
                message=REGISTERED_VERIFY_MESSAGE,
            )
        )
