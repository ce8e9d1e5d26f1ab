"""Email verification handler.

Flow:
1. Consume the verification token
2. Mark the user's email verified
3. Send the welcome email (failure logged only)
4. Return Success(message)
"""

from src.application.commands.auth_commands import VerifyEmail
from src.application.commands.handlers.notifications import send_notification
from src.application.services.token_lifecycle_service import TokenLifecycleService
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.errors import AuthError
from src.domain.protocols import EmailServiceProtocol, LoggerProtocol, UserRepository

EMAIL_VERIFIED_MESSAGE = "Email verified successfully"


class VerifyEmailHandler:
    """Handler for VerifyEmail command."""

    def __init__(
        self,
        user_repo: UserRepository,
        token_service: TokenLifecycleService,
        email_service: EmailServiceProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._token_service = token_service
        self._email_service = email_service
        self._logger = logger

    async def handle(self, cmd: VerifyEmail) -> Result[str, DomainError]:
        """Handle email verification.

        Returns:
            Success(message) when verified.
            Failure(INVALID_VERIFICATION_TOKEN) or
            Failure(VERIFICATION_TOKEN_EXPIRED).
        """
        # Step 1: Consume token
        result = await self._token_service.consume_verification_token(cmd.token)
        if isinstance(result, Failure):
            return result
        user_id = result.value

        # Step 2: Flag user
        await self._user_repo.set_email_verified(user_id)
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            return Failure(error=AuthError.user_not_found())

        # Step 3: Welcome email
        await send_notification(
            self._logger,
            self._email_service.send_welcome_email(user),
            kind="welcome_email",
            user_id=user.id,
        )

        self._logger.info("Email verified", user_id=str(user.id))
        return Success(value=EMAIL_VERIFIED_MESSAGE)
