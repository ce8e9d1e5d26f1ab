"""Confirm password reset handler.

Flow:
1. Hash the new password
2. Consume the reset token, update the password and revoke every session
   (one transaction, see TokenLifecycleService.consume_reset_token)
3. Send the password-changed notice (failure logged only)
4. Return Success(message)
"""

from src.application.commands.auth_commands import ConfirmPasswordReset
from src.application.commands.handlers.notifications import send_notification
from src.application.services.token_lifecycle_service import TokenLifecycleService
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.protocols import (
    EmailServiceProtocol,
    LoggerProtocol,
    PasswordHashingProtocol,
    UserRepository,
)

PASSWORD_RESET_MESSAGE = "Password reset successfully"


class ConfirmPasswordResetHandler:
    """Handler for ConfirmPasswordReset command."""

    def __init__(
        self,
        user_repo: UserRepository,
        token_service: TokenLifecycleService,
        password_service: PasswordHashingProtocol,
        email_service: EmailServiceProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._token_service = token_service
        self._password_service = password_service
        self._email_service = email_service
        self._logger = logger

    async def handle(self, cmd: ConfirmPasswordReset) -> Result[str, DomainError]:
        """Handle password reset confirmation.

        Returns:
            Success(message) when the password was reset.
            Failure(INVALID_RESET_TOKEN) or Failure(RESET_TOKEN_EXPIRED).
        """
        new_password_hash = self._password_service.hash_password(cmd.new_password)

        result = await self._token_service.consume_reset_token(
            cmd.token, new_password_hash
        )
        if isinstance(result, Failure):
            return result
        user_id = result.value

        user = await self._user_repo.find_by_id(user_id)
        if user is not None:
            await send_notification(
                self._logger,
                self._email_service.send_password_changed_notification(user),
                kind="password_changed_notification",
                user_id=user.id,
            )

        return Success(value=PASSWORD_RESET_MESSAGE)
