"""Request password reset handler (forgot password).

Always answers with the same generic message, whether the email is
registered or not and whether the email could be sent or not.
"""

from src.application.commands.auth_commands import RequestPasswordReset
from src.application.commands.handlers.notifications import send_notification
from src.application.services.token_lifecycle_service import TokenLifecycleService
from src.core.constants import GENERIC_RESET_SENT_MESSAGE
from src.core.errors import DomainError
from src.core.result import Result, Success
from src.domain.protocols import EmailServiceProtocol, LoggerProtocol, UserRepository


class RequestPasswordResetHandler:
    """Handler for RequestPasswordReset command."""

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

    async def handle(self, cmd: RequestPasswordReset) -> Result[str, DomainError]:
        user = await self._user_repo.find_by_email(cmd.email)
        if user is None:
            self._logger.warning("Password reset requested for unknown email")
            return Success(value=GENERIC_RESET_SENT_MESSAGE)

        token = await self._token_service.issue_reset_token(user.id)
        await send_notification(
            self._logger,
            self._email_service.send_password_reset_email(user, token),
            kind="password_reset_email",
            user_id=user.id,
        )
        return Success(value=GENERIC_RESET_SENT_MESSAGE)
