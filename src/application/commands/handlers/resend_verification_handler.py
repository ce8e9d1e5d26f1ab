"""Resend verification email handler.

Unknown emails receive the same response as known ones so the endpoint
cannot be used to probe for registered addresses.
"""

from src.application.commands.auth_commands import ResendVerification
from src.application.commands.handlers.notifications import send_notification
from src.application.services.token_lifecycle_service import TokenLifecycleService
from src.core.constants import GENERIC_VERIFICATION_SENT_MESSAGE
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.errors import AuthError
from src.domain.protocols import EmailServiceProtocol, LoggerProtocol, UserRepository


class ResendVerificationHandler:
    """Handler for ResendVerification command."""

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

    async def handle(self, cmd: ResendVerification) -> Result[str, DomainError]:
        """Handle resend verification.

        Returns:
            Success(generic message) whether or not the email is registered.
            Failure(EMAIL_ALREADY_VERIFIED) if the account needs no
            verification.
        """
        user = await self._user_repo.find_by_email(cmd.email)
        if user is None:
            self._logger.info("Verification resend requested for unknown email")
            return Success(value=GENERIC_VERIFICATION_SENT_MESSAGE)

        if user.email_verified:
            return Failure(error=AuthError.email_already_verified())

        token = await self._token_service.issue_verification_token(user.id)
        await send_notification(
            self._logger,
            self._email_service.send_verification_email(user, token),
            kind="verification_email",
            user_id=user.id,
        )
        return Success(value=GENERIC_VERIFICATION_SENT_MESSAGE)
