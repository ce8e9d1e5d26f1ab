"""Change password handler.

Flow:
1. Load the user
2. Verify the current password
3. Store the new password hash
4. Revoke every other session (reason: password_changed)
5. Send the password-changed notice (failure logged only)
"""

from src.application.commands.auth_commands import ChangePassword
from src.application.commands.handlers.notifications import send_notification
from src.application.services.token_lifecycle_service import TokenLifecycleService
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.enums import RevocationReason
from src.domain.errors import AuthError
from src.domain.protocols import (
    EmailServiceProtocol,
    LoggerProtocol,
    PasswordHashingProtocol,
    UserRepository,
)

PASSWORD_CHANGED_MESSAGE = "Password changed successfully"


class ChangePasswordHandler:
    """Handler for ChangePassword command.

    The session that issued the request survives when its refresh token is
    supplied; all other sessions of the user are revoked.
    """

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

    async def handle(self, cmd: ChangePassword) -> Result[str, DomainError]:
        """Handle password change.

        Returns:
            Success(message) when changed.
            Failure(USER_NOT_FOUND) or Failure(INVALID_CREDENTIALS).
        """
        # Step 1: Load user
        user = await self._user_repo.find_by_id(cmd.user_id)
        if user is None:
            return Failure(error=AuthError.user_not_found())

        # Step 2: Current password
        if not self._password_service.verify_password(
            cmd.current_password, user.password_hash
        ):
            return Failure(
                error=AuthError.invalid_credentials("Current password is incorrect")
            )

        # Step 3-4: Update and revoke other sessions
        await self._user_repo.update_password(
            user.id, self._password_service.hash_password(cmd.new_password)
        )
        await self._token_service.revoke_all_sessions(
            user.id,
            RevocationReason.PASSWORD_CHANGED,
            except_token=cmd.current_refresh_token,
        )

        # Step 5: Notice
        await send_notification(
            self._logger,
            self._email_service.send_password_changed_notification(user),
            kind="password_changed_notification",
            user_id=user.id,
        )

        self._logger.info("Password changed", user_id=str(user.id))
        return Success(value=PASSWORD_CHANGED_MESSAGE)
