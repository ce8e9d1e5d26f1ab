"""Logout handlers.

LogoutUserHandler ends one session; LogoutAllSessionsHandler ends every
session of the user.
"""

from src.application.commands.auth_commands import LogoutAllSessions, LogoutUser
from src.application.services.token_lifecycle_service import TokenLifecycleService
from src.core.errors import DomainError
from src.core.result import Result, Success
from src.domain.enums import RevocationReason


class LogoutUserHandler:
    """Handler for LogoutUser command.

    Idempotent: an unknown or already revoked token still logs out
    successfully.
    """

    def __init__(self, token_service: TokenLifecycleService) -> None:
        self._token_service = token_service

    async def handle(self, cmd: LogoutUser) -> Result[None, DomainError]:
        return await self._token_service.logout(cmd.refresh_token)


class LogoutAllSessionsHandler:
    """Handler for LogoutAllSessions command."""

    def __init__(self, token_service: TokenLifecycleService) -> None:
        self._token_service = token_service

    async def handle(self, cmd: LogoutAllSessions) -> Result[int, DomainError]:
        """Revoke every active refresh token of the user.

        Returns:
            Success(number of sessions revoked).
        """
        count = await self._token_service.revoke_all_sessions(
            cmd.user_id, RevocationReason.LOGOUT_ALL
        )
        return Success(value=count)
