"""Refresh Access Token handler.

Thin command adapter over TokenLifecycleService.rotate, which owns the
rotation-on-use rules.
"""

from src.application.commands.auth_commands import RefreshAccessToken
from src.application.services.token_lifecycle_service import (
    TokenLifecycleService,
    TokenPair,
)
from src.core.errors import DomainError
from src.core.result import Result


class RefreshAccessTokenHandler:
    """Handler for RefreshAccessToken command."""

    def __init__(self, token_service: TokenLifecycleService) -> None:
        self._token_service = token_service

    async def handle(self, cmd: RefreshAccessToken) -> Result[TokenPair, DomainError]:
        """Rotate the presented refresh token.

        Returns:
            Success(TokenPair) on rotation.
            Failure(INVALID_REFRESH_TOKEN), Failure(REFRESH_TOKEN_EXPIRED) or
            Failure(ACCOUNT_INACTIVE).
        """
        return await self._token_service.rotate(cmd.refresh_token)
