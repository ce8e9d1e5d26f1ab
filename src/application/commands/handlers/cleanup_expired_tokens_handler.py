"""Expired token cleanup handler."""

from src.application.commands.auth_commands import CleanupExpiredTokens
from src.application.services.token_lifecycle_service import (
    CleanupReport,
    TokenLifecycleService,
)
from src.core.errors import DomainError
from src.core.result import Result, Success


class CleanupExpiredTokensHandler:
    """Handler for CleanupExpiredTokens command."""

    def __init__(self, token_service: TokenLifecycleService) -> None:
        self._token_service = token_service

    async def handle(self, cmd: CleanupExpiredTokens) -> Result[CleanupReport, DomainError]:
        report = await self._token_service.cleanup_expired()
        return Success(value=report)
