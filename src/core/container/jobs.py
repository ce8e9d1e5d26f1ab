"""Background job factories."""

from functools import lru_cache

from src.application.services import CleanupReport
from src.core.config import get_settings
from src.core.container.auth_handlers import get_token_lifecycle_service
from src.core.container.infrastructure import get_database, get_logger
from src.infrastructure.jobs import TokenCleanupJob


async def run_token_cleanup() -> CleanupReport:
    """Run one expired-token cleanup pass in its own transaction."""
    async with get_database().get_session() as session:
        return await get_token_lifecycle_service(session).cleanup_expired()


@lru_cache()
def get_token_cleanup_job() -> TokenCleanupJob:
    """Get the cleanup job singleton (app-scoped)."""
    return TokenCleanupJob(
        cleanup=run_token_cleanup,
        logger=get_logger(),
        interval_seconds=get_settings().token_cleanup_interval_seconds,
    )
