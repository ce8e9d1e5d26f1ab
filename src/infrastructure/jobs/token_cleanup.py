"""Periodic expired-token cleanup job.

Runs the cleanup command on a fixed interval inside the application's event
loop. Cleanup only deletes rows that are already past expiry, so it needs no
coordination with request handling and several instances may run at once.

Architecture:
- The job knows nothing about repositories; it awaits a ``cleanup``
  callable supplied by the container (one unit of work per run)
- A failed run is logged and retried on the next tick
"""

import asyncio
from collections.abc import Awaitable, Callable
from contextlib import suppress

from sqlalchemy.exc import SQLAlchemyError

from src.application.services import CleanupReport
from src.domain.protocols import LoggerProtocol


class TokenCleanupJob:
    """Background loop deleting expired tokens.

    Attributes:
        interval_seconds: Delay between runs.

    Example:
        >>> job = TokenCleanupJob(cleanup=run_token_cleanup, logger=logger)
        >>> job.start()
        >>> ...
        >>> await job.stop()
    """

    def __init__(
        self,
        cleanup: Callable[[], Awaitable[CleanupReport]],
        logger: LoggerProtocol,
        interval_seconds: float = 3600,
    ) -> None:
        """Initialize cleanup job.

        Args:
            cleanup: Runs one cleanup pass in its own transaction.
            logger: Structured logger.
            interval_seconds: Delay between runs (must be positive).

        Raises:
            ValueError: If interval_seconds is not positive.
        """
        if interval_seconds <= 0:
            msg = "Cleanup interval must be positive"
            raise ValueError(msg)

        self._cleanup = cleanup
        self._logger = logger.bind(job="token_cleanup")
        self.interval_seconds = interval_seconds
        self._task: asyncio.Task[None] | None = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def run_once(self) -> CleanupReport | None:
        """Run one cleanup pass.

        Returns:
            CleanupReport, or None if the database failed or could not be
            reached (logged). Connection refusals and timeouts surface as
            OSError from the driver.
        """
        try:
            report = await self._cleanup()
        except (SQLAlchemyError, OSError) as e:
            self._logger.error("Token cleanup failed", error=e)
            return None

        self._logger.info("Token cleanup finished", deleted=report.total)
        return report

    def start(self) -> None:
        """Schedule the loop on the running event loop (no-op if running)."""
        if self.is_running:
            return
        self._task = asyncio.create_task(self._run_forever(), name="token-cleanup")
        self._logger.info("Token cleanup started", interval_seconds=self.interval_seconds)

    async def stop(self) -> None:
        """Cancel the loop and wait for it to finish."""
        if self._task is None:
            return
        self._task.cancel()
        with suppress(asyncio.CancelledError):
            await self._task
        self._task = None
        self._logger.info("Token cleanup stopped")

    async def _run_forever(self) -> None:
        while True:
            await self.run_once()
            await asyncio.sleep(self.interval_seconds)
