"""Unit tests for TokenCleanupJob.

Tests cover:
- One run reports the cleanup result
- Database and connection errors are logged, not raised
- The loop keeps running after failed passes
- Start/stop lifecycle of the background task
"""

import asyncio
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError

from src.application.services import CleanupReport
from src.infrastructure.jobs import TokenCleanupJob

REPORT = CleanupReport(refresh_tokens=3, verification_tokens=1, reset_tokens=0)


@pytest.mark.unit
class TestTokenCleanupJob:
    async def test_run_once_returns_report(self, mock_logger):
        job = TokenCleanupJob(cleanup=AsyncMock(return_value=REPORT), logger=mock_logger)

        assert await job.run_once() == REPORT
        mock_logger.info.assert_called_with("Token cleanup finished", deleted=4)

    async def test_run_once_logs_database_error(self, mock_logger):
        error = OperationalError("DELETE", {}, Exception("locked"))
        job = TokenCleanupJob(cleanup=AsyncMock(side_effect=error), logger=mock_logger)

        assert await job.run_once() is None
        mock_logger.error.assert_called_once_with("Token cleanup failed", error=error)

    @pytest.mark.parametrize(
        "error",
        [TimeoutError("timed out"), ConnectionRefusedError(111, "Connection refused")],
    )
    async def test_run_once_logs_connection_error(self, mock_logger, error):
        job = TokenCleanupJob(cleanup=AsyncMock(side_effect=error), logger=mock_logger)

        assert await job.run_once() is None
        mock_logger.error.assert_called_once_with("Token cleanup failed", error=error)

    async def test_loop_survives_failed_passes(self, mock_logger):
        calls = 0
        third_call = asyncio.Event()

        async def cleanup():
            nonlocal calls
            calls += 1
            if calls == 3:
                third_call.set()
            raise OSError("database unreachable")

        job = TokenCleanupJob(
            cleanup=cleanup, logger=mock_logger, interval_seconds=0.01
        )
        job.start()
        await asyncio.wait_for(third_call.wait(), timeout=1)
        await asyncio.sleep(0)

        assert job.is_running
        await job.stop()
        assert not job.is_running
        assert mock_logger.error.call_count >= 3

    async def test_start_runs_immediately_and_stop_cancels(self, mock_logger):
        ran = asyncio.Event()

        async def cleanup():
            ran.set()
            return REPORT

        job = TokenCleanupJob(cleanup=cleanup, logger=mock_logger, interval_seconds=60)
        job.start()
        await asyncio.wait_for(ran.wait(), timeout=1)

        assert job.is_running
        await job.stop()
        assert not job.is_running

    async def test_start_twice_keeps_one_task(self, mock_logger):
        cleanup = AsyncMock(return_value=REPORT)
        job = TokenCleanupJob(cleanup=cleanup, logger=mock_logger, interval_seconds=60)

        job.start()
        first = job._task
        job.start()

        assert job._task is first
        await job.stop()

    async def test_stop_when_not_started_is_noop(self, mock_logger):
        job = TokenCleanupJob(cleanup=AsyncMock(), logger=mock_logger)

        await job.stop()

        assert not job.is_running

    @pytest.mark.parametrize("interval", [0, -1])
    def test_non_positive_interval_rejected(self, mock_logger, interval):
        with pytest.raises(ValueError, match="positive"):
            TokenCleanupJob(
                cleanup=AsyncMock(), logger=mock_logger, interval_seconds=interval
            )
