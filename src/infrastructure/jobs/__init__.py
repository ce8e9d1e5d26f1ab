"""Background jobs.

- TokenCleanupJob: periodic deletion of expired tokens

Usage:
    from src.core.container import get_token_cleanup_job

    job = get_token_cleanup_job()
    job.start()
"""

from src.infrastructure.jobs.token_cleanup import TokenCleanupJob

__all__ = ["TokenCleanupJob"]
