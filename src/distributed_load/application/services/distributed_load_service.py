"""Walk a file tree and load every file that is not yet fully resident."""

from __future__ import annotations

import logging
from collections.abc import Callable

from distributed_load.application.runtime import ActiveJobPool
from distributed_load.domain.files import FileStatus
from distributed_load.domain.jobs import LoadJobConfig
from distributed_load.domain.ports import FileSystemMetadata, JobServiceClientFactory
from distributed_load.domain.retry import DEFAULT_MAX_SUBMIT_ATTEMPTS

Reporter = Callable[[str], None]

logger = logging.getLogger(__name__)


def _discard(_: str) -> None:
    return None


class DistributedLoadService:
    """Dispatch one load job per non-resident file under a root path.

    Traversal is depth-first in listing order. Admission into the job pool blocks
    while the pool is full, which throttles the walk to the concurrency ceiling.
    Metadata and connection errors abort the walk and propagate unchanged; failures
    of individual jobs are absorbed by their retry budget.
    """

    def __init__(
        self,
        metadata: FileSystemMetadata,
        job_client_factory: JobServiceClientFactory,
        *,
        max_active_jobs: int = 1000,
        max_submit_attempts: int = DEFAULT_MAX_SUBMIT_ATTEMPTS,
        poll_interval_seconds: float = 0.0,
        status_check_concurrency: int = 16,
        reporter: Reporter | None = None,
    ) -> None:
        self._metadata = metadata
        self._job_client_factory = job_client_factory
        self._max_active_jobs = max_active_jobs
        self._max_submit_attempts = max_submit_attempts
        self._poll_interval_seconds = poll_interval_seconds
        self._status_check_concurrency = status_check_concurrency
        self._reporter = reporter or _discard

    async def distributed_load(
        self,
        path: str,
        replication: int = 1,
        max_active_jobs: int | None = None,
    ) -> None:
        """Load `path` (a file or a directory tree) and wait for every job to finish."""

        if replication < 1:
            raise ValueError("replication must be >= 1.")
        capacity = self._max_active_jobs if max_active_jobs is None else max_active_jobs

        async with ActiveJobPool(
            self._job_client_factory,
            capacity,
            max_submit_attempts=self._max_submit_attempts,
            poll_interval_seconds=self._poll_interval_seconds,
            status_check_concurrency=self._status_check_concurrency,
        ) as pool:
            await self._load(pool, path, replication)
            await pool.drain_all()

        logger.info(
            "Distributed load of '%s' finished: %s jobs completed, %s abandoned.",
            path,
            pool.completed_count,
            pool.abandoned_count,
        )

    async def _load(self, pool: ActiveJobPool, path: str, replication: int) -> None:
        status = await self._metadata.get_status(path)
        if not status.folder:
            await self._add_job(pool, status, replication)
            return

        for child in await self._metadata.list_status(path):
            if child.folder:
                await self._load(pool, child.path, replication)
            else:
                await self._add_job(pool, child, replication)

    async def _add_job(self, pool: ActiveJobPool, status: FileStatus, replication: int) -> None:
        if status.fully_resident:
            self._reporter(f"{status.path} is already fully loaded")
            return
        await pool.admit(LoadJobConfig(path=status.path, replication=replication))
        self._reporter(f"{status.path} loading")


__all__ = ["DistributedLoadService", "Reporter"]
