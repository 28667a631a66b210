"""One retryable load job and the job service session that drives it."""

from __future__ import annotations

import logging

from distributed_load.domain.errors import JobServiceClientError
from distributed_load.domain.jobs import JobStatus, LoadJobConfig
from distributed_load.domain.ports import JobServiceClient
from distributed_load.domain.retry import CountingRetry

logger = logging.getLogger(__name__)


class JobAttempt:
    """Submit and poll one load job within a fixed retry budget.

    The attempt exclusively owns `client`. `release` closes it at most once, and
    a released attempt refuses to talk to the job service again.
    """

    def __init__(
        self,
        config: LoadJobConfig,
        retry_policy: CountingRetry,
        client: JobServiceClient,
    ) -> None:
        self._config = config
        self._retry_policy = retry_policy
        self._client = client
        self._job_id: int | None = None
        self._released = False

    @property
    def config(self) -> LoadJobConfig:
        return self._config

    @property
    def job_id(self) -> int | None:
        """Id of the most recent successful submission, if any."""

        return self._job_id

    @property
    def submit_count(self) -> int:
        return self._retry_policy.attempt_count

    @property
    def released(self) -> bool:
        return self._released

    async def submit(self) -> bool:
        """Submit the job, returning False once the retry budget is exhausted.

        A transport failure still consumes one attempt; it leaves `job_id` unset so
        the next status check reports FAILED.
        """

        self._ensure_open()
        if not self._retry_policy.attempt():
            logger.warning(
                "Failed to complete load job for '%s' after %s attempts.",
                self._config.path,
                self._retry_policy.max_attempts,
            )
            return False

        self._job_id = None
        try:
            self._job_id = await self._client.run(self._config)
        except JobServiceClientError as exc:
            logger.warning(
                "Failed to submit load job for '%s' (attempt %s/%s): %s",
                self._config.path,
                self._retry_policy.attempt_count,
                self._retry_policy.max_attempts,
                exc,
            )
        return True

    async def status(self) -> JobStatus:
        """Return the remote job status, treating unreachable jobs as FAILED."""

        self._ensure_open()
        if self._job_id is None:
            return JobStatus.FAILED

        try:
            return await self._client.get_status(self._job_id)
        except JobServiceClientError as exc:
            logger.warning(
                "Failed to get status for load job %s ('%s'): %s",
                self._job_id,
                self._config.path,
                exc,
            )
            return JobStatus.FAILED

    async def release(self) -> None:
        """Close the job service session.

        Repeated calls are no-ops. A failing close propagates because it may leak a
        session on the remote side.
        """

        if self._released:
            return
        self._released = True
        await self._client.close()

    def _ensure_open(self) -> None:
        if self._released:
            raise RuntimeError(f"Job attempt for '{self._config.path}' is already released.")


__all__ = ["JobAttempt"]
