"""Bounded pool of in-flight load jobs driven by status polling."""

from __future__ import annotations

import asyncio
import logging
from types import TracebackType

from distributed_load.application.runtime.job_attempt import JobAttempt
from distributed_load.domain.errors import UnexpectedJobStatusError
from distributed_load.domain.jobs import JobStatus, LoadJobConfig
from distributed_load.domain.ports import JobServiceClientFactory
from distributed_load.domain.retry import DEFAULT_MAX_SUBMIT_ATTEMPTS, CountingRetry

_DEFAULT_CAPACITY = 1000
_DEFAULT_POLL_INTERVAL_SECONDS = 0.0
_DEFAULT_STATUS_CHECK_CONCURRENCY = 16

logger = logging.getLogger(__name__)


class ActiveJobPool:
    """Admit load jobs up to `capacity` and poll them until they finish.

    The job service only offers pull-style status queries, so admission control is
    a sweep over every in-flight attempt: finished jobs free their slot, failed jobs
    are resubmitted until their retry budget runs out. Completion order is
    independent of submission order, so every sweep visits all attempts.

    Use the pool as an async context manager so attempts left in flight by an
    aborted dispatch still release their sessions.
    """

    def __init__(
        self,
        client_factory: JobServiceClientFactory,
        capacity: int = _DEFAULT_CAPACITY,
        *,
        max_submit_attempts: int = DEFAULT_MAX_SUBMIT_ATTEMPTS,
        poll_interval_seconds: float = _DEFAULT_POLL_INTERVAL_SECONDS,
        status_check_concurrency: int = _DEFAULT_STATUS_CHECK_CONCURRENCY,
    ) -> None:
        if capacity < 1:
            raise ValueError("capacity must be >= 1.")
        self._client_factory = client_factory
        self._capacity = capacity
        self._max_submit_attempts = max(1, max_submit_attempts)
        self._poll_interval_seconds = max(0.0, poll_interval_seconds)
        self._status_checks = asyncio.Semaphore(max(1, status_check_concurrency))
        self._in_flight: list[JobAttempt] = []
        self._completed_count = 0
        self._abandoned_count = 0

    async def __aenter__(self) -> ActiveJobPool:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        if exc is None:
            await self.close()
            return

        # The error that aborted the dispatch wins over a failing session close.
        try:
            await self.close()
        except Exception as close_exc:
            exc.add_note(f"Releasing in-flight job sessions also failed: {close_exc!r}")

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def in_flight(self) -> tuple[JobAttempt, ...]:
        """Snapshot of attempts submitted but not yet finished."""

        return tuple(self._in_flight)

    @property
    def completed_count(self) -> int:
        """Number of jobs that reached COMPLETED or CANCELED."""

        return self._completed_count

    @property
    def abandoned_count(self) -> int:
        """Number of jobs dropped after exhausting their retry budget."""

        return self._abandoned_count

    async def admit(self, config: LoadJobConfig) -> JobAttempt:
        """Submit a new load job, first waiting for a free slot when the pool is full."""

        if len(self._in_flight) >= self._capacity:
            await self.wait_for_slot()

        attempt = JobAttempt(
            config=config,
            retry_policy=CountingRetry(self._max_submit_attempts),
            client=self._client_factory(),
        )
        self._in_flight.append(attempt)
        await attempt.submit()
        logger.debug(
            "Admitted load job for '%s' (%s/%s in flight).",
            config.path,
            len(self._in_flight),
            self._capacity,
        )
        return attempt

    async def wait_for_slot(self) -> int:
        """Sweep until at least one attempt leaves the pool; return how many left."""

        if not self._in_flight:
            raise RuntimeError("Cannot wait for a slot with no job attempts in flight.")

        while True:
            removed = await self._sweep()
            if removed:
                return removed
            await asyncio.sleep(self._poll_interval_seconds)

    async def drain_all(self) -> None:
        """Block until every in-flight attempt has finished or been abandoned."""

        while self._in_flight:
            await self.wait_for_slot()

    async def close(self) -> None:
        """Release every attempt still in flight."""

        attempts, self._in_flight = self._in_flight, []
        first_error: Exception | None = None
        for attempt in attempts:
            try:
                await attempt.release()
            except Exception as exc:
                logger.warning(
                    "Failed to release job service session for '%s': %s",
                    attempt.config.path,
                    exc,
                )
                if first_error is None:
                    first_error = exc
        if first_error is not None:
            raise first_error

    async def _sweep(self) -> int:
        attempts = list(self._in_flight)
        statuses = await asyncio.gather(
            *(self._checked_status(attempt) for attempt in attempts),
            return_exceptions=True,
        )
        for status in statuses:
            if isinstance(status, BaseException):
                raise status

        retained: list[JobAttempt] = []
        removed = 0
        position = 0
        try:
            for attempt, status in zip(attempts, statuses, strict=True):
                if await self._handle_status(attempt, status):
                    removed += 1
                else:
                    retained.append(attempt)
                position += 1
        finally:
            unprocessed = [attempt for attempt in attempts[position:] if not attempt.released]
            self._in_flight = retained + unprocessed
        return removed

    async def _handle_status(self, attempt: JobAttempt, status: JobStatus) -> bool:
        """Apply one polled status; return True when the attempt leaves the pool."""

        match status:
            case JobStatus.CREATED | JobStatus.RUNNING:
                return False
            case JobStatus.COMPLETED | JobStatus.CANCELED:
                logger.debug("Load job for '%s' finished: %s.", attempt.config.path, status)
                self._completed_count += 1
                await attempt.release()
                return True
            case JobStatus.FAILED:
                if await attempt.submit():
                    return False
                self._abandoned_count += 1
                await attempt.release()
                return True
            case _:
                raise UnexpectedJobStatusError(f"Unexpected job status: {status}")

    async def _checked_status(self, attempt: JobAttempt) -> JobStatus:
        async with self._status_checks:
            return await attempt.status()


__all__ = ["ActiveJobPool"]
