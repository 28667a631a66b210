"""Load job models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from distributed_load.domain.errors import UnexpectedJobStatusError


class JobStatus(StrEnum):
    """Remote job states reported by the job service."""

    CREATED = "CREATED"
    RUNNING = "RUNNING"
    COMPLETED = "COMPLETED"
    CANCELED = "CANCELED"
    FAILED = "FAILED"


PENDING_JOB_STATUSES = frozenset({JobStatus.CREATED, JobStatus.RUNNING})
FINISHED_JOB_STATUSES = frozenset({JobStatus.COMPLETED, JobStatus.CANCELED})


def parse_job_status(value: str) -> JobStatus:
    """Map a wire status string onto `JobStatus`."""

    try:
        return JobStatus(value.strip().upper())
    except ValueError as exc:
        raise UnexpectedJobStatusError(f"Unexpected job status '{value}'.") from exc


@dataclass(slots=True, frozen=True)
class LoadJobConfig:
    """Immutable description of one file load job."""

    path: str
    replication: int = 1


__all__ = [
    "FINISHED_JOB_STATUSES",
    "JobStatus",
    "LoadJobConfig",
    "PENDING_JOB_STATUSES",
    "parse_job_status",
]
