"""Domain public API."""

from distributed_load.domain.errors import (
    DistributedLoadError,
    FileSystemMetadataError,
    FileSystemPermissionError,
    JobServiceClientError,
    PathNotFoundError,
    UnexpectedJobStatusError,
)
from distributed_load.domain.files import FULLY_RESIDENT_PERCENTAGE, FileStatus
from distributed_load.domain.jobs import (
    FINISHED_JOB_STATUSES,
    PENDING_JOB_STATUSES,
    JobStatus,
    LoadJobConfig,
    parse_job_status,
)
from distributed_load.domain.ports import (
    FileSystemMetadata,
    JobServiceClient,
    JobServiceClientFactory,
)
from distributed_load.domain.retry import DEFAULT_MAX_SUBMIT_ATTEMPTS, CountingRetry

__all__ = [
    "CountingRetry",
    "DEFAULT_MAX_SUBMIT_ATTEMPTS",
    "DistributedLoadError",
    "FINISHED_JOB_STATUSES",
    "FULLY_RESIDENT_PERCENTAGE",
    "FileStatus",
    "FileSystemMetadata",
    "FileSystemMetadataError",
    "FileSystemPermissionError",
    "JobServiceClient",
    "JobServiceClientError",
    "JobServiceClientFactory",
    "JobStatus",
    "LoadJobConfig",
    "PENDING_JOB_STATUSES",
    "PathNotFoundError",
    "UnexpectedJobStatusError",
    "parse_job_status",
]
