"""Ports for storage metadata and the remote job service."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from distributed_load.domain.files import FileStatus
from distributed_load.domain.jobs import JobStatus, LoadJobConfig


class FileSystemMetadata(Protocol):
    """Read-only metadata port of the storage system."""

    async def get_status(self, path: str) -> FileStatus:
        """Return metadata for one path."""

    async def list_status(self, path: str) -> list[FileStatus]:
        """Return the immediate children of a directory in listing order."""


class JobServiceClient(Protocol):
    """One session with the remote job-execution service."""

    async def run(self, config: LoadJobConfig) -> int:
        """Submit a job and return its id."""

    async def get_status(self, job_id: int) -> JobStatus:
        """Return the current status of a submitted job."""

    async def close(self) -> None:
        """Release the session."""


JobServiceClientFactory = Callable[[], JobServiceClient]


__all__ = ["FileSystemMetadata", "JobServiceClient", "JobServiceClientFactory"]
