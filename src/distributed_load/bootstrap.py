"""Application bootstrap/wiring."""

from distributed_load.application.services import DistributedLoadService
from distributed_load.application.services.distributed_load_service import Reporter
from distributed_load.config import Settings
from distributed_load.domain.ports import (
    FileSystemMetadata,
    JobServiceClient,
    JobServiceClientFactory,
)
from distributed_load.infrastructure.job_service import HttpJobServiceClient
from distributed_load.infrastructure.metadata import HttpFileSystemMetadataClient


def build_metadata_client(settings: Settings) -> HttpFileSystemMetadataClient:
    """Build the storage metadata adapter."""

    return HttpFileSystemMetadataClient(
        base_url=settings.metadata_endpoint,
        timeout_seconds=settings.request_timeout_seconds,
    )


def build_job_client_factory(settings: Settings) -> JobServiceClientFactory:
    """Build a factory opening one job service session per load job."""

    def factory() -> JobServiceClient:
        return HttpJobServiceClient(
            base_url=settings.job_service_endpoint,
            timeout_seconds=settings.request_timeout_seconds,
        )

    return factory


def build_distributed_load_service(
    settings: Settings,
    metadata: FileSystemMetadata,
    reporter: Reporter | None = None,
    job_client_factory: JobServiceClientFactory | None = None,
) -> DistributedLoadService:
    """Compose service graph."""

    return DistributedLoadService(
        metadata=metadata,
        job_client_factory=job_client_factory or build_job_client_factory(settings),
        max_active_jobs=settings.max_active_jobs,
        max_submit_attempts=settings.max_submit_attempts,
        poll_interval_seconds=settings.poll_interval_seconds,
        status_check_concurrency=settings.status_check_concurrency,
        reporter=reporter,
    )


__all__ = [
    "build_distributed_load_service",
    "build_job_client_factory",
    "build_metadata_client",
]
