"""Infrastructure layer public API."""

from distributed_load.infrastructure.job_service import (
    HttpJobServiceClient,
    JobServiceClientError,
)
from distributed_load.infrastructure.metadata import HttpFileSystemMetadataClient

__all__ = [
    "HttpFileSystemMetadataClient",
    "HttpJobServiceClient",
    "JobServiceClientError",
]
