"""Job service adapter."""

from distributed_load.infrastructure.job_service.client import (
    HttpJobServiceClient,
    JobServiceClientError,
)

__all__ = ["HttpJobServiceClient", "JobServiceClientError"]
