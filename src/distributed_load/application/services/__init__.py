"""Application services."""

from distributed_load.application.services.distributed_load_service import (
    DistributedLoadService,
)

__all__ = ["DistributedLoadService"]
