"""Application layer public API."""

from distributed_load.application.runtime import ActiveJobPool, JobAttempt
from distributed_load.application.services import DistributedLoadService

__all__ = ["ActiveJobPool", "DistributedLoadService", "JobAttempt"]
