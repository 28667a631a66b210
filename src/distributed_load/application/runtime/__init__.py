"""Job dispatch runtime."""

from distributed_load.application.runtime.active_job_pool import ActiveJobPool
from distributed_load.application.runtime.job_attempt import JobAttempt

__all__ = ["ActiveJobPool", "JobAttempt"]
