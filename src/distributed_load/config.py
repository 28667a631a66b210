"""Application settings."""

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings loaded from environment variables."""

    metadata_endpoint: str = "http://localhost:39999"
    job_service_endpoint: str = "http://localhost:20002"
    request_timeout_seconds: float = 10.0
    default_replication: int = 1
    max_active_jobs: int = 1000
    max_submit_attempts: int = 3
    poll_interval_seconds: float = 0.05
    status_check_concurrency: int = 16
    log_level: str = "INFO"

    @model_validator(mode="after")
    def validate_dispatch_settings(self) -> "Settings":
        """Ensure endpoints are present and limits are positive."""

        if not self.metadata_endpoint.strip():
            raise ValueError("DISTRIBUTED_LOAD_METADATA_ENDPOINT cannot be empty.")
        if not self.job_service_endpoint.strip():
            raise ValueError("DISTRIBUTED_LOAD_JOB_SERVICE_ENDPOINT cannot be empty.")
        if self.request_timeout_seconds <= 0:
            raise ValueError("DISTRIBUTED_LOAD_REQUEST_TIMEOUT_SECONDS must be > 0.")
        if self.default_replication < 1:
            raise ValueError("DISTRIBUTED_LOAD_DEFAULT_REPLICATION must be >= 1.")
        if self.max_active_jobs < 1:
            raise ValueError("DISTRIBUTED_LOAD_MAX_ACTIVE_JOBS must be >= 1.")
        if self.max_submit_attempts < 1:
            raise ValueError("DISTRIBUTED_LOAD_MAX_SUBMIT_ATTEMPTS must be >= 1.")
        if self.poll_interval_seconds < 0:
            raise ValueError("DISTRIBUTED_LOAD_POLL_INTERVAL_SECONDS must be >= 0.")
        if self.status_check_concurrency < 1:
            raise ValueError("DISTRIBUTED_LOAD_STATUS_CHECK_CONCURRENCY must be >= 1.")
        self.log_level = self.log_level.strip().upper()
        return self

    model_config = SettingsConfigDict(env_prefix="DISTRIBUTED_LOAD_", extra="ignore")


__all__ = ["Settings"]
