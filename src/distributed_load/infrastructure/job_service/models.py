"""Pydantic models for job service JSON payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from distributed_load.domain.jobs import LoadJobConfig


class JobServiceModel(BaseModel):
    """Base model for job service payloads."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class LoadJobConfigPayload(JobServiceModel):
    """Serialized load job configuration."""

    type_: str = Field(default="load", alias="@type")
    file_path: str = Field(alias="filePath")
    replication: int = Field(ge=1)

    @classmethod
    def from_config(cls, config: LoadJobConfig) -> LoadJobConfigPayload:
        return cls(file_path=config.path, replication=config.replication)


class RunJobRequest(JobServiceModel):
    """Body of a job submission request."""

    job_config: LoadJobConfigPayload = Field(alias="jobConfig")


class RunJobResponse(JobServiceModel):
    """Job submission response."""

    job_id: int = Field(alias="jobId")


class JobStatusResponse(JobServiceModel):
    """Job status response.

    `status` is kept as a raw string so unknown values surface as a domain error
    instead of a validation error.
    """

    job_id: int = Field(alias="jobId")
    status: str


__all__ = [
    "JobStatusResponse",
    "LoadJobConfigPayload",
    "RunJobRequest",
    "RunJobResponse",
]
