"""Pydantic models for storage metadata JSON payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from distributed_load.domain.files import FileStatus


class FileStatusPayload(BaseModel):
    """Serialized file status returned by the metadata proxy."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    path: str
    folder: bool = False
    residency_percentage: int = Field(default=0, alias="residencyPercentage", ge=0, le=100)
    length: int = Field(default=0, ge=0)

    def to_domain(self) -> FileStatus:
        return FileStatus(
            path=self.path,
            folder=self.folder,
            residency_percentage=self.residency_percentage,
            length=self.length,
        )


__all__ = ["FileStatusPayload"]
