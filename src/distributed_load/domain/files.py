"""File metadata entities."""

from __future__ import annotations

from dataclasses import dataclass

FULLY_RESIDENT_PERCENTAGE = 100


@dataclass(slots=True, frozen=True)
class FileStatus:
    """Subset of storage metadata needed to plan load jobs."""

    path: str
    folder: bool
    residency_percentage: int = 0
    length: int = 0

    @property
    def fully_resident(self) -> bool:
        """Whether every block of the file is already cached."""

        return self.residency_percentage >= FULLY_RESIDENT_PERCENTAGE


__all__ = ["FULLY_RESIDENT_PERCENTAGE", "FileStatus"]
