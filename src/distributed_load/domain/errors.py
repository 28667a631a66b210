"""Domain exceptions for distributed load operations."""


class DistributedLoadError(Exception):
    """Base class for distributed load errors."""


class FileSystemMetadataError(DistributedLoadError):
    """Raised when file metadata cannot be fetched or listed."""


class PathNotFoundError(FileSystemMetadataError):
    """Raised when a path does not exist in the storage system."""


class FileSystemPermissionError(FileSystemMetadataError):
    """Raised when the storage system denies access to a path."""


class JobServiceClientError(RuntimeError):
    """Raised when a call to the job service fails in transport."""


class UnexpectedJobStatusError(DistributedLoadError):
    """Raised when the job service reports a status this dispatcher does not know."""


__all__ = [
    "DistributedLoadError",
    "FileSystemMetadataError",
    "FileSystemPermissionError",
    "JobServiceClientError",
    "PathNotFoundError",
    "UnexpectedJobStatusError",
]
