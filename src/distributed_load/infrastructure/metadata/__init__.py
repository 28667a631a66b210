"""Storage metadata adapter."""

from distributed_load.infrastructure.metadata.client import HttpFileSystemMetadataClient

__all__ = ["HttpFileSystemMetadataClient"]
