"""HTTP client for the storage system metadata proxy."""

from __future__ import annotations

from types import TracebackType
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from distributed_load.domain.errors import (
    FileSystemMetadataError,
    FileSystemPermissionError,
    PathNotFoundError,
)
from distributed_load.domain.files import FileStatus
from distributed_load.domain.ports import FileSystemMetadata
from distributed_load.infrastructure.http_support import (
    detail_from_response,
    failure_message,
    normalize_base_url,
)
from distributed_load.infrastructure.metadata.models import FileStatusPayload

_STATUS_LIST_ADAPTER = TypeAdapter(list[FileStatusPayload])


class HttpFileSystemMetadataClient(FileSystemMetadata):
    """Fetch file status and directory listings over HTTP."""

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = normalize_base_url(base_url, FileSystemMetadataError, "Metadata")
        self._http = httpx.AsyncClient(timeout=timeout_seconds, transport=transport)

    async def __aenter__(self) -> HttpFileSystemMetadataClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        await self.close()

    async def get_status(self, path: str) -> FileStatus:
        """Call `/api/v1/paths/status`."""

        payload = await self._get_json("/api/v1/paths/status", path)
        try:
            return FileStatusPayload.model_validate(payload).to_domain()
        except ValidationError as exc:
            raise FileSystemMetadataError(f"Malformed status for '{path}': {exc}") from exc

    async def list_status(self, path: str) -> list[FileStatus]:
        """Call `/api/v1/paths/children`."""

        payload = await self._get_json("/api/v1/paths/children", path)
        try:
            children = _STATUS_LIST_ADAPTER.validate_python(payload)
        except ValidationError as exc:
            raise FileSystemMetadataError(f"Malformed listing for '{path}': {exc}") from exc
        return [child.to_domain() for child in children]

    async def close(self) -> None:
        """Release underlying HTTP resources."""

        await self._http.aclose()

    async def _get_json(self, endpoint: str, path: str) -> Any:
        url = f"{self._base_url}{endpoint}"
        try:
            response = await self._http.get(url, params={"path": path})
        except httpx.HTTPError as exc:
            raise FileSystemMetadataError(f"GET {url} failed for '{path}': {exc}") from exc

        self._ensure_success(response, path)
        try:
            return response.json()
        except ValueError as exc:
            raise FileSystemMetadataError(
                f"GET {url} returned invalid JSON for '{path}'."
            ) from exc

    def _ensure_success(self, response: httpx.Response, path: str) -> None:
        if response.is_success:
            return
        if response.status_code == 404:
            raise PathNotFoundError(
                f"Path '{path}' does not exist: {detail_from_response(response)}"
            )
        if response.status_code in {401, 403}:
            raise FileSystemPermissionError(
                f"Access to '{path}' denied: {detail_from_response(response)}"
            )
        raise FileSystemMetadataError(failure_message(response))


__all__ = ["HttpFileSystemMetadataClient"]
