"""HTTP client for the remote job-execution service."""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import ValidationError

from distributed_load.domain.errors import JobServiceClientError
from distributed_load.domain.jobs import JobStatus, LoadJobConfig, parse_job_status
from distributed_load.domain.ports import JobServiceClient
from distributed_load.infrastructure.http_support import failure_message, normalize_base_url
from distributed_load.infrastructure.job_service.models import (
    JobStatusResponse,
    LoadJobConfigPayload,
    RunJobRequest,
    RunJobResponse,
)


class HttpJobServiceClient(JobServiceClient):
    """One session with the job service, backed by its own HTTP connection pool."""

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = normalize_base_url(base_url, JobServiceClientError, "Job service")
        self._http = httpx.AsyncClient(timeout=timeout_seconds, transport=transport)

    async def run(self, config: LoadJobConfig) -> int:
        """Call `/api/v1/jobs/run` and return the assigned job id."""

        body = RunJobRequest(job_config=LoadJobConfigPayload.from_config(config))
        payload = await self._request(
            "POST",
            "/api/v1/jobs/run",
            json=body.model_dump(by_alias=True),
        )
        try:
            return RunJobResponse.model_validate(payload).job_id
        except ValidationError as exc:
            raise JobServiceClientError(f"Malformed job submission response: {exc}") from exc

    async def get_status(self, job_id: int) -> JobStatus:
        """Call `/api/v1/jobs/{jobId}/status`."""

        payload = await self._request("GET", f"/api/v1/jobs/{job_id}/status")
        try:
            response = JobStatusResponse.model_validate(payload)
        except ValidationError as exc:
            raise JobServiceClientError(f"Malformed job status response: {exc}") from exc
        return parse_job_status(response.status)

    async def close(self) -> None:
        """Release underlying HTTP resources."""

        await self._http.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        json: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        url = f"{self._base_url}{path}"
        try:
            response = await self._http.request(method, url, json=json)
        except httpx.HTTPError as exc:
            raise JobServiceClientError(f"{method} {url} failed: {exc}") from exc
        return self._parse_json_response(response)

    def _parse_json_response(self, response: httpx.Response) -> dict[str, Any]:
        self._ensure_success(response)
        try:
            payload = response.json()
        except ValueError as exc:
            raise JobServiceClientError(
                f"{response.request.method} {response.request.url} returned invalid JSON."
            ) from exc
        if not isinstance(payload, dict):
            raise JobServiceClientError(
                f"{response.request.method} {response.request.url} returned non-object JSON."
            )
        return payload

    def _ensure_success(self, response: httpx.Response) -> None:
        if not response.is_success:
            raise JobServiceClientError(failure_message(response))


__all__ = ["HttpJobServiceClient", "JobServiceClientError"]
