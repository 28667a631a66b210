"""In-memory doubles for the storage metadata and job service ports."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import count
from types import TracebackType

from distributed_load.domain.errors import JobServiceClientError, PathNotFoundError
from distributed_load.domain.files import FileStatus
from distributed_load.domain.jobs import JobStatus, LoadJobConfig

StatusStep = JobStatus | str | Exception


class FakeFileSystem:
    """File tree built from absolute file paths mapped to residency percentages.

    Directories are implied by file paths; `directories` adds ones that may be
    empty. `failing_listings` maps a directory to the error its listing raises.
    """

    def __init__(
        self,
        files: dict[str, int],
        directories: Sequence[str] = (),
        failing_listings: dict[str, Exception] | None = None,
    ) -> None:
        self._files = dict(files)
        self._directories = [directory.rstrip("/") for directory in directories]
        self._failing_listings = dict(failing_listings or {})
        self.get_status_calls: list[str] = []
        self.list_status_calls: list[str] = []
        self.closed = False

    async def __aenter__(self) -> FakeFileSystem:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        await self.close()

    async def get_status(self, path: str) -> FileStatus:
        self.get_status_calls.append(path)
        return self._status(path)

    async def list_status(self, path: str) -> list[FileStatus]:
        self.list_status_calls.append(path)
        if path in self._failing_listings:
            raise self._failing_listings[path]
        prefix = self._prefix(path)
        children: list[str] = []
        for entry in [*self._files, *self._directories]:
            if not entry.startswith(prefix):
                continue
            child = prefix + entry[len(prefix) :].split("/", 1)[0]
            if child not in children:
                children.append(child)
        return [self._status(child) for child in children]

    async def close(self) -> None:
        self.closed = True

    def set_residency(self, path: str, percentage: int) -> None:
        self._files[path] = percentage

    def _status(self, path: str) -> FileStatus:
        if path in self._files:
            return FileStatus(path=path, folder=False, residency_percentage=self._files[path])
        prefix = self._prefix(path)
        entries = [*self._files, *(self._prefix(directory) for directory in self._directories)]
        if any(entry.startswith(prefix) for entry in entries):
            return FileStatus(path=path, folder=True, residency_percentage=0)
        raise PathNotFoundError(f"Path '{path}' does not exist")

    @staticmethod
    def _prefix(path: str) -> str:
        return path.rstrip("/") + "/"


class FakeJobService:
    """Scripted job service shared by every session it hands out.

    `status_scripts` maps a file path to the statuses returned by successive polls
    of that path's jobs; the last step repeats once the script is exhausted.
    Paths without a script complete on the first poll.
    """

    def __init__(
        self,
        status_scripts: dict[str, Sequence[StatusStep]] | None = None,
        failing_submits: dict[str, int] | None = None,
        close_error: Exception | None = None,
    ) -> None:
        self._status_scripts = {path: list(steps) for path, steps in (status_scripts or {}).items()}
        self._failing_submits = dict(failing_submits or {})
        self._close_error = close_error
        self._job_ids = count(1)
        self._job_paths: dict[int, str] = {}
        self.submitted_configs: list[LoadJobConfig] = []
        self.run_calls: list[str] = []
        self.poll_calls: list[int] = []
        self.sessions: list[FakeJobServiceClient] = []
        self.max_open_sessions = 0

    def client(self) -> FakeJobServiceClient:
        session = FakeJobServiceClient(self)
        self.sessions.append(session)
        self.max_open_sessions = max(self.max_open_sessions, self.open_sessions)
        return session

    @property
    def open_sessions(self) -> int:
        return sum(1 for session in self.sessions if session.close_calls == 0)

    def submit(self, config: LoadJobConfig) -> int:
        self.submitted_configs.append(config)
        self.run_calls.append(config.path)
        remaining_failures = self._failing_submits.get(config.path, 0)
        if remaining_failures > 0:
            self._failing_submits[config.path] = remaining_failures - 1
            raise JobServiceClientError(f"submit of {config.path} refused")
        job_id = next(self._job_ids)
        self._job_paths[job_id] = config.path
        return job_id

    def poll(self, job_id: int) -> JobStatus:
        self.poll_calls.append(job_id)
        path = self._job_paths[job_id]
        script = self._status_scripts.get(path)
        if not script:
            return JobStatus.COMPLETED
        step = script.pop(0) if len(script) > 1 else script[0]
        if isinstance(step, Exception):
            raise step
        return step  # type: ignore[return-value]

    def close(self) -> None:
        if self._close_error is not None:
            raise self._close_error


class FakeJobServiceClient:
    """One session handed out by `FakeJobService`."""

    def __init__(self, service: FakeJobService) -> None:
        self._service = service
        self.close_calls = 0

    async def run(self, config: LoadJobConfig) -> int:
        return self._service.submit(config)

    async def get_status(self, job_id: int) -> JobStatus:
        return self._service.poll(job_id)

    async def close(self) -> None:
        self.close_calls += 1
        self._service.close()
