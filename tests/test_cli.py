from __future__ import annotations

import pytest
from fakes import FakeFileSystem, FakeJobService
from typer.testing import CliRunner

from distributed_load import __version__, bootstrap
from distributed_load.config import Settings
from distributed_load.domain.errors import PathNotFoundError
from distributed_load.domain.jobs import JobStatus
from distributed_load.main import app

runner = CliRunner()


@pytest.fixture
def file_system(monkeypatch: pytest.MonkeyPatch) -> FakeFileSystem:
    fake = FakeFileSystem({"/data/a.csv": 0, "/data/b.csv": 100, "/data/sub/c.csv": 0})
    monkeypatch.setenv("DISTRIBUTED_LOAD_POLL_INTERVAL_SECONDS", "0")

    def _build_metadata_client(_settings: Settings) -> FakeFileSystem:
        return fake

    monkeypatch.setattr(bootstrap, "build_metadata_client", _build_metadata_client)
    return fake


@pytest.fixture
def job_service(monkeypatch: pytest.MonkeyPatch) -> FakeJobService:
    fake = FakeJobService(
        status_scripts={
            "/data/a.csv": [JobStatus.RUNNING, JobStatus.COMPLETED],
            "/data/sub/c.csv": [JobStatus.RUNNING, JobStatus.COMPLETED],
        }
    )

    def _build_job_client_factory(_settings: Settings):  # type: ignore[no-untyped-def]
        return fake.client

    monkeypatch.setattr(bootstrap, "build_job_client_factory", _build_job_client_factory)
    return fake


def test_cli_prints_one_line_per_file_and_exits_zero(
    file_system: FakeFileSystem,
    job_service: FakeJobService,
) -> None:
    result = runner.invoke(app, ["/data"])

    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines() == [
        "/data/a.csv loading",
        "/data/b.csv is already fully loaded",
        "/data/sub/c.csv loading",
    ]
    assert job_service.run_calls == ["/data/a.csv", "/data/sub/c.csv"]
    assert file_system.closed is True


def test_cli_active_jobs_option_bounds_concurrency(
    file_system: FakeFileSystem,
    job_service: FakeJobService,
) -> None:
    result = runner.invoke(app, ["/data", "--active-jobs", "1", "--replication", "2"])

    assert result.exit_code == 0, result.output
    assert job_service.max_open_sessions == 1
    assert [config.replication for config in job_service.submitted_configs] == [2, 2]


def test_cli_defaults_replication_to_one(
    file_system: FakeFileSystem,
    job_service: FakeJobService,
) -> None:
    result = runner.invoke(app, ["/data"])

    assert result.exit_code == 0, result.output
    assert [config.replication for config in job_service.submitted_configs] == [1, 1]


def test_cli_empty_directory_prints_nothing_and_exits_zero(
    monkeypatch: pytest.MonkeyPatch,
    job_service: FakeJobService,
) -> None:
    empty = FakeFileSystem({}, directories=["/landing"])
    monkeypatch.setenv("DISTRIBUTED_LOAD_POLL_INTERVAL_SECONDS", "0")

    def _build_metadata_client(_settings: Settings) -> FakeFileSystem:
        return empty

    monkeypatch.setattr(bootstrap, "build_metadata_client", _build_metadata_client)

    result = runner.invoke(app, ["/landing"])

    assert result.exit_code == 0, result.output
    assert "loading" not in result.stdout
    assert "already fully loaded" not in result.stdout
    assert job_service.run_calls == []
    assert empty.closed is True


def test_cli_reports_walk_error_even_when_session_close_fails(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    broken = FakeFileSystem(
        {"/data/a.csv": 0, "/data/sub/b.csv": 0},
        failing_listings={"/data/sub": PathNotFoundError("Path '/data/sub' does not exist")},
    )
    leaky = FakeJobService(
        status_scripts={"/data/a.csv": [JobStatus.RUNNING]},
        close_error=OSError("close failed"),
    )
    monkeypatch.setenv("DISTRIBUTED_LOAD_POLL_INTERVAL_SECONDS", "0")

    def _build_metadata_client(_settings: Settings) -> FakeFileSystem:
        return broken

    def _build_job_client_factory(_settings: Settings):  # type: ignore[no-untyped-def]
        return leaky.client

    monkeypatch.setattr(bootstrap, "build_metadata_client", _build_metadata_client)
    monkeypatch.setattr(bootstrap, "build_job_client_factory", _build_job_client_factory)

    result = runner.invoke(app, ["/data"])

    assert result.exit_code == 1
    assert not isinstance(result.exception, OSError)
    assert "/data/sub" in result.output
    assert [session.close_calls for session in leaky.sessions] == [1]


def test_cli_exits_non_zero_for_missing_path(
    file_system: FakeFileSystem,
    job_service: FakeJobService,
) -> None:
    result = runner.invoke(app, ["/missing"])

    assert result.exit_code == 1
    assert job_service.run_calls == []
    assert file_system.closed is True


def test_cli_rejects_non_positive_options(
    file_system: FakeFileSystem,
    job_service: FakeJobService,
) -> None:
    result = runner.invoke(app, ["/data", "--replication", "0"])

    assert result.exit_code != 0
    assert job_service.run_calls == []


def test_cli_requires_a_path() -> None:
    result = runner.invoke(app, [])

    assert result.exit_code != 0


def test_cli_prints_version() -> None:
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.stdout
