"""Command-line entrypoint."""

from __future__ import annotations

import asyncio
import logging

import typer

from distributed_load import __version__, bootstrap
from distributed_load.config import Settings
from distributed_load.domain.errors import DistributedLoadError, JobServiceClientError

app = typer.Typer(
    name="distributed-load",
    help="Loads a file or all files in a directory into the storage cache.",
    add_completion=False,
)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


async def _distributed_load(
    settings: Settings,
    path: str,
    replication: int,
    active_jobs: int,
) -> None:
    async with bootstrap.build_metadata_client(settings) as metadata:
        service = bootstrap.build_distributed_load_service(
            settings,
            metadata=metadata,
            reporter=typer.echo,
        )
        await service.distributed_load(path, replication, max_active_jobs=active_jobs)


@app.command()
def distributed_load(
    path: str = typer.Argument(..., help="File or directory to load."),
    replication: int | None = typer.Option(
        None,
        "--replication",
        min=1,
        metavar="replicas",
        help="Number of block replicas of each loaded file, default: 1",
    ),
    active_jobs: int | None = typer.Option(
        None,
        "--active-jobs",
        "--active_jobs",
        min=1,
        metavar="jobs",
        help="Maximum number of active outgoing jobs, default: 1000",
    ),
    log_level: str | None = typer.Option(None, "--log-level", help="Override log level."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Load a file or every file under a directory, skipping fully loaded files."""

    settings = Settings()
    _configure_logging((log_level or settings.log_level).upper())
    try:
        asyncio.run(
            _distributed_load(
                settings,
                path,
                replication or settings.default_replication,
                active_jobs or settings.max_active_jobs,
            )
        )
    except (DistributedLoadError, JobServiceClientError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def run() -> None:
    """Console script entrypoint."""

    app()


__all__ = ["app", "run"]
