"""runfiles-resolver: look up Bazel runfiles from the shell.

Usage:
    runfiles-resolver rlocation my_repo/data/config.yaml
    runfiles-resolver rlocations "my_repo/files/a my_repo/files/b"
    env $(runfiles-resolver env) ./child_binary
"""

from __future__ import annotations

from typing import Annotated

import structlog
import typer

from runfiles_resolver.errors import RunfilesError
from runfiles_resolver.global_runfiles import get_runfiles
from runfiles_resolver.logging_config import logging_callback
from runfiles_resolver.repository import repository_of_file
from runfiles_resolver.runfiles import Runfiles

logger = structlog.get_logger()

SOURCE_REPO_OPT = typer.Option("--source-repo", help="Canonical repository the request is made from")

app = typer.Typer(help="Resolve Bazel runfiles to absolute paths.", no_args_is_help=True)
app.callback()(logging_callback)


def _runfiles(source_repo: str) -> Runfiles:
    try:
        runfiles = get_runfiles()
    except RunfilesError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1) from e
    logger.debug("runfiles_ready", backend=type(runfiles.backend).__name__, source_repo=source_repo)
    return runfiles.with_source_repo(source_repo)


@app.command("rlocation")
def rlocation_cmd(path: str, source_repo: Annotated[str, SOURCE_REPO_OPT] = "") -> None:
    """Print the absolute path of one runfile."""
    runfiles = _runfiles(source_repo)
    try:
        resolved = runfiles.rlocation(path)
    except RunfilesError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1) from e
    typer.echo(str(resolved))


@app.command("rlocations")
def rlocations_cmd(paths: str, source_repo: Annotated[str, SOURCE_REPO_OPT] = "") -> None:
    """Print "<runfile>\\t<absolute path>" for space-separated runfiles."""
    runfiles = _runfiles(source_repo)
    try:
        resolved = runfiles.rlocations(paths)
    except RunfilesError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1) from e
    for key in sorted(resolved):
        typer.echo(f"{key}\t{resolved[key]}")


@app.command("env")
def env_cmd() -> None:
    """Print KEY=VALUE variables that let child processes find these runfiles."""
    for line in _runfiles("").env():
        typer.echo(line)


@app.command("current-repository")
def current_repository_cmd(source_file: str) -> None:
    """Print the canonical repository a source file belongs to (empty for the main repository)."""
    typer.echo(repository_of_file(source_file))


def main() -> None:
    app()
