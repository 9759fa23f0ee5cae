"""Construct ``Runfiles`` from explicit locations or the process environment."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from runfiles_resolver import backend as backends
from runfiles_resolver.backend import Backend
from runfiles_resolver.directory import DirectoryBackend
from runfiles_resolver.errors import NoRunfilesStrategyError
from runfiles_resolver.manifest import ManifestBackend
from runfiles_resolver.repo_mapping import REPO_MAPPING_RLOCATION, RepoMapping
from runfiles_resolver.runfiles import Runfiles
from runfiles_resolver.settings import RunfilesSettings

logger = logging.getLogger(__name__)


def load_repo_mapping(backend: Backend) -> RepoMapping:
    """Load ``_repo_mapping`` through the backend; absent means no mapping."""
    location = backends.lookup(backend, REPO_MAPPING_RLOCATION)
    if not isinstance(location, Path):
        logger.debug("No repository mapping in runfiles")
        return RepoMapping()
    return RepoMapping.from_file(location)


def from_backend(backend: Backend, source_repo: str = "") -> Runfiles:
    return Runfiles(backend=backend, repo_mapping=load_repo_mapping(backend), source_repo=source_repo)


def from_manifest(manifest_path: Path, source_repo: str = "") -> Runfiles:
    return from_backend(ManifestBackend.from_file(manifest_path), source_repo)


def from_directory(root: Path, source_repo: str = "") -> Runfiles:
    return from_backend(DirectoryBackend.from_root(root), source_repo)


def create(
    *,
    manifest: Path | None = None,
    directory: Path | None = None,
    program: Path | None = None,
    source_repo: str = "",
    settings: RunfilesSettings | None = None,
) -> Runfiles:
    """Pick a backend and build ``Runfiles``.

    Selection order: explicit manifest, RUNFILES_MANIFEST_FILE, explicit
    directory, RUNFILES_DIR/JAVA_RUNFILES, then ``<program>.runfiles_manifest``
    and ``<program>.runfiles`` next to the running binary.

    Raises:
        NoRunfilesStrategyError: Nothing above points at runfiles.
        BackendUnavailableError: The chosen manifest/directory is unusable.
    """
    if settings is None:
        settings = RunfilesSettings()

    if manifest is None:
        manifest = settings.runfiles_manifest_file
    if manifest is not None:
        logger.debug("Using manifest-based runfiles: %s", manifest)
        return from_manifest(manifest, source_repo)

    if directory is None:
        directory = settings.get_runfiles_dir()
    if directory is not None:
        logger.debug("Using directory-based runfiles: %s", directory)
        return from_directory(directory, source_repo)

    if program is None:
        program = Path(sys.argv[0]) if sys.argv and sys.argv[0] else None
    if program is not None and program.name:
        program_manifest = program.with_name(program.name + ".runfiles_manifest")
        if program_manifest.is_file():
            logger.debug("Using runfiles manifest next to program: %s", program_manifest)
            return from_manifest(program_manifest, source_repo)
        program_dir = program.with_name(program.name + ".runfiles")
        if program_dir.is_dir():
            logger.debug("Using runfiles directory next to program: %s", program_dir)
            return from_directory(program_dir, source_repo)

    raise NoRunfilesStrategyError(
        "runfiles: no runfiles found; set RUNFILES_MANIFEST_FILE or RUNFILES_DIR, or run via Bazel"
    )
