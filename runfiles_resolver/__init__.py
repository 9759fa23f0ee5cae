"""Resolve Bazel runfiles to absolute paths at runtime."""

from runfiles_resolver.backend import Absent, Backend
from runfiles_resolver.create import create, from_directory, from_manifest
from runfiles_resolver.directory import DirectoryBackend
from runfiles_resolver.errors import (
    BackendUnavailableError,
    EmptyRunfileError,
    InvalidPathFormatError,
    ManifestError,
    NoRunfilesStrategyError,
    RepoMappingError,
    RunfileNotFoundError,
    RunfilesError,
)
from runfiles_resolver.global_runfiles import (
    LazyRunfiles,
    env,
    get_runfiles,
    rlocation,
    rlocation_from,
    rlocations,
    rlocations_from,
)
from runfiles_resolver.manifest import ManifestBackend
from runfiles_resolver.repo_mapping import RepoMapping
from runfiles_resolver.repository import caller_repository, current_repository, repository_of_file
from runfiles_resolver.runfiles import Runfiles

__all__ = [
    "Absent",
    "Backend",
    "BackendUnavailableError",
    "DirectoryBackend",
    "EmptyRunfileError",
    "InvalidPathFormatError",
    "LazyRunfiles",
    "ManifestBackend",
    "ManifestError",
    "NoRunfilesStrategyError",
    "RepoMapping",
    "RepoMappingError",
    "RunfileNotFoundError",
    "Runfiles",
    "RunfilesError",
    "caller_repository",
    "create",
    "current_repository",
    "env",
    "from_directory",
    "from_manifest",
    "get_runfiles",
    "repository_of_file",
    "rlocation",
    "rlocation_from",
    "rlocations",
    "rlocations_from",
]
