"""The ``Runfiles`` façade: backend + repository mapping + source repository."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from pathlib import Path

from runfiles_resolver import backend as backends
from runfiles_resolver.backend import Absent, Backend
from runfiles_resolver.errors import EmptyRunfileError, RunfileNotFoundError
from runfiles_resolver.paths import validate_logical_path
from runfiles_resolver.repo_mapping import RepoMapping


@dataclass(frozen=True)
class Runfiles:
    """Resolves logical runfile paths to absolute paths.

    Instances are immutable: ``with_source_repo`` returns a new view sharing
    the same backend and repository mapping, so one instance can be used from
    any number of threads.

    Usage:
        r = create()
        config = r.rlocation("my_repo/data/config.yaml")
        subprocess.run([tool], env={**os.environ, **r.env_vars()})
    """

    backend: Backend
    repo_mapping: RepoMapping = field(default_factory=RepoMapping)
    source_repo: str = ""

    def with_source_repo(self, source_repo: str) -> Runfiles:
        """View of the same runfiles as seen from ``source_repo``."""
        return dataclasses.replace(self, source_repo=source_repo)

    def rlocation(self, path: str) -> Path:
        """Absolute path of the runfile ``path``.

        Args:
            path: Logical runfile path, e.g. "my_repo/data/file.txt". The first
                segment may be an apparent repository name; it is mapped as
                seen from this view's source repository.

        Raises:
            InvalidPathFormatError: ``path`` is absolute, empty, or not normalized.
            EmptyRunfileError: The manifest declares ``path`` with no file on disk.
            RunfileNotFoundError: The backend does not know ``path``.
        """
        validate_logical_path(path)
        mapped = self.repo_mapping.canonicalize(self.source_repo, path)
        match backends.lookup(self.backend, mapped):
            case Absent.EMPTY:
                raise EmptyRunfileError(path, mapped)
            case Absent.NOT_FOUND:
                raise RunfileNotFoundError(path, mapped)
            case Path() as resolved:
                return resolved

    def rlocations(self, paths: str) -> dict[str, Path]:
        """Resolve runfile paths separated by single spaces, as produced by ``$(rlocationpaths ...)``.

        All paths must resolve; the first failure is raised and no partial
        result is returned.
        """
        return {path: self.rlocation(path) for path in paths.split(" ")}

    def env_vars(self) -> dict[str, str]:
        """Environment variables that let a child process find the same runfiles."""
        return backends.env_vars(self.backend)

    def env(self) -> list[str]:
        """``env_vars`` as a fresh list of ``KEY=VALUE`` strings."""
        return [f"{key}={value}" for key, value in self.env_vars().items()]
