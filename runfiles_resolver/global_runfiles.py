"""Process-wide runfiles, created on first use from the environment."""

from __future__ import annotations

import threading
from collections.abc import Callable
from pathlib import Path

from runfiles_resolver.create import create
from runfiles_resolver.repository import caller_repository
from runfiles_resolver.runfiles import Runfiles


class LazyRunfiles:
    """Runs ``factory`` exactly once and remembers its outcome.

    Concurrent first callers block until initialization completes. A failure
    is remembered too: every later ``get()`` raises the same exception
    without calling ``factory`` again.
    """

    def __init__(self, factory: Callable[[], Runfiles]) -> None:
        self._factory = factory
        self._lock = threading.Lock()
        self._initialized = False
        self._runfiles: Runfiles | None = None
        self._error: Exception | None = None

    def get(self) -> Runfiles:
        if not self._initialized:
            with self._lock:
                if not self._initialized:
                    try:
                        self._runfiles = self._factory()
                    except Exception as e:
                        # Any failure is final, not just RunfilesError.
                        self._error = e
                    self._initialized = True
        if self._error is not None:
            raise self._error
        assert self._runfiles is not None
        return self._runfiles


_GLOBAL = LazyRunfiles(create)


def get_runfiles() -> Runfiles:
    """The shared ``Runfiles`` for this process."""
    return _GLOBAL.get()


def rlocation(path: str) -> Path:
    """Absolute path of runfile ``path``, mapped as seen from the calling repository.

    Raises:
        InvalidPathFormatError: ``path`` is not a normalized relative path.
        EmptyRunfileError: ``path`` is declared but has no file on disk.
        RunfileNotFoundError: ``path`` is unknown.
        BackendUnavailableError: No usable runfiles for this process.
    """
    return rlocation_from(path, caller_repository())


def rlocations(paths: str) -> dict[str, Path]:
    """Resolve single-space separated runfile paths, e.g. from ``$(rlocationpaths //files)``.

    Example:
        rlocations("my_repo/files/a my_repo/files/b")
        # {"my_repo/files/a": Path(".../files/a"), "my_repo/files/b": Path(".../files/b")}
    """
    return rlocations_from(paths, caller_repository())


def rlocation_from(path: str, source_repo: str) -> Path:
    return _GLOBAL.get().with_source_repo(source_repo).rlocation(path)


def rlocations_from(paths: str, source_repo: str) -> dict[str, Path]:
    return _GLOBAL.get().with_source_repo(source_repo).rlocations(paths)


def env() -> list[str]:
    """``KEY=VALUE`` variables to pass to Bazel-built subprocesses so they find their runfiles."""
    return _GLOBAL.get().env()
