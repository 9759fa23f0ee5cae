"""The two runfiles backends behind one lookup capability."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import TypeAlias

from runfiles_resolver.directory import DirectoryBackend
from runfiles_resolver.errors import BackendUnavailableError
from runfiles_resolver.manifest import ManifestBackend


class Absent(Enum):
    """Why a lookup produced no path."""

    EMPTY = "empty"
    NOT_FOUND = "not_found"


# Closed variant: no third backend is expected.
Backend: TypeAlias = ManifestBackend | DirectoryBackend

LookupResult: TypeAlias = Path | Absent


def lookup(backend: Backend, path: str) -> LookupResult:
    """Resolve an already-canonicalized logical path against ``backend``."""
    match backend:
        case ManifestBackend():
            if path not in backend.entries:
                return Absent.NOT_FOUND
            target = backend.entries[path]
            return Absent.EMPTY if target is None else target
        case DirectoryBackend():
            target = backend.join(path)
            try:
                exists = target.exists()
            except OSError as e:
                raise BackendUnavailableError(f"runfiles: cannot access {target}: {e}") from e
            return target if exists else Absent.NOT_FOUND


def env_vars(backend: Backend) -> dict[str, str]:
    """Environment a child process needs to reuse the same backing data."""
    match backend:
        case ManifestBackend():
            result = {"RUNFILES_MANIFEST_FILE": str(backend.manifest_path)}
            if (directory := backend.runfiles_dir()) is not None:
                result["RUNFILES_DIR"] = str(directory)
                result["JAVA_RUNFILES"] = str(directory)
            return result
        case DirectoryBackend():
            return {"RUNFILES_DIR": str(backend.root), "JAVA_RUNFILES": str(backend.root)}
