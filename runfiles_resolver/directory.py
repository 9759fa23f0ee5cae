"""Directory-based runfiles backend."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from runfiles_resolver.errors import BackendUnavailableError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirectoryBackend:
    """Runfiles staged as a directory tree mirroring logical paths.

    Existence is checked on every lookup, so a path with nothing staged is
    reported as not found rather than returned blindly.
    """

    root: Path

    @classmethod
    def from_root(cls, root: Path) -> DirectoryBackend:
        root = Path(root).absolute()
        try:
            is_dir = root.is_dir()
        except OSError as e:
            raise BackendUnavailableError(f"runfiles: cannot access runfiles directory {root}: {e}") from e
        if not is_dir:
            raise BackendUnavailableError(f"runfiles: runfiles directory {root} does not exist")
        logger.debug("Using runfiles directory %s", root)
        return cls(root=root)

    def join(self, path: str) -> Path:
        return self.root.joinpath(*path.split("/"))
