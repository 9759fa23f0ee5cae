"""Repository mapping: apparent repository names to canonical ones.

Bazel stages a ``_repo_mapping`` runfile with one CSV record per line::

    source_canonical,apparent_name,target_canonical

A source ending in ``*`` applies to every source repository with that
prefix. Exact records take precedence over prefix records.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from runfiles_resolver.errors import RepoMappingError
from runfiles_resolver.paths import split_first_segment

logger = logging.getLogger(__name__)

REPO_MAPPING_RLOCATION = "_repo_mapping"


@dataclass(frozen=True)
class RepoMapping:
    """Immutable (source repo, apparent name) -> canonical name table."""

    exact: Mapping[tuple[str, str], str] = field(default_factory=lambda: MappingProxyType({}))
    # (source prefix, apparent name, canonical name), longest prefix first
    prefixed: tuple[tuple[str, str, str], ...] = ()

    @classmethod
    def parse(cls, lines: Iterable[str]) -> RepoMapping:
        exact: dict[tuple[str, str], str] = {}
        prefixed: list[tuple[str, str, str]] = []
        for lineno, raw in enumerate(lines, start=1):
            line = raw.rstrip("\r\n")
            if not line:
                continue
            fields = line.split(",")
            if len(fields) != 3:
                raise RepoMappingError(f"runfiles: malformed repository mapping on line {lineno}: {line!r}")
            source, apparent, canonical = fields
            if source.endswith("*"):
                prefixed.append((source[:-1], apparent, canonical))
            else:
                exact[(source, apparent)] = canonical
        prefixed.sort(key=lambda entry: len(entry[0]), reverse=True)
        return cls(exact=MappingProxyType(exact), prefixed=tuple(prefixed))

    @classmethod
    def from_file(cls, path: Path) -> RepoMapping:
        try:
            with path.open(encoding="utf-8", newline="\n") as f:
                mapping = cls.parse(f)
        except (OSError, UnicodeDecodeError) as e:
            raise RepoMappingError(f"runfiles: cannot read repository mapping {path}: {e}") from e
        logger.debug("Loaded repository mapping from %s (%d entries)", path, len(mapping))
        return mapping

    def __len__(self) -> int:
        return len(self.exact) + len(self.prefixed)

    def lookup(self, source_repo: str, apparent: str) -> str | None:
        if (canonical := self.exact.get((source_repo, apparent))) is not None:
            return canonical
        for prefix, name, canonical in self.prefixed:
            if name == apparent and source_repo.startswith(prefix):
                return canonical
        return None

    def canonicalize(self, source_repo: str, path: str) -> str:
        """Rewrite the leading apparent repository name of ``path`` as seen from ``source_repo``."""
        first, rest = split_first_segment(path)
        canonical = self.lookup(source_repo, first)
        if canonical is None:
            return path
        if rest is None:
            return canonical
        return f"{canonical}/{rest}"
