"""Manifest-based runfiles backend.

A manifest is a line-oriented text file written by Bazel next to a binary::

    _main/data/config.yaml /abs/path/to/config.yaml
    _main/pkg/__init__.py

Each line maps a logical path to an absolute target. A missing or empty
target marks an empty runfile: declared in the build graph but with nothing
on disk. Lines starting with a space use escaping for paths that contain
spaces, newlines or backslashes (``\\s``, ``\\n``, ``\\b``).

Duplicate logical paths are resolved last-entry-wins.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

from runfiles_resolver.errors import ManifestError

logger = logging.getLogger(__name__)

_LINK_ESCAPES = {"s": " ", "n": "\n", "b": "\\"}
_TARGET_ESCAPES = {"n": "\n", "b": "\\"}


def _unescape(field: str, escapes: Mapping[str, str], lineno: int) -> str:
    out: list[str] = []
    chars = iter(field)
    for ch in chars:
        if ch != "\\":
            out.append(ch)
            continue
        code = next(chars, "")
        if code not in escapes:
            raise ManifestError(f"runfiles: invalid escape sequence '\\{code}' on manifest line {lineno}", lineno=lineno)
        out.append(escapes[code])
    return "".join(out)


def _parse_line(line: str, lineno: int) -> tuple[str, Path | None]:
    escaped = line.startswith(" ")
    if escaped:
        line = line[1:]
    link, _, target = line.partition(" ")
    if escaped:
        link = _unescape(link, _LINK_ESCAPES, lineno)
        target = _unescape(target, _TARGET_ESCAPES, lineno)
    if not link:
        raise ManifestError(f"runfiles: missing runfile path on manifest line {lineno}", lineno=lineno)
    return link, Path(target) if target else None


def parse_manifest(lines: Iterable[str]) -> dict[str, Path | None]:
    """Parse manifest lines into ``{logical path: target or None}``."""
    entries: dict[str, Path | None] = {}
    for lineno, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line:
            continue
        link, target = _parse_line(line, lineno)
        entries[link] = target
    return entries


@dataclass(frozen=True)
class ManifestBackend:
    """Immutable lookup table loaded from a runfiles manifest."""

    manifest_path: Path
    entries: Mapping[str, Path | None]

    @classmethod
    def from_file(cls, manifest_path: Path) -> ManifestBackend:
        manifest_path = Path(manifest_path).absolute()
        try:
            with manifest_path.open(encoding="utf-8", newline="\n") as f:
                entries = parse_manifest(f)
        except (OSError, UnicodeDecodeError) as e:
            raise ManifestError(f"runfiles: cannot read manifest {manifest_path}: {e}") from e
        logger.debug("Loaded %d runfiles manifest entries from %s", len(entries), manifest_path)
        return cls(manifest_path=manifest_path, entries=MappingProxyType(entries))

    def runfiles_dir(self) -> Path | None:
        """Runfiles directory that sits next to the manifest, if there is one."""
        if self.manifest_path.name == "MANIFEST" and self.manifest_path.parent.name.endswith(".runfiles"):
            candidate = self.manifest_path.parent
        elif self.manifest_path.name.endswith(".runfiles_manifest"):
            candidate = self.manifest_path.with_name(self.manifest_path.name.removesuffix("_manifest"))
        else:
            return None
        return candidate if candidate.is_dir() else None
