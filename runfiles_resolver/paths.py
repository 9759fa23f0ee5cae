"""Validation helpers for logical runfile paths.

A logical path is slash-separated and relative to the runfiles root; its
first segment is conventionally the canonical repository name.
"""

from __future__ import annotations

import re

from runfiles_resolver.errors import InvalidPathFormatError

_DRIVE_LETTER = re.compile(r"^[A-Za-z]:")


def validate_logical_path(path: str) -> str:
    """Return ``path`` unchanged or raise ``InvalidPathFormatError``."""
    if not path:
        raise InvalidPathFormatError(path, "path may not be empty")
    if "\\" in path:
        raise InvalidPathFormatError(path, "path may not contain backslashes")
    if path.startswith("/") or _DRIVE_LETTER.match(path):
        raise InvalidPathFormatError(path, "path must be relative")
    for segment in path.split("/"):
        if segment == "":
            raise InvalidPathFormatError(path, "path may not contain empty segments")
        if segment in (".", ".."):
            raise InvalidPathFormatError(path, f"path may not contain {segment!r} segments")
    return path


def split_first_segment(path: str) -> tuple[str, str | None]:
    """Split ``repo/rest`` into ``("repo", "rest")``; a bare name yields ``(name, None)``."""
    first, sep, rest = path.partition("/")
    return first, rest if sep else None
