"""Attribute a call site to the Bazel repository that contains its source file.

The same library can be linked into binaries from many repositories, so the
repository a call comes from is inferred from the caller's own source path
rather than from process-wide state.
"""

from __future__ import annotations

import inspect
import re

_LEGACY_EXTERNAL_GENERATED_FILE = re.compile(r"^bazel-out/[^/]+/bin/external/([^/]+)/")
_LEGACY_EXTERNAL_FILE = re.compile(r"^external/([^/]+)/")

# Python frames carry absolute paths; these find the part Bazel laid out.
_RUNFILES_PREFIX = re.compile(r"^.*\.runfiles/([^/]+)/(.*)$")
_EXECROOT_PREFIX = re.compile(r"^.*/execroot/[^/]+/(.*)$")
_MAIN_RUNFILES_DIRS = ("_main", "__main__")


def _repository_of_relative(path: str) -> str:
    if match := _LEGACY_EXTERNAL_GENERATED_FILE.match(path):
        return match.group(1)
    if match := _LEGACY_EXTERNAL_FILE.match(path):
        return match.group(1)
    # Not in an external repository: the main repository, canonical name "".
    return ""


def repository_of_file(source_path: str) -> str:
    """Canonical repository name for a source file; ``""`` is the main repository.

    Workspace-relative paths are matched directly. Absolute paths are first
    cut down to what follows ``<x>.runfiles/`` or ``execroot/<ws>/``; inside
    runfiles, a top-level directory other than the main one is itself the
    canonical repository name. Absolute paths outside both are in the main
    repository.
    """
    source_path = source_path.replace("\\", "/")
    if match := _RUNFILES_PREFIX.match(source_path):
        top, rest = match.groups()
        if top in _MAIN_RUNFILES_DIRS:
            return _repository_of_relative(rest)
        return top
    if match := _EXECROOT_PREFIX.match(source_path):
        return _repository_of_relative(match.group(1))
    return _repository_of_relative(source_path)


def _repository_of_frame(skip: int) -> str:
    """Repository of the frame ``skip`` levels above the caller of this function."""
    frame = inspect.currentframe()
    # One extra hop for this function's own frame.
    for _ in range(skip + 1):
        if frame is None:
            break
        frame = frame.f_back
    if frame is None:
        return ""
    return repository_of_file(frame.f_code.co_filename)


def current_repository() -> str:
    """Canonical name of the repository containing the caller's source file."""
    return _repository_of_frame(1)


def caller_repository() -> str:
    """Canonical name of the repository containing the source file of the caller's caller.

    Lets a public entry point attribute a request to whoever called it.
    """
    return _repository_of_frame(2)
