"""Exception classes for runfiles resolution."""

from __future__ import annotations


class RunfilesError(Exception):
    """Base exception for runfiles errors."""


class InvalidPathFormatError(RunfilesError, ValueError):
    """Caller passed something that is not a normalized relative runfile path."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"runfiles: invalid runfile path {path!r}: {reason}")
        self.path = path
        self.reason = reason


class RunfileNotFoundError(RunfilesError, LookupError):
    """Runfile is not known to the backend."""

    def __init__(self, path: str, mapped_path: str | None = None) -> None:
        detail = f" (mapped to {mapped_path!r})" if mapped_path and mapped_path != path else ""
        super().__init__(f"runfiles: {path!r}{detail} not found")
        self.path = path
        self.mapped_path = mapped_path or path


class EmptyRunfileError(RunfilesError):
    """Runfile is declared but intentionally has no file on disk."""

    def __init__(self, path: str, mapped_path: str | None = None) -> None:
        super().__init__(f"runfiles: {path!r} is an empty runfile")
        self.path = path
        self.mapped_path = mapped_path or path


class BackendUnavailableError(RunfilesError):
    """Manifest or runfiles directory cannot be used."""


class ManifestError(BackendUnavailableError):
    """Manifest file is unreadable or malformed."""

    def __init__(self, message: str, *, lineno: int | None = None) -> None:
        super().__init__(message)
        self.lineno = lineno


class RepoMappingError(BackendUnavailableError):
    """The _repo_mapping runfile is malformed."""


class NoRunfilesStrategyError(BackendUnavailableError):
    """Neither a manifest nor a runfiles directory could be located."""
