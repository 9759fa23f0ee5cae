"""Runfiles configuration read from the process environment.

Bazel sets these variables for ``bazel run`` and ``bazel test``; ``Runfiles.env()``
produces them for child processes.

Environment Variables (in priority order):
1. RUNFILES_MANIFEST_FILE - path to the runfiles manifest
2. RUNFILES_DIR - path to the runfiles directory tree
3. JAVA_RUNFILES - legacy spelling of RUNFILES_DIR
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_MANIFEST_FILE = "RUNFILES_MANIFEST_FILE"
ENV_RUNFILES_DIR = "RUNFILES_DIR"
ENV_JAVA_RUNFILES = "JAVA_RUNFILES"


class RunfilesSettings(BaseSettings):
    """Where the current process's runfiles live, if Bazel told us."""

    model_config = SettingsConfigDict(env_prefix="", env_ignore_empty=True, extra="ignore")

    runfiles_manifest_file: Path | None = Field(default=None, description="Runfiles manifest file")
    runfiles_dir: Path | None = Field(default=None, description="Runfiles directory")
    java_runfiles: Path | None = Field(default=None, description="Legacy runfiles directory variable")

    def get_runfiles_dir(self) -> Path | None:
        if self.runfiles_dir is not None:
            return self.runfiles_dir
        return self.java_runfiles
