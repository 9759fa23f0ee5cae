"""Fixtures building fake runfiles trees and manifests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from runfiles_resolver.settings import ENV_JAVA_RUNFILES, ENV_MANIFEST_FILE, ENV_RUNFILES_DIR


@pytest.fixture(autouse=True)
def clean_runfiles_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Tests may run under Bazel; never pick up the real runfiles."""
    for name in (ENV_MANIFEST_FILE, ENV_RUNFILES_DIR, ENV_JAVA_RUNFILES):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def runfiles_tree(tmp_path: Path) -> Path:
    """Directory layout as staged by Bazel for a binary named ``bin``."""
    root = tmp_path / "bin.runfiles"
    files = {
        "_main/data/a.txt": "a",
        "_main/data/b.txt": "b",
        "rules_foo~/lib/foo.txt": "foo",
        "rules_bar~/lib/bar.txt": "bar",
    }
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    return root


@pytest.fixture
def write_manifest(tmp_path: Path) -> Callable[..., Path]:
    def _write(text: str, name: str = "MANIFEST") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def manifest_for_tree(runfiles_tree: Path) -> Path:
    """MANIFEST inside ``runfiles_tree`` listing every staged file, plus an empty runfile."""
    lines = [
        f"{p.relative_to(runfiles_tree).as_posix()} {p}" for p in sorted(runfiles_tree.rglob("*")) if p.is_file()
    ]
    lines.append("_main/pkg/__init__.py ")
    manifest = runfiles_tree / "MANIFEST"
    manifest.write_text("\n".join(lines) + "\n")
    return manifest
