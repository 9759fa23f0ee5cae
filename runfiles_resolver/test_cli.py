from __future__ import annotations

from pathlib import Path

import pytest
from hamcrest import assert_that, contains_string, equal_to
from typer.testing import CliRunner

from runfiles_resolver import global_runfiles
from runfiles_resolver.cli import app
from runfiles_resolver.global_runfiles import LazyRunfiles

runner = CliRunner()


@pytest.fixture(autouse=True)
def fresh_global(monkeypatch: pytest.MonkeyPatch, runfiles_tree: Path) -> None:
    (runfiles_tree / "_repo_mapping").write_text("rules_foo~,bar,rules_bar~\n")
    monkeypatch.setenv("RUNFILES_DIR", str(runfiles_tree))
    monkeypatch.setattr(global_runfiles, "_GLOBAL", LazyRunfiles(global_runfiles.create))


def test_rlocation_prints_path(runfiles_tree: Path):
    result = runner.invoke(app, ["--log-output", "none", "rlocation", "_main/data/a.txt"])

    assert_that(result.exit_code, equal_to(0))
    assert_that(result.stdout.strip(), equal_to(str(runfiles_tree / "_main" / "data" / "a.txt")))


def test_rlocation_with_source_repo(runfiles_tree: Path):
    result = runner.invoke(
        app, ["--log-output", "none", "rlocation", "bar/lib/bar.txt", "--source-repo", "rules_foo~"]
    )

    assert_that(result.exit_code, equal_to(0))
    assert_that(result.stdout.strip(), equal_to(str(runfiles_tree / "rules_bar~" / "lib" / "bar.txt")))


def test_rlocation_missing_exits_nonzero():
    result = runner.invoke(app, ["--log-output", "none", "rlocation", "_main/data/missing.txt"])

    assert_that(result.exit_code, equal_to(1))
    assert_that(result.output, contains_string("not found"))


def test_rlocations_prints_sorted_pairs(runfiles_tree: Path):
    result = runner.invoke(app, ["--log-output", "none", "rlocations", "_main/data/b.txt _main/data/a.txt"])

    assert_that(result.exit_code, equal_to(0))
    assert_that(
        result.stdout.splitlines(),
        equal_to(
            [
                f"_main/data/a.txt\t{runfiles_tree / '_main' / 'data' / 'a.txt'}",
                f"_main/data/b.txt\t{runfiles_tree / '_main' / 'data' / 'b.txt'}",
            ]
        ),
    )


def test_env_prints_variables(runfiles_tree: Path):
    result = runner.invoke(app, ["--log-output", "none", "env"])

    assert_that(result.exit_code, equal_to(0))
    assert_that(result.stdout.splitlines(), equal_to([f"RUNFILES_DIR={runfiles_tree}", f"JAVA_RUNFILES={runfiles_tree}"]))


def test_no_runfiles_exits_nonzero(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    monkeypatch.delenv("RUNFILES_DIR")
    monkeypatch.setattr(
        global_runfiles, "_GLOBAL", LazyRunfiles(lambda: global_runfiles.create(program=tmp_path / "nothing"))
    )

    result = runner.invoke(app, ["--log-output", "none", "env"])

    assert_that(result.exit_code, equal_to(1))
    assert_that(result.output, contains_string("no runfiles found"))


def test_current_repository_command():
    result = runner.invoke(app, ["--log-output", "none", "current-repository", "external/bar/pkg/file.py"])

    assert_that(result.stdout.strip(), equal_to("bar"))


def test_invalid_log_level_rejected():
    result = runner.invoke(app, ["--log-level", "LOUD", "env"])

    assert_that(result.exit_code, equal_to(1))
