from __future__ import annotations

from pathlib import Path

import pytest
from hamcrest import assert_that, equal_to, is_, none

from runfiles_resolver.errors import RepoMappingError
from runfiles_resolver.repo_mapping import RepoMapping

MAPPING_LINES = [
    ",foo,rules_foo~\n",
    ",my_workspace,_main\n",
    "rules_foo~,bar,rules_bar~\n",
    "rules_foo~,foo,rules_foo~\n",
    "deps+*,baz,rules_baz~\n",
    "deps+inner*,baz,rules_baz_inner~\n",
]


@pytest.fixture
def mapping() -> RepoMapping:
    return RepoMapping.parse(MAPPING_LINES)


def test_main_repo_maps_apparent_name(mapping: RepoMapping):
    assert_that(mapping.canonicalize("", "foo/lib/foo.txt"), equal_to("rules_foo~/lib/foo.txt"))
    assert_that(mapping.canonicalize("", "my_workspace/data/a.txt"), equal_to("_main/data/a.txt"))


def test_mapping_depends_on_source_repo(mapping: RepoMapping):
    assert_that(mapping.canonicalize("rules_foo~", "bar/lib/bar.txt"), equal_to("rules_bar~/lib/bar.txt"))
    assert_that(mapping.canonicalize("", "bar/lib/bar.txt"), equal_to("bar/lib/bar.txt"))


def test_unmapped_path_passes_through(mapping: RepoMapping):
    assert_that(mapping.canonicalize("", "_main/data/a.txt"), equal_to("_main/data/a.txt"))
    assert_that(mapping.canonicalize("unknown~", "foo/x"), equal_to("foo/x"))


def test_bare_repository_name_is_mapped(mapping: RepoMapping):
    assert_that(mapping.canonicalize("", "foo"), equal_to("rules_foo~"))


def test_prefix_sources_match_longest_prefix(mapping: RepoMapping):
    assert_that(mapping.canonicalize("deps+other", "baz/x"), equal_to("rules_baz~/x"))
    assert_that(mapping.canonicalize("deps+inner+sub", "baz/x"), equal_to("rules_baz_inner~/x"))


def test_exact_entry_wins_over_prefix():
    mapping = RepoMapping.parse(["deps*,baz,from_prefix\n", "deps+a,baz,from_exact\n"])

    assert_that(mapping.lookup("deps+a", "baz"), equal_to("from_exact"))
    assert_that(mapping.lookup("deps+b", "baz"), equal_to("from_prefix"))


def test_empty_mapping_passes_everything_through():
    mapping = RepoMapping()

    assert_that(mapping.lookup("", "foo"), is_(none()))
    assert_that(mapping.canonicalize("", "foo/bar"), equal_to("foo/bar"))


def test_malformed_line_rejected():
    with pytest.raises(RepoMappingError, match="line 2"):
        RepoMapping.parse([",foo,rules_foo~\n", "only,two\n"])


def test_from_file_unreadable(tmp_path: Path):
    with pytest.raises(RepoMappingError):
        RepoMapping.from_file(tmp_path / "_repo_mapping")
