"""Tests for the high-level functional API."""

import pytest

import lslrtree
from lslrtree import (
    InvalidPathSegment,
    QueryParseError,
    UnknownDirectoryEntry,
    bfs,
    count_matches,
    dfs,
    find,
    resolve_path,
)


def test_dfs_and_bfs(small_root):
    assert list(dfs(small_root)) == [".", "sub", "sub/a.txt", "b.log"]
    assert list(bfs(small_root)) == [".", "sub", "b.log", "sub/a.txt"]


def test_find_with_strategy_names(project_root):
    query = ["-name", "*.c"]
    assert list(find(project_root, query, strategy="dfs")) == ["src/lib/util.c", "src/main.c"]
    assert list(find(project_root, query, strategy="breadth_first")) == ["src/main.c", "src/lib/util.c"]


def test_find_unknown_strategy(project_root):
    with pytest.raises(ValueError):
        list(find(project_root, [], strategy="random"))


def test_find_reports_parse_errors(project_root):
    with pytest.raises(QueryParseError) as excinfo:
        list(find(project_root, ["-type", "x"]))
    assert excinfo.value.token == "x"


def test_star_skips_dotfiles():
    root = lslrtree.parse_listing(
        ".:\n"
        "total 8\n"
        "-rw-r--r-- 1 alice staff 3 Jan  1 00:00 .hidden\n"
        "-rw-r--r-- 1 alice staff 4 Jan  1 00:00 shown\n"
    )
    assert list(dfs(root, ["-name", "*", "-a", "-type", "f"])) == ["shown"]
    assert list(dfs(root, ["-name", ".*"])) == [".hidden"]


def test_count_matches(project_root):
    assert count_matches(project_root) == 9
    assert count_matches(project_root, ["-type", "d"]) == 3
    assert count_matches(project_root, ["-size", "+100"], strategy="bfs") == 4


class TestResolvePath:
    """Test absolute and relative path resolution."""

    def test_root(self, project_root):
        assert resolve_path(project_root, "/") is project_root
        assert resolve_path(project_root, ".") is project_root
        assert resolve_path(project_root, "..") is project_root

    def test_absolute(self, project_root):
        assert resolve_path(project_root, "/src/lib/a").size == 7

    def test_relative_to_cwd(self, project_root):
        src = project_root.get_child("src")
        assert resolve_path(project_root, "lib/util.c", src).size == 300
        assert resolve_path(project_root, "../README.md", src).size == 42
        assert resolve_path(project_root, "./lib/../main.c", src).size == 1200

    def test_absolute_ignores_cwd(self, project_root):
        lib = project_root.get_descendant("src/lib")
        assert resolve_path(project_root, "/README.md", lib).name == "README.md"

    def test_trailing_slash(self, project_root):
        assert resolve_path(project_root, "src/").name == "src"

    def test_missing(self, project_root):
        with pytest.raises(UnknownDirectoryEntry) as excinfo:
            resolve_path(project_root, "/src/nothing")
        assert excinfo.value.name == "nothing"

    def test_through_file(self, project_root):
        with pytest.raises(InvalidPathSegment):
            resolve_path(project_root, "/README.md/x")


def test_public_exports():
    for name in lslrtree.__all__:
        assert hasattr(lslrtree, name), name
