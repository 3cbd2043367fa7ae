"""Tests for the repository list storage."""

import tempfile
from pathlib import Path

import pytest

from gitlocalstats.repo_list import (
    RepoListError,
    add_new_repos,
    dump_lines,
    join_lists,
    parse_file_lines,
)


@pytest.fixture
def temp_list_file():
    """Create a temporary repository list path that doesn't exist yet."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / ".gitlocalstats"


class TestParseFileLines:
    """Tests for parse_file_lines."""

    def test_creates_missing_file(self, temp_list_file):
        """A missing list is created empty."""
        assert parse_file_lines(temp_list_file) == []
        assert temp_list_file.exists()

    def test_creates_parent_folder(self, temp_list_file):
        nested = temp_list_file.parent / "config" / "repos"
        assert parse_file_lines(nested) == []
        assert nested.exists()

    def test_reads_lines_in_order(self, temp_list_file):
        temp_list_file.write_text("/home/me/b\n/home/me/a\n")
        assert parse_file_lines(temp_list_file) == ["/home/me/b", "/home/me/a"]

    def test_skips_blank_lines(self, temp_list_file):
        temp_list_file.write_text("/home/me/a\n\n   \n/home/me/b")
        assert parse_file_lines(temp_list_file) == ["/home/me/a", "/home/me/b"]

    def test_unreadable_path_raises(self, temp_list_file):
        """A folder in place of the file is reported, not crashed on."""
        temp_list_file.mkdir()
        with pytest.raises(RepoListError) as exc_info:
            parse_file_lines(temp_list_file)

        assert str(temp_list_file) in str(exc_info.value)


class TestJoinLists:
    """Tests for join_lists."""

    def test_appends_new_entries(self):
        assert join_lists(["/c"], ["/a", "/b"]) == ["/a", "/b", "/c"]

    def test_drops_duplicates(self):
        assert join_lists(["/b", "/c"], ["/a", "/b"]) == ["/a", "/b", "/c"]

    def test_drops_duplicates_within_new(self):
        assert join_lists(["/c", "/c"], []) == ["/c"]

    def test_keeps_existing_order(self):
        assert join_lists(["/a"], ["/z", "/a", "/m"]) == ["/z", "/a", "/m"]


class TestDumpAndAdd:
    """Tests for dump_lines and add_new_repos."""

    def test_dump_writes_one_path_per_line(self, temp_list_file):
        dump_lines(["/a", "/b"], temp_list_file)
        assert temp_list_file.read_text() == "/a\n/b\n"

    def test_add_new_repos_merges_with_stored(self, temp_list_file):
        temp_list_file.write_text("/home/me/old\n")

        result = add_new_repos(temp_list_file, ["/home/me/new", "/home/me/old"])

        assert result == ["/home/me/old", "/home/me/new"]
        assert parse_file_lines(temp_list_file) == result

    def test_add_is_idempotent(self, temp_list_file):
        add_new_repos(temp_list_file, ["/a", "/b"])
        add_new_repos(temp_list_file, ["/a", "/b"])

        assert parse_file_lines(temp_list_file) == ["/a", "/b"]

    def test_dump_to_folder_raises(self, temp_list_file):
        temp_list_file.mkdir()
        with pytest.raises(RepoListError):
            dump_lines(["/a"], temp_list_file)
