"""
Plain-text storage for the list of tracked repositories.

One absolute repository path per line, no header.
"""

from pathlib import Path


class RepoListError(Exception):
    """Raised when the repository list file cannot be read or written."""

    pass


def parse_file_lines(file_path: Path) -> list[str]:
    """
    Read the repository paths stored in a file.

    The file (and its parent folder) is created empty if it doesn't exist.

    Args:
        file_path: Path to the repository list

    Returns:
        Repository paths in file order, blank lines skipped

    Raises:
        RepoListError: If the file cannot be created or read
    """
    try:
        if not file_path.exists():
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.touch()
        content = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise RepoListError(f"Could not open repository list {file_path}: {e}") from e

    return [line.strip() for line in content.splitlines() if line.strip()]


def join_lists(new: list[str], existing: list[str]) -> list[str]:
    """
    Append new paths to the existing ones, dropping duplicates.

    Args:
        new: Newly discovered paths
        existing: Paths already stored

    Returns:
        Existing paths in their original order followed by unseen new paths
    """
    joined = []
    seen = set()
    for path in [*existing, *new]:
        if path in seen:
            continue
        seen.add(path)
        joined.append(path)
    return joined


def dump_lines(repos: list[str], file_path: Path) -> None:
    """Overwrite the file with one repository path per line."""
    content = "".join(f"{repo}\n" for repo in repos)
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise RepoListError(f"Could not write repository list {file_path}: {e}") from e


def add_new_repos(file_path: Path, new_repos: list[str]) -> list[str]:
    """
    Merge newly found repositories into the stored list.

    Args:
        file_path: Path to the repository list
        new_repos: Repository paths to add

    Returns:
        The full list as written to disk
    """
    existing = parse_file_lines(file_path)
    repos = join_lists(new_repos, existing)
    dump_lines(repos, file_path)
    return repos
