"""
Git repository scanner.

Walks a folder tree and collects the root of every Git repository found.
"""

import os
from pathlib import Path

from gitlocalstats.config import SKIPPED_DIRS


class ScanError(Exception):
    """Raised when a folder in the tree cannot be read."""

    pass


def is_git_repository(folder: Path) -> bool:
    """Return True if the folder has a .git entry (directory or file)."""
    return os.path.lexists(folder / ".git")


def scan_git_folders(folder: str | Path) -> list[str]:
    """
    Recursively scan a folder for Git repositories.

    A folder holding a .git entry is a repository root and is not searched
    any deeper. Folders named in SKIPPED_DIRS and symlinked folders are
    never entered.

    Args:
        folder: Root folder to scan

    Returns:
        Absolute repository paths, in sorted walk order

    Raises:
        ScanError: If a folder cannot be listed
    """
    root = Path(folder).expanduser().resolve()
    repos: list[str] = []
    _scan(root, repos)
    return repos


def _scan(folder: Path, repos: list[str]) -> None:
    if is_git_repository(folder):
        repos.append(str(folder))
        return

    try:
        with os.scandir(folder) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except OSError as e:
        raise ScanError(f"Could not read folder {folder}: {e}") from e

    for entry in entries:
        if entry.name in SKIPPED_DIRS:
            continue
        if not entry.is_dir(follow_symlinks=False):
            continue
        _scan(folder / entry.name, repos)
