"""
Local Git commit source.

Opens a repository with GitPython and streams the author of every commit
reachable from HEAD.
"""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Iterator

from git import GitCommandError, InvalidGitRepositoryError, NoSuchPathError, Repo


class RepositoryError(Exception):
    """Raised when a repository cannot be opened or its history read."""

    pass


@dataclass(frozen=True)
class CommitRecord:
    """Author of a single commit."""

    author_email: str
    authored_at: datetime  # timezone-aware, in the author's own offset


def open_repository(path: str | Path) -> Repo:
    """
    Open the repository rooted at path.

    Raises:
        RepositoryError: If the path doesn't exist or isn't a Git repository
    """
    try:
        return Repo(path)
    except (InvalidGitRepositoryError, NoSuchPathError) as e:
        raise RepositoryError(f"Failed to open repository {path}: {e}") from e


def iter_commits(path: str | Path) -> Iterator[CommitRecord]:
    """
    Yield commits reachable from HEAD, newest first.

    The history is read lazily; errors surface while iterating.

    Args:
        path: Repository root

    Yields:
        CommitRecord for each commit

    Raises:
        RepositoryError: If the repository, its HEAD or its history can't be read
    """
    repo = open_repository(path)
    with repo:
        if not repo.head.is_valid():
            raise RepositoryError(f"Failed to resolve HEAD of repository {path}")

        try:
            for commit in repo.iter_commits(repo.head.commit):
                yield CommitRecord(
                    author_email=commit.author.email or "",
                    authored_at=commit.authored_datetime,
                )
        except (GitCommandError, ValueError) as e:
            raise RepositoryError(f"Failed to read commit history of {path}: {e}") from e
