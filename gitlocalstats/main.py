"""
gitlocalstats: commit activity heatmaps for local Git repositories

Entry point for the application.
"""

import argparse
import sys
from datetime import datetime
from pathlib import Path

from gitlocalstats.calendar_grid import build_grid
from gitlocalstats.cli import display_heatmap
from gitlocalstats.commit_source import RepositoryError
from gitlocalstats.config import get_dotfile_path, validate_config
from gitlocalstats.history_calculator import process_repositories
from gitlocalstats.repo_list import RepoListError, add_new_repos, parse_file_lines
from gitlocalstats.scanner import ScanError, scan_git_folders


def scan(folder: str, dotfile: Path | None = None) -> list[str]:
    """
    Find the repositories under folder and add them to the tracked list.

    Args:
        folder: Folder to search
        dotfile: Repository list file. Uses the configured one if not provided.

    Returns:
        All tracked repositories after the update
    """
    if dotfile is None:
        dotfile = get_dotfile_path()

    print("Searching for Git repositories...\n")
    repositories = scan_git_folders(folder)
    for path in repositories:
        print(path)

    tracked = add_new_repos(dotfile, repositories)

    plural = "repository" if len(tracked) == 1 else "repositories"
    print(f"\nAdded successfully! Tracking {len(tracked)} {plural}.\n")
    return tracked


def _report_skipped(path: str, error: Exception) -> None:
    print(f"Skipping {path}: {error}", file=sys.stderr)


def stats(
    email: str,
    dotfile: Path | None = None,
    now: datetime | None = None,
    skip_broken: bool = False,
) -> None:
    """
    Print the commit heatmap of email across every tracked repository.

    Args:
        email: Author email to count
        dotfile: Repository list file. Uses the configured one if not provided.
        now: Override the current time for testing
        skip_broken: Skip repositories that can't be read instead of failing
    """
    if dotfile is None:
        dotfile = get_dotfile_path()
    if now is None:
        now = datetime.now().astimezone()

    repos = parse_file_lines(dotfile)
    commits = process_repositories(
        email, repos, now, skip_errors=skip_broken, on_error=_report_skipped
    )
    cols = build_grid(commits, now)
    display_heatmap(cols, now)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="gitlocalstats",
        description="Show a contribution heatmap of your commits in local Git repositories.",
    )
    mode = p.add_mutually_exclusive_group()
    mode.add_argument("--add", metavar="FOLDER", default="", help="Add a folder to scan for Git repositories.")
    mode.add_argument("--email", default=None, help="Author email to show stats for (default: $GITLOCALSTATS_EMAIL).")
    p.add_argument("--skip-broken", action="store_true", help="Skip repositories that can't be read instead of stopping.")
    return p


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        if args.add:
            scan(args.add)
            return 0

        email = validate_config(args.email)
        stats(email, skip_broken=args.skip_broken)
    except ValueError as e:
        print(f"Configuration Error:\n{e}", file=sys.stderr)
        return 1
    except (ScanError, RepoListError, RepositoryError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
