"""
History calculator for the commit activity heatmap.

Counts a single author's commits per day over the last six months, keyed
by how many calendar days before today each commit was authored.
"""

from datetime import datetime, timedelta
from typing import Callable, Iterable, Optional

from gitlocalstats.commit_source import CommitRecord, RepositoryError, iter_commits
from gitlocalstats.config import DAYS_IN_LAST_SIX_MONTHS


def beginning_of_day(t: datetime) -> datetime:
    """Return midnight of t's day, keeping t's timezone."""
    return t.replace(hour=0, minute=0, second=0, microsecond=0)


def count_days_since_date(date: datetime, now: datetime) -> Optional[int]:
    """
    Count the calendar days between a timestamp's day and today.

    Each value's day is read off its own wall clock, then the walk steps
    one calendar date at a time, so days that are 23 or 25 hours long
    (DST transitions) and commits from other UTC offsets still count by
    the date they were authored.

    Args:
        date: Commit timestamp
        now: Reference time for "today"

    Returns:
        0 for today or any later date, the number of days otherwise,
        or None when the day is more than DAYS_IN_LAST_SIX_MONTHS back
    """
    day = beginning_of_day(date).date()
    today = beginning_of_day(now).date()

    days = 0
    while day < today:
        day += timedelta(days=1)
        days += 1
        if days > DAYS_IN_LAST_SIX_MONTHS:
            return None
    return days


def new_commit_map() -> dict[int, int]:
    """Return a count map with a zero for every offset in the window."""
    return {offset: 0 for offset in range(DAYS_IN_LAST_SIX_MONTHS + 1)}


def aggregate(
    email: str,
    commits: Iterable[CommitRecord],
    now: datetime,
    counts: dict[int, int] | None = None,
) -> dict[int, int]:
    """
    Count the commits authored by email, per day offset.

    Args:
        email: Author email to count; other authors are ignored
        commits: Commit records in any order
        now: Reference time for "today"
        counts: Existing map to add to. A new one is created if not provided.

    Returns:
        The count map, keyed 0..DAYS_IN_LAST_SIX_MONTHS
    """
    if counts is None:
        counts = new_commit_map()

    for commit in commits:
        if commit.author_email != email:
            continue

        days_ago = count_days_since_date(commit.authored_at, now)
        if days_ago is not None:
            counts[days_ago] += 1

    return counts


def process_repositories(
    email: str,
    repos: list[str],
    now: datetime,
    skip_errors: bool = False,
    on_error: Callable[[str, RepositoryError], None] | None = None,
) -> dict[int, int]:
    """
    Count the author's commits across every repository, one at a time.

    Args:
        email: Author email to count
        repos: Repository paths, processed in order
        now: Reference time for "today"
        skip_errors: Report and skip repositories that fail instead of
            stopping at the first failure
        on_error: Called with (path, error) for each skipped repository

    Returns:
        Count map summed over all repositories

    Raises:
        RepositoryError: On the first failing repository, unless skip_errors
    """
    counts = new_commit_map()

    for path in repos:
        try:
            aggregate(email, iter_commits(path), now, counts)
        except RepositoryError as e:
            if not skip_errors:
                raise
            if on_error is not None:
                on_error(path, e)

    return counts
