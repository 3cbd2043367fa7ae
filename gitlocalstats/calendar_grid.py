"""
Calendar grid for the commit heatmap.

Lays daily commit counts out as week columns and weekday rows, with
column 0 being the calendar week (Sunday to Saturday) that contains today.
"""

from datetime import date, datetime, timedelta

from gitlocalstats.config import WEEKS_IN_LAST_SIX_MONTHS
from gitlocalstats.history_calculator import beginning_of_day


def weekday_index(day: date) -> int:
    """Return the weekday with Sunday = 0 through Saturday = 6."""
    return day.isoweekday() % 7


def week_anchor(day: date) -> date:
    """Return the Sunday on or before day."""
    return day - timedelta(days=weekday_index(day))


def build_grid(commits: dict[int, int], now: datetime) -> list[list[int]]:
    """
    Map per-day commit counts onto week columns.

    Each day's column is the number of whole weeks between its Sunday and
    the Sunday of the current week, so every column is a real calendar week
    even when today isn't a Sunday. Days falling more than
    WEEKS_IN_LAST_SIX_MONTHS weeks back are dropped.

    Args:
        commits: Count map keyed by days before today
        now: Reference time for "today"

    Returns:
        WEEKS_IN_LAST_SIX_MONTHS + 1 columns indexed by week (0 = current
        week), each a list of 7 counts indexed by weekday (Sunday = 0)
    """
    today = beginning_of_day(now).date()
    current_sunday = week_anchor(today)

    cols = [[0] * 7 for _ in range(WEEKS_IN_LAST_SIX_MONTHS + 1)]

    for days_ago in sorted(commits):
        commit_day = today - timedelta(days=days_ago)
        week = (current_sunday - week_anchor(commit_day)).days // 7

        if 0 <= week <= WEEKS_IN_LAST_SIX_MONTHS:
            cols[week][weekday_index(commit_day)] = commits[days_ago]

    return cols
