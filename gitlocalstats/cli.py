"""
CLI display functions for gitlocalstats.

Renders the calendar grid as a colored terminal heatmap.
"""

from datetime import date, datetime, timedelta

from gitlocalstats.calendar_grid import week_anchor, weekday_index
from gitlocalstats.config import WEEKS_IN_LAST_SIX_MONTHS
from gitlocalstats.history_calculator import beginning_of_day

RESET = "\033[0m"

COLOR_EMPTY = "\033[0;37;30m"
COLOR_LOW = "\033[38;5;17;48;5;153m"
COLOR_MEDIUM = "\033[38;5;17;48;5;75m"
COLOR_HIGH = "\033[38;5;18;48;5;33m"
COLOR_MAX = "\033[38;5;17;104m"
COLOR_TODAY = "\033[1;37;45m"

EMPTY_MARKER = " - "
CELL_WIDTH = 4

# Fixed English names so output never depends on the locale
MONTH_ABBREVS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
                 "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]
DAY_LABELS = [" Sun ", " Mon ", " Tue ", " Wed ", " Thu ", " Fri ", " Sat "]


def _color_for_count(count: int) -> str:
    """
    Pick the intensity color for a commit count.

    Args:
        count: Number of commits for the day

    Returns:
        Escape sequence:
            0: empty
            1-4: low
            5-9: medium
            10-14: high
            15+: max
    """
    if count <= 0:
        return COLOR_EMPTY
    elif count < 5:
        return COLOR_LOW
    elif count < 10:
        return COLOR_MEDIUM
    elif count < 15:
        return COLOR_HIGH
    else:
        return COLOR_MAX


def cell_style(count: int, is_today: bool) -> tuple[str, str]:
    """
    Get the color and padded text for one heatmap cell.

    Args:
        count: Number of commits for the day
        is_today: Whether the cell is today's

    Returns:
        (escape sequence, text CELL_WIDTH characters wide)
    """
    color = COLOR_TODAY if is_today else _color_for_count(count)

    if count <= 0:
        text = f"{EMPTY_MARKER:<{CELL_WIDTH}}"
    else:
        text = f"{count:>{CELL_WIDTH - 1}} "
    return color, text


def format_cell(count: int, is_today: bool) -> str:
    """Format a cell, resetting the style afterwards."""
    color, text = cell_style(count, is_today)
    return f"{color}{text}{RESET}"


def format_day_label(row: int) -> str:
    """Return the 5-character label for a weekday row (Sunday = 0)."""
    return DAY_LABELS[row]


def format_months_line(today: date) -> str:
    """
    Build the header row of month abbreviations.

    A month is printed above the oldest column and above every column whose
    Sunday falls in a different month than the column before it.

    Args:
        today: Today's date

    Returns:
        Header line, aligned with the cells below it
    """
    current_sunday = week_anchor(today)
    line = " " * len(DAY_LABELS[0])

    for week in range(WEEKS_IN_LAST_SIX_MONTHS, -1, -1):
        week_start = current_sunday - timedelta(weeks=week)
        prev_week_start = week_start - timedelta(weeks=1)

        if week == WEEKS_IN_LAST_SIX_MONTHS or week_start.month != prev_week_start.month:
            month = MONTH_ABBREVS[week_start.month - 1]
            line += f"{month:<{CELL_WIDTH}}"
        else:
            line += " " * CELL_WIDTH

    return line


def format_heatmap(cols: list[list[int]], now: datetime) -> str:
    """
    Render the whole heatmap as text.

    Args:
        cols: Grid from build_grid(), indexed by week then weekday
        now: Reference time for "today"

    Returns:
        Month header followed by one line per weekday, oldest week first
    """
    today = beginning_of_day(now).date()
    today_row = weekday_index(today)

    lines = [format_months_line(today)]
    for row in range(7):
        line = format_day_label(row)
        for week in range(WEEKS_IN_LAST_SIX_MONTHS, -1, -1):
            is_today = week == 0 and row == today_row
            line += format_cell(cols[week][row], is_today)
        lines.append(line)

    return "\n".join(lines) + "\n"


def display_heatmap(cols: list[list[int]], now: datetime) -> None:
    """
    Print the commit heatmap to the console.

    Args:
        cols: Grid from build_grid()
        now: Reference time for "today"
    """
    print(format_heatmap(cols, now), end="")
