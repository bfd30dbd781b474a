"""Pure calendar calculations — no UI dependencies."""

import calendar
from datetime import MAXYEAR, MINYEAR, date
from typing import NamedTuple

LTR = "ltr"
RTL = "rtl"
DIRECTIONS = (LTR, RTL)


class InvalidMonth(ValueError):
    """Raised when a (year, month) pair is not a real calendar month."""


class DayCell(NamedTuple):
    """One cell of the month grid.

    ``in_month`` is False for the leading filler cells borrowed from the
    previous month. ``is_current_date`` only says the cell's date is today;
    whether it gets highlighted is decided by ``CalendarState.is_today``.
    """

    day: int
    in_month: bool
    is_current_date: bool = False


class WeekLayout(NamedTuple):
    """Week start (``calendar.MONDAY`` .. ``calendar.SUNDAY``) and direction."""

    direction: str = LTR
    week_start: int = calendar.SUNDAY


def _check_month(year: int, month: int) -> None:
    if not isinstance(year, int) or not isinstance(month, int):
        raise InvalidMonth(f"not a calendar month: {year!r}-{month!r}")
    if not 1 <= month <= 12 or not MINYEAR <= year <= MAXYEAR:
        raise InvalidMonth(f"not a calendar month: {year}-{month:02d}")


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in the month (leap-year aware)."""
    _check_month(year, month)
    return calendar.monthrange(year, month)[1]


def weekday_index_of(year: int, month: int, day: int,
                     week_start: int = calendar.SUNDAY) -> int:
    """Return the 0-based column of a date, column 0 being ``week_start``."""
    _check_month(year, month)
    return (date(year, month, day).weekday() - week_start) % 7


def add_months(year: int, month: int, n: int) -> tuple[int, int]:
    """Return (year, month) moved by ``n`` months, in either direction."""
    total = year * 12 + (month - 1) + n
    y, m = divmod(total, 12)
    return y, m + 1


def prev_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month earlier."""
    return add_months(year, month, -1)


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month later."""
    return add_months(year, month, 1)


def month_label(year: int, month: int) -> str:
    """Return e.g. ``"March 2024"``."""
    _check_month(year, month)
    return f"{calendar.month_name[month]} {year}"


def weekday_headers(week_start: int = calendar.SUNDAY) -> list[str]:
    """Return the seven abbreviated day names, starting at ``week_start``."""
    return [calendar.day_abbr[(week_start + i) % 7] for i in range(7)]


def build_month_grid(year: int, month: int, today: date | None = None,
                     week_start: int = calendar.SUNDAY) -> list[DayCell]:
    """Return the day cells for the given month.

    The month's days are preceded by filler cells numbered backward from the
    1st, so that day 1 lands in its weekday column. There is no trailing
    filler; the last row may be short.
    """
    total_days = days_in_month(year, month)
    first_weekday = weekday_index_of(year, month, 1, week_start)
    # December always has 31 days, which also covers January of MINYEAR
    prev_days = 31 if month == 1 else days_in_month(year, month - 1)

    cells: list[DayCell] = []
    for i in range(first_weekday):
        cells.append(DayCell(prev_days - first_weekday + 1 + i, False))

    today_day = None
    if today is not None and (today.year, today.month) == (year, month):
        today_day = today.day
    for day in range(1, total_days + 1):
        cells.append(DayCell(day, True, day == today_day))
    return cells


def day_of_year(d: date) -> int:
    """Return the 1-based day-of-year for the given date."""
    return d.timetuple().tm_yday
