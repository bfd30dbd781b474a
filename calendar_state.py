"""Displayed month and selected day of the calendar widget."""

import calendar
import logging
from datetime import MAXYEAR, MINYEAR, date
from typing import Callable

from calendar_logic import DayCell, add_months, build_month_grid, month_label

logger = logging.getLogger(__name__)

_FIRST_MONTH = (MINYEAR, 1)
_LAST_MONTH = (MAXYEAR, 12)


class CalendarState:
    """Owns the (displayed month, selected day) pair.

    ``today`` is a zero-argument callable so tests can pin the clock. The
    selection is only meaningful for the month it was made in: every page
    clears it.
    """

    def __init__(self, today: Callable[[], date] = date.today,
                 week_start: int = calendar.SUNDAY) -> None:
        self._today = today
        self.week_start = week_start
        now = today()
        self.year: int = now.year
        self.month: int = now.month
        self.selected_day: int | None = None

    @property
    def displayed_month(self) -> tuple[int, int]:
        return self.year, self.month

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def page_month(self, offset: int) -> None:
        """Move by ``offset`` months and drop the selection.

        The target is clamped to the months ``datetime`` can represent.
        """
        target = add_months(self.year, self.month, offset)
        self.year, self.month = min(max(target, _FIRST_MONTH), _LAST_MONTH)
        self.selected_day = None
        logger.debug("Paged %+d month(s) to %d-%02d", offset, self.year, self.month)

    def select_day(self, cell: DayCell) -> bool:
        """Select the cell's day; return False if the click was ignored.

        Filler cells cannot be selected, and clicking the selected day again
        leaves it selected.
        """
        if not cell.in_month or cell.day == self.selected_day:
            return False
        self.selected_day = cell.day
        logger.debug("Selected %d-%02d-%02d", self.year, self.month, cell.day)
        return True

    def go_today(self) -> None:
        now = self._today()
        offset = (now.year - self.year) * 12 + (now.month - self.month)
        self.page_month(offset)

    def set_week_start(self, week_start: int) -> None:
        self.week_start = week_start

    # ------------------------------------------------------------------
    # Read-only view for the renderer
    # ------------------------------------------------------------------
    def current_grid(self) -> list[DayCell]:
        return build_month_grid(self.year, self.month, self._today(), self.week_start)

    def current_month_label(self) -> str:
        return month_label(self.year, self.month)

    def is_today(self, cell: DayCell) -> bool:
        """True if the cell should get the today highlight.

        Any selection suppresses the today highlight, in every month.
        """
        if self.selected_day is not None or not cell.in_month:
            return False
        now = self._today()
        return (now.year, now.month, now.day) == (self.year, self.month, cell.day)

    def is_selected(self, cell: DayCell) -> bool:
        return cell.in_month and cell.day == self.selected_day
