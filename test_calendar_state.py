import calendar
from datetime import date

import pytest

from calendar_logic import DayCell
from calendar_state import CalendarState


def fixed(d: date):
    return lambda: d


@pytest.fixture
def state():
    return CalendarState(today=fixed(date(2024, 3, 10)))


def test_initial_state(state):
    assert state.displayed_month == (2024, 3)
    assert state.selected_day is None
    assert state.current_month_label() == "March 2024"


def test_page_month_clears_selection(state):
    state.select_day(DayCell(15, True))
    assert state.selected_day == 15
    state.page_month(1)
    assert state.displayed_month == (2024, 4)
    assert state.selected_day is None


def test_page_zero_still_clears_selection(state):
    state.select_day(DayCell(15, True))
    state.page_month(0)
    assert state.displayed_month == (2024, 3)
    assert state.selected_day is None


@pytest.mark.parametrize("k", [0, 1, -1, 9, -10, 12, 25, -131])
def test_page_and_back(state, k):
    state.page_month(k)
    state.page_month(-k)
    assert state.displayed_month == (2024, 3)


def test_page_across_year(state):
    state.page_month(10)
    assert state.displayed_month == (2025, 1)
    state.page_month(-13)
    assert state.displayed_month == (2023, 12)


def test_select_filler_is_ignored(state):
    assert state.select_day(DayCell(28, False)) is False
    assert state.selected_day is None
    state.select_day(DayCell(5, True))
    assert state.select_day(DayCell(29, False)) is False
    assert state.selected_day == 5


def test_reselect_is_not_a_toggle(state):
    assert state.select_day(DayCell(12, True)) is True
    assert state.select_day(DayCell(12, True)) is False
    assert state.selected_day == 12


def test_select_other_day(state):
    state.select_day(DayCell(12, True))
    assert state.select_day(DayCell(20, True)) is True
    assert state.selected_day == 20


def test_today_highlight_suppressed_by_selection(state):
    day10 = DayCell(10, True)
    day12 = DayCell(12, True)
    assert state.is_today(day10)
    assert not state.is_selected(day10)

    state.select_day(day12)
    assert not state.is_today(day10)
    assert state.is_selected(day12)
    assert not state.is_selected(day10)


def test_selecting_today_shows_selected_not_today(state):
    day10 = DayCell(10, True)
    state.select_day(day10)
    assert state.is_selected(day10)
    assert not state.is_today(day10)


def test_today_only_in_todays_month(state):
    state.page_month(1)
    assert not state.is_today(DayCell(10, True))
    state.page_month(-13)
    assert not state.is_today(DayCell(10, True))


def test_filler_is_never_today_or_selected():
    state = CalendarState(today=fixed(date(2024, 4, 30)))
    filler = DayCell(30, False)
    assert not state.is_today(filler)
    state.select_day(DayCell(30, True))
    assert not state.is_selected(filler)


def test_current_grid(state):
    cells = state.current_grid()
    assert len(cells) == 5 + 31  # 2024-03-01 is a Friday
    assert [c for c in cells if c.is_current_date] == [DayCell(10, True, True)]
    assert [c for c in cells if state.is_today(c)] == [DayCell(10, True, True)]


def test_current_grid_follows_week_start(state):
    state.set_week_start(calendar.MONDAY)
    assert len(state.current_grid()) == 4 + 31
    assert state.displayed_month == (2024, 3)


def test_go_today():
    clock = {"now": date(2024, 3, 10)}
    state = CalendarState(today=lambda: clock["now"])
    state.page_month(-30)
    state.select_day(DayCell(3, True))
    clock["now"] = date(2024, 5, 2)
    state.go_today()
    assert state.displayed_month == (2024, 5)
    assert state.selected_day is None
    assert state.is_today(DayCell(2, True))


def test_today_is_read_at_query_time():
    clock = {"now": date(2024, 3, 31)}
    state = CalendarState(today=lambda: clock["now"])
    assert state.is_today(DayCell(31, True))
    clock["now"] = date(2024, 4, 1)
    assert not state.is_today(DayCell(31, True))


@pytest.mark.parametrize("offset,expected", [
    (10**6, (9999, 12)),
    (-10**6, (1, 1)),
    (-2024 * 12, (1, 1)),
])
def test_page_stops_at_representable_months(state, offset, expected):
    state.select_day(DayCell(15, True))
    state.page_month(offset)
    assert state.displayed_month == expected
    assert state.selected_day is None
    assert len(state.current_grid()) > 0
    assert state.current_month_label().endswith(str(expected[0]))


def test_page_past_last_month():
    state = CalendarState(today=fixed(date(9999, 12, 1)))
    state.page_month(1)
    assert state.displayed_month == (9999, 12)
    assert state.current_month_label() == "December 9999"
    state.page_month(-1)
    assert state.displayed_month == (9999, 11)
