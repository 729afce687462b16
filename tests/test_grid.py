"""Tests for month grid construction.

This module tests blank padding, month lengths, today flags and input validation.
"""
import datetime as dt

import pytest

from month_view.date_provider import CalendarDateProvider
from month_view.errors import InvalidMonthYear
from month_view.grid import build_calendar_month, build_grid, days_in_month, first_weekday_offset

provider = CalendarDateProvider()


def test_february_2024_leap_year_grid() -> None:
    """Test the leap-year February grid with today inside the month."""
    cells = build_grid(2, 2024, dt.date(2024, 2, 15), provider)

    blanks = [cell for cell in cells if cell.is_blank]
    dated = [cell for cell in cells if not cell.is_blank]

    # Feb 1, 2024 is a Thursday
    assert len(blanks) == 4
    assert [cell.key for cell in blanks] == ["blank-0", "blank-1", "blank-2", "blank-3"]
    assert len(dated) == 29
    assert [cell.date for cell in dated] == list(range(1, 30))
    assert [cell.key for cell in dated] == list(range(1, 30))
    assert [cell.date for cell in dated if cell.is_today] == [15]


@pytest.mark.parametrize(
    "month, year, offset, length",
    [
        (2, 2023, 3, 28),   # Wednesday, common year
        (2, 2024, 4, 29),   # Thursday, leap year
        (2, 1900, 4, 28),   # century, not a leap year
        (2, 2000, 2, 29),   # divisible by 400
        (6, 2024, 6, 30),   # starts on Saturday
        (9, 2024, 0, 30),   # starts on Sunday
        (12, 2023, 5, 31),
        (1, 2024, 1, 31),
    ],
)
def test_grid_length_is_offset_plus_days(month: int, year: int, offset: int, length: int) -> None:
    """Test offsets and month lengths, and that the grid holds exactly both."""
    assert first_weekday_offset(month, year, provider) == offset
    assert days_in_month(month, year, provider) == length

    cells = build_grid(month, year, dt.date(1999, 1, 1), provider)
    assert len(cells) == offset + length


def test_blanks_precede_dated_cells_in_ascending_order() -> None:
    """Test that every blank comes first and days run 1..n without gaps."""
    for month in range(1, 13):
        cells = build_grid(month, 2025, dt.date(2025, 1, 1), provider)
        first_dated = next(i for i, cell in enumerate(cells) if not cell.is_blank)

        assert all(cell.is_blank for cell in cells[:first_dated])
        assert [cell.date for cell in cells[first_dated:]] == list(range(1, len(cells) - first_dated + 1))
        assert all(cell.events == () for cell in cells)


def test_no_today_flag_outside_the_displayed_month() -> None:
    """Test that today in another month or year flags no cell."""
    same_day_other_month = build_grid(3, 2024, dt.date(2024, 2, 15), provider)
    same_month_other_year = build_grid(2, 2023, dt.date(2024, 2, 15), provider)

    assert not any(cell.is_today for cell in same_day_other_month)
    assert not any(cell.is_today for cell in same_month_other_year)


def test_grid_is_deterministic() -> None:
    """Test that identical inputs give identical grids."""
    today = dt.date(2024, 12, 31)
    assert build_grid(12, 2024, today, provider) == build_grid(12, 2024, today, provider)


def test_build_calendar_month_carries_month_and_year() -> None:
    """Test the CalendarMonth wrapper and its helpers."""
    calendar = build_calendar_month(2, 2024, dt.date(2024, 2, 15), provider)

    assert (calendar.month, calendar.year) == (2, 2024)
    assert calendar.month_name == "February"
    assert calendar.blank_count == 4
    assert calendar.day(15).is_today

    weeks = calendar.weeks()
    assert len(weeks) == 5
    assert all(len(week) == 7 for week in weeks)
    assert weeks[0][4].date == 1
    assert weeks[-1][-1] is None

    with pytest.raises(KeyError):
        calendar.day(30)


@pytest.mark.parametrize(
    "month, year",
    [(0, 2024), (13, 2024), (-1, 2024), ("2", 2024), (2.0, 2024), (True, 2024), (2, "2024"), (2, None), (2, 2024.5)],
)
def test_invalid_month_or_year_is_rejected(month, year) -> None:
    """Test that invalid input fails fast instead of being clamped."""
    with pytest.raises(InvalidMonthYear):
        build_grid(month, year, dt.date(2024, 1, 1), provider)


def test_invalid_month_is_a_value_error() -> None:
    """Test that callers can treat validation failures as ValueError."""
    with pytest.raises(ValueError) as exc_info:
        first_weekday_offset(13, 2024, provider)

    assert exc_info.value.month == 13
    assert "between 1 and 12" in str(exc_info.value)
