"""Calendar grid construction: leading blank cells followed by one cell per day."""
from __future__ import annotations

import datetime as dt
import typing as t

from month_view.date_provider import DateProvider, get_date_provider
from month_view.errors import InvalidMonthYear
from month_view.models import CalendarMonth, DayCell


def validate_month_year(month: t.Any, year: t.Any) -> None:
    """Reject anything but an integer month in 1..12 and an integer year.

    Raises:
        InvalidMonthYear: If either value is invalid
    """
    # bool is an int subclass but never a month or year
    if isinstance(month, bool) or not isinstance(month, int):
        raise InvalidMonthYear(month, year, "month must be an integer")
    if isinstance(year, bool) or not isinstance(year, int):
        raise InvalidMonthYear(month, year, "year must be an integer")
    if not 1 <= month <= 12:
        raise InvalidMonthYear(month, year, "month must be between 1 and 12")


def first_weekday_offset(
    month: int, year: int, provider: t.Optional[DateProvider] = None
) -> int:
    """Number of blank cells before the 1st in a Sunday-first grid."""
    validate_month_year(month, year)
    provider = provider or get_date_provider()
    return provider.weekday_index(year, month, 1)


def days_in_month(
    month: int, year: int, provider: t.Optional[DateProvider] = None
) -> int:
    validate_month_year(month, year)
    provider = provider or get_date_provider()
    return provider.days_in_month(month, year)


def build_grid(
    month: int,
    year: int,
    today: dt.date,
    provider: t.Optional[DateProvider] = None,
) -> tuple[DayCell, ...]:
    """Build the ordered day cells of a month.

    Args:
        month: Month number, 1..12
        year: Year
        today: The date to flag with is_today
        provider: Date provider; the shared one when omitted

    Returns:
        first_weekday_offset blank cells (keys "blank-0", "blank-1", ...)
        followed by one cell per day, keyed and dated by the day number

    Raises:
        InvalidMonthYear: If month or year is invalid
    """
    validate_month_year(month, year)
    provider = provider or get_date_provider()

    offset = provider.weekday_index(year, month, 1)
    length = provider.days_in_month(month, year)
    today_in_month = today.year == year and today.month == month

    cells: list[DayCell] = [DayCell(key=f"blank-{i}") for i in range(offset)]
    for day in range(1, length + 1):
        cells.append(DayCell(key=day, date=day, is_today=today_in_month and today.day == day))
    return tuple(cells)


def build_calendar_month(
    month: int,
    year: int,
    today: dt.date,
    provider: t.Optional[DateProvider] = None,
) -> CalendarMonth:
    """Build a CalendarMonth with no events attached."""
    return CalendarMonth(month=month, year=year, cells=build_grid(month, year, today, provider))
