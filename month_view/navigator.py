"""Month navigation with year carry."""
from __future__ import annotations

from month_view.grid import validate_month_year


def shift_month(month: int, year: int, delta: int) -> tuple[int, int]:
    """Return (month, year) one month before (delta=-1) or after (delta=+1).

    Raises:
        InvalidMonthYear: If month or year is invalid
        ValueError: If delta is not -1 or +1
    """
    validate_month_year(month, year)
    if delta == -1:
        if month == 1:
            return 12, year - 1
        return month - 1, year
    if delta == 1:
        if month == 12:
            return 1, year + 1
        return month + 1, year
    raise ValueError(f"delta must be -1 or +1, got {delta!r}")


def prev_month(month: int, year: int) -> tuple[int, int]:
    """Return (month, year) for one month earlier."""
    return shift_month(month, year, -1)


def next_month(month: int, year: int) -> tuple[int, int]:
    """Return (month, year) for one month later."""
    return shift_month(month, year, 1)
