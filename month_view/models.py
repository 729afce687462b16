"""
Data models for the month-view calendar grid.

This module contains the immutable dataclasses produced by the grid builder and
event mapper: events as delivered by an event source, the day cells of a grid,
and a complete calendar month.
"""
from __future__ import annotations

import datetime as dt
import typing as t
from dataclasses import dataclass, field

# Anything a date provider can read a calendar date from
Timestamp = t.Union[dt.datetime, dt.date, str]

WEEKDAYS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


@dataclass(frozen=True)
class Event:
    """A scheduled event; only the date of start_datetime is ever read."""
    start_datetime: Timestamp
    fields: dict[str, t.Any] = field(default_factory=dict)

    @property
    def title(self) -> str:
        return str(self.fields.get("title") or self.fields.get("Subject") or "")


@dataclass(frozen=True)
class DayCell:
    """One grid square: blank padding (date is None) or a day of the month."""
    key: t.Union[str, int]
    date: t.Optional[int] = None
    is_today: bool = False
    events: tuple[Event, ...] = ()

    @property
    def is_blank(self) -> bool:
        return self.date is None


@dataclass(frozen=True)
class CalendarMonth:
    """A fully computed month: leading blank cells followed by every day."""
    month: int
    year: int
    cells: tuple[DayCell, ...] = ()

    @property
    def month_name(self) -> str:
        return MONTH_NAMES[self.month - 1]

    @property
    def blank_count(self) -> int:
        return sum(1 for cell in self.cells if cell.is_blank)

    def day(self, day: int) -> DayCell:
        """Return the cell for a day of the month.

        Raises:
            KeyError: If the month has no such day
        """
        for cell in self.cells:
            if cell.date == day:
                return cell
        raise KeyError(day)

    def weeks(self) -> list[list[t.Optional[DayCell]]]:
        """Split the cells into Sunday-first rows of seven, padding the last row with None."""
        rows: list[list[t.Optional[DayCell]]] = []
        row: list[t.Optional[DayCell]] = []
        for cell in self.cells:
            row.append(cell)
            if len(row) == 7:
                rows.append(row)
                row = []
        if row:
            row.extend([None] * (7 - len(row)))
            rows.append(row)
        return rows
