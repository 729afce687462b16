"""Exceptions raised by the month-view core and its collaborators."""
from __future__ import annotations

import typing as t


class MonthViewError(Exception):
    """Base class for all month-view errors."""


class DateProviderUnavailable(MonthViewError, RuntimeError):
    """The date capability could not be initialized, so no grid can be built."""


class InvalidMonthYear(MonthViewError, ValueError):
    """Month outside 1..12, or a month/year that is not an integer."""

    def __init__(self, month: t.Any, year: t.Any, reason: str) -> None:
        self.month = month
        self.year = year
        super().__init__(f"Invalid month/year ({month!r}, {year!r}): {reason}")


class InvalidEventTimestamp(MonthViewError, ValueError):
    """An event's start timestamp has no readable calendar date."""

    def __init__(self, value: t.Any) -> None:
        self.value = value
        super().__init__(f"Cannot read a calendar date from {value!r}")


class EventFetchFailed(MonthViewError, RuntimeError):
    """The event source could not deliver the events for a month."""

    def __init__(self, month: int, year: int, message: str) -> None:
        self.month = month
        self.year = year
        self.message = message
        super().__init__(f"Fetching events for {year}-{month:02d} failed: {message}")


class StaleFetchResult(MonthViewError):
    """A fetch finished after a newer navigation request and was discarded."""

    def __init__(self, month: int, year: int, generation: int, latest: int) -> None:
        self.month = month
        self.year = year
        self.generation = generation
        self.latest = latest
        super().__init__(
            f"Result for {year}-{month:02d} (request {generation}) superseded by request {latest}"
        )
