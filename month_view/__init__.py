"""Month-view calendar grid with events bucketed into day cells."""
from month_view.controller import MonthView, MonthViewController
from month_view.date_provider import (
    CalendarDateProvider,
    DateProvider,
    get_date_provider,
    init_date_provider,
    set_date_provider,
)
from month_view.errors import (
    DateProviderUnavailable,
    EventFetchFailed,
    InvalidEventTimestamp,
    InvalidMonthYear,
    MonthViewError,
    StaleFetchResult,
)
from month_view.grid import build_calendar_month, build_grid, days_in_month, first_weekday_offset
from month_view.mapper import map_events
from month_view.models import MONTH_NAMES, WEEKDAYS, CalendarMonth, DayCell, Event
from month_view.navigator import next_month, prev_month, shift_month
from month_view.sources import EventSource, StaticEventSource

__all__ = [
    "CalendarDateProvider",
    "CalendarMonth",
    "DateProvider",
    "DateProviderUnavailable",
    "DayCell",
    "Event",
    "EventFetchFailed",
    "EventSource",
    "InvalidEventTimestamp",
    "InvalidMonthYear",
    "MONTH_NAMES",
    "MonthView",
    "MonthViewController",
    "MonthViewError",
    "StaleFetchResult",
    "StaticEventSource",
    "WEEKDAYS",
    "build_calendar_month",
    "build_grid",
    "days_in_month",
    "first_weekday_offset",
    "get_date_provider",
    "init_date_provider",
    "map_events",
    "next_month",
    "prev_month",
    "set_date_provider",
    "shift_month",
]
