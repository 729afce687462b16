"""Event bucketing: attach each fetched event to the cell of its day."""
from __future__ import annotations

import typing as t
from dataclasses import replace

from month_view.date_provider import DateProvider, get_date_provider
from month_view.models import DayCell, Event


def map_events(
    cells: t.Sequence[DayCell],
    events: t.Sequence[Event],
    provider: t.Optional[DateProvider] = None,
) -> tuple[DayCell, ...]:
    """Return new cells whose events are those starting on the cell's day.

    Events already attached to the input cells are replaced, never merged, and
    the input cells are left untouched. Within a day the events keep their
    original order. Blank cells always come back with no events.

    Raises:
        InvalidEventTimestamp: If an event's start has no readable date
    """
    provider = provider or get_date_provider()

    # Read every date up front so a bad timestamp fails before any cell is built
    days = [provider.to_date(event.start_datetime).day for event in events]

    mapped: list[DayCell] = []
    for cell in cells:
        if cell.is_blank:
            mapped.append(replace(cell, events=()))
            continue
        bucket = tuple(event for event, day in zip(events, days) if day == cell.date)
        mapped.append(replace(cell, events=bucket))
    return tuple(mapped)
