"""
Event source contract and an in-memory implementation.

An event source delivers the events of one month. Any failure must surface as
EventFetchFailed rather than as a partial list.
"""
from __future__ import annotations

import typing as t

from month_view.date_provider import DateProvider, get_date_provider
from month_view.errors import EventFetchFailed, InvalidEventTimestamp
from month_view.models import Event


class EventSource(t.Protocol):
    """Asynchronous provider of the events of a month."""

    async def fetch_events(self, month: int, year: int) -> list[Event]:
        ...


class StaticEventSource:
    """Serves events from a fixed in-memory list, filtered by month and year."""

    def __init__(
        self,
        events: t.Iterable[Event] = (),
        provider: t.Optional[DateProvider] = None,
    ) -> None:
        self.events = list(events)
        self.provider = provider

    async def fetch_events(self, month: int, year: int) -> list[Event]:
        """Return the stored events starting in the month, in stored order.

        Raises:
            EventFetchFailed: If a stored event has no readable start date
        """
        provider = self.provider or get_date_provider()
        matched = []
        for event in self.events:
            try:
                start = provider.to_date(event.start_datetime)
            except InvalidEventTimestamp as e:
                raise EventFetchFailed(month, year, str(e)) from e
            if start.month == month and start.year == year:
                matched.append(event)
        return matched
