"""
Month view controller.

This module ties the grid builder, event mapper and navigator to an event
source. Every navigation recomputes the whole month; the fetched events are
applied only if no newer navigation started while the fetch was in flight.
"""
from __future__ import annotations

import datetime as dt
import logging
import typing as t
from dataclasses import dataclass

from month_view.date_provider import DateProvider, get_date_provider
from month_view.errors import EventFetchFailed, StaleFetchResult
from month_view.grid import build_calendar_month, validate_month_year
from month_view.mapper import map_events
from month_view.models import CalendarMonth
from month_view.navigator import shift_month
from month_view.sources import EventSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MonthView:
    """Result of one navigation: the mapped month and any fetch failure."""
    calendar: CalendarMonth
    generation: int
    error: t.Optional[EventFetchFailed] = None


class MonthViewController:
    """Keeps the displayed month and rebuilds it on every navigation."""

    def __init__(
        self,
        source: EventSource,
        provider: t.Optional[DateProvider] = None,
        today: t.Optional[t.Callable[[], dt.date]] = None,
    ) -> None:
        """
        Args:
            source: Where events are fetched from
            provider: Date provider; the shared one when omitted
            today: Callable returning the current date; the provider's today() when omitted

        Raises:
            DateProviderUnavailable: If the shared provider cannot be initialized
        """
        self.source = source
        self.provider = provider if provider is not None else get_date_provider()
        self._today = today or self.provider.today
        self._generation = 0
        # Latest requested month, which may still be loading
        self.month: t.Optional[int] = None
        self.year: t.Optional[int] = None
        self.current: t.Optional[MonthView] = None

    @property
    def generation(self) -> int:
        return self._generation

    async def show(self, month: int, year: int) -> MonthView:
        """Build the month, fetch its events and apply them.

        Returns:
            The new MonthView, also stored on ``current``. If the event fetch
            failed the cells carry no events and ``error`` is set.

        Raises:
            InvalidMonthYear: If month or year is invalid
            StaleFetchResult: If another navigation started before the fetch
                finished; ``current`` is left as the newer request set it
        """
        validate_month_year(month, year)
        calendar_month = build_calendar_month(month, year, self._today(), self.provider)

        self._generation += 1
        generation = self._generation
        self.month, self.year = month, year
        logger.debug("Request %d: showing %d-%02d", generation, year, month)

        error: t.Optional[EventFetchFailed] = None
        try:
            events = await self.source.fetch_events(month, year)
        except EventFetchFailed as e:
            logger.warning("%s", e)
            events = []
            error = e

        if generation != self._generation:
            logger.debug("Request %d: discarded, request %d is newer", generation, self._generation)
            raise StaleFetchResult(month, year, generation, self._generation)

        cells = map_events(calendar_month.cells, events, self.provider)
        view = MonthView(
            calendar=CalendarMonth(month=month, year=year, cells=cells),
            generation=generation,
            error=error,
        )
        self.current = view
        logger.info("Showing %s %d with %d event(s)", view.calendar.month_name, year, len(events))
        return view

    async def initialize(self) -> MonthView:
        """Show the month containing today."""
        today = self._today()
        return await self.show(today.month, today.year)

    async def next_month(self) -> MonthView:
        month, year = self._position()
        return await self.show(*shift_month(month, year, 1))

    async def prev_month(self) -> MonthView:
        month, year = self._position()
        return await self.show(*shift_month(month, year, -1))

    def _position(self) -> tuple[int, int]:
        if self.month is None or self.year is None:
            today = self._today()
            return today.month, today.year
        return self.month, self.year
