"""
Date capability used by the grid builder and event mapper.

The provider answers weekday and month-length questions and reads calendar
dates out of event timestamps. One instance is created per process on first
use and shared by reference afterwards.
"""
from __future__ import annotations

import calendar
import datetime as dt
import logging
import typing as t

from month_view.errors import DateProviderUnavailable, InvalidEventTimestamp
from month_view.models import Timestamp

logger = logging.getLogger(__name__)


class DateProvider(t.Protocol):
    """Deterministic, side-effect-free date math."""

    def weekday_index(self, year: int, month: int, day: int) -> int:
        """Weekday of a date, 0=Sunday .. 6=Saturday."""
        ...

    def days_in_month(self, month: int, year: int) -> int:
        ...

    def to_date(self, timestamp: Timestamp) -> dt.date:
        ...

    def today(self) -> dt.date:
        ...


class CalendarDateProvider:
    """DateProvider backed by the standard library calendar and datetime modules."""

    def weekday_index(self, year: int, month: int, day: int) -> int:
        # calendar counts Monday as 0
        return (calendar.weekday(year, month, day) + 1) % 7

    def days_in_month(self, month: int, year: int) -> int:
        return calendar.monthrange(year, month)[1]

    def to_date(self, timestamp: Timestamp) -> dt.date:
        """Return the calendar date of a datetime, date or ISO-8601 string.

        Strings are read with datetime.fromisoformat (Python 3.11 rules), a
        trailing "Z" meaning UTC. The date is taken as written; no timezone
        conversion is applied.

        Raises:
            InvalidEventTimestamp: If no date can be read from the value
        """
        if isinstance(timestamp, dt.datetime):
            return timestamp.date()
        if isinstance(timestamp, dt.date):
            return timestamp
        if isinstance(timestamp, str):
            try:
                return dt.datetime.fromisoformat(timestamp.strip().replace("Z", "+00:00")).date()
            except ValueError as e:
                raise InvalidEventTimestamp(timestamp) from e
        raise InvalidEventTimestamp(timestamp)

    def today(self) -> dt.date:
        return dt.date.today()


# Process-wide instance, created once by init_date_provider()
_provider: t.Optional[DateProvider] = None


def init_date_provider(
    factory: t.Callable[[], DateProvider] = CalendarDateProvider,
) -> DateProvider:
    """Create the shared provider if it does not exist yet and return it.

    Args:
        factory: Zero-argument callable building the provider

    Returns:
        The shared provider (the existing one if already initialized)

    Raises:
        DateProviderUnavailable: If the factory fails
    """
    global _provider
    if _provider is not None:
        return _provider
    try:
        provider = factory()
    except Exception as e:
        raise DateProviderUnavailable(f"Date provider failed to initialize: {e}") from e
    logger.debug("Initialized date provider %s", type(provider).__name__)
    _provider = provider
    return provider


def get_date_provider() -> DateProvider:
    """Return the shared provider, initializing the default one on first use."""
    if _provider is None:
        return init_date_provider()
    return _provider


def set_date_provider(provider: t.Optional[DateProvider]) -> None:
    """Replace the shared provider; None resets it so the next use re-initializes."""
    global _provider
    _provider = provider
