# -*- coding: utf-8 -*-
"""Command line month view: renders one month and its events as a table."""
import asyncio
import logging
import typing as t

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from month_view.controller import MonthViewController
from month_view.errors import DateProviderUnavailable, InvalidEventTimestamp, InvalidMonthYear
from month_view.http_source import EVENTS_SERVICE_URL, HttpEventSource, payload_to_event
from month_view.models import WEEKDAYS, CalendarMonth, DayCell, Event
from month_view.navigator import shift_month
from month_view.sources import EventSource, StaticEventSource
from services.shared.models import load_event_payloads


console = Console()
err_console = Console(stderr=True)


def setup_logging(verbose: bool) -> None:
    """Route log records through rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def truncate_title(title: str, max_length: int = 12) -> str:
    """Truncate title to max_length characters, adding ellipsis if needed."""
    if len(title) <= max_length:
        return title
    return title[:max_length-3] + "..."


def format_cell(cell: t.Optional[DayCell]) -> Text:
    """Render one grid square: day number then one line per event."""
    text = Text()
    if cell is None or cell.is_blank:
        return text
    text.append(str(cell.date), style="bold reverse cyan" if cell.is_today else "bold")
    for event in cell.events:
        text.append("\n")
        text.append(truncate_title(event.title or "(untitled)"), style="yellow")
    return text


def create_month_table(calendar: CalendarMonth) -> Table:
    """Create a Sunday-first table for a calendar month."""
    table = Table(
        title=f"📅 {calendar.month_name} {calendar.year}",
        show_header=True,
        header_style="bold magenta",
        show_lines=True,
    )
    for weekday in WEEKDAYS:
        table.add_column(weekday, style="white", vertical="top")
    for week in calendar.weeks():
        table.add_row(*(format_cell(cell) for cell in week))
    return table


def load_events(path: str) -> list[Event]:
    """Read events from a local JSON file."""
    return [payload_to_event(payload) for payload in load_event_payloads(path)]


def resolve_month(
    month: t.Optional[int], year: t.Optional[int], shift: int, controller: MonthViewController
) -> tuple[int, int]:
    """Start from the given (or current) month and step |shift| months."""
    today = controller.provider.today()
    month = month if month is not None else today.month
    year = year if year is not None else today.year
    delta = 1 if shift > 0 else -1
    for _ in range(abs(shift)):
        month, year = shift_month(month, year, delta)
    return month, year


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--month", "-m", type=click.IntRange(1, 12), default=None, help="Month to show (default: current).")
@click.option("--year", "-y", type=int, default=None, help="Year to show (default: current).")
@click.option("--shift", "-s", type=int, default=0, help="Months to move forward (positive) or back (negative).")
@click.option("--service-url", default=EVENTS_SERVICE_URL, show_default=True, help="Events service base URL.")
@click.option(
    "--events-file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Read events from a local JSON file instead of the events service.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
def main(
    month: t.Optional[int],
    year: t.Optional[int],
    shift: int,
    service_url: str,
    events_file: t.Optional[str],
    verbose: bool,
) -> None:
    """Show a month-view calendar with its scheduled events."""
    setup_logging(verbose)

    try:
        source: EventSource
        if events_file:
            source = StaticEventSource(load_events(events_file))
        else:
            source = HttpEventSource(service_url)
        controller = MonthViewController(source)
        month, year = resolve_month(month, year, shift, controller)
        view = asyncio.run(controller.show(month, year))
    except (DateProviderUnavailable, InvalidMonthYear, InvalidEventTimestamp) as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise SystemExit(1)
    except ValueError as e:
        err_console.print(f"[red]Error:[/red] Could not read events file: {escape(str(e))}")
        raise SystemExit(1)

    console.print(create_month_table(view.calendar))

    if view.error:
        err_console.print(f"[red]Error:[/red] Events unavailable: {escape(view.error.message)}")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
