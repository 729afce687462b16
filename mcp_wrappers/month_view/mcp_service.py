"""
MCP wrapper for the month view.

This module exposes the month grid as MCP tools. Events are fetched over HTTP
from the events service; the grid is computed locally and returned as plain
JSON-ready dictionaries.
"""
from __future__ import annotations

import typing as t

from fastmcp import FastMCP

from month_view.controller import MonthView, MonthViewController
from month_view.http_source import EVENTS_SERVICE_URL, HttpEventSource
from month_view.models import WEEKDAYS, DayCell, Timestamp
from month_view.navigator import shift_month as _navigate
from month_view.sources import EventSource


mcp = FastMCP("MonthViewMCPWrapper")


async def _show_month(
    month: int,
    year: int,
    source: t.Optional[EventSource] = None,
) -> dict[str, t.Any]:
    """
    Build the month grid with its events.

    A failed event fetch still returns the full grid, with empty event lists
    and the failure under "error".
    """
    controller = MonthViewController(source or HttpEventSource(EVENTS_SERVICE_URL))
    view = await controller.show(month, year)
    return _month_view_to_dict(view)


def _shift_month(month: int, year: int, delta: int) -> dict[str, int]:
    """Move one month back (delta=-1) or forward (delta=+1)."""
    new_month, new_year = _navigate(month, year, delta)
    return {"month": new_month, "year": new_year}


def _timestamp_to_str(timestamp: Timestamp) -> str:
    return timestamp if isinstance(timestamp, str) else timestamp.isoformat()


def _day_cell_to_dict(cell: DayCell) -> dict[str, t.Any]:
    """Convert a DayCell dataclass to a JSON-ready dictionary."""
    return {
        "key": cell.key,
        "date": cell.date,
        "isToday": cell.is_today,
        "events": [
            {"startDateTime": _timestamp_to_str(event.start_datetime), **event.fields}
            for event in cell.events
        ],
    }


def _month_view_to_dict(view: MonthView) -> dict[str, t.Any]:
    """Convert a MonthView to a JSON-ready dictionary."""
    calendar = view.calendar
    return {
        "month": calendar.month,
        "year": calendar.year,
        "monthName": calendar.month_name,
        "weekdays": list(WEEKDAYS),
        "cells": [_day_cell_to_dict(cell) for cell in calendar.cells],
        "error": str(view.error) if view.error else None,
    }


# MCP tool wrappers that call the raw functions
@mcp.tool()
async def show_month(month: int, year: int) -> dict[str, t.Any]:
    """Shows the calendar grid of a month with its events bucketed by day."""
    return await _show_month(month, year)


@mcp.tool()
def shift_month(month: int, year: int, delta: int) -> dict[str, int]:
    """Returns the month and year one month before (delta=-1) or after (delta=1)."""
    return _shift_month(month, year, delta)
