"""
FastAPI service for month event listing.

This service is the backend the HTTP event source talks to. It answers
GET /events?month=&year= with the events starting in that month, in the order
they are stored. Events are held in memory and may be seeded at startup from
the JSON file named by the EVENTS_FILE environment variable.
"""
from __future__ import annotations

import os
import typing as t
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, HTTPException, Query

from month_view.date_provider import get_date_provider
from month_view.errors import InvalidEventTimestamp
from services.shared.models import EventPayload, HealthResponse, load_event_payloads


# In-memory event store, read-only once the service is up
events: list[EventPayload] = []


def load_events_file(path: t.Union[str, Path]) -> list[EventPayload]:
    """
    Load the event store seed file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not a list of events with readable start dates.
    """
    payloads = load_event_payloads(path)
    provider = get_date_provider()
    for payload in payloads:
        # Reject unreadable timestamps at load time rather than per request
        provider.to_date(payload.start_datetime)
    return payloads


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Seed the event store on startup."""
    events_file = os.getenv("EVENTS_FILE")
    if events_file:
        events[:] = load_events_file(events_file)
    yield


app = FastAPI(
    title="Events Service",
    description="REST API listing scheduled events by month",
    version="1.0.0",
    lifespan=lifespan,
)


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint for container orchestration."""
    return HealthResponse(status="healthy", service="events-service")


@app.get("/events")
async def list_events(
    month: int = Query(..., ge=1, le=12),
    year: int = Query(...),
) -> list[dict[str, t.Any]]:
    """
    List the events starting in a month.

    Returns the events as JSON objects with their original field names.
    """
    provider = get_date_provider()
    try:
        matched = []
        for event in events:
            start = provider.to_date(event.start_datetime)
            if start.month == month and start.year == year:
                matched.append(event.model_dump(by_alias=True))
        return matched

    except InvalidEventTimestamp as e:
        raise HTTPException(status_code=500, detail=f"Error listing events: {str(e)}")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("EVENTS_SERVICE_PORT", "8004")))
