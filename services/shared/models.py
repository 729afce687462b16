"""
Shared Pydantic models for REST API serialization.

This module contains the wire representation of events exchanged between the
events service and the HTTP event source, ensuring consistent JSON
serialization on both sides.
"""
from __future__ import annotations

import json
import typing as t
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class EventPayload(BaseModel):
    """
    One scheduled event as served by the backend, e.g.:
    {"startDateTime": "2024-02-15T10:00", "title": "Planning"}

    Fields other than startDateTime are opaque and kept as sent.
    """
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    start_datetime: str = Field(alias="startDateTime")  # ISO date or datetime

    @property
    def extra_fields(self) -> dict[str, t.Any]:
        return dict(self.model_extra or {})


class HealthResponse(BaseModel):
    """Response model for the health check endpoint."""
    status: str
    service: str


EventPayloadList = TypeAdapter(list[EventPayload])


def load_event_payloads(path: t.Union[str, Path]) -> list[EventPayload]:
    """
    Load events from a JSON file holding a list of event objects.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not valid JSON or an entry is not an event.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return EventPayloadList.validate_python(data)
