"""Tests for the events REST service."""
import json

import pytest
from fastapi.testclient import TestClient

from services.events_service import app as events_app
from services.shared.models import EventPayload


@pytest.fixture
def client(monkeypatch):
    """Client against a service holding a small event store."""
    monkeypatch.delenv("EVENTS_FILE", raising=False)
    monkeypatch.setattr(events_app, "events", [
        EventPayload(startDateTime="2024-02-15T10:00", title="Planning"),
        EventPayload(startDateTime="2024-03-01T09:00", title="Kickoff"),
        EventPayload(startDateTime="2024-02-03T09:00", title="Standup", location="Room 4"),
        EventPayload(startDateTime="2023-02-15T10:00", title="Last year"),
    ])
    with TestClient(events_app.app) as test_client:
        yield test_client


def test_health_check(client) -> None:
    """Test the health endpoint."""
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "service": "events-service"}


def test_list_events_filters_by_month_and_year(client) -> None:
    """Test that only the requested month is returned, in stored order, with all fields."""
    response = client.get("/events", params={"month": 2, "year": 2024})

    assert response.status_code == 200
    assert response.json() == [
        {"startDateTime": "2024-02-15T10:00", "title": "Planning"},
        {"startDateTime": "2024-02-03T09:00", "title": "Standup", "location": "Room 4"},
    ]


def test_list_events_for_empty_month(client) -> None:
    """Test a month without events."""
    response = client.get("/events", params={"month": 7, "year": 2024})

    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.parametrize("params", [{"month": 13, "year": 2024}, {"month": 0, "year": 2024}, {"year": 2024}])
def test_list_events_rejects_invalid_month(client, params) -> None:
    """Test request validation for the month parameter."""
    response = client.get("/events", params=params)

    assert response.status_code == 422


def test_events_file_seeds_the_store(tmp_path, monkeypatch) -> None:
    """Test loading the store from EVENTS_FILE at startup."""
    events_file = tmp_path / "events.json"
    events_file.write_text(json.dumps([
        {"startDateTime": "2024-02-29T12:00", "title": "Leap day"},
    ]), encoding="utf-8")
    monkeypatch.setenv("EVENTS_FILE", str(events_file))
    monkeypatch.setattr(events_app, "events", [])

    with TestClient(events_app.app) as client:
        response = client.get("/events", params={"month": 2, "year": 2024})

    assert response.json() == [{"startDateTime": "2024-02-29T12:00", "title": "Leap day"}]


def test_events_file_with_unreadable_date_is_rejected(tmp_path) -> None:
    """Test that a seed entry without a readable start date fails at load time."""
    events_file = tmp_path / "events.json"
    events_file.write_text(json.dumps([{"startDateTime": "soon"}]), encoding="utf-8")

    with pytest.raises(ValueError):
        events_app.load_events_file(events_file)
