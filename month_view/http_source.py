"""
HTTP event source backed by the events service.

Fetches GET {base_url}/events?month=&year= with httpx and converts the Pydantic
payloads into core Event dataclasses. Every transport, status or decoding
failure is reported as EventFetchFailed.
"""
from __future__ import annotations

import logging
import os
import typing as t

import httpx

from month_view.date_provider import DateProvider, get_date_provider
from month_view.errors import EventFetchFailed
from month_view.models import Event
from services.shared.models import EventPayload, EventPayloadList

logger = logging.getLogger(__name__)

# Service URL - configurable via environment variable
EVENTS_SERVICE_URL = os.getenv("EVENTS_SERVICE_URL", "http://localhost:8004")

# Timeout for event listing (in seconds)
STANDARD_TIMEOUT = 30.0


def payload_to_event(payload: EventPayload) -> Event:
    """Convert a Pydantic EventPayload to an Event dataclass."""
    return Event(start_datetime=payload.start_datetime, fields=payload.extra_fields)


class HttpEventSource:
    """EventSource talking to the events REST service."""

    def __init__(
        self,
        base_url: str = EVENTS_SERVICE_URL,
        timeout: float = STANDARD_TIMEOUT,
        client: t.Optional[httpx.AsyncClient] = None,
        provider: t.Optional[DateProvider] = None,
    ) -> None:
        """
        Args:
            base_url: Root URL of the events service
            timeout: Request timeout in seconds, used when no client is given
            client: Optional shared client; one is opened per request otherwise
            provider: Date provider used to check start dates; the shared one when omitted
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client
        self.provider = provider

    async def fetch_events(self, month: int, year: int) -> list[Event]:
        """Fetch the events of a month.

        Raises:
            EventFetchFailed: On timeout, non-2xx status, transport error or
                a response body that is not a list of events with readable start dates
        """
        url = f"{self.base_url}/events"
        params = {"month": month, "year": year}
        logger.debug("GET %s %s", url, params)
        try:
            if self._client is not None:
                response = await self._client.get(url, params=params)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.get(url, params=params)
            response.raise_for_status()
            payloads = EventPayloadList.validate_python(response.json())
            provider = self.provider or get_date_provider()
            for payload in payloads:
                provider.to_date(payload.start_datetime)

        except httpx.TimeoutException:
            raise EventFetchFailed(month, year, f"events service timed out after {self.timeout} seconds")
        except httpx.HTTPStatusError as e:
            raise EventFetchFailed(
                month, year, f"HTTP error from events service: {e.response.status_code} {e.response.text}"
            )
        except httpx.HTTPError as e:
            raise EventFetchFailed(month, year, f"Error calling events service: {e}")
        except ValueError as e:
            # Undecodable JSON, a body that fails validation or an unreadable start date
            raise EventFetchFailed(month, year, f"Malformed response from events service: {e}")

        return [payload_to_event(payload) for payload in payloads]
