"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Expand rules into occurrence dates
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from collections.abc import Callable
from datetime import date, datetime

from agenda.domain import Event, EventId, EventRule, Occurrence, expand, normalize_date
from agenda.domain.errors import (
    EventFetchError,
    EventNotFoundError,
    EventSaveError,
    InvalidDateError,
    InvalidEventIdError,
    OccurrenceFetchError,
)
from agenda.stores.interfaces import EventStore, StoreError

logger = logging.getLogger(__name__)

Expander = Callable[[EventRule], list[date]]


class EventService:
    """Service for creating events and browsing their occurrences."""

    def __init__(self, store: EventStore, expander: Expander = expand) -> None:
        self._store = store
        self._expand = expander

    def create_event(self, rule: EventRule) -> EventId:
        """Expand a rule and store it together with its occurrences.

        Raises:
            EventSaveError: If the event or any occurrence could not be stored.
        """
        dates = self._expand(rule)
        try:
            event_id = self._store.create_event(rule, dates)
        except StoreError:
            logger.exception("Failed to create event %r", rule.title)
            raise EventSaveError() from None
        logger.info("Created event %s with %d occurrences", event_id, len(dates))
        return event_id

    def preview(self, rule: EventRule) -> list[date]:
        """Return the dates a rule would produce, without storing anything."""
        return self._expand(rule)

    def list_events(self) -> list[Event]:
        """Return all events."""
        try:
            return self._store.list_events()
        except StoreError:
            logger.exception("Failed to list events")
            raise EventFetchError() from None

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        parsed = _parse_event_id(event_id)
        try:
            event = self._store.get_event(parsed)
        except StoreError:
            logger.exception("Failed to fetch event %s", event_id)
            raise EventFetchError() from None
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def get_occurrences_for_event(self, event_id: str) -> list[Occurrence]:
        """Return occurrences of an event, ordered by date.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            OccurrenceFetchError: If the store could not be read.
        """
        parsed = _parse_event_id(event_id)
        try:
            if not self._store.event_exists(parsed):
                raise EventNotFoundError(event_id)
            return self._store.get_occurrences_for_event(parsed)
        except StoreError:
            logger.exception("Failed to fetch occurrences for event %s", event_id)
            raise OccurrenceFetchError() from None

    def get_occurrences_on(self, day: date | datetime | str) -> list[Occurrence]:
        """Return occurrences on the UTC calendar day of ``day``.

        Raises:
            InvalidDateError: If ``day`` cannot be read as a date.
            OccurrenceFetchError: If the store could not be read.
        """
        try:
            normalized = normalize_date(day)
        except (TypeError, ValueError, OverflowError):
            raise InvalidDateError() from None
        if not isinstance(normalized, date):
            raise InvalidDateError()
        try:
            return self._store.get_occurrences_on(normalized)
        except StoreError:
            logger.exception("Failed to fetch occurrences on %s", normalized)
            raise OccurrenceFetchError() from None


def _parse_event_id(event_id: str) -> EventId:
    try:
        return EventId.from_string(event_id)
    except (TypeError, ValueError, AttributeError):
        raise InvalidEventIdError() from None
