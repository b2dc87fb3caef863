"""Pytest configuration and shared fixtures."""

from collections.abc import Sequence
from datetime import date, datetime, timezone
from uuid import uuid4

import pytest
from rest_framework.test import APIClient

from agenda.domain import Event, EventId, EventRule, Occurrence
from agenda.stores.interfaces import EventStore, StoreError


class InMemoryEventStore(EventStore):
    """Dict-backed store for service tests."""

    def __init__(self) -> None:
        self.events: dict[EventId, Event] = {}
        self.occurrences: dict[EventId, list[Occurrence]] = {}
        self.fail = False

    def _check(self) -> None:
        if self.fail:
            raise StoreError("storage unavailable")

    def create_event(self, rule: EventRule, dates: Sequence[date]) -> EventId:
        self._check()
        event_id = EventId(uuid4())
        self.events[event_id] = Event(
            id=event_id, rule=rule, created_at=datetime.now(timezone.utc)
        )
        self.occurrences[event_id] = [
            Occurrence(event_id, index, day, rule.title, rule.description)
            for index, day in enumerate(dates)
        ]
        return event_id

    def list_events(self) -> list[Event]:
        self._check()
        return sorted(self.events.values(), key=lambda event: event.created_at, reverse=True)

    def get_event(self, event_id: EventId) -> Event | None:
        self._check()
        return self.events.get(event_id)

    def event_exists(self, event_id: EventId) -> bool:
        self._check()
        return event_id in self.events

    def get_occurrences_for_event(self, event_id: EventId) -> list[Occurrence]:
        self._check()
        return sorted(self.occurrences.get(event_id, []), key=lambda occ: occ.date)

    def get_occurrences_on(self, day: date) -> list[Occurrence]:
        self._check()
        return [
            occurrence
            for occurrences in self.occurrences.values()
            for occurrence in occurrences
            if occurrence.date == day
        ]


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def memory_store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()
