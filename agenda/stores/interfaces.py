"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from datetime import date

from agenda.domain import Event, EventId, EventRule, Occurrence


class StoreError(Exception):
    """Raised when the underlying storage fails."""


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def create_event(self, rule: EventRule, dates: Sequence[date]) -> EventId:
        """Persist a rule with one occurrence per date, all or nothing."""
        ...

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events ordered by created_at descending."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def event_exists(self, event_id: EventId) -> bool:
        """Check if an event exists."""
        ...

    @abstractmethod
    def get_occurrences_for_event(self, event_id: EventId) -> list[Occurrence]:
        """Return all occurrences of an event, ordered by date ascending."""
        ...

    @abstractmethod
    def get_occurrences_on(self, day: date) -> list[Occurrence]:
        """Return all occurrences falling on a calendar day."""
        ...
