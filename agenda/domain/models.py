"""Domain models representing recurrence rules and persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in agenda/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from agenda.domain.value_objects import EventId


class EventKind(Enum):
    SINGLE = "single"
    RECURRING = "recurring"


class Frequency(Enum):
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class EndCondition(Enum):
    BY_DATE = "by_date"
    BY_COUNT = "by_count"


@dataclass(frozen=True)
class EventRule:
    """What the user asked for when creating an event.

    Selector and termination fields only matter for recurring rules.
    Values are kept as given; the recurrence engine normalizes them.
    """

    kind: EventKind
    title: str
    start_date: date
    description: str | None = None
    end_date: date | None = None
    frequency: Frequency | None = None
    interval: int | str | None = 1
    weekdays: tuple[str, ...] = ()
    month_days: tuple[int, ...] = ()
    end_condition: EndCondition | None = None
    occurrence_count: int | None = None

    @property
    def is_recurring(self) -> bool:
        return self.kind is EventKind.RECURRING


@dataclass(frozen=True)
class Event:
    """Domain representation of a stored Event."""

    id: EventId
    rule: EventRule
    created_at: datetime

    @property
    def title(self) -> str:
        return self.rule.title


@dataclass(frozen=True)
class Occurrence:
    """One concrete date of an Event, addressable on its own."""

    event_id: EventId
    sequence_index: int
    date: date
    title: str
    description: str | None = None

    @property
    def id(self) -> str:
        return f"{self.event_id}_{self.sequence_index}"
