from agenda.domain.models import EndCondition, Event, EventKind, EventRule, Frequency, Occurrence
from agenda.domain.recurrence import TraceEvent, expand
from agenda.domain.value_objects import EventId, Interval, Weekday, normalize_date

__all__ = [
    "Event",
    "EventRule",
    "Occurrence",
    "EventKind",
    "Frequency",
    "EndCondition",
    "EventId",
    "Interval",
    "Weekday",
    "normalize_date",
    "expand",
    "TraceEvent",
]
