"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from datetime import date, datetime, timezone
from enum import Enum
from typing import Self
from uuid import UUID

from dateutil.parser import isoparse


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Interval:
    """Positive step between recurrence cycles."""

    value: int = 1

    def __post_init__(self) -> None:
        if self.value < 1:
            raise ValueError("Interval must be positive")

    @classmethod
    def coerce(cls, raw: object) -> Self:
        """Build an Interval from loose input, falling back to 1."""
        try:
            value = int(raw)  # type: ignore[call-overload]
        except (TypeError, ValueError):
            return cls()
        return cls(value) if value >= 1 else cls()


class Weekday(Enum):
    """Day of the week, ordered like date.weekday()."""

    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"

    @property
    def index(self) -> int:
        return _WEEKDAY_ORDER.index(self)

    @classmethod
    def from_name(cls, name: str) -> Self | None:
        """Case-insensitive lookup; unknown names return None."""
        try:
            return cls(name.strip().lower())
        except (AttributeError, ValueError):
            return None


_WEEKDAY_ORDER = tuple(Weekday)


def normalize_date(value: date | datetime | str) -> date:
    """Reduce a date-like value to its UTC calendar day.

    Aware datetimes are converted to UTC before the time is dropped.
    Naive datetimes are taken as UTC. Strings must be ISO-8601.
    """
    if isinstance(value, str):
        value = isoparse(value.strip())
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    return value
