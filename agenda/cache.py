"""Cache keys for read responses."""

from datetime import date

from django.conf import settings

EVENT_LIST_KEY = "events:list"


def event_key(event_id: object) -> str:
    return f"events:{event_id}"


def event_occurrences_key(event_id: object) -> str:
    return f"events:{event_id}:occurrences"


def occurrences_on_key(day: date) -> str:
    return f"occurrences:{day.isoformat()}"


def timeout() -> int:
    return settings.AGENDA_CACHE_TIMEOUT
