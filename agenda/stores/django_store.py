"""Django ORM implementation of the EventStore."""

from collections.abc import Sequence
from datetime import date

from django.db import DatabaseError, transaction

from agenda import models
from agenda.domain import (
    EndCondition,
    Event,
    EventId,
    EventKind,
    EventRule,
    Frequency,
    Interval,
    Occurrence,
    normalize_date,
)
from agenda.stores.interfaces import EventStore, StoreError


class DjangoEventStore(EventStore):
    """SQLite-backed event store using Django ORM."""

    def create_event(self, rule: EventRule, dates: Sequence[date]) -> EventId:
        try:
            with transaction.atomic():
                record = models.Event.objects.create(**_rule_fields(rule))
                models.Occurrence.objects.bulk_create(
                    models.Occurrence(
                        event=record,
                        sequence_index=index,
                        date=day,
                        title=rule.title,
                        description=rule.description,
                    )
                    for index, day in enumerate(dates)
                )
        except DatabaseError as exc:
            raise StoreError("Failed to insert event") from exc
        return EventId(record.id)

    def list_events(self) -> list[Event]:
        try:
            return [_to_event(record) for record in models.Event.objects.all()]
        except DatabaseError as exc:
            raise StoreError("Failed to list events") from exc

    def get_event(self, event_id: EventId) -> Event | None:
        try:
            record = models.Event.objects.filter(pk=event_id.value).first()
        except DatabaseError as exc:
            raise StoreError("Failed to fetch event") from exc
        return _to_event(record) if record is not None else None

    def event_exists(self, event_id: EventId) -> bool:
        try:
            return models.Event.objects.filter(pk=event_id.value).exists()
        except DatabaseError as exc:
            raise StoreError("Failed to fetch event") from exc

    def get_occurrences_for_event(self, event_id: EventId) -> list[Occurrence]:
        queryset = models.Occurrence.objects.filter(event_id=event_id.value)
        return self._fetch_occurrences(queryset.order_by("date", "sequence_index"))

    def get_occurrences_on(self, day: date) -> list[Occurrence]:
        queryset = models.Occurrence.objects.filter(date=day)
        return self._fetch_occurrences(
            queryset.order_by("date", "event__created_at", "sequence_index")
        )

    def _fetch_occurrences(self, queryset) -> list[Occurrence]:
        try:
            return [_to_occurrence(record) for record in queryset]
        except DatabaseError as exc:
            raise StoreError("Failed to fetch occurrences") from exc


def _rule_fields(rule: EventRule) -> dict:
    return {
        "kind": rule.kind.value,
        "title": rule.title,
        "description": rule.description,
        "start_date": normalize_date(rule.start_date),
        "end_date": normalize_date(rule.end_date) if rule.end_date is not None else None,
        "frequency": rule.frequency.value if rule.frequency is not None else None,
        "interval": Interval.coerce(rule.interval).value,
        "weekdays": [name.lower() for name in rule.weekdays],
        "month_days": [int(day) for day in rule.month_days],
        "end_condition": rule.end_condition.value if rule.end_condition is not None else None,
        "occurrence_count": rule.occurrence_count,
    }


def _to_event(record: models.Event) -> Event:
    rule = EventRule(
        kind=EventKind(record.kind),
        title=record.title,
        description=record.description,
        start_date=record.start_date,
        end_date=record.end_date,
        frequency=Frequency(record.frequency) if record.frequency else None,
        interval=record.interval,
        weekdays=tuple(record.weekdays),
        month_days=tuple(record.month_days),
        end_condition=EndCondition(record.end_condition) if record.end_condition else None,
        occurrence_count=record.occurrence_count,
    )
    return Event(id=EventId(record.id), rule=rule, created_at=record.created_at)


def _to_occurrence(record: models.Occurrence) -> Occurrence:
    return Occurrence(
        event_id=EventId(record.event_id),
        sequence_index=record.sequence_index,
        date=record.date,
        title=record.title,
        description=record.description,
    )
