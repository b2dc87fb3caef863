"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/.
"""

import uuid

from django.db import models


class Event(models.Model):
    """Persistence model for an event and its recurrence rule."""

    KIND_CHOICES = [("single", "Single"), ("recurring", "Recurring")]
    FREQUENCY_CHOICES = [("weekly", "Weekly"), ("monthly", "Monthly")]
    END_CONDITION_CHOICES = [("by_date", "By date"), ("by_count", "By count")]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    kind = models.CharField(max_length=16, choices=KIND_CHOICES)
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True, null=True)
    start_date = models.DateField()
    end_date = models.DateField(blank=True, null=True)
    frequency = models.CharField(
        max_length=16, choices=FREQUENCY_CHOICES, blank=True, null=True
    )
    interval = models.PositiveIntegerField(default=1)
    weekdays = models.JSONField(default=list, blank=True)
    month_days = models.JSONField(default=list, blank=True)
    end_condition = models.CharField(
        max_length=16, choices=END_CONDITION_CHOICES, blank=True, null=True
    )
    occurrence_count = models.PositiveIntegerField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["-created_at"], name="agenda_event_created_idx"),
        ]

    def __str__(self) -> str:
        return self.title


class Occurrence(models.Model):
    """Persistence model for one expanded date of an event."""

    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="occurrences")
    sequence_index = models.PositiveIntegerField()
    date = models.DateField()
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True, null=True)

    class Meta:
        ordering = ["date", "sequence_index"]
        constraints = [
            models.UniqueConstraint(
                fields=["event", "sequence_index"], name="unique_event_sequence"
            ),
        ]
        indexes = [
            models.Index(fields=["date"], name="agenda_occurrence_date_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.title} - {self.date}"
