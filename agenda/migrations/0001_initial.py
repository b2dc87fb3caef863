import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Event",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                (
                    "kind",
                    models.CharField(
                        choices=[("single", "Single"), ("recurring", "Recurring")],
                        max_length=16,
                    ),
                ),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True, null=True)),
                ("start_date", models.DateField()),
                ("end_date", models.DateField(blank=True, null=True)),
                (
                    "frequency",
                    models.CharField(
                        blank=True,
                        choices=[("weekly", "Weekly"), ("monthly", "Monthly")],
                        max_length=16,
                        null=True,
                    ),
                ),
                ("interval", models.PositiveIntegerField(default=1)),
                ("weekdays", models.JSONField(blank=True, default=list)),
                ("month_days", models.JSONField(blank=True, default=list)),
                (
                    "end_condition",
                    models.CharField(
                        blank=True,
                        choices=[("by_date", "By date"), ("by_count", "By count")],
                        max_length=16,
                        null=True,
                    ),
                ),
                ("occurrence_count", models.PositiveIntegerField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["-created_at"], name="agenda_event_created_idx")
                ],
            },
        ),
        migrations.CreateModel(
            name="Occurrence",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
                    ),
                ),
                ("sequence_index", models.PositiveIntegerField()),
                ("date", models.DateField()),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True, null=True)),
                (
                    "event",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="occurrences",
                        to="agenda.event",
                    ),
                ),
            ],
            options={
                "ordering": ["date", "sequence_index"],
                "indexes": [models.Index(fields=["date"], name="agenda_occurrence_date_idx")],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("event", "sequence_index"), name="unique_event_sequence"
                    )
                ],
            },
        ),
    ]
