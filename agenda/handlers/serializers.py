"""Serializers for validating rule input and rendering domain models."""

from rest_framework import serializers

from agenda.domain import EndCondition, EventKind, EventRule, Frequency, Weekday, normalize_date


class CalendarDateField(serializers.DateField):
    """Accepts dates or ISO datetimes, reduced to their UTC calendar day."""

    def to_internal_value(self, value):
        if isinstance(value, str):
            try:
                return normalize_date(value)
            except (ValueError, OverflowError):
                self.fail("invalid", format="YYYY-MM-DD")
        return super().to_internal_value(value)


class EventRuleSerializer(serializers.Serializer):
    """Validates event creation input before it reaches the engine."""

    kind = serializers.ChoiceField(choices=[kind.value for kind in EventKind])
    title = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    start_date = CalendarDateField()
    end_date = CalendarDateField(required=False, allow_null=True)
    frequency = serializers.ChoiceField(
        choices=[frequency.value for frequency in Frequency], required=False, allow_null=True
    )
    interval = serializers.IntegerField(required=False, default=1)
    weekdays = serializers.ListField(child=serializers.CharField(), required=False, default=list)
    month_days = serializers.ListField(
        child=serializers.IntegerField(min_value=1, max_value=31), required=False, default=list
    )
    end_condition = serializers.ChoiceField(
        choices=[condition.value for condition in EndCondition], required=False, allow_null=True
    )
    occurrence_count = serializers.IntegerField(required=False, allow_null=True)

    def validate_weekdays(self, value: list[str]) -> list[str]:
        unknown = [name for name in value if Weekday.from_name(name) is None]
        if unknown:
            raise serializers.ValidationError(f"Unknown weekday: {unknown[0]}")
        return value

    def validate(self, attrs: dict) -> dict:
        if attrs["kind"] != EventKind.RECURRING.value:
            return attrs

        errors = {}
        frequency = attrs.get("frequency")
        end_condition = attrs.get("end_condition")
        if frequency is None:
            errors["frequency"] = "Frequency is required for recurring events"
        elif frequency == Frequency.WEEKLY.value and not attrs.get("weekdays"):
            errors["weekdays"] = "Please select at least one weekday"
        elif frequency == Frequency.MONTHLY.value and not attrs.get("month_days"):
            errors["month_days"] = "Please select at least one day of the month"

        if attrs.get("interval", 1) <= 0:
            errors["interval"] = "Interval must be a positive number"

        if end_condition is None:
            errors["end_condition"] = "End condition is required for recurring events"
        elif end_condition == EndCondition.BY_COUNT.value:
            count = attrs.get("occurrence_count")
            if count is None or count <= 0:
                errors["occurrence_count"] = "Number of occurrences must be a positive number"
        elif end_condition == EndCondition.BY_DATE.value:
            end_date = attrs.get("end_date")
            if end_date is None:
                errors["end_date"] = "End date is required"
            elif end_date < attrs["start_date"]:
                errors["end_date"] = "End date must not be before the start date"

        if errors:
            raise serializers.ValidationError(errors)
        return attrs

    def to_rule(self) -> EventRule:
        data = self.validated_data
        kind = EventKind(data["kind"])
        if kind is EventKind.SINGLE:
            return EventRule(
                kind=kind,
                title=data["title"],
                description=data.get("description"),
                start_date=data["start_date"],
            )
        end_condition = EndCondition(data["end_condition"])
        return EventRule(
            kind=kind,
            title=data["title"],
            description=data.get("description"),
            start_date=data["start_date"],
            end_date=data.get("end_date") if end_condition is EndCondition.BY_DATE else None,
            frequency=Frequency(data["frequency"]),
            interval=data.get("interval", 1),
            weekdays=tuple(data.get("weekdays", ())),
            month_days=tuple(data.get("month_days", ())),
            end_condition=end_condition,
            occurrence_count=(
                data.get("occurrence_count") if end_condition is EndCondition.BY_COUNT else None
            ),
        )


class RuleSerializer(serializers.Serializer):
    """Serializer for the EventRule domain model."""

    kind = serializers.CharField(source="kind.value")
    start_date = serializers.DateField()
    end_date = serializers.DateField(allow_null=True)
    frequency = serializers.SerializerMethodField()
    interval = serializers.IntegerField()
    weekdays = serializers.ListField(child=serializers.CharField())
    month_days = serializers.ListField(child=serializers.IntegerField())
    end_condition = serializers.SerializerMethodField()
    occurrence_count = serializers.IntegerField(allow_null=True)

    def get_frequency(self, rule: EventRule) -> str | None:
        return rule.frequency.value if rule.frequency is not None else None

    def get_end_condition(self, rule: EventRule) -> str | None:
        return rule.end_condition.value if rule.end_condition is not None else None


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.UUIDField(source="id.value")
    title = serializers.CharField()
    description = serializers.CharField(source="rule.description", allow_null=True)
    rule = RuleSerializer()
    created_at = serializers.DateTimeField()


class OccurrenceSerializer(serializers.Serializer):
    """Serializer for Occurrence domain model."""

    id = serializers.CharField()
    event_id = serializers.UUIDField(source="event_id.value")
    sequence_index = serializers.IntegerField()
    date = serializers.DateField()
    title = serializers.CharField()
    description = serializers.CharField(allow_null=True)
