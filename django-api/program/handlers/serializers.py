"""Serializers for transforming domain models to API responses."""

from rest_framework import serializers

from program.domain.clock import format_elapsed, format_time
from program.domain.durations import parse_duration


class DisplayTimeField(serializers.Field):
    """Renders a 24-hour ``HH:MM`` value as ``h:MM AM/PM``."""

    def to_representation(self, value: str) -> str:
        return format_time(value)


class ElapsedField(serializers.Field):
    """Renders a minute count as ``Hh Mm``."""

    def to_representation(self, value: int) -> str:
        return format_elapsed(value)


class ScheduleSlotSerializer(serializers.Serializer):
    """Serializer for ScheduleSlot domain model."""

    startTime = DisplayTimeField(source="start_time")
    endTime = DisplayTimeField(source="end_time")
    code = serializers.CharField()
    item = serializers.CharField()
    itemCode = serializers.CharField(source="item_code")
    schoolName = serializers.CharField(source="school_name")
    durationMinutes = serializers.IntegerField(source="duration")
    maxCast = serializers.IntegerField(source="max_cast", allow_null=True)
    category = serializers.CharField()


class VenueScheduleSerializer(serializers.Serializer):
    """Serializer for VenueSchedule domain model."""

    name = serializers.CharField(source="venue.name")
    description = serializers.CharField(source="venue.description")
    categories = serializers.ListField(child=serializers.CharField())
    slots = serializers.SerializerMethodField()
    slotCount = serializers.IntegerField(source="summary.count")
    totalElapsed = ElapsedField(source="summary.total_minutes")

    def get_slots(self, obj) -> list[dict]:
        return [
            {"order": order, **ScheduleSlotSerializer(slot).data}
            for order, slot in enumerate(obj.slots, start=1)
        ]


class ProgramSerializer(serializers.Serializer):
    """Serializer for Program domain model."""

    venues = VenueScheduleSerializer(many=True)
    totalPerformances = serializers.IntegerField(source="total_performances")
    startTime = DisplayTimeField(source="start_time")
    intervalMinutes = serializers.IntegerField(source="interval_minutes")


class ItemCountSerializer(serializers.Serializer):
    """Serializer for ItemCount domain model."""

    category = serializers.CharField()
    itemType = serializers.CharField(source="item_type")
    count = serializers.IntegerField()


class ItemRegulationSerializer(serializers.Serializer):
    """Serializer for ItemRegulation domain model."""

    code = serializers.CharField(allow_null=True)
    itemType = serializers.CharField(source="item_type")
    maxTime = serializers.CharField(source="max_time", allow_null=True)
    maxCast = serializers.IntegerField(source="max_cast", allow_null=True)
    durationMinutes = serializers.SerializerMethodField()

    def get_durationMinutes(self, obj) -> int:
        return parse_duration(obj.max_time)
