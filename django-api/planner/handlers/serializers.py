"""Serializers for the camelCase wire format of the planner API.

Output serializers read domain models; input serializers only check the
shape of the request and hand a draft to the services, which own the
business rules.
"""

from rest_framework import serializers

from planner.domain import EventDraft, FreeTextLocation, SelectedLocation, VenueConfig


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.CharField()
    title = serializers.CharField()
    description = serializers.CharField()
    startDate = serializers.DateTimeField(source="start_date")
    endDate = serializers.DateTimeField(source="end_date")
    location = serializers.CharField(allow_null=True)
    category = serializers.CharField()
    priority = serializers.CharField()
    attendees = serializers.ListField(child=serializers.CharField())
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")


class EventInputSerializer(serializers.Serializer):
    """Request body for creating or replacing an event.

    ``locationId`` picks one of the venue's locations; ``location`` is free
    text. When both are sent the selected location wins.
    """

    title = serializers.CharField(required=False, allow_blank=True, default="")
    description = serializers.CharField(required=False, allow_blank=True, default="")
    startDate = serializers.DateTimeField(required=False, allow_null=True, default=None)
    endDate = serializers.DateTimeField(required=False, allow_null=True, default=None)
    category = serializers.CharField(required=False, allow_null=True, default=None)
    priority = serializers.CharField(required=False, allow_null=True, default=None)
    locationId = serializers.CharField(required=False, allow_null=True, allow_blank=True, default=None)
    location = serializers.CharField(required=False, allow_null=True, allow_blank=True, default=None)
    attendees = serializers.ListField(
        child=serializers.CharField(allow_blank=True), required=False, default=list
    )

    def to_draft(self, config: VenueConfig) -> EventDraft:
        """Build a draft, falling back to the venue's default category and priority."""
        data = self.validated_data
        if data["locationId"]:
            location = SelectedLocation(location_id=data["locationId"])
        elif data["location"] is not None:
            location = FreeTextLocation(text=data["location"])
        else:
            location = None
        return EventDraft(
            title=data["title"],
            description=data["description"],
            start_date=data["startDate"],
            end_date=data["endDate"],
            category=data["category"] or config.default_category,
            priority=data["priority"] or config.default_priority,
            location=location,
            attendees=tuple(data["attendees"]),
        )


class EventRangeQuerySerializer(serializers.Serializer):
    start = serializers.DateField(required=False, default=None)
    end = serializers.DateField(required=False, default=None)

    def validate(self, attrs):
        if attrs["start"] and attrs["end"] and attrs["end"] < attrs["start"]:
            raise serializers.ValidationError("end must not be before start")
        return attrs


class MonthQuerySerializer(serializers.Serializer):
    selected = serializers.DateField(required=False, default=None)


class LocationOptionSerializer(serializers.Serializer):
    id = serializers.CharField()
    name = serializers.CharField()
    description = serializers.CharField(allow_null=True)
    capacity = serializers.IntegerField(allow_null=True)
    amenities = serializers.ListField(child=serializers.CharField())
    isActive = serializers.BooleanField(source="is_active")


class CategoryOptionSerializer(serializers.Serializer):
    id = serializers.CharField()
    name = serializers.CharField()
    color = serializers.CharField()
    icon = serializers.CharField(allow_null=True)
    isActive = serializers.BooleanField(source="is_active")
    isDefault = serializers.BooleanField(source="is_default")


class PriorityOptionSerializer(serializers.Serializer):
    id = serializers.CharField()
    name = serializers.CharField()
    color = serializers.CharField()
    level = serializers.IntegerField()
    isActive = serializers.BooleanField(source="is_active")
    isDefault = serializers.BooleanField(source="is_default")


class LocationInputSerializer(serializers.Serializer):
    name = serializers.CharField(allow_blank=True)
    description = serializers.CharField(required=False, allow_null=True, default=None)
    capacity = serializers.IntegerField(required=False, allow_null=True, min_value=0, default=None)
    amenities = serializers.ListField(child=serializers.CharField(), required=False, default=list)


class CategoryInputSerializer(serializers.Serializer):
    name = serializers.CharField(allow_blank=True)
    color = serializers.CharField(required=False, default="#6b7280")
    icon = serializers.CharField(required=False, allow_null=True, default=None)


class PriorityInputSerializer(serializers.Serializer):
    name = serializers.CharField(allow_blank=True)
    level = serializers.IntegerField(required=False, default=5)
    color = serializers.CharField(required=False, default="#6b7280")


class GridCellSerializer(serializers.Serializer):
    date = serializers.DateField(source="day")
    inMonth = serializers.BooleanField(source="in_month")
    isToday = serializers.BooleanField(source="is_today")
    isSelected = serializers.BooleanField(source="is_selected")
    events = EventSerializer(many=True)


class MonthViewSerializer(serializers.Serializer):
    """Serializer for the 6x7 month grid; ``month`` is zero-based."""

    year = serializers.IntegerField()
    month = serializers.IntegerField()
    title = serializers.CharField()
    weekdayHeaders = serializers.ListField(source="weekday_headers", child=serializers.CharField())
    weeks = serializers.SerializerMethodField()

    def get_weeks(self, view):
        return [GridCellSerializer(week, many=True).data for week in view.weeks]


class EventStatsSerializer(serializers.Serializer):
    total = serializers.IntegerField()
    today = serializers.IntegerField()
    upcoming = serializers.IntegerField()
    urgent = serializers.IntegerField()
