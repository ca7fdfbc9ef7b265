"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/.
Every row below a Venue belongs to exactly one venue; the default
categories and priorities are not stored, they are part of the domain.
"""

import uuid

from django.db import models


class Venue(models.Model):
    """A tenant of the planner."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    venue_name = models.CharField(max_length=100)
    venue_code = models.CharField(max_length=20, unique=True)
    contact_email = models.CharField(max_length=100, blank=True, default="")
    contact_phone = models.CharField(max_length=20, blank=True, default="")
    address = models.CharField(max_length=500, blank=True, default="")
    website = models.CharField(max_length=200, blank=True, default="")
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["venue_code"]

    def __str__(self) -> str:
        return f"{self.venue_name} ({self.venue_code})"


class VenueConfiguration(models.Model):
    """Branding, defaults and feature flags of a venue."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    venue = models.OneToOneField(Venue, on_delete=models.CASCADE, related_name="configuration")
    company_name = models.CharField(max_length=100, default="Event Planner")
    logo = models.CharField(max_length=500, default="📅")
    tagline = models.CharField(max_length=200, blank=True, null=True)
    primary_color = models.CharField(max_length=7, default="#667eea")
    secondary_color = models.CharField(max_length=7, default="#764ba2")
    time_format = models.CharField(max_length=3, default="12h")
    date_format = models.CharField(max_length=10, default="MM/DD/YYYY")
    first_day_of_week = models.PositiveSmallIntegerField(default=0)
    default_event_duration = models.FloatField(default=1.0)
    default_category = models.CharField(max_length=50, default="meeting")
    default_priority = models.CharField(max_length=50, default="normal")
    show_attendees = models.BooleanField(default=True)
    show_location = models.BooleanField(default=True)
    show_description = models.BooleanField(default=True)
    allow_recurring = models.BooleanField(default=False)
    allow_file_attachments = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return f"Configuration of {self.venue.venue_code}"


class Location(models.Model):
    """A room or area of a venue."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    venue = models.ForeignKey(Venue, on_delete=models.CASCADE, related_name="locations")
    code = models.CharField(max_length=50)
    name = models.CharField(max_length=100)
    description = models.CharField(max_length=500, blank=True, null=True)
    capacity = models.PositiveIntegerField(blank=True, null=True)
    amenities = models.JSONField(default=list, blank=True)
    is_active = models.BooleanField(default=True)
    sort_order = models.IntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["sort_order"]
        indexes = [
            models.Index(fields=["venue", "sort_order"], name="location_venue_order_idx"),
        ]
        constraints = [
            models.UniqueConstraint(fields=["venue", "code"], name="location_venue_code_uniq"),
        ]

    def __str__(self) -> str:
        return self.name


class Category(models.Model):
    """A venue's custom event category."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    venue = models.ForeignKey(Venue, on_delete=models.CASCADE, related_name="categories")
    code = models.CharField(max_length=50)
    name = models.CharField(max_length=100)
    color = models.CharField(max_length=7, default="#6b7280")
    icon = models.CharField(max_length=10, blank=True, null=True)
    is_active = models.BooleanField(default=True)
    sort_order = models.IntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["sort_order"]
        verbose_name_plural = "categories"
        indexes = [
            models.Index(fields=["venue", "sort_order"], name="category_venue_order_idx"),
        ]
        constraints = [
            models.UniqueConstraint(fields=["venue", "code"], name="category_venue_code_uniq"),
        ]

    def __str__(self) -> str:
        return self.name


class Priority(models.Model):
    """A venue's custom event priority."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    venue = models.ForeignKey(Venue, on_delete=models.CASCADE, related_name="priorities")
    code = models.CharField(max_length=50)
    name = models.CharField(max_length=100)
    color = models.CharField(max_length=7, default="#6b7280")
    level = models.PositiveSmallIntegerField(default=5)
    is_active = models.BooleanField(default=True)
    sort_order = models.IntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["sort_order"]
        verbose_name_plural = "priorities"
        indexes = [
            models.Index(fields=["venue", "sort_order"], name="priority_venue_order_idx"),
        ]
        constraints = [
            models.UniqueConstraint(fields=["venue", "code"], name="priority_venue_code_uniq"),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.level})"


class Event(models.Model):
    """Persistence model for events."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    venue = models.ForeignKey(Venue, on_delete=models.CASCADE, related_name="events")
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True, default="")
    start_date = models.DateTimeField()
    end_date = models.DateTimeField()
    location_text = models.CharField(max_length=200, blank=True, null=True)
    category_code = models.CharField(max_length=50)
    priority_code = models.CharField(max_length=50)
    created_at = models.DateTimeField()
    updated_at = models.DateTimeField()

    class Meta:
        ordering = ["start_date", "title"]
        indexes = [
            models.Index(fields=["venue", "start_date", "end_date"], name="event_venue_range_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(end_date__gt=models.F("start_date")),
                name="event_end_after_start",
            ),
        ]

    def __str__(self) -> str:
        return self.title


class EventAttendee(models.Model):
    """A named attendee of an event."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="attendees")
    name = models.CharField(max_length=200)
    position = models.PositiveIntegerField(default=0)

    class Meta:
        ordering = ["position"]

    def __str__(self) -> str:
        return self.name
