from django.contrib import admin

from planner.models import (
    Category,
    Event,
    EventAttendee,
    Location,
    Priority,
    Venue,
    VenueConfiguration,
)


class VenueConfigurationInline(admin.StackedInline):
    model = VenueConfiguration
    can_delete = False


class LocationInline(admin.TabularInline):
    model = Location
    extra = 1


class CategoryInline(admin.TabularInline):
    model = Category
    extra = 1


class PriorityInline(admin.TabularInline):
    model = Priority
    extra = 1


class EventAttendeeInline(admin.TabularInline):
    model = EventAttendee
    extra = 1


@admin.register(Venue)
class VenueAdmin(admin.ModelAdmin):
    list_display = ["venue_code", "venue_name", "is_active", "created_at"]
    search_fields = ["venue_code", "venue_name"]
    list_filter = ["is_active"]
    inlines = [VenueConfigurationInline, LocationInline, CategoryInline, PriorityInline]


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["title", "venue", "start_date", "end_date", "category_code", "priority_code"]
    search_fields = ["title", "location_text"]
    list_filter = ["venue", "category_code", "priority_code"]
    inlines = [EventAttendeeInline]
