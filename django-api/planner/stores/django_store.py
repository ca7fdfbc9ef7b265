"""Django ORM implementation of the stores.

Rows are converted to domain models on the way out; database failures
are translated into PersistenceError so callers never see ORM exceptions.
"""

import logging
from collections.abc import Mapping
from datetime import datetime, timedelta
from typing import Any
from uuid import UUID

from django.db import DatabaseError, transaction

from planner import models
from planner.domain import (
    DEFAULT_CONFIG,
    CategoryOption,
    Event,
    EventId,
    LocationOption,
    PriorityOption,
    StoredConfig,
    VenueConfig,
    VenueId,
)
from planner.domain.date_grid import start_of_day
from planner.domain.errors import PersistenceError, VenueNotFoundError
from planner.stores.interfaces import ConfigStore, EventRepository

logger = logging.getLogger(__name__)

CONFIG_COLUMNS = {
    "companyName": "company_name",
    "logo": "logo",
    "tagline": "tagline",
    "primaryColor": "primary_color",
    "secondaryColor": "secondary_color",
    "defaultEventDuration": "default_event_duration",
    "defaultCategory": "default_category",
    "defaultPriority": "default_priority",
    "timeFormat": "time_format",
    "dateFormat": "date_format",
    "firstDayOfWeek": "first_day_of_week",
}

VENUE_COLUMNS = {
    "venueName": "venue_name",
    "venueAddress": "address",
    "venuePhone": "contact_phone",
    "venueEmail": "contact_email",
    "venueWebsite": "website",
}

FEATURE_COLUMNS = {
    "showAttendees": "show_attendees",
    "showLocation": "show_location",
    "showDescription": "show_description",
    "allowRecurring": "allow_recurring",
    "allowFileAttachments": "allow_file_attachments",
}


def _event_to_domain(row: models.Event) -> Event:
    return Event(
        id=EventId(value=row.id),
        title=row.title,
        description=row.description,
        start_date=row.start_date,
        end_date=row.end_date,
        location=row.location_text,
        category=row.category_code,
        priority=row.priority_code,
        attendees=tuple(attendee.name for attendee in row.attendees.all()),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _event_columns(event: Event) -> dict[str, Any]:
    return {
        "title": event.title,
        "description": event.description,
        "start_date": event.start_date,
        "end_date": event.end_date,
        "location_text": event.location,
        "category_code": event.category,
        "priority_code": event.priority,
        "updated_at": event.updated_at,
    }


class DjangoEventRepository(EventRepository):
    """Database-backed event repository using Django ORM."""

    def list_all(
        self,
        venue_id: VenueId,
        range_start: datetime | None = None,
        range_end: datetime | None = None,
    ) -> list[Event]:
        try:
            rows = models.Event.objects.filter(venue_id=venue_id.value)
            # Overlap is decided per calendar day, like the in-memory index.
            if range_start is not None:
                rows = rows.filter(end_date__gte=start_of_day(range_start))
            if range_end is not None:
                rows = rows.filter(start_date__lt=start_of_day(range_end) + timedelta(days=1))
            return [
                _event_to_domain(row)
                for row in rows.prefetch_related("attendees").order_by("start_date", "title")
            ]
        except DatabaseError as exc:
            logger.error("Failed to list events for venue %s: %s", venue_id, exc)
            raise PersistenceError() from exc

    def get(self, venue_id: VenueId, event_id: EventId) -> Event | None:
        try:
            row = (
                models.Event.objects.prefetch_related("attendees")
                .filter(venue_id=venue_id.value, id=event_id.value)
                .first()
            )
        except DatabaseError as exc:
            logger.error("Failed to load event %s: %s", event_id, exc)
            raise PersistenceError() from exc
        return _event_to_domain(row) if row is not None else None

    def save(self, venue_id: VenueId, event: Event) -> EventId:
        try:
            with transaction.atomic():
                row = models.Event.objects.create(
                    id=event.id.value,
                    venue_id=venue_id.value,
                    created_at=event.created_at,
                    **_event_columns(event),
                )
                self._replace_attendees(row.id, event.attendees)
        except DatabaseError as exc:
            logger.error("Failed to save event %s: %s", event.id, exc)
            raise PersistenceError("Event could not be saved") from exc
        return event.id

    def update(self, venue_id: VenueId, event: Event) -> bool:
        try:
            with transaction.atomic():
                updated = models.Event.objects.filter(
                    venue_id=venue_id.value, id=event.id.value
                ).update(**_event_columns(event))
                if not updated:
                    return False
                self._replace_attendees(event.id.value, event.attendees)
        except DatabaseError as exc:
            logger.error("Failed to update event %s: %s", event.id, exc)
            raise PersistenceError("Event could not be saved") from exc
        return True

    def delete(self, venue_id: VenueId, event_id: EventId) -> bool:
        try:
            deleted, _ = models.Event.objects.filter(
                venue_id=venue_id.value, id=event_id.value
            ).delete()
        except DatabaseError as exc:
            logger.error("Failed to delete event %s: %s", event_id, exc)
            raise PersistenceError("Event could not be deleted") from exc
        return deleted > 0

    @staticmethod
    def _replace_attendees(event_pk: UUID, names: tuple[str, ...]) -> None:
        models.EventAttendee.objects.filter(event_id=event_pk).delete()
        models.EventAttendee.objects.bulk_create(
            models.EventAttendee(event_id=event_pk, name=name, position=position)
            for position, name in enumerate(names)
        )


class DjangoConfigStore(ConfigStore):
    """Database-backed venue configuration store using Django ORM."""

    def get(self, venue_code: str) -> StoredConfig | None:
        try:
            venue = (
                models.Venue.objects.select_related("configuration")
                .filter(venue_code=venue_code, is_active=True)
                .first()
            )
            if venue is None or not hasattr(venue, "configuration"):
                return None
            values = self._to_values(venue, venue.configuration)
        except DatabaseError as exc:
            logger.error("Failed to load configuration of %s: %s", venue_code, exc)
            raise PersistenceError() from exc
        return StoredConfig(venue_id=VenueId(value=venue.id), venue_code=venue.venue_code, values=values)

    def update(self, venue_id: VenueId, values: Mapping[str, Any]) -> None:
        try:
            with transaction.atomic():
                configuration = (
                    models.VenueConfiguration.objects.select_related("venue")
                    .filter(venue_id=venue_id.value)
                    .first()
                )
                if configuration is None:
                    raise VenueNotFoundError(str(venue_id))
                self._apply(configuration, values)
        except DatabaseError as exc:
            logger.error("Failed to update configuration of venue %s: %s", venue_id, exc)
            raise PersistenceError("Configuration could not be saved") from exc

    def provision(
        self, venue_code: str, venue_name: str, config: VenueConfig = DEFAULT_CONFIG
    ) -> VenueId:
        """Create a venue together with its configuration rows."""
        try:
            with transaction.atomic():
                venue = models.Venue.objects.create(venue_code=venue_code, venue_name=venue_name)
                models.VenueConfiguration.objects.create(venue=venue)
                venue_id = VenueId(value=venue.id)
                self.update(venue_id, {**config.to_dict(), "venueName": venue_name})
        except DatabaseError as exc:
            logger.error("Failed to provision venue %s: %s", venue_code, exc)
            raise PersistenceError("Venue could not be created") from exc
        logger.info("Provisioned venue %s", venue_code)
        return venue_id

    @staticmethod
    def _to_values(venue: models.Venue, configuration: models.VenueConfiguration) -> dict[str, Any]:
        values: dict[str, Any] = {
            key: getattr(configuration, column) for key, column in CONFIG_COLUMNS.items()
        }
        values.update({key: getattr(venue, column) for key, column in VENUE_COLUMNS.items()})
        values["features"] = {
            key: getattr(configuration, column) for key, column in FEATURE_COLUMNS.items()
        }
        values["locations"] = [
            LocationOption(
                id=row.code,
                name=row.name,
                description=row.description,
                capacity=row.capacity,
                amenities=tuple(row.amenities or ()),
                is_active=row.is_active,
            ).to_dict()
            for row in venue.locations.all()
        ]
        values["customCategories"] = [
            CategoryOption(
                id=row.code, name=row.name, color=row.color, icon=row.icon, is_active=row.is_active
            ).to_dict()
            for row in venue.categories.all()
        ]
        values["customPriorities"] = [
            PriorityOption(
                id=row.code, name=row.name, color=row.color, level=row.level, is_active=row.is_active
            ).to_dict()
            for row in venue.priorities.all()
        ]
        return values

    @staticmethod
    def _apply(configuration: models.VenueConfiguration, values: Mapping[str, Any]) -> None:
        venue = configuration.venue
        for key, column in CONFIG_COLUMNS.items():
            if values.get(key) is not None:
                setattr(configuration, column, values[key])
        for key, column in FEATURE_COLUMNS.items():
            flag = (values.get("features") or {}).get(key)
            if flag is not None:
                setattr(configuration, column, flag)
        for key, column in VENUE_COLUMNS.items():
            if values.get(key) is not None:
                setattr(venue, column, values[key])
        configuration.save()
        venue.save()

        if values.get("locations") is not None:
            venue.locations.all().delete()
            models.Location.objects.bulk_create(
                models.Location(
                    venue=venue,
                    code=option.id,
                    name=option.name,
                    description=option.description,
                    capacity=option.capacity,
                    amenities=list(option.amenities),
                    is_active=option.is_active,
                    sort_order=position,
                )
                for position, option in enumerate(
                    LocationOption.from_dict(item) for item in values["locations"]
                )
            )
        if values.get("customCategories") is not None:
            venue.categories.all().delete()
            models.Category.objects.bulk_create(
                models.Category(
                    venue=venue,
                    code=option.id,
                    name=option.name,
                    color=option.color,
                    icon=option.icon,
                    is_active=option.is_active,
                    sort_order=position,
                )
                for position, option in enumerate(
                    CategoryOption.from_dict(item) for item in values["customCategories"]
                )
            )
        if values.get("customPriorities") is not None:
            venue.priorities.all().delete()
            models.Priority.objects.bulk_create(
                models.Priority(
                    venue=venue,
                    code=option.id,
                    name=option.name,
                    color=option.color,
                    level=option.level,
                    is_active=option.is_active,
                    sort_order=position,
                )
                for position, option in enumerate(
                    PriorityOption.from_dict(item) for item in values["customPriorities"]
                )
            )
