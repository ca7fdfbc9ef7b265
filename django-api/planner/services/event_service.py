"""Event service - all event business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors

Writes are last-writer-wins: an update overwrites whatever is stored,
even if someone else changed the event in between.
"""

import logging
from collections.abc import Callable
from dataclasses import replace
from datetime import date, datetime
from typing import Any

from planner.domain import Event, EventDraft, EventId, EventStats, VenueConfig, VenueId
from planner.domain.config_resolver import effective_categories, effective_priorities, resolve_location
from planner.domain.date_grid import calendar_grid
from planner.domain.errors import EventNotFoundError, InvalidEventIdError, ValidationError
from planner.domain.event_index import MonthView, build_month_view, events_on_date, stats_for
from planner.stores.interfaces import EventRepository

logger = logging.getLogger(__name__)


def parse_event_id(event_id: str) -> EventId:
    try:
        return EventId.from_string(event_id)
    except (TypeError, ValueError, AttributeError):
        raise InvalidEventIdError() from None


class EventService:
    """Service for calendar event operations of a venue."""

    def __init__(
        self, repository: EventRepository, clock: Callable[[], datetime] = datetime.now
    ) -> None:
        self._repository = repository
        self._clock = clock

    def list_events(
        self, venue_id: VenueId, start: date | None = None, end: date | None = None
    ) -> list[Event]:
        """Return events overlapping the inclusive day range, ordered by start."""
        return self._repository.list_all(venue_id, start, end)

    def events_on_date(self, venue_id: VenueId, day: date) -> list[Event]:
        return events_on_date(self._repository.list_all(venue_id, day, day), day)

    def month_view(
        self,
        venue_id: VenueId,
        year: int,
        month: int,
        first_day_of_week: int = 0,
        selected: date | None = None,
    ) -> MonthView:
        grid = calendar_grid(year, month, first_day_of_week)
        events = self._repository.list_all(venue_id, grid[0][0], grid[-1][-1])
        return build_month_view(
            year,
            month,
            events,
            today=self._clock(),
            selected=selected,
            first_day_of_week=first_day_of_week,
        )

    def stats(self, venue_id: VenueId) -> EventStats:
        return stats_for(self._repository.list_all(venue_id), self._clock())

    def get_event(self, venue_id: VenueId, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        event = self._repository.get(venue_id, parse_event_id(event_id))
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def create_event(self, venue_id: VenueId, draft: EventDraft, config: VenueConfig) -> Event:
        """Validate a draft and store it as a new event.

        Raises:
            ValidationError: If the draft breaks an event rule.
        """
        fields = self._validated(draft, config)
        now = self._clock()
        event = Event(id=EventId.new(), created_at=now, updated_at=now, **fields)
        self._repository.save(venue_id, event)
        logger.info("Created event %s for venue %s", event.id, venue_id)
        return event

    def update_event(
        self, venue_id: VenueId, event_id: str, draft: EventDraft, config: VenueConfig
    ) -> Event:
        """Replace the user-editable fields of an event.

        The id and creation time are kept; ``updated_at`` is bumped.
        """
        existing = self.get_event(venue_id, event_id)
        event = replace(existing, updated_at=self._clock(), **self._validated(draft, config))
        if not self._repository.update(venue_id, event):
            raise EventNotFoundError(event_id)
        logger.info("Updated event %s for venue %s", event.id, venue_id)
        return event

    def delete_event(self, venue_id: VenueId, event_id: str) -> None:
        if not self._repository.delete(venue_id, parse_event_id(event_id)):
            raise EventNotFoundError(event_id)
        logger.info("Deleted event %s for venue %s", event_id, venue_id)

    @staticmethod
    def _validated(draft: EventDraft, config: VenueConfig) -> dict[str, Any]:
        title = (draft.title or "").strip()
        if not title:
            raise ValidationError("Title is required")
        if draft.start_date is None or draft.end_date is None:
            raise ValidationError("Start and end dates are required")
        if draft.end_date <= draft.start_date:
            raise ValidationError("End date must be after start date")
        if draft.category not in {category.id for category in effective_categories(config)}:
            raise ValidationError(f"Unknown category '{draft.category}'")
        if draft.priority not in {priority.id for priority in effective_priorities(config)}:
            raise ValidationError(f"Unknown priority '{draft.priority}'")
        return {
            "title": title,
            "description": draft.description or "",
            "start_date": draft.start_date,
            "end_date": draft.end_date,
            "category": draft.category,
            "priority": draft.priority,
            "location": resolve_location(draft.location, config.locations),
            "attendees": tuple(name.strip() for name in draft.attendees if name and name.strip()),
        }
