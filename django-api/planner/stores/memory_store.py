"""In-memory stores, used by tests and for running the services without a database."""

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from planner.domain import Event, EventId, StoredConfig, VenueId
from planner.domain.errors import VenueNotFoundError
from planner.domain.event_index import events_in_range
from planner.stores.interfaces import ConfigStore, EventRepository


class InMemoryEventRepository(EventRepository):
    """Events kept in a dict per venue."""

    def __init__(self) -> None:
        self._events: dict[VenueId, dict[EventId, Event]] = {}

    def list_all(
        self,
        venue_id: VenueId,
        range_start: datetime | None = None,
        range_end: datetime | None = None,
    ) -> list[Event]:
        events = self._events.get(venue_id, {}).values()
        return events_in_range(events, range_start, range_end)

    def get(self, venue_id: VenueId, event_id: EventId) -> Event | None:
        return self._events.get(venue_id, {}).get(event_id)

    def save(self, venue_id: VenueId, event: Event) -> EventId:
        self._events.setdefault(venue_id, {})[event.id] = event
        return event.id

    def update(self, venue_id: VenueId, event: Event) -> bool:
        venue_events = self._events.get(venue_id, {})
        if event.id not in venue_events:
            return False
        venue_events[event.id] = event
        return True

    def delete(self, venue_id: VenueId, event_id: EventId) -> bool:
        return self._events.get(venue_id, {}).pop(event_id, None) is not None


class InMemoryConfigStore(ConfigStore):
    """Venue configurations keyed by venue code."""

    def __init__(self) -> None:
        self._configs: dict[str, StoredConfig] = {}

    def add_venue(self, venue_code: str, values: Mapping[str, Any] | None = None) -> VenueId:
        venue_id = VenueId.new()
        self._configs[venue_code] = StoredConfig(
            venue_id=venue_id, venue_code=venue_code, values=dict(values or {})
        )
        return venue_id

    def get(self, venue_code: str) -> StoredConfig | None:
        return self._configs.get(venue_code)

    def update(self, venue_id: VenueId, values: Mapping[str, Any]) -> None:
        for code, stored in self._configs.items():
            if stored.venue_id == venue_id:
                self._configs[code] = StoredConfig(
                    venue_id=venue_id, venue_code=code, values={**stored.values, **values}
                )
                return
        raise VenueNotFoundError(str(venue_id))
