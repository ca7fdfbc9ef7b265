"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Writes are
last-writer-wins: there is no version check, so two editors saving the
same event or configuration overwrite each other.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from planner.domain import Event, EventId, StoredConfig, VenueId


class EventRepository(ABC):
    """Interface for event persistence operations, scoped by venue."""

    @abstractmethod
    def list_all(
        self,
        venue_id: VenueId,
        range_start: datetime | None = None,
        range_end: datetime | None = None,
    ) -> list[Event]:
        """Return every event overlapping the range, ordered by start_date ascending.

        ``None`` leaves that side of the range open. Results are never truncated.
        """
        ...

    @abstractmethod
    def get(self, venue_id: VenueId, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def save(self, venue_id: VenueId, event: Event) -> EventId:
        """Persist a new event and return its ID."""
        ...

    @abstractmethod
    def update(self, venue_id: VenueId, event: Event) -> bool:
        """Overwrite an existing event. Returns False if it does not exist."""
        ...

    @abstractmethod
    def delete(self, venue_id: VenueId, event_id: EventId) -> bool:
        """Delete an event. Returns False if nothing was deleted."""
        ...


class ConfigStore(ABC):
    """Interface for venue configuration persistence."""

    @abstractmethod
    def get(self, venue_code: str) -> StoredConfig | None:
        """Return the stored configuration of an active venue, or None."""
        ...

    @abstractmethod
    def update(self, venue_id: VenueId, values: Mapping[str, Any]) -> None:
        """Persist configuration values (camelCase) for a venue.

        Raises:
            VenueNotFoundError: If the venue has no configuration.
        """
        ...
