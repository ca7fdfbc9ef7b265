"""Per-venue configuration context.

A ConfigService owns the effective configuration of one venue. It moves
through UNINITIALIZED -> LOADED on load(), and LOADED -> MODIFIED -> LOADED
on every change. Changes are persisted before the in-memory copy is
swapped, so a failed write leaves the last-known-good configuration.
"""

import logging
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any

from planner.domain import (
    DEFAULT_CATEGORIES,
    DEFAULT_CONFIG,
    DEFAULT_PRIORITIES,
    CategoryOption,
    LocationOption,
    PriorityOption,
    VenueConfig,
    VenueId,
)
from planner.domain import config_resolver
from planner.domain.errors import MalformedConfigError, PersistenceError, VenueNotFoundError
from planner.stores.interfaces import ConfigStore

logger = logging.getLogger(__name__)


class ConfigState(Enum):
    UNINITIALIZED = "uninitialized"
    LOADED = "loaded"
    MODIFIED = "modified"


def _editable(defaults: Sequence[Any], custom: Sequence[Any], item_id: str) -> tuple[Any, ...]:
    # A custom entry shadows a default one with the same id.
    if any(item.id == item_id for item in custom):
        return tuple(custom)
    return (*defaults, *custom)


class ConfigService:
    """Configuration of a single venue, loaded from a ConfigStore."""

    def __init__(
        self, store: ConfigStore, venue_code: str, defaults: VenueConfig = DEFAULT_CONFIG
    ) -> None:
        self._store = store
        self._venue_code = venue_code
        self._defaults = defaults
        self._state = ConfigState.UNINITIALIZED
        self._config: VenueConfig | None = None
        self._venue_id: VenueId | None = None

    @property
    def state(self) -> ConfigState:
        return self._state

    @property
    def venue_code(self) -> str:
        return self._venue_code

    @property
    def config(self) -> VenueConfig:
        if self._config is None:
            raise RuntimeError("Configuration has not been loaded")
        return self._config

    @property
    def venue_id(self) -> VenueId:
        if self._venue_id is None:
            raise RuntimeError("Configuration has not been loaded")
        return self._venue_id

    def load(self) -> VenueConfig:
        """Fetch the venue's stored values and resolve them against the defaults.

        Raises:
            VenueNotFoundError: If no active venue has this code.
            MalformedConfigError: If the stored values cannot be merged.
        """
        stored = self._store.get(self._venue_code)
        if stored is None:
            raise VenueNotFoundError(self._venue_code)
        self._config = config_resolver.effective_config(stored.values, self._defaults)
        self._venue_id = stored.venue_id
        self._state = ConfigState.LOADED
        logger.info("Loaded configuration for venue %s", self._venue_code)
        return self._config

    def update(self, updates: Mapping[str, Any]) -> VenueConfig:
        """Apply a partial camelCase update and persist it.

        Raises:
            ValidationError: If a value breaks a configuration rule.
            PersistenceError: If the store rejects the write; the current
                configuration is left unchanged.
        """
        return self._commit(config_resolver.update_config(self.config, updates))

    def reset_to_defaults(self) -> VenueConfig:
        logger.info("Resetting configuration for venue %s", self._venue_code)
        return self._commit(self._defaults)

    def export_config(self) -> str:
        return config_resolver.export_config(self.config)

    def import_config(self, text: str) -> bool:
        """Replace the configuration with an exported document.

        Returns False, leaving the configuration untouched, when the
        document is malformed.
        """
        try:
            imported = config_resolver.import_config(text, self._defaults)
        except MalformedConfigError as exc:
            logger.warning("Rejected configuration import for venue %s: %s", self._venue_code, exc)
            return False
        self._commit(imported)
        return True

    def effective_categories(self) -> list[CategoryOption]:
        return config_resolver.effective_categories(self.config)

    def effective_priorities(self) -> list[PriorityOption]:
        return config_resolver.effective_priorities(self.config)

    def active_locations(self) -> list[LocationOption]:
        return config_resolver.active_locations(self.config)

    def add_location(
        self,
        name: str,
        description: str | None = None,
        capacity: int | None = None,
        amenities: Sequence[str] = (),
    ) -> LocationOption:
        location = config_resolver.new_location(name, description, capacity, amenities)
        self._save_locations((*self.config.locations, location))
        return location

    def add_category(self, name: str, color: str = "#6b7280", icon: str | None = None) -> CategoryOption:
        category = config_resolver.new_category(name, color, icon)
        self._save_categories((*self.config.custom_categories, category))
        return category

    def add_priority(self, name: str, level: int = 5, color: str = "#6b7280") -> PriorityOption:
        priority = config_resolver.new_priority(name, level, color)
        self._save_priorities((*self.config.custom_priorities, priority))
        return priority

    def toggle_location(self, location_id: str) -> VenueConfig:
        return self._save_locations(config_resolver.toggle_active(self.config.locations, location_id))

    def toggle_category(self, category_id: str) -> VenueConfig:
        items = _editable(DEFAULT_CATEGORIES, self.config.custom_categories, category_id)
        return self._save_categories(config_resolver.toggle_active(items, category_id))

    def toggle_priority(self, priority_id: str) -> VenueConfig:
        items = _editable(DEFAULT_PRIORITIES, self.config.custom_priorities, priority_id)
        return self._save_priorities(config_resolver.toggle_active(items, priority_id))

    def remove_location(self, location_id: str) -> VenueConfig:
        return self._save_locations(config_resolver.remove_item(self.config.locations, location_id))

    def remove_category(self, category_id: str) -> VenueConfig:
        items = _editable(DEFAULT_CATEGORIES, self.config.custom_categories, category_id)
        return self._save_categories(config_resolver.remove_item(items, category_id))

    def remove_priority(self, priority_id: str) -> VenueConfig:
        items = _editable(DEFAULT_PRIORITIES, self.config.custom_priorities, priority_id)
        return self._save_priorities(config_resolver.remove_item(items, priority_id))

    def _save_locations(self, locations: Sequence[LocationOption]) -> VenueConfig:
        return self.update({"locations": [location.to_dict() for location in locations]})

    def _save_categories(self, categories: Sequence[CategoryOption]) -> VenueConfig:
        custom = [category.to_dict() for category in categories if not category.is_default]
        return self.update({"customCategories": custom})

    def _save_priorities(self, priorities: Sequence[PriorityOption]) -> VenueConfig:
        custom = [priority.to_dict() for priority in priorities if not priority.is_default]
        return self.update({"customPriorities": custom})

    def _commit(self, config: VenueConfig) -> VenueConfig:
        venue_id = self.venue_id
        previous = self._state
        self._state = ConfigState.MODIFIED
        try:
            self._store.update(venue_id, config.to_dict())
        except Exception:
            # The write did not happen; keep the last-known-good state.
            self._state = previous
            logger.error("Failed to persist configuration for venue %s", self._venue_code)
            raise
        self._config = config
        self._state = ConfigState.LOADED
        logger.info("Saved configuration for venue %s", self._venue_code)
        return config
