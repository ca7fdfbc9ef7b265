from planner.domain.models import (
    DEFAULT_CATEGORIES,
    DEFAULT_CONFIG,
    DEFAULT_PRIORITIES,
    CategoryOption,
    Event,
    EventDraft,
    EventStats,
    FeatureFlags,
    LocationOption,
    PriorityOption,
    StoredConfig,
    VenueConfig,
)
from planner.domain.value_objects import (
    EventId,
    FreeTextLocation,
    HexColor,
    LocationInput,
    SelectedLocation,
    VenueId,
)

__all__ = [
    "DEFAULT_CATEGORIES",
    "DEFAULT_CONFIG",
    "DEFAULT_PRIORITIES",
    "CategoryOption",
    "Event",
    "EventDraft",
    "EventStats",
    "FeatureFlags",
    "LocationOption",
    "PriorityOption",
    "StoredConfig",
    "VenueConfig",
    "EventId",
    "VenueId",
    "HexColor",
    "LocationInput",
    "SelectedLocation",
    "FreeTextLocation",
]
