"""Resolution of a venue's effective configuration.

Three layers are combined: the system defaults, the values a venue has
stored, and the venue's own location/category/priority lists. Merging is
shallow and field-by-field: a stored value that is present and not None
replaces the default. Feature flags are the one nested object and are
merged flag-by-flag.
"""

import json
import logging
from collections.abc import Mapping, Sequence
from dataclasses import replace
from datetime import date, datetime
from typing import Any, TypeVar
from uuid import uuid4

from planner.domain.errors import MalformedConfigError, ValidationError
from planner.domain.models import (
    CONFIG_FIELDS,
    DEFAULT_CATEGORIES,
    DEFAULT_CONFIG,
    DEFAULT_OPTION_COLOR,
    DEFAULT_PRIORITIES,
    DEFAULT_PRIORITY_LEVEL,
    MAX_PRIORITY_LEVEL,
    MIN_PRIORITY_LEVEL,
    CategoryOption,
    LocationOption,
    PriorityOption,
    VenueConfig,
)
from planner.domain.value_objects import FreeTextLocation, HexColor, LocationInput, SelectedLocation

logger = logging.getLogger(__name__)

COLOR_FIELDS = ("primaryColor", "secondaryColor")

Option = TypeVar("Option", LocationOption, CategoryOption, PriorityOption)


def merge_config(base: VenueConfig, overrides: Mapping[str, Any] | None) -> VenueConfig:
    """Overlay ``overrides`` (camelCase, possibly partial) on ``base``.

    Raises:
        MalformedConfigError: If ``overrides`` is not an object or a field
            has the wrong shape.
    """
    if overrides is None:
        return base
    if not isinstance(overrides, Mapping):
        raise MalformedConfigError("configuration must be an object")

    merged = base.to_dict()
    for key, value in overrides.items():
        if key not in CONFIG_FIELDS:
            logger.debug("Ignoring unknown configuration field %r", key)
            continue
        if value is None:
            continue
        if key == "features":
            if not isinstance(value, Mapping):
                raise MalformedConfigError("features must be an object")
            merged["features"] = {
                **merged["features"],
                **{flag: enabled for flag, enabled in value.items() if enabled is not None},
            }
        else:
            merged[key] = value
    return VenueConfig.from_dict(merged)


def effective_config(
    stored: Mapping[str, Any] | None, defaults: VenueConfig = DEFAULT_CONFIG
) -> VenueConfig:
    return merge_config(defaults, stored)


def update_config(current: VenueConfig, updates: Mapping[str, Any]) -> VenueConfig:
    """Apply a user update to the current configuration.

    Raises:
        ValidationError: If a branding color is not a #RRGGBB value.
        MalformedConfigError: If a field has the wrong shape.
    """
    for key in COLOR_FIELDS:
        if updates.get(key) is not None:
            try:
                HexColor(updates[key])
            except ValueError as exc:
                raise ValidationError(f"{key} must be a hex color like #1a2b3c") from exc
    return merge_config(current, updates)


def effective_categories(config: VenueConfig) -> list[CategoryOption]:
    """Default categories followed by the venue's active custom ones."""
    custom = [category for category in config.custom_categories if category.is_active]
    return [*DEFAULT_CATEGORIES, *custom]


def effective_priorities(config: VenueConfig) -> list[PriorityOption]:
    """Default priorities followed by active custom ones, highest level first."""
    custom = sorted(
        (priority for priority in config.custom_priorities if priority.is_active),
        key=lambda priority: priority.level,
        reverse=True,
    )
    return [*DEFAULT_PRIORITIES, *custom]


def active_locations(config: VenueConfig) -> list[LocationOption]:
    return [location for location in config.locations if location.is_active]


def export_config(config: VenueConfig) -> str:
    return json.dumps(config.to_dict(), indent=2, ensure_ascii=False)


def import_config(text: str, defaults: VenueConfig = DEFAULT_CONFIG) -> VenueConfig:
    """Parse an exported document, filling absent fields from ``defaults``.

    Raises:
        MalformedConfigError: If the text is not a JSON object of the
            expected shape.
    """
    try:
        document = json.loads(text)
    except (TypeError, ValueError) as exc:
        raise MalformedConfigError("configuration is not valid JSON") from exc
    if not isinstance(document, dict):
        raise MalformedConfigError("configuration must be a JSON object")
    return merge_config(defaults, document)


def _ensure_custom(item: Option) -> None:
    if getattr(item, "is_default", False):
        raise ValidationError(f"Default entry '{item.id}' cannot be changed")


def toggle_active(items: Sequence[Option], item_id: str) -> tuple[Option, ...]:
    """Flip ``is_active`` on the entry with ``item_id``; unknown ids are ignored."""
    toggled = []
    for item in items:
        if item.id == item_id:
            _ensure_custom(item)
            item = replace(item, is_active=not item.is_active)
        toggled.append(item)
    return tuple(toggled)


def remove_item(items: Sequence[Option], item_id: str) -> tuple[Option, ...]:
    """Drop the entry with ``item_id``; unknown ids are ignored."""
    for item in items:
        if item.id == item_id:
            _ensure_custom(item)
    return tuple(item for item in items if item.id != item_id)


def _new_id(prefix: str) -> str:
    return f"{prefix}-{uuid4().hex}"


def new_location(
    name: str,
    description: str | None = None,
    capacity: int | None = None,
    amenities: Sequence[str] = (),
) -> LocationOption:
    if not name or not name.strip():
        raise ValidationError("Location name is required")
    if capacity is not None and capacity < 0:
        raise ValidationError("Location capacity must not be negative")
    return LocationOption(
        id=_new_id("location"),
        name=name.strip(),
        description=description,
        capacity=capacity,
        amenities=tuple(amenities),
    )


def new_category(name: str, color: str = DEFAULT_OPTION_COLOR, icon: str | None = None) -> CategoryOption:
    if not name or not name.strip():
        raise ValidationError("Category name is required")
    try:
        HexColor(color)
    except ValueError as exc:
        raise ValidationError("Category color must be a hex color like #1a2b3c") from exc
    return CategoryOption(id=_new_id("category"), name=name.strip(), color=color, icon=icon)


def new_priority(
    name: str, level: int = DEFAULT_PRIORITY_LEVEL, color: str = DEFAULT_OPTION_COLOR
) -> PriorityOption:
    if not name or not name.strip():
        raise ValidationError("Priority name is required")
    try:
        HexColor(color)
    except ValueError as exc:
        raise ValidationError("Priority color must be a hex color like #1a2b3c") from exc
    level = max(MIN_PRIORITY_LEVEL, min(MAX_PRIORITY_LEVEL, level))
    return PriorityOption(id=_new_id("priority"), name=name.strip(), color=color, level=level)


def resolve_location(
    location: LocationInput | None, locations: Sequence[LocationOption]
) -> str | None:
    """Turn the form's location input into the text stored on the event."""
    if isinstance(location, SelectedLocation):
        for option in locations:
            if option.id == location.location_id and option.is_active:
                return option.name
        return location.location_id or None
    if isinstance(location, FreeTextLocation):
        return location.text.strip() or None
    return None


def format_date(config: VenueConfig, value: date | datetime) -> str:
    day, month, year = f"{value.day:02d}", f"{value.month:02d}", f"{value.year:04d}"
    if config.date_format == "DD/MM/YYYY":
        return f"{day}/{month}/{year}"
    if config.date_format == "YYYY-MM-DD":
        return f"{year}-{month}-{day}"
    return f"{month}/{day}/{year}"


def format_time(config: VenueConfig, value: datetime) -> str:
    if config.time_format == "24h":
        return f"{value.hour:02d}:{value.minute:02d}"
    suffix = "AM" if value.hour < 12 else "PM"
    return f"{value.hour % 12 or 12}:{value.minute:02d} {suffix}"
