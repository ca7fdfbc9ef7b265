"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in planner/models.py (persistence layer).

VenueConfig and its option types know how to convert to and from the
camelCase document shape used for export/import and the HTTP API.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Self

from planner.domain.errors import MalformedConfigError
from planner.domain.value_objects import EventId, LocationInput, VenueId

DEFAULT_OPTION_COLOR = "#6b7280"
DEFAULT_PRIORITY_LEVEL = 5
MIN_PRIORITY_LEVEL = 1
MAX_PRIORITY_LEVEL = 10

TIME_FORMATS = ("12h", "24h")
DATE_FORMATS = ("MM/DD/YYYY", "DD/MM/YYYY", "YYYY-MM-DD")
FIRST_DAYS_OF_WEEK = (0, 1)


def _require(data: Mapping[str, Any], key: str, kind: type | tuple[type, ...], what: str) -> Any:
    value = data.get(key)
    if not isinstance(value, kind) or isinstance(value, bool) and bool not in _as_tuple(kind):
        raise MalformedConfigError(f"{what}: '{key}' has the wrong type")
    return value


def _optional(data: Mapping[str, Any], key: str, kind: type | tuple[type, ...], what: str) -> Any:
    if data.get(key) is None:
        return None
    return _require(data, key, kind, what)


def _as_tuple(kind: type | tuple[type, ...]) -> tuple[type, ...]:
    return kind if isinstance(kind, tuple) else (kind,)


def _as_mapping(value: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise MalformedConfigError(f"{what} must be an object")
    return value


def _list(data: Mapping[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise MalformedConfigError(f"configuration: '{key}' must be a list")
    return value


def _options(data: Mapping[str, Any], key: str, parse: Any) -> tuple[Any, ...]:
    options = tuple(parse(item) for item in _list(data, key))
    seen: set[str] = set()
    for option in options:
        if option.id in seen:
            raise MalformedConfigError(f"configuration: duplicate id '{option.id}' in '{key}'")
        seen.add(option.id)
    return options


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    title: str
    description: str
    start_date: datetime
    end_date: datetime
    category: str
    priority: str
    created_at: datetime
    updated_at: datetime
    location: str | None = None
    attendees: tuple[str, ...] = ()


@dataclass(frozen=True)
class EventDraft:
    """User-supplied event fields, before validation and id assignment."""

    title: str
    start_date: datetime | None
    end_date: datetime | None
    category: str
    priority: str
    description: str = ""
    location: LocationInput | None = None
    attendees: tuple[str, ...] = ()


@dataclass(frozen=True)
class EventStats:
    """Dashboard counters."""

    total: int
    today: int
    upcoming: int
    urgent: int


@dataclass(frozen=True)
class LocationOption:
    """A room or area of the venue offered in the event form."""

    id: str
    name: str
    description: str | None = None
    capacity: int | None = None
    amenities: tuple[str, ...] = ()
    is_active: bool = True

    def __post_init__(self) -> None:
        if self.capacity is not None and self.capacity < 0:
            raise ValueError(f"Location capacity must not be negative, got {self.capacity}")

    @classmethod
    def from_dict(cls, data: Any) -> Self:
        data = _as_mapping(data, "location")
        amenities = data.get("amenities") or []
        if not isinstance(amenities, list) or not all(isinstance(a, str) for a in amenities):
            raise MalformedConfigError("location: 'amenities' must be a list of strings")
        is_active = data.get("isActive", True)
        if not isinstance(is_active, bool):
            raise MalformedConfigError("location: 'isActive' must be a boolean")
        try:
            return cls(
                id=_require(data, "id", str, "location"),
                name=_require(data, "name", str, "location"),
                description=_optional(data, "description", str, "location"),
                capacity=_optional(data, "capacity", int, "location"),
                amenities=tuple(amenities),
                is_active=is_active,
            )
        except ValueError as exc:
            raise MalformedConfigError(f"location: {exc}") from exc

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"id": self.id, "name": self.name}
        if self.description is not None:
            data["description"] = self.description
        if self.capacity is not None:
            data["capacity"] = self.capacity
        if self.amenities:
            data["amenities"] = list(self.amenities)
        data["isActive"] = self.is_active
        return data


@dataclass(frozen=True)
class CategoryOption:
    """An event category. Default entries are system-wide and read-only."""

    id: str
    name: str
    color: str = DEFAULT_OPTION_COLOR
    icon: str | None = None
    is_active: bool = True
    is_default: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> Self:
        data = _as_mapping(data, "category")
        is_active = data.get("isActive", True)
        if not isinstance(is_active, bool):
            raise MalformedConfigError("category: 'isActive' must be a boolean")
        return cls(
            id=_require(data, "id", str, "category"),
            name=_require(data, "name", str, "category"),
            color=_optional(data, "color", str, "category") or DEFAULT_OPTION_COLOR,
            icon=_optional(data, "icon", str, "category"),
            is_active=is_active,
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"id": self.id, "name": self.name, "color": self.color}
        if self.icon is not None:
            data["icon"] = self.icon
        data["isActive"] = self.is_active
        return data


@dataclass(frozen=True)
class PriorityOption:
    """An event priority; ``level`` orders custom priorities (10 = most urgent)."""

    id: str
    name: str
    color: str = DEFAULT_OPTION_COLOR
    level: int = DEFAULT_PRIORITY_LEVEL
    is_active: bool = True
    is_default: bool = False

    def __post_init__(self) -> None:
        if not MIN_PRIORITY_LEVEL <= self.level <= MAX_PRIORITY_LEVEL:
            raise ValueError(f"Priority level must be between 1 and 10, got {self.level}")

    @classmethod
    def from_dict(cls, data: Any) -> Self:
        data = _as_mapping(data, "priority")
        is_active = data.get("isActive", True)
        if not isinstance(is_active, bool):
            raise MalformedConfigError("priority: 'isActive' must be a boolean")
        level = _optional(data, "level", int, "priority")
        try:
            return cls(
                id=_require(data, "id", str, "priority"),
                name=_require(data, "name", str, "priority"),
                color=_optional(data, "color", str, "priority") or DEFAULT_OPTION_COLOR,
                level=DEFAULT_PRIORITY_LEVEL if level is None else level,
                is_active=is_active,
            )
        except ValueError as exc:
            raise MalformedConfigError(f"priority: {exc}") from exc

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "color": self.color,
            "level": self.level,
            "isActive": self.is_active,
        }


@dataclass(frozen=True)
class FeatureFlags:
    """UI feature switches for a venue."""

    show_attendees: bool = True
    show_location: bool = True
    show_description: bool = True
    allow_recurring: bool = False
    allow_file_attachments: bool = False

    _KEYS = {
        "showAttendees": "show_attendees",
        "showLocation": "show_location",
        "showDescription": "show_description",
        "allowRecurring": "allow_recurring",
        "allowFileAttachments": "allow_file_attachments",
    }

    @classmethod
    def from_dict(cls, data: Any) -> Self:
        data = _as_mapping(data, "features")
        values = {}
        for key, attr in cls._KEYS.items():
            if key in data and data[key] is not None:
                if not isinstance(data[key], bool):
                    raise MalformedConfigError(f"features: '{key}' must be a boolean")
                values[attr] = data[key]
        return cls(**values)

    def to_dict(self) -> dict[str, bool]:
        return {key: getattr(self, attr) for key, attr in self._KEYS.items()}


@dataclass(frozen=True)
class VenueConfig:
    """Effective configuration of one venue: branding, options, defaults and flags."""

    company_name: str
    logo: str
    primary_color: str
    secondary_color: str
    venue_name: str
    tagline: str | None = None
    venue_address: str | None = None
    venue_phone: str | None = None
    venue_email: str | None = None
    venue_website: str | None = None
    locations: tuple[LocationOption, ...] = ()
    custom_categories: tuple[CategoryOption, ...] = ()
    custom_priorities: tuple[PriorityOption, ...] = ()
    default_event_duration: float = 1.0
    default_category: str = "meeting"
    default_priority: str = "normal"
    time_format: str = "12h"
    date_format: str = "MM/DD/YYYY"
    first_day_of_week: int = 0
    features: FeatureFlags = field(default_factory=FeatureFlags)

    @classmethod
    def from_dict(cls, data: Any) -> Self:
        """Build a config from a complete camelCase document.

        Raises:
            MalformedConfigError: If a field is missing or has the wrong shape.
        """
        data = _as_mapping(data, "configuration")
        what = "configuration"

        duration = _require(data, "defaultEventDuration", (int, float), what)
        time_format = _require(data, "timeFormat", str, what)
        date_format = _require(data, "dateFormat", str, what)
        first_day = _require(data, "firstDayOfWeek", int, what)
        if time_format not in TIME_FORMATS:
            raise MalformedConfigError(f"Unsupported time format: {time_format}")
        if date_format not in DATE_FORMATS:
            raise MalformedConfigError(f"Unsupported date format: {date_format}")
        if first_day not in FIRST_DAYS_OF_WEEK:
            raise MalformedConfigError(f"Unsupported first day of week: {first_day}")

        return cls(
            company_name=_require(data, "companyName", str, what),
            logo=_require(data, "logo", str, what),
            tagline=_optional(data, "tagline", str, what),
            primary_color=_require(data, "primaryColor", str, what),
            secondary_color=_require(data, "secondaryColor", str, what),
            venue_name=_require(data, "venueName", str, what),
            venue_address=_optional(data, "venueAddress", str, what),
            venue_phone=_optional(data, "venuePhone", str, what),
            venue_email=_optional(data, "venueEmail", str, what),
            venue_website=_optional(data, "venueWebsite", str, what),
            locations=_options(data, "locations", LocationOption.from_dict),
            custom_categories=_options(data, "customCategories", CategoryOption.from_dict),
            custom_priorities=_options(data, "customPriorities", PriorityOption.from_dict),
            default_event_duration=float(duration),
            default_category=_require(data, "defaultCategory", str, what),
            default_priority=_require(data, "defaultPriority", str, what),
            time_format=time_format,
            date_format=date_format,
            first_day_of_week=first_day,
            features=FeatureFlags.from_dict(data.get("features") or {}),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "companyName": self.company_name,
            "logo": self.logo,
            "tagline": self.tagline,
            "primaryColor": self.primary_color,
            "secondaryColor": self.secondary_color,
            "venueName": self.venue_name,
            "venueAddress": self.venue_address,
            "venuePhone": self.venue_phone,
            "venueEmail": self.venue_email,
            "venueWebsite": self.venue_website,
            "locations": [location.to_dict() for location in self.locations],
            "customCategories": [category.to_dict() for category in self.custom_categories],
            "customPriorities": [priority.to_dict() for priority in self.custom_priorities],
            "defaultEventDuration": self.default_event_duration,
            "defaultCategory": self.default_category,
            "defaultPriority": self.default_priority,
            "timeFormat": self.time_format,
            "dateFormat": self.date_format,
            "firstDayOfWeek": self.first_day_of_week,
            "features": self.features.to_dict(),
        }


@dataclass(frozen=True)
class StoredConfig:
    """A venue's configuration as persisted: possibly partial camelCase values."""

    venue_id: VenueId
    venue_code: str
    values: Mapping[str, Any]


DEFAULT_CATEGORIES: tuple[CategoryOption, ...] = (
    CategoryOption(id="meeting", name="Meeting", color="#3b82f6", is_default=True),
    CategoryOption(id="personal", name="Personal", color="#10b981", is_default=True),
    CategoryOption(id="work", name="Work", color="#f59e0b", is_default=True),
    CategoryOption(id="other", name="Other", color="#6b7280", is_default=True),
)

DEFAULT_PRIORITIES: tuple[PriorityOption, ...] = (
    PriorityOption(id="high", name="High", color="#ef4444", is_default=True),
    PriorityOption(id="medium", name="Medium", color="#f59e0b", is_default=True),
    PriorityOption(id="low", name="Low", color="#10b981", is_default=True),
)

DEFAULT_CONFIG = VenueConfig(
    company_name="Event Planner",
    logo="📅",
    tagline="Organize your events with ease",
    primary_color="#667eea",
    secondary_color="#764ba2",
    venue_name="Main Venue",
    venue_address="",
    venue_phone="",
    venue_email="",
    venue_website="",
    locations=(
        LocationOption(
            id="main-hall",
            name="Main Hall",
            description="Large conference hall with A/V equipment",
            capacity=200,
            amenities=("Projector", "Sound System", "WiFi", "Air Conditioning"),
        ),
        LocationOption(
            id="meeting-room-a",
            name="Meeting Room A",
            description="Small meeting room for team discussions",
            capacity=12,
            amenities=("Whiteboard", "WiFi", "Conference Phone"),
        ),
        LocationOption(
            id="meeting-room-b",
            name="Meeting Room B",
            description="Medium meeting room with presentation setup",
            capacity=20,
            amenities=("TV Display", "WiFi", "Video Conferencing"),
        ),
        LocationOption(
            id="outdoor-space",
            name="Outdoor Patio",
            description="Covered outdoor area for social events",
            capacity=50,
            amenities=("Tables", "Chairs", "Lighting"),
        ),
        LocationOption(
            id="virtual",
            name="Virtual/Online",
            description="Online meeting or webinar",
        ),
    ),
    custom_categories=(
        CategoryOption(id="training", name="Training", color="#10b981", icon="🎓"),
        CategoryOption(id="workshop", name="Workshop", color="#f59e0b", icon="🔨"),
        CategoryOption(id="conference", name="Conference", color="#3b82f6", icon="🎤"),
    ),
    custom_priorities=(
        PriorityOption(id="critical", name="Critical", color="#dc2626", level=10),
        PriorityOption(id="important", name="Important", color="#f59e0b", level=7),
        PriorityOption(id="normal", name="Normal", color="#6b7280", level=5),
        PriorityOption(id="low", name="Low", color="#10b981", level=2),
    ),
    default_event_duration=1.0,
    default_category="meeting",
    default_priority="normal",
    time_format="12h",
    date_format="MM/DD/YYYY",
    first_day_of_week=0,
    features=FeatureFlags(),
)

CONFIG_FIELDS = frozenset(DEFAULT_CONFIG.to_dict())
