"""Domain primitives that enforce validity at creation time."""

import re
from dataclasses import dataclass
from typing import Self
from uuid import UUID, uuid4

HEX_COLOR_PATTERN = re.compile(r"^#[0-9A-Fa-f]{6}$")


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    @classmethod
    def new(cls) -> Self:
        return cls(value=uuid4())

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class VenueId:
    """Unique identifier for a Venue (tenant)."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    @classmethod
    def new(cls) -> Self:
        return cls(value=uuid4())

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class HexColor:
    """Color in #RRGGBB form."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not HEX_COLOR_PATTERN.match(self.value):
            raise ValueError(f"Invalid hex color: {self.value!r}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SelectedLocation:
    """Location picked from the venue's configured list, by id."""

    location_id: str


@dataclass(frozen=True)
class FreeTextLocation:
    """Location typed in by the user."""

    text: str


LocationInput = SelectedLocation | FreeTextLocation
