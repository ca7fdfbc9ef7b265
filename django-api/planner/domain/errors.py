"""Domain error codes for the planner module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    VALIDATION_FAILED = "VALIDATION_FAILED"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    VENUE_NOT_FOUND = "VENUE_NOT_FOUND"
    PERSISTENCE_FAILED = "PERSISTENCE_FAILED"
    MALFORMED_CONFIG = "MALFORMED_CONFIG"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ValidationError(DomainError):
    """Raised when user input breaks an event or configuration rule."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.VALIDATION_FAILED, message=message)


class InvalidEventIdError(ValidationError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        DomainError.__init__(
            self,
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        object.__setattr__(self, "event_id", event_id)


class VenueNotFoundError(DomainError):
    """Raised when no active venue matches a venue code."""

    def __init__(self, venue_code: str) -> None:
        super().__init__(
            code=ErrorCode.VENUE_NOT_FOUND,
            message="Venue not found",
        )
        object.__setattr__(self, "venue_code", venue_code)


class PersistenceError(DomainError):
    """Raised when the underlying store is unreachable or rejects a write."""

    def __init__(self, message: str = "Storage is unavailable") -> None:
        super().__init__(code=ErrorCode.PERSISTENCE_FAILED, message=message)


class MalformedConfigError(DomainError):
    """Raised when a configuration document cannot be parsed or merged."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.MALFORMED_CONFIG, message=message)
