from planner.services.config_service import ConfigService, ConfigState
from planner.services.event_service import EventService

__all__ = ["ConfigService", "ConfigState", "EventService"]
