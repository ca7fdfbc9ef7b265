from planner.handlers.views import (
    CalendarMonthView,
    ConfigExportView,
    ConfigImportView,
    ConfigResetView,
    DayEventsView,
    EventDetailView,
    EventListView,
    EventStatsView,
    HealthView,
    OptionDetailView,
    OptionListView,
    OptionToggleView,
    VenueConfigView,
)

__all__ = [
    "CalendarMonthView",
    "ConfigExportView",
    "ConfigImportView",
    "ConfigResetView",
    "DayEventsView",
    "EventDetailView",
    "EventListView",
    "EventStatsView",
    "HealthView",
    "OptionDetailView",
    "OptionListView",
    "OptionToggleView",
    "VenueConfigView",
]
