from django.apps import apps
from django.urls import path

from planner.handlers import (
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

app_config = apps.get_app_config("planner")
services = {"config_store": app_config.config_store, "event_service": app_config.event_service}

venue_prefix = "venues/<str:venue_code>"

option_patterns = []
for kind in ("locations", "categories", "priorities"):
    option_patterns += [
        path(
            f"{venue_prefix}/{kind}",
            OptionListView.as_view(kind=kind, **services),
            name=f"{kind}-list",
        ),
        path(
            f"{venue_prefix}/{kind}/<str:option_id>",
            OptionDetailView.as_view(kind=kind, **services),
            name=f"{kind}-detail",
        ),
        path(
            f"{venue_prefix}/{kind}/<str:option_id>/toggle",
            OptionToggleView.as_view(kind=kind, **services),
            name=f"{kind}-toggle",
        ),
    ]

urlpatterns = [
    path("health", HealthView.as_view(), name="health"),
    path(f"{venue_prefix}/config", VenueConfigView.as_view(**services), name="venue-config"),
    path(
        f"{venue_prefix}/config/export",
        ConfigExportView.as_view(**services),
        name="venue-config-export",
    ),
    path(
        f"{venue_prefix}/config/import",
        ConfigImportView.as_view(**services),
        name="venue-config-import",
    ),
    path(
        f"{venue_prefix}/config/reset",
        ConfigResetView.as_view(**services),
        name="venue-config-reset",
    ),
    *option_patterns,
    path(f"{venue_prefix}/events", EventListView.as_view(**services), name="event-list"),
    path(
        f"{venue_prefix}/events/<str:event_id>",
        EventDetailView.as_view(**services),
        name="event-detail",
    ),
    path(
        f"{venue_prefix}/days/<str:day>/events",
        DayEventsView.as_view(**services),
        name="day-events",
    ),
    path(
        f"{venue_prefix}/calendar/<int:year>/<int:month>",
        CalendarMonthView.as_view(**services),
        name="calendar-month",
    ),
    path(f"{venue_prefix}/stats", EventStatsView.as_view(**services), name="event-stats"),
]
