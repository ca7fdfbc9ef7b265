"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Leave domain errors to the exception handler
- Never contain business logic

Every view below the health check is scoped to one venue by its code.
The stores and the event service are injected through ``as_view``.
"""

from datetime import date
from typing import NamedTuple

from django.conf import settings
from django.core.cache import cache
from django.http import HttpResponse
from rest_framework import serializers, status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from planner.cache_keys import venue_config_key
from planner.domain.errors import ValidationError
from planner.handlers.serializers import (
    CategoryInputSerializer,
    CategoryOptionSerializer,
    EventInputSerializer,
    EventRangeQuerySerializer,
    EventSerializer,
    EventStatsSerializer,
    LocationInputSerializer,
    LocationOptionSerializer,
    MonthQuerySerializer,
    MonthViewSerializer,
    PriorityInputSerializer,
    PriorityOptionSerializer,
)
from planner.services import ConfigService, EventService
from planner.stores.interfaces import ConfigStore

MIN_YEAR = 1900
MAX_YEAR = 9998


class OptionKind(NamedTuple):
    singular: str
    listing: str
    input_serializer: type[serializers.Serializer]
    output_serializer: type[serializers.Serializer]


OPTION_KINDS = {
    "locations": OptionKind(
        "location", "active_locations", LocationInputSerializer, LocationOptionSerializer
    ),
    "categories": OptionKind(
        "category", "effective_categories", CategoryInputSerializer, CategoryOptionSerializer
    ),
    "priorities": OptionKind(
        "priority", "effective_priorities", PriorityInputSerializer, PriorityOptionSerializer
    ),
}


class HealthView(APIView):
    """Handler for GET /api/health"""

    def get(self, request: Request) -> Response:
        return Response({"status": "ok"})


class VenueView(APIView):
    """Base for venue-scoped handlers."""

    config_store: ConfigStore | None = None
    event_service: EventService | None = None

    def load_config(self, venue_code: str) -> ConfigService:
        service = ConfigService(self.config_store, venue_code)
        service.load()
        return service


class VenueConfigView(VenueView):
    """Handler for GET/PUT /api/venues/{code}/config"""

    def get(self, request: Request, venue_code: str) -> Response:
        key = venue_config_key(venue_code)
        data = cache.get(key)
        if data is None:
            data = self.load_config(venue_code).config.to_dict()
            cache.set(key, data, settings.PLANNER_CONFIG_CACHE_SECONDS)
        return Response(data)

    def put(self, request: Request, venue_code: str) -> Response:
        if not isinstance(request.data, dict):
            raise ValidationError("Configuration update must be a JSON object")
        service = self.load_config(venue_code)
        return Response(service.update(request.data).to_dict())


class ConfigExportView(VenueView):
    """Handler for GET /api/venues/{code}/config/export"""

    def get(self, request: Request, venue_code: str) -> HttpResponse:
        document = self.load_config(venue_code).export_config()
        response = HttpResponse(document, content_type="application/json; charset=utf-8")
        response["Content-Disposition"] = f'attachment; filename="{venue_code}-config.json"'
        return response


class ConfigImportView(VenueView):
    """Handler for POST /api/venues/{code}/config/import

    The body is the raw exported document.
    """

    def post(self, request: Request, venue_code: str) -> Response:
        service = self.load_config(venue_code)
        try:
            text = request.body.decode("utf-8")
        except UnicodeDecodeError:
            return Response({"imported": False})
        return Response({"imported": service.import_config(text)})


class ConfigResetView(VenueView):
    """Handler for POST /api/venues/{code}/config/reset"""

    def post(self, request: Request, venue_code: str) -> Response:
        return Response(self.load_config(venue_code).reset_to_defaults().to_dict())


class OptionListView(VenueView):
    """Handler for GET/POST /api/venues/{code}/{locations|categories|priorities}"""

    kind: str = ""

    def get(self, request: Request, venue_code: str) -> Response:
        kind = OPTION_KINDS[self.kind]
        options = getattr(self.load_config(venue_code), kind.listing)()
        return Response(kind.output_serializer(options, many=True).data)

    def post(self, request: Request, venue_code: str) -> Response:
        kind = OPTION_KINDS[self.kind]
        serializer = kind.input_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        service = self.load_config(venue_code)
        option = getattr(service, f"add_{kind.singular}")(**serializer.validated_data)
        return Response(kind.output_serializer(option).data, status=status.HTTP_201_CREATED)


class OptionDetailView(VenueView):
    """Handler for DELETE /api/venues/{code}/{kind}/{id}"""

    kind: str = ""

    def delete(self, request: Request, venue_code: str, option_id: str) -> Response:
        kind = OPTION_KINDS[self.kind]
        getattr(self.load_config(venue_code), f"remove_{kind.singular}")(option_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class OptionToggleView(VenueView):
    """Handler for POST /api/venues/{code}/{kind}/{id}/toggle"""

    kind: str = ""

    def post(self, request: Request, venue_code: str, option_id: str) -> Response:
        kind = OPTION_KINDS[self.kind]
        service = self.load_config(venue_code)
        getattr(service, f"toggle_{kind.singular}")(option_id)
        options = getattr(service, kind.listing)()
        return Response(kind.output_serializer(options, many=True).data)


class EventListView(VenueView):
    """Handler for GET/POST /api/venues/{code}/events"""

    def get(self, request: Request, venue_code: str) -> Response:
        query = EventRangeQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        service = self.load_config(venue_code)
        events = self.event_service.list_events(
            service.venue_id, query.validated_data["start"], query.validated_data["end"]
        )
        return Response(EventSerializer(events, many=True).data)

    def post(self, request: Request, venue_code: str) -> Response:
        serializer = EventInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        service = self.load_config(venue_code)
        event = self.event_service.create_event(
            service.venue_id, serializer.to_draft(service.config), service.config
        )
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class EventDetailView(VenueView):
    """Handler for GET/PUT/DELETE /api/venues/{code}/events/{event_id}"""

    def get(self, request: Request, venue_code: str, event_id: str) -> Response:
        service = self.load_config(venue_code)
        event = self.event_service.get_event(service.venue_id, event_id)
        return Response(EventSerializer(event).data)

    def put(self, request: Request, venue_code: str, event_id: str) -> Response:
        serializer = EventInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        service = self.load_config(venue_code)
        event = self.event_service.update_event(
            service.venue_id, event_id, serializer.to_draft(service.config), service.config
        )
        return Response(EventSerializer(event).data)

    def delete(self, request: Request, venue_code: str, event_id: str) -> Response:
        service = self.load_config(venue_code)
        self.event_service.delete_event(service.venue_id, event_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class DayEventsView(VenueView):
    """Handler for GET /api/venues/{code}/days/{YYYY-MM-DD}/events"""

    def get(self, request: Request, venue_code: str, day: str) -> Response:
        try:
            parsed = date.fromisoformat(day)
        except ValueError:
            raise ValidationError("Date must be in YYYY-MM-DD format") from None
        service = self.load_config(venue_code)
        events = self.event_service.events_on_date(service.venue_id, parsed)
        return Response(EventSerializer(events, many=True).data)


class CalendarMonthView(VenueView):
    """Handler for GET /api/venues/{code}/calendar/{year}/{month}

    ``month`` is zero-based (0 = January).
    """

    def get(self, request: Request, venue_code: str, year: int, month: int) -> Response:
        if not 0 <= month <= 11:
            raise ValidationError("Month must be between 0 and 11")
        if not MIN_YEAR <= year <= MAX_YEAR:
            raise ValidationError(f"Year must be between {MIN_YEAR} and {MAX_YEAR}")
        query = MonthQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        service = self.load_config(venue_code)
        view = self.event_service.month_view(
            service.venue_id,
            year,
            month,
            first_day_of_week=service.config.first_day_of_week,
            selected=query.validated_data["selected"],
        )
        return Response(MonthViewSerializer(view).data)


class EventStatsView(VenueView):
    """Handler for GET /api/venues/{code}/stats"""

    def get(self, request: Request, venue_code: str) -> Response:
        service = self.load_config(venue_code)
        return Response(EventStatsSerializer(self.event_service.stats(service.venue_id)).data)
