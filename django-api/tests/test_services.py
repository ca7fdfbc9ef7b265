"""Unit tests for EventService and ConfigService.

These test business rules, state changes and domain error mapping
against the in-memory stores.
Run with: pytest tests/test_services.py -v
"""

from dataclasses import replace
from datetime import date, datetime

import pytest

from planner.domain import DEFAULT_CONFIG, EventDraft, FreeTextLocation, SelectedLocation, VenueId
from planner.domain.errors import (
    EventNotFoundError,
    InvalidEventIdError,
    PersistenceError,
    ValidationError,
    VenueNotFoundError,
)
from planner.services import ConfigService, ConfigState
from planner.stores import InMemoryConfigStore


def make_draft(**overrides) -> EventDraft:
    fields = {
        "title": "Board Meeting",
        "start_date": datetime(2024, 3, 20, 9, 0),
        "end_date": datetime(2024, 3, 20, 10, 0),
        "category": "meeting",
        "priority": "high",
    }
    fields.update(overrides)
    return EventDraft(**fields)


class FailingConfigStore(InMemoryConfigStore):
    """Config store that loads fine but refuses every write."""

    def update(self, venue_id, values):
        raise PersistenceError()


class DeactivatedVenueConfigStore(InMemoryConfigStore):
    """Config store whose venue disappears between load and write."""

    def update(self, venue_id, values):
        raise VenueNotFoundError(str(venue_id))


class TestEventService:
    """Tests for EventService."""

    def test_get_event_invalid_id_raises_error(self, event_service, venue_id):
        """get_event raises InvalidEventIdError for malformed UUID."""
        with pytest.raises(InvalidEventIdError):
            event_service.get_event(venue_id, "not-a-uuid")

    def test_get_event_not_found_raises_error(self, event_service, venue_id):
        """get_event raises EventNotFoundError when store returns None."""
        with pytest.raises(EventNotFoundError):
            event_service.get_event(venue_id, "9b2f6f5e-3d7a-4d3b-9d9c-0f4b2f1e8a11")

    def test_create_event_assigns_id_and_timestamps(self, event_service, venue_id, clock):
        """create_event stamps created_at and updated_at from the clock."""
        event = event_service.create_event(venue_id, make_draft(), DEFAULT_CONFIG)
        assert event.created_at == event.updated_at == clock.now
        assert event_service.get_event(venue_id, str(event.id)) == event

    def test_create_event_cleans_up_input(self, event_service, venue_id):
        """Titles, attendees and free-text locations are trimmed."""
        draft = make_draft(
            title="  Board Meeting ",
            attendees=("  Ann ", "", "   ", "Bob"),
            location=FreeTextLocation("  Lobby "),
        )
        event = event_service.create_event(venue_id, draft, DEFAULT_CONFIG)
        assert event.title == "Board Meeting"
        assert event.attendees == ("Ann", "Bob")
        assert event.location == "Lobby"

    def test_selected_location_is_stored_by_name(self, event_service, venue_id):
        """A selected location is saved as its display name."""
        draft = make_draft(location=SelectedLocation("meeting-room-a"))
        event = event_service.create_event(venue_id, draft, DEFAULT_CONFIG)
        assert event.location == "Meeting Room A"

    @pytest.mark.parametrize(
        "overrides",
        [
            {"title": "   "},
            {"start_date": None},
            {"end_date": None},
            {"end_date": datetime(2024, 3, 20, 9, 0)},
            {"end_date": datetime(2024, 3, 19, 9, 0)},
            {"category": "appointment"},
            {"priority": "urgent"},
        ],
    )
    def test_create_event_rejects_invalid_drafts(self, event_service, venue_id, overrides):
        """Invalid drafts raise ValidationError and store nothing."""
        with pytest.raises(ValidationError):
            event_service.create_event(venue_id, make_draft(**overrides), DEFAULT_CONFIG)
        assert event_service.list_events(venue_id) == []

    def test_custom_priority_is_accepted(self, event_service, venue_id):
        """Custom priorities of the venue are valid for events."""
        event = event_service.create_event(venue_id, make_draft(priority="critical"), DEFAULT_CONFIG)
        assert event.priority == "critical"

    def test_update_keeps_identity_and_bumps_updated_at(self, event_service, venue_id, clock):
        """update_event keeps id and created_at but refreshes updated_at."""
        created = event_service.create_event(venue_id, make_draft(), DEFAULT_CONFIG)
        clock.advance(hours=1)

        updated = event_service.update_event(
            venue_id, str(created.id), make_draft(title="Renamed"), DEFAULT_CONFIG
        )

        assert updated.id == created.id
        assert updated.created_at == created.created_at
        assert updated.updated_at == clock.now
        assert event_service.get_event(venue_id, str(created.id)).title == "Renamed"

    def test_update_unknown_event(self, event_service, venue_id):
        """Updating a missing event raises EventNotFoundError."""
        with pytest.raises(EventNotFoundError):
            event_service.update_event(
                venue_id, "9b2f6f5e-3d7a-4d3b-9d9c-0f4b2f1e8a11", make_draft(), DEFAULT_CONFIG
            )

    def test_delete_event(self, event_service, venue_id):
        """Deleting twice raises EventNotFoundError the second time."""
        event = event_service.create_event(venue_id, make_draft(), DEFAULT_CONFIG)
        event_service.delete_event(venue_id, str(event.id))
        with pytest.raises(EventNotFoundError):
            event_service.delete_event(venue_id, str(event.id))

    def test_events_are_scoped_to_their_venue(self, event_service, venue_id):
        """Another venue never sees these events."""
        event_service.create_event(venue_id, make_draft(), DEFAULT_CONFIG)
        assert event_service.list_events(VenueId.new()) == []

    def test_events_on_date_includes_multi_day_events(self, event_service, venue_id):
        """Multi-day events are listed on each day they cover."""
        event = event_service.create_event(
            venue_id,
            make_draft(start_date=datetime(2024, 3, 19, 18), end_date=datetime(2024, 3, 21, 9)),
            DEFAULT_CONFIG,
        )
        assert event_service.events_on_date(venue_id, date(2024, 3, 20)) == [event]
        assert event_service.events_on_date(venue_id, date(2024, 3, 22)) == []

    def test_month_view_marks_today_from_the_clock(self, event_service, venue_id, clock):
        """The month grid flags today from the injected clock."""
        event = event_service.create_event(venue_id, make_draft(), DEFAULT_CONFIG)
        view = event_service.month_view(venue_id, 2024, 2, selected=date(2024, 3, 20))
        cells = {cell.day: cell for cell in view.cells()}
        assert len(cells) == 42
        assert cells[clock.now.date()].is_today
        assert cells[date(2024, 3, 20)].is_selected
        assert cells[date(2024, 3, 20)].events == (event,)

    def test_stats_use_the_clock(self, event_service, venue_id):
        """Dashboard counters are computed relative to the clock."""
        event_service.create_event(
            venue_id,
            make_draft(start_date=datetime(2024, 3, 15, 9), end_date=datetime(2024, 3, 15, 11)),
            DEFAULT_CONFIG,
        )
        event_service.create_event(venue_id, make_draft(), DEFAULT_CONFIG)
        stats = event_service.stats(venue_id)
        assert (stats.total, stats.today, stats.upcoming, stats.urgent) == (2, 1, 2, 0)


class TestConfigService:
    """Tests for ConfigService."""

    def test_config_before_load_raises(self, config_store, venue_id):
        """Accessing config before load raises RuntimeError."""
        service = ConfigService(config_store, "main")
        assert service.state is ConfigState.UNINITIALIZED
        with pytest.raises(RuntimeError):
            service.config
        with pytest.raises(RuntimeError):
            service.venue_id

    def test_load_unknown_venue(self, config_store):
        """Loading an unknown venue raises VenueNotFoundError."""
        with pytest.raises(VenueNotFoundError):
            ConfigService(config_store, "nowhere").load()

    def test_load_resolves_against_defaults(self, config_service, venue_id):
        """An empty stored config resolves to the defaults."""
        assert config_service.state is ConfigState.LOADED
        assert config_service.config == DEFAULT_CONFIG
        assert config_service.venue_id == venue_id

    def test_update_persists_then_applies(self, config_service, config_store):
        """update writes to the store and swaps the in-memory config."""
        config = config_service.update({"companyName": "Acme"})
        assert config.company_name == "Acme"
        assert config_service.config.company_name == "Acme"
        assert config_service.state is ConfigState.LOADED
        assert config_store.get("main").values["companyName"] == "Acme"

    def test_update_visible_to_a_fresh_load(self, config_service, config_store):
        """A new service sees values saved by an earlier one."""
        config_service.update({"timeFormat": "24h"})
        assert ConfigService(config_store, "main").load().time_format == "24h"

    def test_failed_persist_keeps_last_known_good(self):
        """A failed write keeps the previous config and state."""
        store = FailingConfigStore()
        store.add_venue("main", {"companyName": "Acme"})
        service = ConfigService(store, "main")
        service.load()

        with pytest.raises(PersistenceError):
            service.update({"companyName": "Changed"})

        assert service.config.company_name == "Acme"
        assert service.state is ConfigState.LOADED

    def test_missing_venue_on_write_keeps_last_known_good(self):
        """A write that fails with a non-storage error still leaves the service LOADED."""
        store = DeactivatedVenueConfigStore()
        store.add_venue("main", {"companyName": "Acme"})
        service = ConfigService(store, "main")
        service.load()

        with pytest.raises(VenueNotFoundError):
            service.update({"companyName": "Changed"})

        assert service.config.company_name == "Acme"
        assert service.state is ConfigState.LOADED

    def test_invalid_update_leaves_config_unchanged(self, config_service):
        """A rejected update does not touch the config."""
        with pytest.raises(ValidationError):
            config_service.update({"secondaryColor": "red"})
        assert config_service.config == DEFAULT_CONFIG

    def test_reset_to_defaults(self, config_service):
        """reset_to_defaults restores the system defaults."""
        config_service.update({"companyName": "Acme", "features": {"allowRecurring": True}})
        assert config_service.reset_to_defaults() == DEFAULT_CONFIG
        assert config_service.config == DEFAULT_CONFIG

    def test_import_malformed_returns_false(self, config_service):
        """A malformed import returns False and changes nothing."""
        config_service.update({"companyName": "Acme"})
        assert config_service.import_config("{not json") is False
        assert config_service.config.company_name == "Acme"

    def test_export_then_import(self, config_service, config_store):
        """An exported document can be imported back."""
        config_service.update({"companyName": "Acme", "dateFormat": "YYYY-MM-DD"})
        exported = config_service.export_config()
        config_service.reset_to_defaults()

        assert config_service.import_config(exported) is True
        assert config_service.config.company_name == "Acme"
        assert ConfigService(config_store, "main").load().date_format == "YYYY-MM-DD"

    def test_add_category(self, config_service):
        """New categories get a generated id and appear last."""
        category = config_service.add_category("Gala", color="#aa00aa", icon="🎉")
        assert config_service.effective_categories()[-1] == category
        assert category.id.startswith("category-")

    def test_toggle_custom_category_hides_it(self, config_service):
        """Toggling a custom category hides and restores it."""
        config_service.toggle_category("training")
        ids = [category.id for category in config_service.effective_categories()]
        assert "training" not in ids
        config_service.toggle_category("training")
        assert "training" in [category.id for category in config_service.effective_categories()]

    def test_default_category_cannot_be_toggled_or_removed(self, config_service):
        """Built-in categories are read-only."""
        with pytest.raises(ValidationError):
            config_service.toggle_category("meeting")
        with pytest.raises(ValidationError):
            config_service.remove_category("meeting")

    def test_unknown_ids_are_no_ops(self, config_service):
        """Toggling or removing an unknown id changes nothing."""
        config_service.toggle_location("missing")
        config_service.remove_priority("missing")
        assert config_service.config == DEFAULT_CONFIG

    def test_custom_priority_shadows_default_with_same_id(self, config_service):
        """A custom priority hides the built-in one with the same id."""
        config_service.remove_priority("low")
        assert [p.id for p in config_service.config.custom_priorities] == [
            "critical",
            "important",
            "normal",
        ]
        assert "low" in [p.id for p in config_service.effective_priorities()]

    def test_add_priority_clamps_level(self, config_service):
        """Out-of-range levels are clamped to 1..10."""
        priority = config_service.add_priority("Top", level=99)
        assert priority.level == 10
        # Level ties keep insertion order, so it lands right after "critical".
        assert config_service.effective_priorities()[4] == priority

    def test_add_and_toggle_location(self, config_service):
        """Toggling a location hides it from the active list."""
        location = config_service.add_location("Rooftop", capacity=40, amenities=["Heaters"])
        assert location in config_service.active_locations()
        config_service.toggle_location(location.id)
        assert location.id not in [loc.id for loc in config_service.active_locations()]
        assert replace(location, is_active=False) in config_service.config.locations

    def test_options_added_back_to_back_get_distinct_ids(self, config_service):
        """Two options created in the same instant can still be told apart."""
        first = config_service.add_category("Gala")
        second = config_service.add_category("Gala")
        assert first.id != second.id

        config_service.remove_category(first.id)

        assert [c.id for c in config_service.config.custom_categories][-1] == second.id
        assert first.id not in [c.id for c in config_service.effective_categories()]

    def test_add_location_rejects_negative_capacity(self, config_service):
        """A negative capacity is a validation error, not a storage failure."""
        with pytest.raises(ValidationError):
            config_service.add_location("Rooftop", capacity=-5)
        assert config_service.config == DEFAULT_CONFIG
