"""Integration tests for the Django ORM stores.

Run with: pytest tests/test_django_store.py -v
"""

from dataclasses import replace
from datetime import date, datetime
from unittest import mock

import pytest
from django.db import DatabaseError, IntegrityError, transaction

from planner import models
from planner.domain import DEFAULT_CONFIG, Event, EventId, VenueId
from planner.domain.config_resolver import effective_config
from planner.domain.errors import PersistenceError, VenueNotFoundError
from planner.stores import DjangoConfigStore, DjangoEventRepository

CREATED = datetime(2024, 3, 1, 8, 0)


def make_event(title="Board Meeting", start=None, end=None, attendees=()) -> Event:
    return Event(
        id=EventId.new(),
        title=title,
        description="Quarterly review",
        start_date=start or datetime(2024, 3, 20, 9, 0),
        end_date=end or datetime(2024, 3, 20, 10, 0),
        category="meeting",
        priority="high",
        location="Main Hall",
        attendees=attendees,
        created_at=CREATED,
        updated_at=CREATED,
    )


@pytest.mark.django_db
class TestDjangoConfigStore:
    """Tests for DjangoConfigStore."""

    def test_provision_stores_the_default_configuration(self):
        store = DjangoConfigStore()
        venue_id = store.provision("grand", "Grand Hall")

        stored = store.get("grand")

        assert stored.venue_id == venue_id
        assert stored.venue_code == "grand"
        assert effective_config(stored.values) == replace(DEFAULT_CONFIG, venue_name="Grand Hall")

    def test_provision_duplicate_code(self, venue):
        with pytest.raises(PersistenceError):
            DjangoConfigStore().provision("main", "Another")

    def test_unknown_or_inactive_venue(self, venue):
        store = DjangoConfigStore()
        assert store.get("nowhere") is None
        models.Venue.objects.filter(venue_code="main").update(is_active=False)
        assert store.get("main") is None

    def test_update_writes_columns_and_lists(self, venue):
        store = DjangoConfigStore()
        store.update(
            venue,
            {
                "companyName": "Acme",
                "venuePhone": "555-0100",
                "features": {"allowRecurring": True},
                "locations": [{"id": "annex", "name": "Annex", "capacity": 30}],
            },
        )

        config = effective_config(store.get("main").values)

        assert config.company_name == "Acme"
        assert config.venue_phone == "555-0100"
        assert config.features.allow_recurring is True
        assert config.features.show_attendees is True
        assert [location.id for location in config.locations] == ["annex"]
        assert config.custom_categories == DEFAULT_CONFIG.custom_categories

    def test_update_keeps_list_order(self, venue):
        store = DjangoConfigStore()
        priorities = [
            {"id": "low", "name": "Low", "level": 2},
            {"id": "critical", "name": "Critical", "level": 10},
        ]
        store.update(venue, {"customPriorities": priorities})
        stored = store.get("main").values["customPriorities"]
        assert [priority["id"] for priority in stored] == ["low", "critical"]

    def test_duplicate_option_code_is_rejected_by_the_database(self, venue):
        row = models.Location.objects.filter(venue_id=venue.value).first()
        with pytest.raises(IntegrityError), transaction.atomic():
            models.Location.objects.create(venue_id=venue.value, code=row.code, name="Copy")

    def test_update_unknown_venue(self):
        with pytest.raises(VenueNotFoundError):
            DjangoConfigStore().update(VenueId.new(), {"companyName": "Acme"})

    def test_database_failure_becomes_persistence_error(self, venue):
        with mock.patch.object(
            models.Venue.objects, "select_related", side_effect=DatabaseError("down")
        ):
            with pytest.raises(PersistenceError):
                DjangoConfigStore().get("main")


@pytest.mark.django_db
class TestDjangoEventRepository:
    """Tests for DjangoEventRepository."""

    def test_save_and_get(self, venue):
        repository = DjangoEventRepository()
        event = make_event(attendees=("Ann", "Bob", "Cid"))

        assert repository.save(venue, event) == event.id
        assert repository.get(venue, event.id) == event

    def test_get_missing(self, venue):
        assert DjangoEventRepository().get(venue, EventId.new()) is None

    def test_list_all_is_ordered_by_start(self, venue):
        repository = DjangoEventRepository()
        late = make_event("Late", datetime(2024, 3, 20, 15), datetime(2024, 3, 20, 16))
        early = make_event("Early", datetime(2024, 3, 20, 8), datetime(2024, 3, 20, 9))
        repository.save(venue, late)
        repository.save(venue, early)
        assert [event.title for event in repository.list_all(venue)] == ["Early", "Late"]

    def test_list_all_range_overlap_is_by_day(self, venue):
        repository = DjangoEventRepository()
        spanning = make_event("Expo", datetime(2024, 3, 18, 22), datetime(2024, 3, 20, 1))
        later = make_event("Later", datetime(2024, 3, 25, 9), datetime(2024, 3, 25, 10))
        repository.save(venue, spanning)
        repository.save(venue, later)

        def titles(start, end):
            return [event.title for event in repository.list_all(venue, start, end)]

        assert titles(date(2024, 3, 20), date(2024, 3, 20)) == ["Expo"]
        assert titles(date(2024, 3, 17), date(2024, 3, 18)) == ["Expo"]
        assert titles(date(2024, 3, 21), date(2024, 3, 24)) == []
        assert titles(date(2024, 3, 19), None) == ["Expo", "Later"]

    def test_update_replaces_fields_and_attendees(self, venue):
        repository = DjangoEventRepository()
        event = make_event(attendees=("Ann",))
        repository.save(venue, event)
        changed = replace(event, title="Renamed", attendees=("Bob", "Cid"), location=None)

        assert repository.update(venue, changed) is True
        assert repository.get(venue, event.id) == changed

    def test_update_missing(self, venue):
        assert DjangoEventRepository().update(venue, make_event()) is False

    def test_delete(self, venue):
        repository = DjangoEventRepository()
        event = make_event(attendees=("Ann",))
        repository.save(venue, event)

        assert repository.delete(venue, event.id) is True
        assert repository.delete(venue, event.id) is False
        assert not models.EventAttendee.objects.exists()

    def test_events_are_scoped_to_their_venue(self, venue):
        other = DjangoConfigStore().provision("annex", "Annex")
        repository = DjangoEventRepository()
        event = make_event()
        repository.save(venue, event)

        assert repository.list_all(other) == []
        assert repository.get(other, event.id) is None
        assert repository.delete(other, event.id) is False

    def test_rejected_write_becomes_persistence_error(self, venue):
        repository = DjangoEventRepository()
        backwards = make_event(start=datetime(2024, 3, 20, 10), end=datetime(2024, 3, 20, 9))
        with pytest.raises(PersistenceError):
            repository.save(venue, backwards)

    def test_database_failure_becomes_persistence_error(self, venue):
        with mock.patch.object(models.Event.objects, "filter", side_effect=DatabaseError("down")):
            with pytest.raises(PersistenceError):
                DjangoEventRepository().list_all(venue)
