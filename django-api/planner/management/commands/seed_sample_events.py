from datetime import date, datetime, time, timedelta

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from planner.domain import EventDraft, FreeTextLocation
from planner.domain.errors import DomainError
from planner.services import ConfigService, EventService
from planner.stores import DjangoConfigStore, DjangoEventRepository


def _at(day: date, hour: int, minute: int = 0) -> datetime:
    return datetime.combine(day, time(hour, minute))


def sample_drafts(today: date) -> list[EventDraft]:
    """A week of example events around ``today``."""
    tomorrow = today + timedelta(days=1)
    next_week = today + timedelta(days=7)
    return [
        EventDraft(
            title="Team Meeting",
            description="Weekly team sync to discuss project progress and upcoming deadlines.",
            start_date=_at(today, 9),
            end_date=_at(today, 10),
            location=FreeTextLocation("Conference Room A"),
            category="meeting",
            priority="high",
            attendees=("John Doe", "Jane Smith", "Mike Johnson"),
        ),
        EventDraft(
            title="Lunch with Sarah",
            description="Catch up over lunch at the new Italian restaurant downtown.",
            start_date=_at(today, 12, 30),
            end_date=_at(today, 14),
            location=FreeTextLocation("Mario's Italian Restaurant"),
            category="personal",
            priority="medium",
            attendees=("Sarah Wilson",),
        ),
        EventDraft(
            title="Project Deadline",
            description="Final submission for the Q4 marketing campaign project.",
            start_date=_at(tomorrow, 17),
            end_date=_at(tomorrow, 18),
            category="work",
            priority="high",
        ),
        EventDraft(
            title="Gym Session",
            description="Personal training session with Mark.",
            start_date=_at(today + timedelta(days=2), 18),
            end_date=_at(today + timedelta(days=2), 19),
            location=FreeTextLocation("FitLife Gym"),
            category="personal",
            priority="low",
        ),
        EventDraft(
            title="Conference Call",
            description="Q4 strategy discussion with international team.",
            start_date=_at(today + timedelta(days=3), 15),
            end_date=_at(today + timedelta(days=3), 16, 30),
            category="meeting",
            priority="high",
            attendees=("Remote Team",),
        ),
        EventDraft(
            title="Doctor Appointment",
            description="Annual check-up with Dr. Anderson.",
            start_date=_at(next_week, 10, 30),
            end_date=_at(next_week, 11, 30),
            location=FreeTextLocation("Downtown Medical Center"),
            category="personal",
            priority="high",
        ),
        EventDraft(
            title="Birthday Party",
            description="Celebrating Tom's 30th birthday with friends and family.",
            start_date=_at(next_week + timedelta(days=1), 19),
            end_date=_at(next_week + timedelta(days=1), 23),
            location=FreeTextLocation("Tom's House"),
            category="other",
            priority="medium",
            attendees=("Tom Brown", "Lisa Green", "David White", "Amy Black"),
        ),
    ]


class Command(BaseCommand):
    help = "Replace a venue's events with a sample set relative to today."

    def add_arguments(self, parser):
        parser.add_argument("venue_code")
        parser.add_argument(
            "--keep",
            action="store_true",
            help="Add the samples without deleting the venue's existing events.",
        )

    def handle(self, *args, **options):
        config_service = ConfigService(DjangoConfigStore(), options["venue_code"])
        repository = DjangoEventRepository()
        event_service = EventService(repository)
        try:
            config_service.load()
            venue_id = config_service.venue_id
            drafts = sample_drafts(date.today())
            # A failed sample leaves the venue's previous events in place.
            with transaction.atomic():
                if not options["keep"]:
                    for event in repository.list_all(venue_id):
                        repository.delete(venue_id, event.id)
                for draft in drafts:
                    event_service.create_event(venue_id, draft, config_service.config)
        except DomainError as exc:
            raise CommandError(exc.message) from exc
        self.stdout.write(
            self.style.SUCCESS(f"Created {len(drafts)} sample events for {options['venue_code']}")
        )
