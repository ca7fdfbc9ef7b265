from django.core.management.base import BaseCommand, CommandError

from planner.domain.errors import PersistenceError
from planner.models import Venue
from planner.stores import DjangoConfigStore


class Command(BaseCommand):
    help = "Create a venue with the default configuration."

    def add_arguments(self, parser):
        parser.add_argument("venue_code", help="Short unique code used in API paths.")
        parser.add_argument("--name", required=True, help="Display name of the venue.")

    def handle(self, *args, **options):
        venue_code = options["venue_code"]
        if Venue.objects.filter(venue_code=venue_code).exists():
            raise CommandError(f"Venue '{venue_code}' already exists")
        try:
            venue_id = DjangoConfigStore().provision(venue_code, options["name"])
        except PersistenceError as exc:
            raise CommandError(exc.message) from exc
        self.stdout.write(self.style.SUCCESS(f"Created venue {venue_code} ({venue_id})"))
