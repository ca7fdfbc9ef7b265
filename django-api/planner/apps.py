from django.apps import AppConfig


class PlannerConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "planner"
    verbose_name = "Venue Planner"

    def ready(self) -> None:
        from planner import signals  # noqa: F401
        from planner.services import EventService
        from planner.stores import DjangoConfigStore, DjangoEventRepository

        self.config_store = DjangoConfigStore()
        self.event_service = EventService(DjangoEventRepository())
