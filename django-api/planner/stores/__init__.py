from planner.stores.django_store import DjangoConfigStore, DjangoEventRepository
from planner.stores.interfaces import ConfigStore, EventRepository
from planner.stores.memory_store import InMemoryConfigStore, InMemoryEventRepository

__all__ = [
    "ConfigStore",
    "EventRepository",
    "DjangoConfigStore",
    "DjangoEventRepository",
    "InMemoryConfigStore",
    "InMemoryEventRepository",
]
