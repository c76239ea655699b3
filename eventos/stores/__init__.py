from functools import lru_cache

from django.conf import settings
from django.utils.module_loading import import_string

from eventos.stores.interfaces import EventStore
from eventos.stores.memory_store import InMemoryEventStore

__all__ = ["EventStore", "InMemoryEventStore", "get_event_store"]


@lru_cache(maxsize=None)
def get_event_store() -> EventStore:
    """Return the process-wide store configured by ``EVENTOS_STORE``."""
    store_class = import_string(settings.EVENTOS_STORE)
    return store_class()
