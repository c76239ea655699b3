"""In-memory implementation of the EventStore.

Events live for the lifetime of the process.
"""

import threading

from eventos.domain import ValidatedEvent
from eventos.stores.interfaces import EventStore


class InMemoryEventStore(EventStore):
    """List-backed event store."""

    def __init__(self) -> None:
        self._events: list[ValidatedEvent] = []
        self._lock = threading.Lock()

    def append(self, event: ValidatedEvent) -> None:
        with self._lock:
            self._events.append(event)

    def list_events(self) -> list[ValidatedEvent]:
        with self._lock:
            return list(self._events)
