"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from eventos.domain import ValidatedEvent


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def append(self, event: ValidatedEvent) -> None:
        """Record a validated event.

        Raises:
            EventStoreError: If the event could not be recorded.
        """
        ...

    @abstractmethod
    def list_events(self) -> list[ValidatedEvent]:
        """Return all events in insertion order."""
        ...
