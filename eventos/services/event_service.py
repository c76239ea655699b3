"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate submissions through the field rules
- Return results, never raise for invalid input
"""

import logging
from collections.abc import Mapping
from typing import Any

from eventos.domain import FieldError, Ok, Result, ValidatedEvent
from eventos.domain.validation import validate_event
from eventos.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


class EventService:
    """Service for event submission operations."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def create_event(
        self, raw: Mapping[str, Any]
    ) -> Result[ValidatedEvent, tuple[FieldError, ...]]:
        """Validate a submission and store it when every field passes.

        The store is left untouched when validation fails.

        Raises:
            EventStoreError: If the store cannot record the event.
        """
        result = validate_event(raw)
        if isinstance(result, Ok):
            self._store.append(result.value)
            logger.info("Event created: %s", result.value.titulo)
        else:
            logger.info(
                "Event rejected, invalid fields: %s",
                ", ".join(error.path for error in result.error),
            )
        return result

    def list_events(self) -> list[ValidatedEvent]:
        """Return all stored events."""
        return self._store.list_events()
