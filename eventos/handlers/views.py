"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Extract raw fields from the request body
- Call services for business logic
- Map results and failures to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging
from collections.abc import Mapping
from typing import Any

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from eventos.domain import Ok
from eventos.domain.validation import EVENT_FIELDS
from eventos.handlers.serializers import EventSerializer, FieldErrorSerializer
from eventos.services.event_service import EventService
from eventos.stores import EventStore, get_event_store

logger = logging.getLogger(__name__)

EVENT_CREATED = "Evento criado com sucesso"
VALIDATION_ERROR = "Validation error"
INTERNAL_ERROR = "Erro interno do servidor"


def extract_event_fields(body: Any) -> dict[str, Any]:
    """Pick the event fields out of a request body; missing fields are None."""
    if not isinstance(body, Mapping):
        body = {}
    return {name: body.get(name) for name in EVENT_FIELDS}


class EventListView(APIView):
    """Handler for GET and POST /api/eventos"""

    store: EventStore | None = None

    def get_service(self) -> EventService:
        return EventService(self.store if self.store is not None else get_event_store())

    def get(self, request: Request) -> Response:
        try:
            events = self.get_service().list_events()
            return Response(EventSerializer(events, many=True).data)
        except Exception:
            logger.exception("Failed to list events")
            return Response(
                {"error": INTERNAL_ERROR},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

    def post(self, request: Request) -> Response:
        raw = extract_event_fields(request.data)
        try:
            result = self.get_service().create_event(raw)
        except Exception:
            logger.exception("Failed to create event")
            return Response(
                {"error": INTERNAL_ERROR},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        if isinstance(result, Ok):
            return Response({"message": EVENT_CREATED}, status=status.HTTP_201_CREATED)
        return Response(
            {
                "message": VALIDATION_ERROR,
                "errors": FieldErrorSerializer(result.error, many=True).data,
            },
            status=status.HTTP_400_BAD_REQUEST,
        )
