from eventos.domain.errors import DomainError, ErrorCode, EventStoreError, FieldError
from eventos.domain.models import ValidatedEvent
from eventos.domain.result import Err, Ok, Result
from eventos.domain.value_objects import ImageUrl, Price

__all__ = [
    "ValidatedEvent",
    "FieldError",
    "DomainError",
    "ErrorCode",
    "EventStoreError",
    "Ok",
    "Err",
    "Result",
    "Price",
    "ImageUrl",
]
