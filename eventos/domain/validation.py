"""Field rules for event submissions.

Each rule maps a raw request value to ``Ok(normalized)`` or ``Err(message)``.
``validate_event`` runs every rule, in field order, and collects all failures.
"""

from collections.abc import Callable, Mapping
from datetime import date
from typing import Any

from eventos.domain.errors import FieldError
from eventos.domain.models import ValidatedEvent
from eventos.domain.result import Err, Ok, Result
from eventos.domain.value_objects import ImageUrl, Price, parse_event_date

FieldRule = Callable[[Any], Result[Any, str]]

PRICE_NOT_A_NUMBER = "Invalid input: expected number, received NaN"
INVALID_DATE = "Data inválida"
INVALID_IMAGE_URL = "Imagem deve ser uma URL válida"


def required_text(message: str) -> FieldRule:
    def rule(value: Any) -> Result[str, str]:
        if not isinstance(value, str) or not value.strip():
            return Err(message)
        return Ok(value.strip())

    return rule


def event_date(value: Any) -> Result[date, str]:
    try:
        return Ok(parse_event_date(value))
    except ValueError:
        return Err(INVALID_DATE)


def price(value: Any) -> Result[Price, str]:
    try:
        return Ok(Price.from_raw(value))
    except ValueError:
        return Err(PRICE_NOT_A_NUMBER)


def image_url(value: Any) -> Result[str, str]:
    if not isinstance(value, str):
        return Err(INVALID_IMAGE_URL)
    try:
        return Ok(str(ImageUrl(value)))
    except ValueError:
        return Err(INVALID_IMAGE_URL)


EVENT_RULES: tuple[tuple[str, FieldRule], ...] = (
    ("titulo", required_text("Título é obrigatório")),
    ("cat", required_text("Categoria é obrigatória")),
    ("data", event_date),
    ("hora", required_text("Hora é obrigatória")),
    ("local", required_text("Local é obrigatória")),
    ("preco", price),
    ("img", image_url),
    ("desc", required_text("Descrição é obrigatória")),
)

EVENT_FIELDS: tuple[str, ...] = tuple(name for name, _ in EVENT_RULES)


def validate_event(raw: Mapping[str, Any]) -> Result[ValidatedEvent, tuple[FieldError, ...]]:
    """Validate a raw submission against every field rule.

    Returns the normalized event, or every field error in field order.
    """
    values: dict[str, Any] = {}
    errors: list[FieldError] = []
    for name, rule in EVENT_RULES:
        outcome = rule(raw.get(name))
        if isinstance(outcome, Ok):
            values[name] = outcome.value
        else:
            errors.append(FieldError(path=name, message=outcome.error))

    if errors:
        return Err(tuple(errors))
    return Ok(ValidatedEvent(**values))
