"""Domain models representing stored state.

Events reach this shape only through the validator in domain/validation.py.
"""

from dataclasses import dataclass
from datetime import date

from eventos.domain.value_objects import Price


@dataclass(frozen=True)
class ValidatedEvent:
    """Domain representation of a submitted event."""

    titulo: str
    cat: str
    data: date
    hora: str
    local: str
    preco: Price
    img: str
    desc: str
