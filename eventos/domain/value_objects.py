"""Domain primitives that enforce validity at creation time."""

import math
import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Self

from django.core.exceptions import ValidationError
from django.core.validators import RegexValidator
from django.utils.dateparse import parse_date, parse_datetime

FREE_ADMISSION = "Gratuito"

# Absolute URI: any scheme, then an authority, an empty authority with a
# path (file:///...), or a bare path (mailto:...).
_url_validator = RegexValidator(
    regex=r"^[a-z][a-z0-9+.\-]*:(?://[^\s/?#]+\S*|///\S+|/?[^\s/]\S*)\Z",
    flags=re.IGNORECASE,
)


@dataclass(frozen=True)
class Price:
    """Ticket price; zero for free admission."""

    amount: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.amount):
            raise ValueError("Price amount must be a finite number")
        if self.amount < 0:
            raise ValueError("Price amount cannot be negative")

    @classmethod
    def from_raw(cls, value: Any) -> Self:
        """Build a price from request input.

        ``"Gratuito"`` means free admission. Numbers are taken as-is and
        strings are parsed as floats; anything else raises ValueError.
        """
        if value == FREE_ADMISSION:
            return cls(amount=0.0)
        if isinstance(value, bool):
            raise ValueError("Price must be a number")
        if isinstance(value, (int, float)):
            try:
                return cls(amount=float(value))
            except OverflowError as exc:
                raise ValueError("Price is out of range") from exc
        if isinstance(value, str):
            if "_" in value:
                raise ValueError("Price must be a plain decimal number")
            return cls(amount=float(value.strip()))
        raise ValueError("Price must be a number")

    def __str__(self) -> str:
        return f"{self.amount:.2f}"


@dataclass(frozen=True)
class ImageUrl:
    """Absolute URL pointing to the event image."""

    value: str

    def __post_init__(self) -> None:
        try:
            _url_validator(self.value)
        except ValidationError as exc:
            raise ValueError(f"Invalid image URL: {self.value!r}") from exc

    def __str__(self) -> str:
        return self.value


def parse_event_date(value: Any) -> date:
    """Parse an ISO date or datetime into a calendar date.

    Raises ValueError for malformed input and out-of-range components.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError("Date must be a string")
    text = value.strip()
    parsed = parse_date(text)
    if parsed is not None:
        return parsed
    moment = parse_datetime(text)
    if moment is None:
        raise ValueError(f"Unrecognized date: {value!r}")
    return moment.date()
