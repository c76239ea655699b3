"""Domain error codes for the eventos module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    STORE_FAILURE = "STORE_FAILURE"


@dataclass(frozen=True)
class FieldError:
    """A single violated field rule, addressed by field name."""

    path: str
    message: str


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventStoreError(DomainError):
    """Raised when the store cannot record an event."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            code=ErrorCode.STORE_FAILURE,
            message="Event could not be stored",
        )
        self.reason = reason
