"""
Domain entities for explicit success/fault signalling between layers.

Result carries a data-component answer (or the fault that prevented one) up
to the request handlers; Outcome is what a request handler hands to the
transport layer.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    value: Optional[T] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Optional[T]) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: Exception) -> "Result[T]":
        return cls(error=error)


class OutcomeStatus(str, Enum):
    OK = "ok"
    BAD_REQUEST = "bad_request"
    NOT_FOUND = "not_found"
    INTERNAL_ERROR = "internal_error"


GENERIC_ERROR_MESSAGE = "An error occurred while processing your request"


@dataclass(frozen=True)
class Outcome:
    status: OutcomeStatus
    value: Any = None
    message: Optional[str] = None

    @classmethod
    def ok(cls, value: Any) -> "Outcome":
        return cls(status=OutcomeStatus.OK, value=value)

    @classmethod
    def bad_request(cls, message: str) -> "Outcome":
        return cls(status=OutcomeStatus.BAD_REQUEST, message=message)

    @classmethod
    def not_found(cls, message: str) -> "Outcome":
        return cls(status=OutcomeStatus.NOT_FOUND, message=message)

    @classmethod
    def internal_error(cls) -> "Outcome":
        """Never carries fault detail; the cause is logged, not returned."""
        return cls(status=OutcomeStatus.INTERNAL_ERROR, message=GENERIC_ERROR_MESSAGE)
