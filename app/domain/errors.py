"""Typed booking failures, each carrying the HTTP status class it maps to."""

from __future__ import annotations

from enum import Enum

try:
    from enum import StrEnum
except ImportError:  # pragma: no cover - fallback for older Python runtimes

    class StrEnum(str, Enum):
        pass


class ErrorKind(StrEnum):
    INVALID_RESOURCE = "invalid_resource"
    INVALID_DATE = "invalid_date"
    INVALID_ORDERING = "invalid_ordering"
    DURATION_TOO_SHORT = "duration_too_short"
    DURATION_TOO_LONG = "duration_too_long"
    SLOT_CONFLICT = "slot_conflict"
    NOT_FOUND = "not_found"
    MISSING_PARAMETER = "missing_parameter"


class BookingError(Exception):
    """Base class for every recoverable booking failure."""

    kind: ErrorKind
    status_code: int = 400
    default_message: str = "Invalid booking request"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidResource(BookingError):
    kind = ErrorKind.INVALID_RESOURCE
    default_message = "Invalid resource"


class InvalidDate(BookingError):
    kind = ErrorKind.INVALID_DATE
    default_message = "Invalid date"


class InvalidOrdering(BookingError):
    kind = ErrorKind.INVALID_ORDERING
    default_message = "End time can't be before the start time"


class DurationTooShort(BookingError):
    kind = ErrorKind.DURATION_TOO_SHORT
    default_message = "Minimum duration is 15 minutes"


class DurationTooLong(BookingError):
    kind = ErrorKind.DURATION_TOO_LONG
    default_message = "Maximum duration is 2 hours"


class SlotConflict(BookingError):
    kind = ErrorKind.SLOT_CONFLICT
    status_code = 409
    default_message = (
        "A booking already exists in this time frame. Please choose a different time"
    )


class NotFound(BookingError):
    kind = ErrorKind.NOT_FOUND
    status_code = 404
    default_message = "Booking not found"


class MissingParameter(BookingError):
    kind = ErrorKind.MISSING_PARAMETER
    default_message = "Missing parameter"
