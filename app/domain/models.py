"""Domain models for the resource booking service."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any

from dateutil.parser import isoparse
from pydantic import BaseModel, ConfigDict, Field, field_serializer, model_validator


def _new_id() -> str:
    return str(uuid.uuid4())


# ---------------------------------------------------------------------------
# Instant helpers
# ---------------------------------------------------------------------------


def parse_instant(raw: object) -> datetime | None:
    """Parse an ISO-8601 string into an aware UTC datetime.

    Returns ``None`` for anything that is not a parseable string.  Values
    without an offset are taken to be UTC.
    """
    if not isinstance(raw, str) or not raw.strip():
        return None
    try:
        parsed = isoparse(raw.strip())
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=timezone.utc)
        return parsed.astimezone(timezone.utc)
    except (ValueError, OverflowError):
        return None


def format_instant(value: datetime) -> str:
    """Render an instant as ``YYYY-MM-DDTHH:MM:SS.mmmZ`` in UTC."""
    value = value.astimezone(timezone.utc)
    # %Y is not zero-padded below year 1000 on every platform
    return (
        f"{value.year:04d}"
        + value.strftime("-%m-%dT%H:%M:%S")
        + f".{value.microsecond // 1000:03d}Z"
    )


# ---------------------------------------------------------------------------
# Core domain models
# ---------------------------------------------------------------------------


class _Interval(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: datetime
    end: datetime

    @model_validator(mode="after")
    def _end_after_start(self) -> _Interval:
        if self.end <= self.start:
            raise ValueError("end must be after start")
        return self

    @field_serializer("start", "end")
    def _serialize_instant(self, value: datetime) -> str:
        return format_instant(value)


class Booking(_Interval):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(default_factory=_new_id)
    resource: str
    requested_by: str = Field(default="", alias="requestedBy")

    @property
    def start_key(self) -> str:
        """Canonical start string, the target of date-prefix filtering."""
        return format_instant(self.start)


class Slot(_Interval):
    """A fixed-width availability window."""


# ---------------------------------------------------------------------------
# Request DTOs
# ---------------------------------------------------------------------------


class CreateBookingRequest(BaseModel):
    """Raw create-booking input; business validation happens in the validator."""

    model_config = ConfigDict(populate_by_name=True)

    resource: Any = None
    start: Any = None
    end: Any = None
    requested_by: str | None = Field(default="", alias="requestedBy")
