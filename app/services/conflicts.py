"""Service for detecting scheduling conflicts between bookings."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timedelta

from app.domain.models import Booking


def find_conflicts(
    new_start: datetime,
    new_end: datetime,
    resource: str,
    existing_bookings: Iterable[Booking],
    buffer: timedelta,
) -> list[Booking]:
    """Return bookings on *resource* whose buffered interval overlaps the range.

    Each existing booking is widened to ``[start - buffer, end + buffer)``; the
    candidate range itself is never widened.  Overlap rule: conflict if
    new_start < expanded_end AND new_end > expanded_start, so touching the
    buffered edge is NOT a conflict.
    """
    return [
        booking
        for booking in existing_bookings
        if booking.resource == resource
        and new_start < booking.end + buffer
        and new_end > booking.start - buffer
    ]


def has_conflict(
    new_start: datetime,
    new_end: datetime,
    resource: str,
    existing_bookings: Iterable[Booking],
    buffer: timedelta,
) -> bool:
    return bool(find_conflicts(new_start, new_end, resource, existing_bookings, buffer))
