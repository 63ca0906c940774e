"""Service for enumerating free fixed-width slots on a calendar day."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime, time, timedelta, timezone

from app.domain.errors import InvalidDate
from app.domain.models import Booking, Slot
from app.services.conflicts import has_conflict

DAY = timedelta(days=1)


def parse_day(raw: str) -> date:
    """Parse a ``YYYY-MM-DD`` day, raising InvalidDate otherwise."""
    try:
        return date.fromisoformat(raw.strip())
    except (AttributeError, ValueError):
        raise InvalidDate() from None


def enumerate_free_slots(
    resource: str,
    day: date,
    existing_bookings: Iterable[Booking],
    *,
    slot_minutes: int,
    buffer: timedelta,
) -> list[Slot]:
    """Return the slots of *day* (UTC, 00:00 to 24:00) that are free on *resource*.

    Each slot is checked on its own against the existing bookings; only the
    bookings carry the buffer, the slot edges do not.
    """
    bookings = list(existing_bookings)
    width = timedelta(minutes=slot_minutes)
    day_start = datetime.combine(day, time.min, tzinfo=timezone.utc)
    try:
        day_end = day_start + DAY
    except OverflowError:
        raise InvalidDate() from None

    free: list[Slot] = []
    slot_start = day_start
    while slot_start + width <= day_end:
        slot_end = slot_start + width
        if not has_conflict(slot_start, slot_end, resource, bookings, buffer):
            free.append(Slot(start=slot_start, end=slot_end))
        slot_start = slot_end
    return free
