"""Admission pipeline: validate a booking request and commit it atomically."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

from app.config import Settings
from app.domain.errors import (
    BookingError,
    DurationTooLong,
    DurationTooShort,
    InvalidDate,
    InvalidOrdering,
    InvalidResource,
    SlotConflict,
)
from app.domain.models import Booking, CreateBookingRequest, parse_instant
from app.repos.memory import ScheduleStore
from app.services.conflicts import has_conflict

logger = logging.getLogger(__name__)


class BookingValidator:
    """Runs the fail-fast admission gates and inserts the accepted booking.

    Gates, in order: resource, date parsing, ordering, duration bounds,
    buffered conflict.  The conflict gate and the insert share the store's
    write lock.
    """

    def __init__(self, store: ScheduleStore, settings: Settings) -> None:
        self.store = store
        self.settings = settings

    @property
    def buffer(self) -> timedelta:
        return timedelta(minutes=self.settings.buffer_minutes)

    def admit(self, request: CreateBookingRequest) -> Booking:
        try:
            booking = self._admit(request)
        except BookingError as exc:
            logger.info(
                "Rejected booking for %r (%s): %s", request.resource, exc.kind, exc.message
            )
            raise
        logger.info(
            "Admitted booking %s on %s from %s to %s",
            booking.id,
            booking.resource,
            booking.start.isoformat(),
            booking.end.isoformat(),
        )
        return booking

    def _admit(self, request: CreateBookingRequest) -> Booking:
        settings = self.settings

        # 1. Resource
        if request.resource not in settings.resources:
            raise InvalidResource()

        # 2. Instants
        start = parse_instant(request.start)
        end = parse_instant(request.end)
        if start is None or end is None:
            raise InvalidDate()
        if not _fits_with_buffer(start, end, self.buffer):
            raise InvalidDate()

        # 3. Ordering
        if end <= start:
            raise InvalidOrdering()

        # 4. Duration bounds
        duration = (end - start).total_seconds() / 60
        if duration < settings.min_duration_minutes:
            raise DurationTooShort(
                f"Minimum duration is {settings.min_duration_minutes} minutes"
            )
        if duration > settings.max_duration_minutes:
            raise DurationTooLong(_max_duration_message(settings.max_duration_minutes))

        # 5. Conflict check + insert as one unit
        with self.store.write_lock():
            existing = self.store.for_resource(request.resource)
            if has_conflict(start, end, request.resource, existing, self.buffer):
                raise SlotConflict()
            booking = Booking(
                resource=request.resource,
                start=start,
                end=end,
                requested_by=request.requested_by or "",
            )
            return self.store.insert(booking)


def _fits_with_buffer(start: datetime, end: datetime, buffer: timedelta) -> bool:
    """Whether the buffered edges of a booking stay inside the datetime range."""
    try:
        start - buffer
        end + buffer
    except OverflowError:
        return False
    return True


def _max_duration_message(minutes: int) -> str:
    if minutes % 60 == 0:
        hours = minutes // 60
        return f"Maximum duration is {hours} hour{'s' if hours != 1 else ''}"
    return f"Maximum duration is {minutes} minutes"
