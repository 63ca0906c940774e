"""Booking service: the single entry point the HTTP layer talks to."""

from __future__ import annotations

import logging
from datetime import timedelta

from app.config import Settings
from app.domain.errors import InvalidResource, MissingParameter, NotFound
from app.domain.models import Booking, CreateBookingRequest, Slot
from app.repos.memory import ScheduleStore
from app.services.slots import enumerate_free_slots, parse_day
from app.services.validator import BookingValidator

logger = logging.getLogger(__name__)


class BookingService:
    """Wires the schedule store, admission pipeline and slot enumerator."""

    def __init__(self, settings: Settings, store: ScheduleStore | None = None) -> None:
        self.settings = settings
        self.store = store if store is not None else ScheduleStore()
        self.validator = BookingValidator(self.store, settings)

    def create(self, request: CreateBookingRequest) -> Booking:
        return self.validator.admit(request)

    def list(self, resource: str | None = None, date: str | None = None) -> list[Booking]:
        return self.store.list(resource=resource, date=date)

    def delete(self, booking_id: str | None) -> None:
        if not booking_id:
            raise MissingParameter("Missing id")
        with self.store.write_lock():
            removed = self.store.remove(booking_id)
        if not removed:
            raise NotFound()
        logger.info("Deleted booking %s", booking_id)

    def availability(self, resource: str | None, date: str | None) -> list[Slot]:
        """Return the free slots for *resource* on the UTC day *date*.

        Unknown resources raise InvalidResource instead of yielding a full day.
        """
        if not resource or not date:
            raise MissingParameter("resource and date required")
        if resource not in self.settings.resources:
            raise InvalidResource()
        day = parse_day(date)
        slots = enumerate_free_slots(
            resource,
            day,
            self.store.for_resource(resource),
            slot_minutes=self.settings.slot_minutes,
            buffer=timedelta(minutes=self.settings.buffer_minutes),
        )
        logger.debug("%d free slots for %s on %s", len(slots), resource, day)
        return slots
