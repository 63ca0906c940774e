"""In-memory schedule store for bookings."""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager

from app.domain.models import Booking


class ScheduleStore:
    """Lock-guarded store for Booking instances, keyed by id.

    Every mutation and every snapshot copy happens under one re-entrant lock.
    Callers that need check-then-insert to be atomic hold ``write_lock()``
    across both steps.
    """

    def __init__(self) -> None:
        self._store: dict[str, Booking] = {}
        self._lock = threading.RLock()

    @contextmanager
    def write_lock(self) -> Iterator[None]:
        with self._lock:
            yield

    def insert(self, booking: Booking) -> Booking:
        with self._lock:
            self._store[booking.id] = booking
        return booking

    def remove(self, booking_id: str) -> bool:
        with self._lock:
            return self._store.pop(booking_id, None) is not None

    def get(self, booking_id: str) -> Booking | None:
        with self._lock:
            return self._store.get(booking_id)

    def for_resource(self, resource: str) -> list[Booking]:
        with self._lock:
            return [b for b in self._store.values() if b.resource == resource]

    def list(self, resource: str | None = None, date: str | None = None) -> list[Booking]:
        """Return bookings sorted by start, optionally filtered.

        ``date`` is a plain prefix match on the canonical start string, so
        ``"2025-01"`` selects a whole month.
        """
        with self._lock:
            bookings = list(self._store.values())
        if resource:
            bookings = [b for b in bookings if b.resource == resource]
        if date:
            bookings = [b for b in bookings if b.start_key.startswith(date)]
        return sorted(bookings, key=lambda b: b.start)

    def clear(self) -> None:
        with self._lock:
            self._store.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)
