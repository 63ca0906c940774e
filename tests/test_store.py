"""Tests for the in-memory schedule store."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from app.domain.models import Booking
from app.repos.memory import ScheduleStore

_DAY = datetime(2025, 3, 10, 0, 0, tzinfo=timezone.utc)


@pytest.fixture()
def store() -> ScheduleStore:
    return ScheduleStore()


def _make_booking(hours: float, resource: str = "Dental", day: datetime = _DAY) -> Booking:
    start = day + timedelta(hours=hours)
    return Booking(
        resource=resource,
        start=start,
        end=start + timedelta(minutes=30),
        requested_by="Alex",
    )


def test_list_is_sorted_regardless_of_insertion_order(store):
    for hours in (14, 9, 11.5, 7):
        store.insert(_make_booking(hours))

    starts = [b.start for b in store.list()]
    assert starts == sorted(starts)
    assert len(starts) == 4


def test_remove_reports_presence(store):
    booking = store.insert(_make_booking(9))

    assert store.remove(booking.id) is True
    assert store.remove(booking.id) is False
    assert store.get(booking.id) is None
    assert len(store) == 0


def test_list_filters_by_resource(store):
    store.insert(_make_booking(9, resource="Dental"))
    store.insert(_make_booking(9, resource="Surgery"))

    result = store.list(resource="Surgery")
    assert [b.resource for b in result] == ["Surgery"]


def test_date_filter_is_prefix_match_on_canonical_start(store):
    store.insert(_make_booking(9))
    store.insert(_make_booking(9, day=_DAY + timedelta(days=1)))
    store.insert(_make_booking(9, day=_DAY + timedelta(days=40)))

    assert len(store.list(date="2025-03-10")) == 1
    # A shorter prefix selects the whole month
    assert len(store.list(date="2025-03")) == 2
    # Any prefix of the canonical string works, including the hour
    assert len(store.list(date="2025-03-10T09")) == 1
    assert store.list(date="2025-03-10T10") == []


def test_date_filter_uses_utc_start(store):
    """A booking entered with an offset is filtered by its UTC start date."""
    local = datetime(2025, 3, 10, 23, 30, tzinfo=timezone(timedelta(hours=-5)))
    store.insert(
        Booking(resource="Dental", start=local, end=local + timedelta(minutes=30))
    )

    assert store.list(date="2025-03-10") == []
    assert len(store.list(date="2025-03-11")) == 1


def test_list_returns_snapshot(store):
    store.insert(_make_booking(9))
    snapshot = store.list()
    snapshot.clear()

    assert len(store.list()) == 1


def test_bookings_are_immutable(store):
    booking = store.insert(_make_booking(9))
    with pytest.raises(ValidationError):
        booking.resource = "Surgery"


def test_for_resource(store):
    store.insert(_make_booking(9, resource="Dental"))
    store.insert(_make_booking(10, resource="Medicine"))

    assert [b.resource for b in store.for_resource("Medicine")] == ["Medicine"]


def test_canonical_start_pads_years_below_1000(store):
    start = datetime(999, 5, 1, 9, 0, tzinfo=timezone.utc)
    booking = store.insert(
        Booking(resource="Dental", start=start, end=start + timedelta(minutes=30))
    )

    assert booking.start_key == "0999-05-01T09:00:00.000Z"
    assert store.list(date="0999-05-01") == [booking]
