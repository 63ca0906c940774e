"""FastAPI application: entry point for the resource booking service."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Query, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from app.config import get_settings
from app.domain.errors import BookingError
from app.domain.models import Booking, CreateBookingRequest, Slot
from app.services.bookings import BookingService

settings = get_settings()
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Resource Booking Service")

# ── Singletons (created at import time for simplicity) ────────────────
booking_service = BookingService(settings)
schedule_store = booking_service.store


@app.exception_handler(BookingError)
def booking_error_handler(request: Request, exc: BookingError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message, "kind": exc.kind},
    )


# ── Routes ────────────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.post("/api/bookings", response_model=Booking, status_code=201)
def create_booking(payload: CreateBookingRequest) -> Booking:
    """Admit a booking, or fail with the first violated rule."""
    return booking_service.create(payload)


@app.get("/api/bookings", response_model=None)
def list_bookings(
    resource: str | None = None,
    date: str | None = None,
    available: str | None = None,
) -> JSONResponse:
    """List bookings sorted by start, or free slots when ``available=1``."""
    results: list[Booking] | list[Slot]
    if available == "1":
        results = booking_service.availability(resource, date)
    else:
        results = booking_service.list(resource=resource, date=date)
    return JSONResponse(content=jsonable_encoder(results))


@app.delete("/api/bookings", status_code=204)
def delete_booking(booking_id: str | None = Query(default=None, alias="id")) -> Response:
    booking_service.delete(booking_id)
    return Response(status_code=204)
