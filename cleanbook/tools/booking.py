"""
Mock booking store.

In production, this is the bookings table behind the intake API. Bookings
are created once with their price frozen, then only read by the
confirmation page, the admin list, and the reminder service.
"""

import math
from datetime import date, datetime
from typing import Optional, TypedDict

from cleanbook.intake.validation import BookingValidationError, validate_draft
from cleanbook.logging_context import get_request_logger, new_request_id
from cleanbook.notifications.messages import customer_confirmation, owner_notification
from cleanbook.pricing.engine import compute_pricing
from cleanbook.schemas.booking_schema import Booking, BookingDraft
from cleanbook.schemas.catalog_schema import ServiceCatalogEntry
from cleanbook.tools.extras import get_service_extras
from cleanbook.tools.services import get_service

logger = get_request_logger(__name__)


class BookingResult(TypedDict, total=False):
    """Result from submit_booking."""

    success: bool
    message: str
    booking: Booking
    errors: list[str]


_bookings: dict[int, Booking] = {}
_next_id = 1


def scheduled_hours(total_minutes: int, service: ServiceCatalogEntry) -> float:
    """Calendar hours a job occupies: total time rounded up to the half hour.

    Quote-based jobs with no timed extras hold the service's minimum duration.
    """
    if total_minutes <= 0:
        return float(service.minimum_duration_hours)
    return math.ceil(total_minutes / 30) / 2


def create_booking(draft: BookingDraft, today: Optional[date] = None) -> Booking:
    """Validate, price, and store a draft.

    Raises:
        BookingValidationError: if the draft cannot be booked.
    """
    global _next_id

    new_request_id()
    valid = validate_draft(draft, today=today)
    service = get_service(valid.service_type)
    breakdown = compute_pricing(valid, get_service_extras(valid.service_type))
    prices = breakdown.as_strings()

    booking = Booking(
        **valid.model_dump(exclude={"duration"}),
        duration=scheduled_hours(breakdown.total_duration_minutes, service),
        id=_next_id,
        base_price=prices["base_price"],
        extras_total=prices["extras_total"],
        tip_amount=prices["tip_amount"],
        total_price=prices["total_price"],
        total_duration_minutes=breakdown.total_duration_minutes,
        quote_based=breakdown.quote_based,
        created_at=datetime.now(),
    )
    _bookings[booking.id] = booking
    _next_id += 1

    logger.info(
        "Booking created: #%d %s on %s at %s",
        booking.id, booking.service_type, booking.booking_date, booking.booking_time,
    )
    logger.debug("Customer confirmation:\n%s", customer_confirmation(booking))
    logger.debug("Owner notification:\n%s", owner_notification(booking))
    return booking


def submit_booking(draft: BookingDraft, today: Optional[date] = None) -> BookingResult:
    """Create a booking and report the outcome instead of raising."""
    try:
        booking = create_booking(draft, today=today)
    except BookingValidationError as exc:
        return {
            "success": False,
            "message": "Validation error",
            "errors": exc.errors,
        }
    return {
        "success": True,
        "message": f"Booking confirmed. Reference number: #{booking.id}.",
        "booking": booking,
    }


def get_booking(booking_id: int) -> Optional[Booking]:
    """Retrieve a booking by id."""
    return _bookings.get(booking_id)


def get_all_bookings() -> list[Booking]:
    """All bookings in creation order."""
    return list(_bookings.values())


def reset() -> None:
    """Clear all bookings. Used by test fixtures for isolation."""
    global _next_id
    _bookings.clear()
    _next_id = 1
