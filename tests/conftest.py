"""Shared test fixtures and helpers."""

from datetime import date
from typing import Any

import pytest

from cleanbook.schemas.booking_schema import Booking, BookingDraft
from cleanbook.tools import booking as booking_store
from cleanbook.tools import reminders

TODAY = date(2025, 3, 10)

CONTACT: dict[str, Any] = {
    "full_name": "Jane Doe",
    "email": "jane.doe@example.com",
    "phone": "07700 900123",
    "address1": "12 Acacia Avenue",
    "city": "London",
    "postcode": "N1 9GU",
}


@pytest.fixture(autouse=True)
def _reset_stores():
    booking_store.reset()
    reminders.reset()
    yield
    booking_store.reset()
    reminders.reset()


@pytest.fixture
def today() -> date:
    return TODAY


def make_draft(**overrides: Any) -> BookingDraft:
    """A complete, bookable general-cleaning draft a week from TODAY."""
    fields: dict[str, Any] = {
        "service_type": "general",
        "duration": 3,
        "booking_date": "2025-03-17",
        "booking_time": "10:00",
        **CONTACT,
    }
    fields.update(overrides)
    return BookingDraft(**fields)


def make_booking(
    booking_id: int,
    booking_date: str = "2025-03-17",
    booking_time: str = "09:00",
    duration: float = 1,
    **overrides: Any,
) -> Booking:
    """A stored booking built directly, for conflict and dashboard tests."""
    fields: dict[str, Any] = {
        "id": booking_id,
        "service_type": "general",
        "booking_date": booking_date,
        "booking_time": booking_time,
        "duration": duration,
        "base_price": "40.00",
        "total_price": "40.00",
        **CONTACT,
    }
    fields.update(overrides)
    return Booking(**fields)
